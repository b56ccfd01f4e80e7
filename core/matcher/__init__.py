"""Matcher Module - ranks qualified contractors for a job."""
from core.matcher.exceptions import JobNotFoundError
from core.matcher.interfaces import JobSource, ContractorSource
from core.matcher.models import MatchResult
from core.matcher.service import ContractorMatcher

__all__ = [
    'ContractorMatcher', 'MatchResult', 'JobNotFoundError',
    'JobSource', 'ContractorSource',
]
