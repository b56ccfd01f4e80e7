"""Business logic services."""

from .match_service import MatchService
from .job_service import JobService
