#!/usr/bin/env python3
"""
Scoring Module - weighted contractor/job scoring.

Public API:
- ScoringEngine: computes a 0-100 score and reasons for one pair
- ScoreBreakdown: dataclass holding the total and its components

Modules:
- components.py: Specialty, proximity and rating sub-scores
- reasons.py: Human-readable match reasons
- models.py: Data structures (ScoreBreakdown)
- service.py: ScoringEngine
"""

from core.scorer.models import ScoreBreakdown
from core.scorer.service import ScoringEngine

__all__ = ['ScoringEngine', 'ScoreBreakdown']
