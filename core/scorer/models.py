#!/usr/bin/env python3
"""
Scoring Models - Data structures for scoring results.
"""

from typing import List, Dict, Any
from dataclasses import dataclass, field


@dataclass
class ScoreBreakdown:
    """Score for a single (job, contractor) pair with its components."""
    total: int = 0
    specialty_score: int = 0
    proximity_score: int = 0
    rating_score: int = 0
    reasons: List[str] = field(default_factory=list)

    def components(self) -> Dict[str, Any]:
        return {
            'specialty': self.specialty_score,
            'proximity': self.proximity_score,
            'rating': self.rating_score,
        }
