#!/usr/bin/env python3
"""
Scoring Engine - weighted contractor/job match score.

total = floor(specialty * 0.5 + proximity * 0.3 + rating * 0.2)

The weighted sum is evaluated with Decimal: 82.5 truncates to 82 and a
perfect match is exactly 100.
"""

from decimal import Decimal
from typing import List, Optional, Tuple
import logging

from core.config_loader import ScorerConfig
from core.constants import (
    DEFAULT_SPECIALTY_WEIGHT,
    DEFAULT_PROXIMITY_WEIGHT,
    DEFAULT_RATING_WEIGHT,
)
from core.domain import ContractorDTO, JobDTO
from core.scorer.components import (
    calculate_specialty_score,
    calculate_proximity_score,
    calculate_rating_score,
)
from core.scorer.models import ScoreBreakdown
from core.scorer.reasons import generate_match_reasons

logger = logging.getLogger(__name__)

MAX_SCORE = 100


def _weight(name: str, raw: float, default: float) -> Decimal:
    if raw < 0:
        logger.warning("Negative %s=%r; using default=%r", name, raw, default)
        raw = default

    # str() keeps 0.3 as exactly 3/10 rather than its binary approximation
    return Decimal(str(raw))


class ScoringEngine:
    """
    Computes the 0-100 match score and reasons for one job/contractor pair.

    Pure: no I/O, no state beyond the configured weights.
    """

    def __init__(self, config: Optional[ScorerConfig] = None):
        self.config = config or ScorerConfig()
        self.specialty_weight = _weight(
            "specialty_weight", self.config.specialty_weight, DEFAULT_SPECIALTY_WEIGHT
        )
        self.proximity_weight = _weight(
            "proximity_weight", self.config.proximity_weight, DEFAULT_PROXIMITY_WEIGHT
        )
        self.rating_weight = _weight(
            "rating_weight", self.config.rating_weight, DEFAULT_RATING_WEIGHT
        )
        self.prefix_length = self.config.location_prefix_length

    def combine(self, specialty: int, proximity: int, rating: int) -> int:
        """Weighted sum of the sub-scores, truncated toward zero."""
        weighted = (
            specialty * self.specialty_weight
            + proximity * self.proximity_weight
            + rating * self.rating_weight
        )
        total = int(weighted)

        if total > MAX_SCORE:
            logger.warning(f"Score {weighted} exceeds {MAX_SCORE}; check scorer weights")
            total = MAX_SCORE
        return max(0, total)

    def score(self, job: JobDTO, contractor: ContractorDTO) -> ScoreBreakdown:
        specialty = calculate_specialty_score(job.category, contractor.primary_specialty)
        proximity = calculate_proximity_score(
            job.zip_code, contractor.zip_code, self.prefix_length
        )
        rating = calculate_rating_score(contractor.rating)

        return ScoreBreakdown(
            total=self.combine(specialty, proximity, rating),
            specialty_score=specialty,
            proximity_score=proximity,
            rating_score=rating,
            reasons=generate_match_reasons(job, contractor, self.prefix_length),
        )

    def score_pair(self, job: JobDTO, contractor: ContractorDTO) -> Tuple[int, List[str]]:
        """Return just (total, reasons) for a pair."""
        breakdown = self.score(job, contractor)
        return breakdown.total, breakdown.reasons
