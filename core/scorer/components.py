#!/usr/bin/env python3
"""
Sub-score Calculations - the three independent axes of a contractor match.

Each function returns a score on a 0-100 scale:
- Specialty: job category vs. contractor primary specialty
- Proximity: job zip code vs. contractor zip code
- Rating: contractor average review rating
"""

from typing import Optional

from core.constants import (
    LOCATION_PREFIX_LENGTH,
    NO_MATCH_SCORE,
    SPECIALTY_EXACT_SCORE,
    SPECIALTY_PARTIAL_SCORE,
    PROXIMITY_EXACT_SCORE,
    PROXIMITY_NEARBY_SCORE,
    RATING_EXCELLENT,
    RATING_GOOD,
    RATING_AVERAGE,
    RATING_EXCELLENT_SCORE,
    RATING_GOOD_SCORE,
    RATING_AVERAGE_SCORE,
    RATING_BELOW_AVERAGE_SCORE,
)
from core.domain import Specialty


def is_exact_specialty(category: Specialty, specialty: Optional[Specialty]) -> bool:
    return specialty is not None and category.value == specialty.value


def calculate_specialty_score(category: Specialty, specialty: Optional[Specialty]) -> int:
    """
    Score how well the contractor's primary specialty fits the job category.

    Partial credit only applies when the category name contains the
    specialty name, never the reverse.
    """
    if specialty is None:
        return NO_MATCH_SCORE

    if is_exact_specialty(category, specialty):
        return SPECIALTY_EXACT_SCORE
    if specialty.value in category.value:
        return SPECIALTY_PARTIAL_SCORE
    return NO_MATCH_SCORE


def is_exact_location(job_zip: str, contractor_zip: Optional[str]) -> bool:
    return contractor_zip is not None and job_zip == contractor_zip


def is_nearby_location(
    job_zip: str,
    contractor_zip: Optional[str],
    prefix_length: int = LOCATION_PREFIX_LENGTH
) -> bool:
    """True when both zip codes share the same leading characters."""
    if not job_zip or not contractor_zip:
        return False
    if len(job_zip) < prefix_length or len(contractor_zip) < prefix_length:
        return False
    return job_zip[:prefix_length] == contractor_zip[:prefix_length]


def calculate_proximity_score(
    job_zip: str,
    contractor_zip: Optional[str],
    prefix_length: int = LOCATION_PREFIX_LENGTH
) -> int:
    if is_exact_location(job_zip, contractor_zip):
        return PROXIMITY_EXACT_SCORE
    if is_nearby_location(job_zip, contractor_zip, prefix_length):
        return PROXIMITY_NEARBY_SCORE
    return NO_MATCH_SCORE


def calculate_rating_score(rating: Optional[float]) -> int:
    """Map an average rating (0.0-5.0) onto a tiered score. No rating scores 0."""
    if rating is None:
        return NO_MATCH_SCORE
    if rating >= RATING_EXCELLENT:
        return RATING_EXCELLENT_SCORE
    if rating >= RATING_GOOD:
        return RATING_GOOD_SCORE
    if rating >= RATING_AVERAGE:
        return RATING_AVERAGE_SCORE
    return RATING_BELOW_AVERAGE_SCORE
