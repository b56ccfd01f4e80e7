#!/usr/bin/env python3
"""
Match Reasons - human-readable explanations for a contractor match.

Reasons are produced alongside the score and are not gated by it.
"""

from typing import List, Optional

from core.constants import (
    LOCATION_PREFIX_LENGTH,
    NO_RATING,
    RATING_EXCELLENT,
    RATING_GOOD,
    RATING_AVERAGE,
)
from core.domain import ContractorDTO, JobDTO
from core.scorer.components import (
    is_exact_specialty,
    is_exact_location,
    is_nearby_location,
)


def specialty_reason(job: JobDTO, contractor: ContractorDTO) -> Optional[str]:
    if is_exact_specialty(job.category, contractor.primary_specialty):
        return f"Specializes in {job.category.value.lower()} projects"
    return None


def location_reason(
    job: JobDTO,
    contractor: ContractorDTO,
    prefix_length: int = LOCATION_PREFIX_LENGTH
) -> Optional[str]:
    if is_exact_location(job.zip_code, contractor.zip_code):
        return "Located in your area"
    if is_nearby_location(job.zip_code, contractor.zip_code, prefix_length):
        return "Located nearby"
    return None


def rating_reason(rating: Optional[float]) -> str:
    """
    Exactly one rating message is always produced.

    A missing rating falls through to the below-average message, rendered
    with the NO_RATING placeholder.
    """
    if rating is not None and rating >= RATING_EXCELLENT:
        return f"Highly rated with {float(rating)} stars"
    if rating is not None and rating >= RATING_GOOD:
        return f"Good rating with {float(rating)} stars"
    if rating is not None and rating >= RATING_AVERAGE:
        return f"Average rating with {float(rating)} stars"

    shown = NO_RATING if rating is None else float(rating)
    return f"Below average rating with {shown} stars"


def generate_match_reasons(
    job: JobDTO,
    contractor: ContractorDTO,
    prefix_length: int = LOCATION_PREFIX_LENGTH
) -> List[str]:
    """Build the ordered reason list: specialty, location, rating."""
    reasons = []

    reason = specialty_reason(job, contractor)
    if reason:
        reasons.append(reason)

    reason = location_reason(job, contractor, prefix_length)
    if reason:
        reasons.append(reason)

    reasons.append(rating_reason(contractor.rating))
    return reasons
