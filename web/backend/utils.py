#!/usr/bin/env python3
"""
Conversions between core results and API response models.
"""

from core.domain import JobDTO
from core.matcher import MatchResult
from .models.responses import ContractorMatchResponse, JobResponse


def to_match_response(match: MatchResult) -> ContractorMatchResponse:
    return ContractorMatchResponse(
        contractor_id=match.contractor_id,
        contractor_name=match.contractor_name,
        specialty=match.specialty,
        zip_code=match.zip_code,
        rating=match.rating,
        match_score=match.match_score,
        match_reasons=list(match.match_reasons),
    )


def to_job_response(job: JobDTO) -> JobResponse:
    return JobResponse(
        id=job.id,
        title=job.title,
        description=job.description,
        category=job.category.value,
        zip_code=job.zip_code,
        budget=job.budget,
        status=job.status.value,
    )
