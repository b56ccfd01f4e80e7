#!/usr/bin/env python3
"""
Test Mock Implementations - in-memory data sources for the contractor matcher.

These provide deterministic behavior for unit tests without a database.
"""
from decimal import Decimal
from typing import Dict, Iterable, List, Optional

from core.domain import ContractorDTO, JobDTO, JobStatus, Specialty
from core.matcher.interfaces import ContractorSource, JobSource


def make_job(
    job_id: int = 1,
    category: Specialty = Specialty.ROOFING,
    zip_code: str = "12345",
    budget: str = "10000.00",
    status: JobStatus = JobStatus.OPEN,
    title: str = "Test Job"
) -> JobDTO:
    return JobDTO(
        id=job_id,
        title=title,
        category=category,
        zip_code=zip_code,
        budget=Decimal(budget),
        status=status,
    )


def make_contractor(
    contractor_id: int = 1,
    specialties: Iterable[Specialty] = (Specialty.ROOFING,),
    zip_code: Optional[str] = "12345",
    rating: Optional[float] = 4.9,
    company_name: Optional[str] = None
) -> ContractorDTO:
    return ContractorDTO(
        id=contractor_id,
        company_name=company_name or f"Contractor {contractor_id}",
        specialties=frozenset(specialties),
        zip_code=zip_code,
        rating=rating,
    )


class InMemoryJobSource(JobSource):
    """Serves jobs from a dict and counts lookups."""

    def __init__(self, jobs: Iterable[JobDTO] = ()):
        self.jobs: Dict[int, JobDTO] = {j.id: j for j in jobs}
        self.calls = 0

    def get_job_by_id(self, job_id: int) -> Optional[JobDTO]:
        self.calls += 1
        return self.jobs.get(job_id)


class InMemoryContractorSource(ContractorSource):
    """Serves a fixed contractor pool in insertion order."""

    def __init__(self, contractors: Iterable[ContractorDTO] = ()):
        self.contractors: List[ContractorDTO] = list(contractors)
        self.calls = 0

    def list_all_contractors(self) -> List[ContractorDTO]:
        self.calls += 1
        return list(self.contractors)


class FailingContractorSource(ContractorSource):
    """Simulates a data store outage."""

    def __init__(self, error: Exception):
        self.error = error

    def list_all_contractors(self) -> List[ContractorDTO]:
        raise self.error
