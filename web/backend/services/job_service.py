#!/usr/bin/env python3
"""
Job service - read-only access to job postings.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from database.repositories import JobRepository
from ..models.responses import JobResponse
from ..utils import to_job_response
from ..exceptions import JobNotFoundException

logger = logging.getLogger(__name__)


class JobService:
    """Service for looking up jobs."""

    def __init__(self, db: Session):
        self.repo = JobRepository(db)

    def list_jobs(self, zip_code: Optional[str] = None) -> List[JobResponse]:
        return [to_job_response(j) for j in self.repo.list_jobs(zip_code=zip_code)]

    def get_job(self, job_id: int) -> JobResponse:
        """
        Raises:
            JobNotFoundException: If the job does not exist.
        """
        job = self.repo.get_job_by_id(job_id)
        if job is None:
            raise JobNotFoundException(f"Job not found with ID: {job_id}")
        return to_job_response(job)
