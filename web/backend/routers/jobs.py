#!/usr/bin/env python3
"""
Job endpoints - read-only job lookups.
"""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..dependencies import get_db
from ..services.job_service import JobService
from ..models.responses import JobResponse

router = APIRouter(prefix="/api/jobs", tags=["jobs"])


@router.get("", response_model=List[JobResponse])
def list_jobs(
    zip_code: Optional[str] = Query(default=None, max_length=10, description="Only jobs in this zip code"),
    db: Session = Depends(get_db)
):
    """List jobs, optionally filtered by zip code."""
    return JobService(db).list_jobs(zip_code=zip_code)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Get a single job. Returns 404 if it does not exist."""
    return JobService(db).get_job(job_id)
