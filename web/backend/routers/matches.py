#!/usr/bin/env python3
"""
Match endpoints - ranked contractors for a job.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from core.config_loader import ScorerConfig
from ..dependencies import get_db, get_scorer_config
from ..services.match_service import MatchService
from ..models.responses import ContractorMatchResponse

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/jobs", tags=["matches"])


@router.get("/{job_id}/matches", response_model=List[ContractorMatchResponse])
def get_matches_for_job(
    job_id: int,
    db: Session = Depends(get_db),
    scorer_config: ScorerConfig = Depends(get_scorer_config)
):
    """
    Find and rank contractors suitable for a job.
    
    Every contractor is scored on specialty, location and rating; those
    below the minimum match score are left out. Results are ordered by
    match score (highest first). Returns 404 if the job does not exist.
    """
    service = MatchService(db, config=scorer_config)
    return service.get_matches_for_job(job_id)
