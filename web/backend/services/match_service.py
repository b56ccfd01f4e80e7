#!/usr/bin/env python3
"""
Match service - wires the contractor matcher to a database session.
"""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session

from core.config_loader import ScorerConfig
from core.matcher import ContractorMatcher, JobNotFoundError
from database.repositories import JobRepository, ContractorRepository
from ..models.responses import ContractorMatchResponse
from ..utils import to_match_response
from ..exceptions import JobNotFoundException

logger = logging.getLogger(__name__)


class MatchService:
    """Service for ranking contractors against a job."""
    
    def __init__(self, db: Session, config: Optional[ScorerConfig] = None):
        self.db = db
        self.matcher = ContractorMatcher(
            job_source=JobRepository(db),
            contractor_source=ContractorRepository(db),
            config=config,
        )
    
    def get_matches_for_job(self, job_id: int) -> List[ContractorMatchResponse]:
        """
        Get ranked contractor matches for a job.
        
        Args:
            job_id: The job ID.
        
        Returns:
            Contractor matches, highest score first.
        
        Raises:
            JobNotFoundException: If the job does not exist.
        """
        try:
            matches = self.matcher.find_matches(job_id)
        except JobNotFoundError as e:
            raise JobNotFoundException(str(e)) from e
        
        return [to_match_response(m) for m in matches]
