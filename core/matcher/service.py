#!/usr/bin/env python3
"""
Contractor Matcher - ranks contractors for a job.

For a job id:
1. Load the job snapshot (JobNotFoundError when missing)
2. Load the whole contractor pool, no pre-filtering
3. Score every contractor with the ScoringEngine
4. Keep contractors at or above the minimum match score
5. Sort by score, highest first; ties keep pool order

Stateless: every call works on its own snapshots, so concurrent calls
need no coordination.
"""
from typing import List, Optional
import logging

from core.config_loader import ScorerConfig
from core.constants import NO_RATING
from core.domain import ContractorDTO
from core.matcher.exceptions import JobNotFoundError
from core.matcher.interfaces import ContractorSource, JobSource
from core.matcher.models import MatchResult
from core.scorer import ScoringEngine, ScoreBreakdown

logger = logging.getLogger(__name__)


class ContractorMatcher:
    """
    Finds and ranks qualified contractors for a job.
    """

    def __init__(
        self,
        job_source: JobSource,
        contractor_source: ContractorSource,
        config: Optional[ScorerConfig] = None,
        engine: Optional[ScoringEngine] = None
    ):
        """
        Initialize matcher with its data sources.

        Args:
            job_source: Looks up the job being matched
            contractor_source: Provides the contractor pool
            config: ScorerConfig with weights and threshold
            engine: Optional pre-built ScoringEngine (built from config if omitted)
        """
        self.jobs = job_source
        self.contractors = contractor_source
        self.config = config or ScorerConfig()
        self.engine = engine or ScoringEngine(self.config)
        self.min_match_score = self.config.min_match_score

    def find_matches(self, job_id: int) -> List[MatchResult]:
        """
        Rank contractors for a job.

        Args:
            job_id: Id of the job to match

        Returns:
            Qualified contractors sorted by descending match score.
            An empty list when nobody qualifies.

        Raises:
            JobNotFoundError: If the job does not exist.
        """
        job = self.jobs.get_job_by_id(job_id)
        if job is None:
            raise JobNotFoundError(job_id)

        pool = self.contractors.list_all_contractors()

        candidates = []
        for contractor in pool:
            breakdown = self.engine.score(job, contractor)

            if breakdown.total >= self.min_match_score:
                candidates.append(self._to_match_result(contractor, breakdown))
            else:
                logger.debug(
                    f"Contractor {contractor.id} scored {breakdown.total} for job {job_id} "
                    f"(below {self.min_match_score}): {breakdown.components()}"
                )

        # sorted() is stable, so equal scores stay in pool order
        matches = sorted(candidates, key=lambda m: m.match_score, reverse=True)

        logger.info(
            f"Job {job_id}: {len(matches)} of {len(pool)} contractors qualified"
        )
        return matches

    @staticmethod
    def _to_match_result(contractor: ContractorDTO, breakdown: ScoreBreakdown) -> MatchResult:
        specialty = contractor.primary_specialty
        return MatchResult(
            contractor_id=contractor.id,
            contractor_name=contractor.company_name,
            specialty=specialty.value if specialty is not None else None,
            zip_code=contractor.zip_code,
            rating=contractor.rating if contractor.rating is not None else NO_RATING,
            match_score=breakdown.total,
            match_reasons=list(breakdown.reasons),
        )
