import logging
from decimal import Decimal
from typing import List, Optional

from sqlalchemy import select

from core.domain import JobDTO
from core.matcher.interfaces import JobSource
from database.models import Job
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def job_to_dto(job: Job) -> JobDTO:
    return JobDTO(
        id=job.id,
        title=job.title,
        category=job.category,
        zip_code=job.zip_code,
        budget=Decimal(job.budget) if job.budget is not None else Decimal("0"),
        status=job.status,
        description=job.description,
    )


class JobRepository(BaseRepository, JobSource):
    def get_by_id(self, job_id: int) -> Optional[Job]:
        return self._get_one(Job, Job.id, job_id)

    def get_job_by_id(self, job_id: int) -> Optional[JobDTO]:
        job = self.get_by_id(job_id)
        if job is None:
            return None
        return job_to_dto(job)

    def list_jobs(self, zip_code: Optional[str] = None) -> List[JobDTO]:
        stmt = select(Job)
        if zip_code:
            stmt = stmt.where(Job.zip_code == zip_code)
        stmt = stmt.order_by(Job.id)
        return [job_to_dto(j) for j in self.db.execute(stmt).scalars().all()]
