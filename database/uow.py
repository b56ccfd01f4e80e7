import contextlib
import logging
from dataclasses import dataclass

from sqlalchemy.orm import Session

from database.database import SessionLocal
from database.repositories import JobRepository, ContractorRepository

logger = logging.getLogger(__name__)


@dataclass
class Repositories:
    session: Session
    jobs: JobRepository
    contractors: ContractorRepository


@contextlib.contextmanager
def repositories_uow():
    """Per-unit-of-work transaction scope.

    Yields job and contractor repositories bound to a fresh Session.
    Commits on success, rolls back on exception, always closes.

    Usage:
        with repositories_uow() as repos:
            job = repos.jobs.get_job_by_id(job_id)
            # perform operations...
        # commit happens automatically on successful exit
    """
    session = SessionLocal()
    try:
        yield Repositories(
            session=session,
            jobs=JobRepository(session),
            contractors=ContractorRepository(session),
        )
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
