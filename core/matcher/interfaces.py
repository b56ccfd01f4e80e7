"""
Data Source Interfaces - read-only collaborators of the contractor matcher.

Implemented by the SQLAlchemy repositories in production and by in-memory
fakes in tests. Implementations must hand back fully-loaded snapshots.
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from core.domain import ContractorDTO, JobDTO


class JobSource(ABC):
    """Looks up jobs by id."""

    @abstractmethod
    def get_job_by_id(self, job_id: int) -> Optional[JobDTO]:
        """
        Return the job snapshot, or None if no job has this id.
        """
        pass


class ContractorSource(ABC):
    """Provides the full contractor pool."""

    @abstractmethod
    def list_all_contractors(self) -> List[ContractorDTO]:
        """
        Return every contractor, in a stable order.
        """
        pass
