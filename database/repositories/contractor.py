import logging
from typing import List, Optional

from sqlalchemy import select, func

from core.domain import ContractorDTO
from core.matcher.interfaces import ContractorSource
from database.models import Contractor, Review
from database.repositories.base import BaseRepository

logger = logging.getLogger(__name__)


def contractor_to_dto(contractor: Contractor) -> ContractorDTO:
    return ContractorDTO(
        id=contractor.id,
        company_name=contractor.company_name,
        specialties=frozenset(contractor.specialty_values),
        zip_code=contractor.zip_code,
        rating=float(contractor.rating) if contractor.rating is not None else None,
    )


class ContractorRepository(BaseRepository, ContractorSource):
    def get_by_id(self, contractor_id: int) -> Optional[Contractor]:
        return self._get_one(Contractor, Contractor.id, contractor_id)

    def list_all_contractors(self) -> List[ContractorDTO]:
        # Ordered by id so ties in the ranking are reproducible
        stmt = select(Contractor).order_by(Contractor.id)
        contractors = self.db.execute(stmt).scalars().all()
        return [contractor_to_dto(c) for c in contractors]

    def refresh_rating_from_reviews(self, contractor_id: int) -> Optional[float]:
        """
        Recompute a contractor's rating as the average of its reviews.

        The rating is cleared when the contractor has no reviews.
        Returns the new rating; the caller commits.
        """
        contractor = self.get_by_id(contractor_id)
        if contractor is None:
            logger.warning(f"Cannot refresh rating: contractor {contractor_id} not found")
            return None

        average = self.db.execute(
            select(func.avg(Review.rating)).where(Review.contractor_id == contractor_id)
        ).scalar()

        contractor.rating = float(average) if average is not None else None
        logger.debug(f"Contractor {contractor_id} rating set to {contractor.rating}")
        return contractor.rating
