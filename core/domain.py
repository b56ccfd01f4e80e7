"""Domain snapshots consumed by the matching engine.

These are plain, immutable copies of Job and Contractor rows. Repositories
build them while the database session is still open, so scoring never
touches the ORM and never triggers lazy loading.
"""

import enum
from dataclasses import dataclass, field
from decimal import Decimal
from typing import FrozenSet, Optional


class Specialty(str, enum.Enum):
    """Trade categories shared by job categories and contractor specialties."""
    PLUMBING = "PLUMBING"
    ELECTRICAL = "ELECTRICAL"
    HVAC = "HVAC"
    ROOFING = "ROOFING"
    PAINTING = "PAINTING"
    CARPENTRY = "CARPENTRY"
    LANDSCAPING = "LANDSCAPING"
    FLOORING = "FLOORING"
    REMODELING = "REMODELING"
    GENERAL = "GENERAL"
    MASONRY = "MASONRY"
    DRYWALL = "DRYWALL"
    TILE = "TILE"
    CABINETRY = "CABINETRY"
    COUNTERTOPS = "COUNTERTOPS"
    DECKS = "DECKS"
    WINDOWS = "WINDOWS"
    DOORS = "DOORS"
    SIDING = "SIDING"
    CONCRETE = "CONCRETE"
    DEMOLITION = "DEMOLITION"
    INSULATION = "INSULATION"
    FENCING = "FENCING"
    BASEMENT = "BASEMENT"
    HOME_ADDITION = "HOME_ADDITION"
    GARAGE = "GARAGE"
    GUTTERS = "GUTTERS"
    SOLAR = "SOLAR"


class JobStatus(str, enum.Enum):
    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


# Declaration order, used to pick a primary specialty deterministically
_SPECIALTY_ORDER = {s: i for i, s in enumerate(Specialty)}


@dataclass(frozen=True)
class JobDTO:
    """Read-only view of a job posting."""
    id: int
    title: str
    category: Specialty
    zip_code: str
    budget: Decimal = Decimal("0")
    status: JobStatus = JobStatus.OPEN
    description: Optional[str] = None


@dataclass(frozen=True)
class ContractorDTO:
    """Read-only view of a contractor profile."""
    id: int
    company_name: str
    specialties: FrozenSet[Specialty] = field(default_factory=frozenset)
    zip_code: Optional[str] = None
    rating: Optional[float] = None

    @property
    def primary_specialty(self) -> Optional[Specialty]:
        """
        The specialty used for scoring.

        The set is unordered, so the first member in Specialty declaration
        order is used. None when the contractor lists no specialties.
        """
        if not self.specialties:
            return None
        return min(self.specialties, key=_SPECIALTY_ORDER.__getitem__)
