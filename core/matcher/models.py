"""Result structures produced by the contractor matcher."""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class MatchResult:
    """
    A qualified contractor for a job.

    Computed per request and never persisted.
    """
    contractor_id: int
    contractor_name: str
    specialty: Optional[str]
    zip_code: Optional[str]
    rating: float
    match_score: int
    match_reasons: List[str] = field(default_factory=list)
