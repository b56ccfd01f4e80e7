#!/usr/bin/env python3
"""
Response models for API endpoints.
"""

from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Serializes field names as camelCase on the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ContractorMatchResponse(CamelModel):
    """A ranked contractor for a job."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "contractorId": 7,
                "contractorName": "Peak Roofing Services",
                "specialty": "ROOFING",
                "zipCode": "12345",
                "rating": 4.9,
                "matchScore": 100,
                "matchReasons": [
                    "Specializes in roofing projects",
                    "Located in your area",
                    "Highly rated with 4.9 stars"
                ]
            }
        }
    )

    contractor_id: int
    contractor_name: str
    specialty: Optional[str]
    zip_code: Optional[str]
    rating: float
    match_score: int = Field(ge=0, le=100)
    match_reasons: List[str]


class JobResponse(CamelModel):
    """A job posting."""
    id: int
    title: str
    description: Optional[str] = None
    category: str
    zip_code: str
    budget: Decimal
    status: str
