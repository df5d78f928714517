"""Scoring request family.

Every request carries the shared fields consumed by the baseline scorer plus a
``process_type`` discriminant. Variants add the fields their rule extension
needs and pin the discriminant with a ``Literal`` so it cannot disagree with
the concrete class. Requests are frozen once validated.
"""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Mapping, Union
from uuid import UUID

import pendulum
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

from .candidate import Candidate
from .position import Position


class ScoringRequest(BaseModel):
    """Fields shared by every recruitment process.

    Not a scoring variant itself: dispatching a bare ``ScoringRequest`` reaches
    the extension for its ``process_type``, which rejects it with
    ``RequestTypeError``.
    """

    candidate: Candidate
    position: Position
    recruitment_channel: str = ""
    submitted_at: datetime = Field(default_factory=lambda: pendulum.now("UTC"))
    recruiter_name: str = ""
    priority_level: int = 0
    metadata: dict[str, str] = Field(default_factory=dict)
    process_type: str

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def candidate_id(self) -> UUID:
        return self.candidate.id

    @property
    def position_id(self) -> UUID:
        return self.position.id


class TechnicalFocusRequest(ScoringRequest):
    """Process A: technical assessment and certifications."""

    process_type: Literal["A"] = "A"
    requires_technical_assessment: bool = False
    preferred_interview_time: str = ""
    certification_requirements: list[str] = Field(default_factory=list)


class CulturalFitRequest(ScoringRequest):
    """Process B: cultural fit and team preferences."""

    process_type: Literal["B"] = "B"
    requires_cultural_fit_interview: bool = False
    team_size_preference: int = 0
    soft_skills_emphasis: list[str] = Field(default_factory=list)


ScoringRequestVariant = Annotated[
    Union[TechnicalFocusRequest, CulturalFitRequest],
    Field(discriminator="process_type"),
]

REQUEST_TYPES: dict[str, type[ScoringRequest]] = {
    "A": TechnicalFocusRequest,
    "B": CulturalFitRequest,
}

_VARIANT_ADAPTER: TypeAdapter[ScoringRequestVariant] = TypeAdapter(ScoringRequestVariant)


def parse_request(payload: Mapping[str, Any]) -> ScoringRequest:
    """Validate a raw mapping into the variant named by its ``process_type``."""
    return _VARIANT_ADAPTER.validate_python(payload)


__all__ = [
    "ScoringRequest",
    "TechnicalFocusRequest",
    "CulturalFitRequest",
    "ScoringRequestVariant",
    "REQUEST_TYPES",
    "parse_request",
]
