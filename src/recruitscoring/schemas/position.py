"""Job position input record."""

from __future__ import annotations

from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Position(BaseModel):
    """Open position a candidate applies for."""

    id: UUID = Field(default_factory=uuid4)
    title: str = ""
    department: str = ""
    required_skills: tuple[str, ...] = ()
    minimum_experience: int = Field(default=0, ge=0)
    location: str = ""

    model_config = ConfigDict(extra="forbid", frozen=True)
