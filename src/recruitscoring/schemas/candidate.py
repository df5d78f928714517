"""Candidate input record."""

from __future__ import annotations

from datetime import datetime
from uuid import UUID, uuid4

import pendulum
from pydantic import BaseModel, ConfigDict, Field


class Candidate(BaseModel):
    """Applicant being scored against a position."""

    id: UUID = Field(default_factory=uuid4)
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    years_of_experience: int = Field(default=0, ge=0)
    skills: tuple[str, ...] = ()
    applied_at: datetime = Field(default_factory=lambda: pendulum.now("UTC"))

    model_config = ConfigDict(extra="forbid", frozen=True)

    @property
    def full_name(self) -> str:
        return " ".join(part for part in (self.first_name, self.last_name) if part)
