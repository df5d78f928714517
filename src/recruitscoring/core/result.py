"""Scoring result passed from the baseline to a rule extension."""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Iterable
from uuid import UUID


@dataclass(frozen=True, slots=True)
class ScoringResult:
    """Outcome of scoring one request.

    Each stage returns a new instance; ``approved`` is set by the baseline and
    is left alone by later adjustments even when the score moves across the
    approval threshold.
    """

    candidate_id: UUID
    position_id: UUID
    approved: bool
    score: int
    feedback: tuple[str, ...]
    processed_at: datetime
    process_type: str = ""

    def adjust(
        self,
        *,
        points: int = 0,
        feedback: Iterable[str] = (),
        process_type: str | None = None,
    ) -> ScoringResult:
        """Return a copy with ``points`` added and ``feedback`` appended."""
        return replace(
            self,
            score=self.score + points,
            feedback=self.feedback + tuple(feedback),
            process_type=self.process_type if process_type is None else process_type,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "candidate_id": str(self.candidate_id),
            "position_id": str(self.position_id),
            "approved": self.approved,
            "score": self.score,
            "feedback": list(self.feedback),
            "processed_at": self.processed_at.isoformat(),
            "process_type": self.process_type,
        }
