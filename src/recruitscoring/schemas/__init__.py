"""Pydantic schema definitions for scoring inputs."""

from __future__ import annotations

from .candidate import Candidate
from .position import Position
from .requests import (
    REQUEST_TYPES,
    CulturalFitRequest,
    ScoringRequest,
    ScoringRequestVariant,
    TechnicalFocusRequest,
    parse_request,
)

__all__ = [
    "Candidate",
    "Position",
    "ScoringRequest",
    "TechnicalFocusRequest",
    "CulturalFitRequest",
    "ScoringRequestVariant",
    "REQUEST_TYPES",
    "parse_request",
]
