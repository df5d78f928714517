"""Core scoring engine components."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

# NOTE: keep imports explicit for export clarity.
from ..schemas import ScoringRequest
from .baseline import BaselineConfig, BaselineScorer
from .dispatcher import ScoringDispatcher
from .errors import ConfigurationError, RequestTypeError, ScoringError
from .extensions import (
    CulturalFitConfig,
    CulturalFitExtension,
    TechnicalFocusConfig,
    TechnicalFocusExtension,
)
from .registry import ExtensionRegistry
from .result import ScoringResult


@runtime_checkable
class RuleExtension(Protocol):
    """Process-specific adjustments layered on top of the baseline result."""

    process_type: str

    def can_handle(self, request: ScoringRequest) -> bool:
        """Return True when the request's process type belongs to this extension."""

    def apply_rules(self, request: ScoringRequest, baseline: ScoringResult) -> ScoringResult:
        """Return the adjusted result for a request this extension handles."""


__all__ = [
    "RuleExtension",
    "ScoringResult",
    "BaselineConfig",
    "BaselineScorer",
    "ScoringDispatcher",
    "ExtensionRegistry",
    "ScoringError",
    "ConfigurationError",
    "RequestTypeError",
    "TechnicalFocusConfig",
    "TechnicalFocusExtension",
    "CulturalFitConfig",
    "CulturalFitExtension",
]
