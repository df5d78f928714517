"""Process-specific rule extensions."""

from .cultural import CulturalFitConfig, CulturalFitExtension
from .technical import TechnicalFocusConfig, TechnicalFocusExtension

__all__ = [
    "CulturalFitConfig",
    "CulturalFitExtension",
    "TechnicalFocusConfig",
    "TechnicalFocusExtension",
]
