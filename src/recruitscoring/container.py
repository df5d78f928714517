"""Dependency injection container for the scoring service."""

from __future__ import annotations

from dependency_injector import containers, providers

from .batch import BatchScorer, RequestLoader
from .core import (
    BaselineConfig,
    BaselineScorer,
    CulturalFitConfig,
    CulturalFitExtension,
    ExtensionRegistry,
    ScoringDispatcher,
    TechnicalFocusConfig,
    TechnicalFocusExtension,
)
from .schemas import REQUEST_TYPES


class ScoringContainer(containers.DeclarativeContainer):
    """Dependency-injector container definition."""

    baseline_scorer = providers.Singleton(BaselineScorer)

    technical_extension = providers.Singleton(TechnicalFocusExtension)
    cultural_extension = providers.Singleton(CulturalFitExtension)

    extensions = providers.List(
        technical_extension,
        cultural_extension,
    )

    extension_registry = providers.Singleton(
        ExtensionRegistry,
        extensions=extensions,
        expected=tuple(REQUEST_TYPES),
    )

    dispatcher = providers.Singleton(
        ScoringDispatcher,
        baseline=baseline_scorer,
        registry=extension_registry,
    )

    request_loader = providers.Factory(RequestLoader)

    batch = providers.Factory(
        BatchScorer,
        dispatcher=dispatcher,
        loader=request_loader,
    )


def create_container(*, settings: dict | None = None) -> ScoringContainer:
    """Instantiate container with optional overrides."""

    container = ScoringContainer()

    if not settings:
        return container

    baseline_settings = settings.get("baseline", {}) if isinstance(settings, dict) else {}
    if baseline_settings:
        if "valid_channels" in baseline_settings:
            baseline_settings = {
                **baseline_settings,
                "valid_channels": tuple(baseline_settings["valid_channels"]),
            }
        baseline_config = BaselineConfig(**baseline_settings)
        container.baseline_scorer.override(
            providers.Singleton(BaselineScorer, config=baseline_config)
        )

    extension_settings = settings.get("extensions", {}) if isinstance(settings, dict) else {}

    if "technical" in extension_settings:
        technical_config = TechnicalFocusConfig(**extension_settings["technical"])
        container.technical_extension.override(
            providers.Singleton(TechnicalFocusExtension, config=technical_config)
        )

    if "cultural" in extension_settings:
        cultural_config = CulturalFitConfig(**extension_settings["cultural"])
        container.cultural_extension.override(
            providers.Singleton(CulturalFitExtension, config=cultural_config)
        )

    return container
