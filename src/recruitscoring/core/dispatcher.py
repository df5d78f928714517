"""Single entry point routing every request variant through the same flow."""

from __future__ import annotations

from typing import Iterable

import structlog

from ..schemas import ScoringRequest
from .baseline import BaselineScorer
from .registry import ExtensionRegistry
from .result import ScoringResult


class ScoringDispatcher:
    """Run the baseline, then hand the result to the matching rule extension."""

    def __init__(self, *, baseline: BaselineScorer, registry: ExtensionRegistry) -> None:
        self._baseline = baseline
        self._registry = registry
        self._logger = structlog.get_logger(__name__)

    def score(self, request: ScoringRequest) -> ScoringResult:
        log = self._logger.bind(
            candidate_id=str(request.candidate_id),
            process_type=request.process_type,
        )
        log.info("scoring.started")

        baseline = self._baseline.score(request)
        log.info(
            "scoring.baseline_completed",
            score=baseline.score,
            approved=baseline.approved,
        )

        extension = self._registry.select(request)
        result = extension.apply_rules(request, baseline)

        log.info(
            "scoring.completed",
            score=result.score,
            approved=result.approved,
            label=result.process_type,
        )
        return result

    async def score_async(self, request: ScoringRequest) -> ScoringResult:
        return self.score(request)

    def score_many(self, requests: Iterable[ScoringRequest]) -> list[ScoringResult]:
        return [self.score(request) for request in requests]
