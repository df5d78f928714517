"""Scoring of request files for the command line."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import pendulum
import structlog
from pydantic import ValidationError

from . import __version__
from .core import ScoringDispatcher
from .schemas import ScoringRequest, parse_request


class RequestLoadError(ValueError):
    """Raised when a request file contains invalid records."""

    def __init__(self, errors: list[str], partial: list[ScoringRequest]):
        super().__init__("Request loading failed")
        self.errors = errors
        self.partial = partial

    def __str__(self) -> str:  # pragma: no cover - trivial
        return f"Request loading failed: {self.errors}"


class RequestLoader:
    """Load scoring requests from a JSON Lines file."""

    def load(self, path: Path) -> list[ScoringRequest]:
        requests: list[ScoringRequest] = []
        errors: list[str] = []
        with path.open("r", encoding="utf-8") as handle:
            for idx, line in enumerate(handle, start=1):
                raw = line.strip()
                if not raw:
                    continue
                try:
                    record = json.loads(raw)
                except json.JSONDecodeError as exc:
                    errors.append(f"line {idx}: invalid JSON ({exc})")
                    continue
                if not isinstance(record, dict):
                    errors.append(f"line {idx}: expected a JSON object")
                    continue
                if not record.get("process_type"):
                    errors.append(f"line {idx}: missing process_type field")
                    continue
                try:
                    requests.append(parse_request(record))
                except ValidationError as exc:
                    errors.append(f"line {idx}: {exc.error_count()} validation error(s): {_first_error(exc)}")
        if errors:
            raise RequestLoadError(errors, requests)
        return requests


@dataclass
class BatchReport:
    """Scored results plus the lines that could not be loaded."""

    results: list[dict[str, Any]]
    errors: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "metadata": {
                "request_count": len(self.results),
                "errors": self.errors,
                "timestamp": pendulum.now("UTC").to_iso8601_string(),
                "app_version": __version__,
            },
            "results": self.results,
        }


class BatchScorer:
    """Load a request file and score every valid request in order."""

    def __init__(
        self,
        *,
        dispatcher: ScoringDispatcher,
        loader: RequestLoader | None = None,
    ) -> None:
        self._dispatcher = dispatcher
        self._loader = loader or RequestLoader()
        self._logger = structlog.get_logger(__name__)

    def run(self, *, requests_path: Path) -> BatchReport:
        load_errors: list[str] = []
        try:
            requests = self._loader.load(requests_path)
        except RequestLoadError as exc:
            requests = exc.partial
            load_errors.extend(exc.errors)
            self._logger.warning("requests.partial_load", errors=exc.errors)

        results: list[dict[str, Any]] = []
        for request in requests:
            result = self._dispatcher.score(request)
            results.append(result.to_dict())
            self._logger.info(
                "scoring.result",
                candidate_id=str(result.candidate_id),
                position_id=str(result.position_id),
                score=result.score,
                approved=result.approved,
            )

        return BatchReport(results=results, errors=load_errors)


def _first_error(exc: ValidationError) -> str:
    first = exc.errors()[0]
    location = ".".join(str(part) for part in first.get("loc", ()))
    return f"{location}: {first.get('msg', '')}"
