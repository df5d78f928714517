"""Rule extension registry and selection."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Iterable, List

from ..schemas import ScoringRequest
from .errors import ConfigurationError

if TYPE_CHECKING:
    from . import RuleExtension


class ExtensionRegistry:
    """Read-only set of rule extensions, checked once at startup.

    ``select`` still verifies that exactly one extension claims a request, since
    ``can_handle`` may be narrower or wider than the declared process type.
    """

    def __init__(
        self,
        extensions: Iterable[RuleExtension],
        *,
        expected: Iterable[str] | None = None,
    ) -> None:
        self._extensions: tuple[RuleExtension, ...] = tuple(extensions)
        self._validate(expected)

    def select(self, request: ScoringRequest) -> RuleExtension:
        process_type = request.process_type
        matches = [ext for ext in self._extensions if ext.can_handle(request)]
        if not matches:
            raise ConfigurationError(
                f"No rule extension found for process type: {process_type!r}",
                process_type=process_type,
            )
        if len(matches) > 1:
            names = ", ".join(type(ext).__name__ for ext in matches)
            raise ConfigurationError(
                f"Multiple rule extensions claim process type {process_type!r}: {names}",
                process_type=process_type,
            )

        return matches[0]

    def process_types(self) -> List[str]:
        return [ext.process_type for ext in self._extensions]

    def _validate(self, expected: Iterable[str] | None) -> None:
        counts = Counter(ext.process_type for ext in self._extensions)
        duplicates = sorted(pt for pt, count in counts.items() if count > 1)
        if duplicates:
            raise ConfigurationError(
                f"Duplicate rule extensions for process types: {duplicates}",
                process_type=duplicates[0],
            )

        if expected is None:
            return

        expected_types = set(expected)
        missing = sorted(expected_types - counts.keys())
        if missing:
            raise ConfigurationError(
                f"No rule extension registered for process types: {missing}",
                process_type=missing[0],
            )
        unknown = sorted(counts.keys() - expected_types)
        if unknown:
            raise ConfigurationError(
                f"Rule extensions registered for unknown process types: {unknown}",
                process_type=unknown[0],
            )
