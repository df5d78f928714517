"""Errors raised for wiring and contract defects.

Weak candidate data is never an error; it only shows up in feedback and score.
"""

from __future__ import annotations


class ScoringError(Exception):
    """Base class for scoring failures."""


class ConfigurationError(ScoringError):
    """Rule extensions are wired inconsistently for a process type."""

    def __init__(self, message: str, *, process_type: str | None = None):
        super().__init__(message)
        self.process_type = process_type


class RequestTypeError(ScoringError, TypeError):
    """A rule extension received a request of the wrong shape."""

    def __init__(self, expected: type, actual: type):
        super().__init__(f"Expected {expected.__name__} but got {actual.__name__}")
        self.expected = expected.__name__
        self.actual = actual.__name__
