"""Candidate scoring with a shared baseline and process-specific rule extensions."""

__version__ = "0.1.0"
