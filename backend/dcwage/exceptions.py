"""Custom exception hierarchy for the dcwage service."""

from __future__ import annotations


class DcwageError(Exception):
    """Base exception for all dcwage errors."""


class InvalidRequestBodyError(DcwageError):
    """Raised when a POST body cannot be turned into a wage query."""


class ConfigurationError(DcwageError):
    """Raised when server settings from the environment are invalid."""
