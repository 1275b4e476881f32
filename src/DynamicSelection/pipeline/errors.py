"""Custom exception hierarchy for the dynamic test selection pipeline."""
from __future__ import annotations


class DynamicSelectionError(Exception):
    """Base exception for the dynamic test selection pipeline."""


class ConfigurationError(DynamicSelectionError):
    """Raised when suite or mapping configuration is unusable."""


class UnknownSuiteError(ConfigurationError):
    """Raised when the requested suite is not defined in the suite catalog."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        self.available = available
        super().__init__(
            f"Suite {name!r} not found in suites configuration. "
            f"Available suites: {', '.join(available) or '(none)'}"
        )


class InvalidPatternError(ConfigurationError):
    """Raised when a mapping rule pattern is not a valid regular expression."""

    def __init__(self, pattern: str, reason: str) -> None:
        self.pattern = pattern
        self.reason = reason
        super().__init__(
            f"Invalid mapping rule pattern {pattern!r}: {reason}"
        )


class CatalogError(DynamicSelectionError):
    """Raised when the test runner cannot enumerate the test catalog."""
