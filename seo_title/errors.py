"""
Typed errors raised by the title composer.
All of them derive from TitleError so callers can catch the family at once.
"""

from __future__ import annotations


class TitleError(Exception):
    """Base class for every title composition failure."""


class ConfigurationError(TitleError):
    """Missing or empty data, or a configuration that cannot be evaluated."""


class InvalidPrioritySpecError(TitleError):
    """A priority spec names fields that are absent from the data."""

    def __init__(self, spec: str, missing: list[str]):
        self.spec = spec
        self.missing = missing
        super().__init__(f"Priority spec '{spec}' references unknown field(s): {', '.join(missing)}")


class NoFittingCandidateError(TitleError):
    """Neither a candidate nor the primary fallback produced a usable title."""
