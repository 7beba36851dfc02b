"""
Central configuration loaded from environment variables with sensible defaults.
These values seed every TitleComposer unless the caller overrides them.
Values are read when get_settings() first builds the Settings instance.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from functools import lru_cache

DEFAULT_PUNCTUATION = ("-", "|", ",", ",", ",", ",", ",", ",")


def _punctuation_from_env() -> tuple[str, ...]:
    raw = os.getenv("SEO_TITLE_PUNCTUATION", "")
    tokens = tuple(raw.split())
    return tokens or DEFAULT_PUNCTUATION


@dataclass(frozen=True)
class TitleConfig:
    # Left as text; Configuration validates it as a positive int
    max_length: str = field(default_factory=lambda: os.getenv("SEO_TITLE_MAX_LENGTH", "70"))
    punctuation: tuple[str, ...] = field(default_factory=_punctuation_from_env)
    # chars | bytes
    length_unit: str = field(default_factory=lambda: os.getenv("SEO_TITLE_LENGTH_UNIT", "chars"))
    # Raise on specs that name fields missing from the data, instead of skipping them
    strict: bool = field(
        default_factory=lambda: os.getenv("SEO_TITLE_STRICT", "true").lower() == "true"
    )


@dataclass(frozen=True)
class Settings:
    title: TitleConfig = field(default_factory=TitleConfig)
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    env: str = field(default_factory=lambda: os.getenv("APP_ENV", "development"))


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Singleton settings instance."""
    return Settings()
