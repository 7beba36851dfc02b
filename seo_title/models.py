"""
Pydantic models used by the composer for validation and serialization.
These are pure data objects; no composition logic lives here.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from seo_title.config import get_settings
from seo_title.text import LengthUnit

# field name -> field text
FieldRecord = dict[str, str]


# ── Enums ──────────────────────────────────────────────────────────────

class TitleSource(str, Enum):
    CANDIDATE = "candidate"
    PRIMARY_TRUNCATED = "primary_truncated"


# ── Configuration models ──────────────────────────────────────────────

def _split_spec(raw: str) -> dict:
    return {"raw": raw, "fields": [item.strip() for item in raw.split(",")]}


class PrioritySpec(BaseModel):
    """One ordered combination of field names, e.g. 'name,category'."""
    raw: str
    fields: list[str] = Field(..., min_length=1)

    model_config = {"frozen": True}

    @field_validator("fields")
    @classmethod
    def no_blank_fields(cls, v: list[str]) -> list[str]:
        if any(not name for name in v):
            raise ValueError("priority spec contains a blank field name")
        return v

    def __len__(self) -> int:
        return len(self.fields)


def _default_punctuation() -> list[str]:
    return list(get_settings().title.punctuation)


class Configuration(BaseModel):
    """Composer configuration. Missing keys fall back to the process settings."""
    priority: list[PrioritySpec] = Field(..., min_length=1)
    max_length: int = Field(
        default_factory=lambda: get_settings().title.max_length, alias="max", gt=0
    )
    punctuation: list[str] = Field(default_factory=_default_punctuation)
    length_unit: LengthUnit = Field(default_factory=lambda: get_settings().title.length_unit)
    strict: bool = Field(default_factory=lambda: get_settings().title.strict)

    model_config = {"frozen": True, "populate_by_name": True, "validate_default": True}

    @field_validator("priority", mode="before")
    @classmethod
    def parse_priority(cls, v):
        """Priority entries arrive as comma-separated strings."""
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            return v
        return [_split_spec(item) if isinstance(item, str) else item for item in v]

    @model_validator(mode="after")
    def enough_punctuation(self) -> Configuration:
        widest = max(len(spec) for spec in self.priority)
        if len(self.punctuation) < widest - 1:
            raise ValueError(
                f"{len(self.punctuation)} punctuation token(s) configured but a "
                f"priority spec joins {widest} fields"
            )
        return self


class TitlePayload(BaseModel):
    """The nested {"data": ..., "config": ...} input shape."""
    data: FieldRecord = Field(default_factory=dict)
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("data", mode="before")
    @classmethod
    def stringify_values(cls, v):
        """Contact numbers and the like may arrive as numbers."""
        if isinstance(v, dict):
            return {str(k): "" if val is None else str(val) for k, val in v.items()}
        return v


# ── Result models ─────────────────────────────────────────────────────

class Candidate(BaseModel):
    """A priority spec evaluated against the data."""
    spec: str
    text: str
    length: int


class TitleResult(BaseModel):
    title: str
    length: int
    source: TitleSource
    primary_spec: str
    max_length: int
    candidates: list[Candidate] = Field(default_factory=list)
