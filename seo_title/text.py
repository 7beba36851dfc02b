"""
Length measurement, truncation and cleanup helpers.

Lengths are measured in Unicode code points by default. The "bytes" unit
counts UTF-8 bytes instead; truncation in that unit never splits a
multi-byte character, so the result may be a few bytes under the limit.
"""

from __future__ import annotations

import re
from typing import Literal

LengthUnit = Literal["chars", "bytes"]

_TRAILING_COMMA_RE = re.compile(r"\s*,\s*$")


def measure(text: str, unit: LengthUnit = "chars") -> int:
    if unit == "bytes":
        return len(text.encode("utf-8"))
    return len(text)


def truncate(text: str, limit: int, unit: LengthUnit = "chars") -> str:
    """Hard cut to at most `limit` units. Not word-aware."""
    if measure(text, unit) <= limit:
        return text
    if unit == "bytes":
        return text.encode("utf-8")[:limit].decode("utf-8", errors="ignore")
    return text[:limit]


def remove_trailing_comma(text: str) -> str:
    """Drop one trailing comma along with the whitespace around it.

    >>> remove_trailing_comma("Acme, ")
    'Acme'
    """
    return _TRAILING_COMMA_RE.sub("", text)
