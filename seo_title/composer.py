"""
SEO page title composer.

Evaluates each priority spec against the field data, then keeps the longest
candidate that fits within the configured maximum length:

  1. Primary spec: the priority entry with the fewest fields (last one listed wins a tie)
  2. If the primary text alone reaches the maximum, hard-cut it to the maximum
  3. Otherwise pick the longest candidate whose length is <= maximum
  4. Strip a trailing comma from whichever string was chosen

Candidates are keyed by length, so two specs producing equally long strings
collapse to the one listed later. The primary spec is itself a candidate no
longer than the maximum on step 3, so some candidate always fits.
"""

from __future__ import annotations

import logging
from typing import Any, Mapping

from pydantic import ValidationError

from seo_title.errors import ConfigurationError, InvalidPrioritySpecError, NoFittingCandidateError
from seo_title.models import (
    Candidate,
    Configuration,
    FieldRecord,
    PrioritySpec,
    TitlePayload,
    TitleResult,
    TitleSource,
)
from seo_title.text import measure, remove_trailing_comma, truncate

logger = logging.getLogger(__name__)


def _build_config(config: Configuration | Mapping[str, Any] | None) -> Configuration:
    if isinstance(config, Configuration):
        return config
    try:
        return Configuration.model_validate(dict(config or {}))
    except ValidationError as e:
        raise ConfigurationError(f"Invalid title configuration: {e}") from e


class TitleComposer:
    """Derives a single title from one FieldRecord and one Configuration."""

    def __init__(
        self,
        data: Mapping[str, str] | None,
        config: Configuration | Mapping[str, Any] | None = None,
    ):
        self.data: FieldRecord = dict(data or {})
        self.config = _build_config(config)

    @classmethod
    def from_payload(cls, payload: TitlePayload | Mapping[str, Any]) -> TitleComposer:
        if not isinstance(payload, TitlePayload):
            try:
                payload = TitlePayload.model_validate(payload)
            except ValidationError as e:
                raise ConfigurationError(f"Invalid title payload: {e}") from e
        return cls(payload.data, payload.config)

    # ── Field bookkeeping ─────────────────────────────────────────────

    def field_lengths(self) -> list[tuple[str, str, int]]:
        unit = self.config.length_unit
        return [(name, text, measure(text, unit)) for name, text in self.data.items()]

    def _missing(self, spec: PrioritySpec) -> list[str]:
        return [name for name in spec.fields if name not in self.data]

    def _join(self, spec: PrioritySpec) -> str:
        punctuation = self.config.punctuation
        parts = []
        for i, name in enumerate(spec.fields):
            text = self.data[name]
            parts.append(f"{punctuation[i - 1]} {text}" if i > 0 else text)
        return " ".join(parts)

    # ── Primary field ─────────────────────────────────────────────────

    def get_primary_spec(self) -> PrioritySpec:
        by_count: dict[int, PrioritySpec] = {}
        for spec in self.config.priority:
            by_count[len(spec)] = spec
        return by_count[min(by_count)]

    def get_primary_text(self) -> str:
        """Text of the primary spec; a multi-field primary spec yields its joined string."""
        spec = self.get_primary_spec()
        missing = self._missing(spec)
        if missing:
            # never skipped, even when not strict
            raise InvalidPrioritySpecError(spec.raw, missing)
        if len(spec) == 1:
            return self.data[spec.fields[0]]
        return self._join(spec)

    def get_primary_length(self) -> int:
        """Single-field primaries read the per-field length table; joined ones are measured."""
        spec = self.get_primary_spec()
        if len(spec) == 1:
            lengths = {name: length for name, _, length in self.field_lengths()}
            if spec.fields[0] in lengths:
                return lengths[spec.fields[0]]
        return measure(self.get_primary_text(), self.config.length_unit)

    # ── Candidates ────────────────────────────────────────────────────

    def evaluate(self, spec: PrioritySpec) -> Candidate | None:
        missing = self._missing(spec)
        if missing:
            if self.config.strict:
                raise InvalidPrioritySpecError(spec.raw, missing)
            logger.warning("Skipping priority spec '%s': unknown field(s) %s", spec.raw, missing)
            return None

        text = self._join(spec)
        return Candidate(spec=spec.raw, text=text, length=measure(text, self.config.length_unit))

    def prioritize(self) -> dict[int, Candidate]:
        output: dict[int, Candidate] = {}
        for spec in self.config.priority:
            candidate = self.evaluate(spec)
            if candidate is None:
                continue
            logger.debug("Candidate '%s' -> %r (%d)", spec.raw, candidate.text, candidate.length)
            output[candidate.length] = candidate
        return output

    # ── Generation ────────────────────────────────────────────────────

    def generate(self) -> TitleResult:
        if not self.data:
            raise ConfigurationError("Field data is empty; supply at least one field to compose a title")

        limit = self.config.max_length
        unit = self.config.length_unit
        primary = self.get_primary_spec()
        primary_text = self.get_primary_text()
        candidates = self.prioritize()

        if self.get_primary_length() >= limit:
            title = remove_trailing_comma(truncate(primary_text, limit, unit))
            source = TitleSource.PRIMARY_TRUNCATED
        else:
            # the primary candidate fits, so this is never empty
            best = max(length for length in candidates if length <= limit)
            title = remove_trailing_comma(candidates[best].text)
            source = TitleSource.CANDIDATE

        if not title:
            raise NoFittingCandidateError(
                f"No priority spec produced a non-empty title within {limit} {unit}"
            )

        logger.info("Composed title %r (%s)", title, source.value)
        return TitleResult(
            title=title,
            length=measure(title, unit),
            source=source,
            primary_spec=primary.raw,
            max_length=limit,
            candidates=sorted(candidates.values(), key=lambda c: c.length, reverse=True),
        )


def compose_title(
    data: Mapping[str, str] | None,
    config: Configuration | Mapping[str, Any] | None = None,
) -> TitleResult:
    """Compose a title and report how it was chosen."""
    return TitleComposer(data, config).generate()


def compose(
    data: Mapping[str, str] | None,
    config: Configuration | Mapping[str, Any] | None = None,
) -> str:
    return compose_title(data, config).title
