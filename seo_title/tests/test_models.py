"""
Tests for Pydantic model validation.
"""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from seo_title.config import get_settings
from seo_title.models import (
    Candidate,
    Configuration,
    PrioritySpec,
    TitlePayload,
    TitleResult,
    TitleSource,
)


@pytest.fixture
def fresh_settings(monkeypatch):
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestPrioritySpec:
    def test_string_entries_are_split_and_trimmed(self):
        config = Configuration.model_validate({"priority": ["name,category, contact_no"]})
        spec = config.priority[0]
        assert isinstance(spec, PrioritySpec)
        assert spec.fields == ["name", "category", "contact_no"]
        assert spec.raw == "name,category, contact_no"
        assert len(spec) == 3

    def test_single_field(self):
        config = Configuration.model_validate({"priority": ["name"]})
        assert config.priority[0].fields == ["name"]

    def test_blank_field_rejected(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate({"priority": ["name, ,category"]})

    def test_spec_instances_pass_through(self):
        spec = PrioritySpec(raw="name", fields=["name"])
        assert Configuration(priority=[spec]).priority == [spec]


class TestEnvironmentDefaults:
    def test_max_length_from_env(self, fresh_settings):
        fresh_settings.setenv("SEO_TITLE_MAX_LENGTH", "55")
        assert Configuration.model_validate({"priority": ["name"]}).max_length == 55

    def test_negative_max_length_rejected(self, fresh_settings):
        fresh_settings.setenv("SEO_TITLE_MAX_LENGTH", "-5")
        with pytest.raises(ValidationError):
            Configuration.model_validate({"priority": ["name"]})

    def test_non_numeric_max_length_rejected(self, fresh_settings):
        fresh_settings.setenv("SEO_TITLE_MAX_LENGTH", "seventy")
        with pytest.raises(ValidationError):
            Configuration.model_validate({"priority": ["name"]})

    def test_unknown_length_unit_rejected(self, fresh_settings):
        fresh_settings.setenv("SEO_TITLE_LENGTH_UNIT", "words")
        with pytest.raises(ValidationError):
            Configuration.model_validate({"priority": ["name"]})

    def test_explicit_value_overrides_bad_env(self, fresh_settings):
        fresh_settings.setenv("SEO_TITLE_MAX_LENGTH", "-5")
        assert Configuration.model_validate({"priority": ["name"], "max": 10}).max_length == 10


class TestConfiguration:
    def test_alias_and_field_name(self):
        assert Configuration.model_validate({"priority": ["name"], "max": 50}).max_length == 50
        assert Configuration(priority=["name"], max_length=60).max_length == 60

    def test_single_string_priority(self):
        config = Configuration.model_validate({"priority": "name,category"})
        assert [s.fields for s in config.priority] == [["name", "category"]]

    def test_priority_required(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate({})

    def test_length_unit_restricted(self):
        with pytest.raises(ValidationError):
            Configuration.model_validate({"priority": ["name"], "length_unit": "words"})

    def test_punctuation_covers_widest_spec(self):
        config = Configuration.model_validate(
            {"priority": ["a,b,c", "a"], "punctuation": ["-", "|"]}
        )
        assert config.punctuation == ["-", "|"]

    def test_frozen(self):
        config = Configuration.model_validate({"priority": ["name"]})
        with pytest.raises(ValidationError):
            config.max_length = 10


class TestTitlePayload:
    def test_values_stringified(self):
        payload = TitlePayload.model_validate({"data": {"name": "Acme", "phone": 12345, "fax": None}})
        assert payload.data == {"name": "Acme", "phone": "12345", "fax": ""}
        assert payload.config == {}

    def test_empty_payload(self):
        payload = TitlePayload.model_validate({})
        assert payload.data == {}


class TestTitleResult:
    def test_json_dump(self):
        result = TitleResult(
            title="Acme",
            length=4,
            source=TitleSource.CANDIDATE,
            primary_spec="name",
            max_length=70,
            candidates=[Candidate(spec="name", text="Acme", length=4)],
        )
        dumped = result.model_dump(mode="json")
        assert dumped["source"] == "candidate"
        assert dumped["candidates"][0]["text"] == "Acme"
