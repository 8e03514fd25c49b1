# tests/core/test_domain_models.py
import dataclasses

import pytest

from genere.core.domain.exceptions import InvalidGenderMarkerError
from genere.core.domain.models import Gender, ReplacementRule, ResolvedValue


class TestGender:
    @pytest.mark.parametrize(
        "value, expected",
        [
            ("m", Gender.MALE),
            ("M", Gender.MALE),
            ("f", Gender.FEMALE),
            ("F", Gender.FEMALE),
            (" n ", Gender.NEUTRAL),
        ],
    )
    def test_parse(self, value, expected):
        assert Gender.parse(value) is expected

    def test_parse_invalid(self):
        with pytest.raises(InvalidGenderMarkerError) as excinfo:
            Gender.parse("x")
        assert excinfo.value.value == "x"
        assert excinfo.value.symbol is None

    def test_parse_invalid_mentions_location(self):
        with pytest.raises(InvalidGenderMarkerError) as excinfo:
            Gender.parse("q", symbol="hero", fragment="Joe[q]")
        assert "hero" in str(excinfo.value)
        assert "Joe[q]" in str(excinfo.value)


class TestValues:
    def test_resolved_value_defaults_to_neutral(self):
        assert ResolvedValue(content="x").gender is Gender.NEUTRAL

    def test_rule_is_immutable(self):
        rule = ReplacementRule(candidates=("a",))
        assert rule.gender_dependency is None
        with pytest.raises(dataclasses.FrozenInstanceError):
            rule.candidates = ("b",)
