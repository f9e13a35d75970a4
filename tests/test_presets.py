"""Tests for preset matchers."""

import pytest

from valmaker import and_, merge, or_
from valmaker.presets import (
    ALPHA,
    ALPHA_UPPER,
    ALPHANUMERIC,
    DIGITS,
    PRESETS,
    PUNCTUATION,
    WHITESPACE,
    length,
    length_between,
    max_length,
    min_length,
    resolve_preset,
)


class TestCharacterClasses:
    def test_patterns_match_whole_values(self):
        cases = [
            (ALPHA, "abc", "ABC"),
            (ALPHA_UPPER, "ABC", "abc"),
            (ALPHANUMERIC, "aB3", "a-3"),
            (DIGITS, "0123", "12a"),
            (WHITESPACE, " \t", " a "),
            (PUNCTUATION, ", .!", "a,"),
        ]
        for matcher, valid, invalid in cases:
            assert and_(matcher)(valid) == "", f"{valid!r} should match {matcher.pattern}"
            assert and_(matcher)(invalid) == matcher.message, f"{invalid!r} should not match"

    def test_sentence(self):
        validator = or_(ALPHA, ALPHA_UPPER, DIGITS, PUNCTUATION)
        assert validator("Hello, World 42!") == ""
        assert validator("Hello #1") == "'#' is NOT allowed."


class TestLengthRules:
    def test_length(self):
        matcher = length(5)
        assert matcher.pattern == ".{5}"
        assert matcher.message == "Must be 5 characters long."
        assert and_(matcher)("abcde") == ""
        assert and_(matcher)("abcd") == "Must be 5 characters long."

    def test_min_and_max_length(self):
        validator = merge(min_length(2), max_length(4))
        assert validator("a") == "Must be 2 or more characters long."
        assert validator("abc") == ""
        assert validator("abcde") == "Must be 4 or fewer characters long."

    def test_length_between(self):
        validator = merge(length_between(2, 3))
        assert validator("ab") == ""
        assert validator("abcd") == "Must be between 2 and 3 characters long."

    def test_length_between_rejects_inverted_bounds(self):
        with pytest.raises(ValueError):
            length_between(4, 2)


class TestResolvePreset:
    def test_resolves_matcher_by_name(self):
        assert resolve_preset("digits") is DIGITS

    def test_resolves_factory_with_params(self):
        assert resolve_preset("length", {"n": 3}) == length(3)

    def test_unknown_preset(self):
        with pytest.raises(ValueError, match="Available presets"):
            resolve_preset("email")

    def test_matcher_preset_rejects_params(self):
        with pytest.raises(ValueError, match="does not take params"):
            resolve_preset("alpha", {"n": 1})

    def test_factory_with_bad_params(self):
        with pytest.raises(ValueError, match="params are invalid"):
            resolve_preset("length", {"size": 3})

    def test_all_presets_are_listed(self):
        assert {"alpha", "digits", "length", "length_between"} <= set(PRESETS)
