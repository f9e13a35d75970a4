"""Tests for matcher construction."""

import pytest

from valmaker import InvalidPatternError, Matcher, make
from valmaker.matchers import compile_pattern


class TestMake:
    """Test the matcher factory."""

    def test_returns_pattern_and_message_unchanged(self):
        matcher = make("[a-z]+", "Only alphabets allowed.")
        assert matcher == Matcher(pattern="[a-z]+", message="Only alphabets allowed.")

    def test_rejects_leading_caret(self):
        with pytest.raises(InvalidPatternError, match=r"should NOT be started with '\^'"):
            make("^[a-z]+", "Only alphabets allowed.")

    def test_rejects_trailing_dollar(self):
        with pytest.raises(InvalidPatternError, match=r"should NOT be ended with '\$'"):
            make("[a-z]+$", "Only alphabets allowed.")

    def test_start_anchor_is_reported_first(self):
        with pytest.raises(InvalidPatternError) as exc_info:
            make("^[a-z]+$", "Only alphabets allowed.")
        assert str(exc_info.value) == "'pattern' should NOT be started with '^'"
        assert exc_info.value.pattern == "^[a-z]+$"

    def test_inner_anchors_are_allowed(self):
        matcher = make("a(?:^|b)c", "ok")
        assert matcher.pattern == "a(?:^|b)c"

    def test_rejects_invalid_regex(self):
        with pytest.raises(InvalidPatternError, match="not a valid regular expression"):
            make("[a-z", "Broken.")

    def test_invalid_pattern_error_is_value_error(self):
        with pytest.raises(ValueError):
            make("^abc", "Anchored.")

    def test_matcher_is_immutable(self):
        matcher = make("[a-z]+", "Only alphabets allowed.")
        with pytest.raises(AttributeError):
            matcher.pattern = "[0-9]+"

    def test_compiled_patterns_are_cached(self):
        assert compile_pattern("[a-z]+") is compile_pattern("[a-z]+")
