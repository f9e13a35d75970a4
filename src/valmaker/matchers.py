"""Matcher construction.

A Matcher is the leaf of every validator: a regex fragment plus the
message reported when the fragment does not match. Anchoring belongs to
the operators, so fragments carrying '^' or '$' at their boundaries are
rejected here.
"""

import re
from functools import lru_cache

from valmaker.types import Matcher


class InvalidPatternError(ValueError):
    """Raised when a matcher pattern cannot be used by the operators."""

    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(reason)


@lru_cache(maxsize=512)
def compile_pattern(pattern: str) -> re.Pattern:
    """Compile a matcher fragment. Patterns are immutable, so cache them."""
    return re.compile(pattern)


def make(pattern: str, message: str) -> Matcher:
    """Create a Matcher from a regex fragment and its fallback message.

    Args:
        pattern: Regex fragment, without '^' or '$' anchors
        message: Message reported by and_/merge when the fragment fails

    Returns:
        The Matcher with pattern and message unchanged

    Raises:
        InvalidPatternError: If the fragment is anchored or does not compile
    """
    if pattern.startswith("^"):
        raise InvalidPatternError(pattern, "'pattern' should NOT be started with '^'")
    if pattern.endswith("$"):
        raise InvalidPatternError(pattern, "'pattern' should NOT be ended with '$'")

    try:
        compile_pattern(pattern)
    except re.error as e:
        raise InvalidPatternError(
            pattern, f"'pattern' is not a valid regular expression: {e}"
        ) from e

    return Matcher(pattern=pattern, message=message)
