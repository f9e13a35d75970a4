"""Ready-made matchers.

Common character-class fragments and length rules, built with make() so
they can be passed straight to the operators:

    from valmaker import or_, merge
    from valmaker.presets import ALPHA, DIGITS, length

    code = merge(or_(ALPHA, DIGITS), length(6))
"""

from typing import Any, Callable

from valmaker.matchers import make
from valmaker.types import Matcher


# =============================================================================
# Character classes
# =============================================================================

ALPHA = make(r"[a-z]+", "Only alphabets allowed.")

ALPHA_UPPER = make(r"[A-Z]+", "Only upper case alphabets allowed.")

ALPHANUMERIC = make(r"[a-zA-Z0-9]+", "Only alphabets and numbers allowed.")

DIGITS = make(r"[0-9]+", "Only numbers allowed.")

WHITESPACE = make(r"\s+", "Only whitespace allowed.")

PUNCTUATION = make(r"[\s,.!?;:'\"()-]+", "Only punctuation allowed.")


# =============================================================================
# Length rules
# =============================================================================


def length(n: int) -> Matcher:
    """Exactly n characters."""
    return make(f".{{{n}}}", f"Must be {n} characters long.")


def min_length(n: int) -> Matcher:
    return make(f".{{{n},}}", f"Must be {n} or more characters long.")


def max_length(n: int) -> Matcher:
    return make(f".{{0,{n}}}", f"Must be {n} or fewer characters long.")


def length_between(low: int, high: int) -> Matcher:
    if low > high:
        raise ValueError(f"length_between() low ({low}) is greater than high ({high})")
    return make(
        f".{{{low},{high}}}",
        f"Must be between {low} and {high} characters long.",
    )


# =============================================================================
# Lookup by name
# =============================================================================

PRESETS: dict[str, Matcher | Callable[..., Matcher]] = {
    "alpha": ALPHA,
    "alpha_upper": ALPHA_UPPER,
    "alphanumeric": ALPHANUMERIC,
    "digits": DIGITS,
    "whitespace": WHITESPACE,
    "punctuation": PUNCTUATION,
    "length": length,
    "min_length": min_length,
    "max_length": max_length,
    "length_between": length_between,
}


def resolve_preset(name: str, params: dict[str, Any] | None = None) -> Matcher:
    """Build a preset matcher by name.

    Args:
        name: Key in PRESETS
        params: Keyword arguments for factory presets such as "length"

    Raises:
        ValueError: If the preset is unknown or its params do not fit
    """
    if name not in PRESETS:
        raise ValueError(
            f"Preset '{name}' is not defined. "
            "Available presets: " + ", ".join(sorted(PRESETS))
        )

    preset = PRESETS[name]
    if isinstance(preset, Matcher):
        if params:
            raise ValueError(f"Preset '{name}' does not take params")
        return preset

    try:
        return preset(**(params or {}))
    except TypeError as e:
        raise ValueError(f"Preset '{name}' params are invalid: {e}") from e
