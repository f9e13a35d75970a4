"""valmaker: compose string validators from regex fragments.

Matchers are regex fragments with a fallback message. The operators
combine them into validators, callables that return "" for a valid value
and a human-readable message otherwise:
- or_: every part of the value is matched by some matcher
- and_: every matcher matches the whole value
- not_: the matcher occurs nowhere in the value
- merge: run validators in order, first failure wins

Usage:
    from valmaker import make, or_, merge

    alpha = make("[a-z]+", "Only alphabets allowed.")
    digits = make("[0-9]+", "Only numbers allowed.")
    five = make(".{5}", "Must be 5 characters long.")

    code = merge(or_(alpha, digits), five)
    code("ab123")  # ""
    code("AB123")  # "'AB' is NOT allowed."
"""

from valmaker.maker import (
    DEFAULT_MAKER,
    ValidatorMaker,
    and_,
    create_validator_maker,
    make,
    merge,
    not_,
    or_,
)
from valmaker.matchers import InvalidPatternError
from valmaker.operators import AndValidator, MergedValidator, NotValidator, OrValidator
from valmaker.types import (
    DEFAULT_CONFIG,
    Config,
    Matcher,
    MessageFn,
    Validator,
    default_message,
    template_message,
)

validator_maker = DEFAULT_MAKER

__all__ = [
    # Types
    "Config",
    "DEFAULT_CONFIG",
    "Matcher",
    "MessageFn",
    "Validator",
    "default_message",
    "template_message",
    # Errors
    "InvalidPatternError",
    # Operators
    "AndValidator",
    "MergedValidator",
    "NotValidator",
    "OrValidator",
    "and_",
    "make",
    "merge",
    "not_",
    "or_",
    # Factory
    "DEFAULT_MAKER",
    "ValidatorMaker",
    "create_validator_maker",
    "validator_maker",
]
