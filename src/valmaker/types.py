"""Core types for the valmaker combinator engine.

This module defines the values that flow between the combinators:
- Matcher: a regex fragment plus its fallback error message
- MessageFn: formats the offending substring into an error message
- Validator: maps an input string to "" (valid) or an error message
- Config: the default message policy a family of operators is bound to
"""

from dataclasses import dataclass
from typing import Callable, Union

MessageFn = Callable[[str], str]
"""Builds the final error text from the substring that caused a failure."""

Validator = Callable[[str], str]
"""Returns "" when the value is valid, otherwise the user-facing reason."""


@dataclass(frozen=True)
class Matcher:
    """A regex fragment and the message reported when it does not match.

    Attributes:
        pattern: Regex fragment; never starts with '^' nor ends with '$'
        message: Static fallback message used by and_/merge when no
            custom message function is supplied
    """

    pattern: str
    message: str


def default_message(invalid_string: str) -> str:
    return f"'{invalid_string}' is NOT allowed."


@dataclass(frozen=True)
class Config:
    """Configuration a family of operators is bound to.

    Attributes:
        default_message: Message function used by or_/not_ when the caller
            does not pass one
    """

    default_message: MessageFn = default_message

    @classmethod
    def from_template(cls, template: str) -> "Config":
        """Create a Config from a "{value}" message template."""
        return cls(default_message=template_message(template))


def template_message(template: str) -> MessageFn:
    """Turn a "{value}" template into a message function.

    Example:
        template_message("'{value}' is NOT valid.")("ABC")  # "'ABC' is NOT valid."
    """

    def message(invalid_string: str) -> str:
        return template.replace("{value}", invalid_string)

    return message


DEFAULT_CONFIG = Config()

MatcherOrMessage = Union[Matcher, MessageFn]
ValidatorOrMatcher = Union[Validator, Matcher]
