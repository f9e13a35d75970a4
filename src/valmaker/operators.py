"""Logical operators and the merge combinator.

Each operator is a small frozen dataclass that owns its matchers and the
message function it reports with. Instances are callables that satisfy
the Validator contract: "" when the value is valid, the error message
otherwise. They hold no mutable state, so one instance can be shared
freely across callers and threads.

The variadic call convention (matchers, then an optional trailing
message function) is resolved once at construction by split_arguments().
"""

import logging
import re
from dataclasses import dataclass

from valmaker.matchers import compile_pattern
from valmaker.types import Matcher, MatcherOrMessage, MessageFn, ValidatorOrMatcher, Validator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OperatorArguments:
    """Operator arguments split into matchers and the optional formatter."""

    matchers: tuple[Matcher, ...]
    message: MessageFn | None = None


def split_arguments(operator: str, args: tuple[MatcherOrMessage, ...]) -> OperatorArguments:
    """Split an operator's variadic arguments.

    A Matcher instance is a matcher; anything callable is a message
    function. At most one message function is accepted, and only as the
    last argument.

    Raises:
        TypeError: If an argument is neither, or the message function is misplaced
    """
    matchers: list[Matcher] = []
    message: MessageFn | None = None

    for index, arg in enumerate(args):
        if isinstance(arg, Matcher):
            matchers.append(arg)
        elif callable(arg):
            if index != len(args) - 1:
                raise TypeError(
                    f"{operator}() accepts a message function only as its last argument"
                )
            message = arg
        else:
            raise TypeError(
                f"{operator}() arguments must be Matchers or a message function, "
                f"got {type(arg).__name__}"
            )

    return OperatorArguments(matchers=tuple(matchers), message=message)


def remove_matches(regex: re.Pattern, fragment: str) -> list[str]:
    """Remove every non-empty match of regex from fragment.

    Matches are found left to right and never overlap. Zero-width matches
    neither remove text nor split the fragment. Empty pieces are dropped.
    """
    pieces: list[str] = []
    start = 0
    for match in regex.finditer(fragment):
        if match.end() == match.start():
            continue
        pieces.append(fragment[start:match.start()])
        start = match.end()
    pieces.append(fragment[start:])
    return [piece for piece in pieces if piece]


@dataclass(frozen=True)
class OrValidator:
    """Valid when every part of the value is covered by some matcher.

    The value is partitioned pattern by pattern: each matcher removes the
    text it matches from every remaining fragment. Whatever is left was
    matched by none of them, and the first leftover fragment is reported.
    """

    matchers: tuple[Matcher, ...]
    message: MessageFn

    def remainders(self, value: str) -> list[str]:
        fragments = [value] if value else []
        for matcher in self.matchers:
            regex = compile_pattern(matcher.pattern)
            fragments = [
                piece
                for fragment in fragments
                for piece in remove_matches(regex, fragment)
            ]
            if not fragments:
                break
        return fragments

    def __call__(self, value: str) -> str:
        remainders = self.remainders(value)
        return self.message(remainders[0]) if remainders else ""


@dataclass(frozen=True)
class AndValidator:
    """Valid when every matcher matches the entire value.

    The first failing matcher decides the message: the custom message
    function applied to the whole value, or that matcher's own message.
    """

    matchers: tuple[Matcher, ...]
    message: MessageFn | None = None

    def __call__(self, value: str) -> str:
        for matcher in self.matchers:
            # fullmatch anchors the whole pattern, so "ab|cd" means ^(?:ab|cd)$
            if compile_pattern(matcher.pattern).fullmatch(value) is None:
                if self.message is not None:
                    return self.message(value)
                return matcher.message
        return ""


@dataclass(frozen=True)
class NotValidator:
    """Valid when the matcher's pattern occurs nowhere in the value."""

    matcher: Matcher
    message: MessageFn

    def first_match(self, value: str) -> str | None:
        for match in compile_pattern(self.matcher.pattern).finditer(value):
            if match.group(0):
                return match.group(0)
        return None

    def __call__(self, value: str) -> str:
        found = self.first_match(value)
        return self.message(found) if found is not None else ""


@dataclass(frozen=True)
class MergedValidator:
    """Runs validators left to right and reports the first failure."""

    validators: tuple[Validator, ...]

    def __call__(self, value: str) -> str:
        for validator in self.validators:
            message = validator(value)
            if message:
                return message
        return ""


def build_or(args: tuple[MatcherOrMessage, ...], default: MessageFn) -> OrValidator:
    arguments = split_arguments("or_", args)
    if not arguments.matchers:
        raise TypeError("or_() requires at least one Matcher")
    logger.debug("Built or_ validator over %d matcher(s)", len(arguments.matchers))
    return OrValidator(
        matchers=arguments.matchers,
        message=arguments.message or default,
    )


def build_and(args: tuple[MatcherOrMessage, ...]) -> AndValidator:
    arguments = split_arguments("and_", args)
    if not arguments.matchers:
        raise TypeError("and_() requires at least one Matcher")
    logger.debug("Built and_ validator over %d matcher(s)", len(arguments.matchers))
    return AndValidator(matchers=arguments.matchers, message=arguments.message)


def build_not(args: tuple[MatcherOrMessage, ...], default: MessageFn) -> NotValidator:
    arguments = split_arguments("not_", args)
    if len(arguments.matchers) != 1:
        raise TypeError(
            f"not_() takes exactly one Matcher ({len(arguments.matchers)} given)"
        )
    return NotValidator(
        matcher=arguments.matchers[0],
        message=arguments.message or default,
    )


def build_merge(entries: tuple[ValidatorOrMatcher, ...]) -> MergedValidator:
    """Merge validators and bare matchers.

    A bare Matcher must match the whole value, as if passed to and_() alone.
    """
    validators: list[Validator] = []
    for entry in entries:
        if isinstance(entry, Matcher):
            validators.append(AndValidator(matchers=(entry,)))
        elif callable(entry):
            validators.append(entry)
        else:
            raise TypeError(
                f"merge() arguments must be Validators or Matchers, got {type(entry).__name__}"
            )
    return MergedValidator(validators=tuple(validators))
