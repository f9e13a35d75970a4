"""Validator-maker factory.

A ValidatorMaker bundles make, or_, and_, not_ and merge bound to one
Config. Every maker is independent: building a second maker with another
default message never changes the behaviour of the first one.

Usage:
    from valmaker import Config, create_validator_maker

    va = create_validator_maker(Config.from_template("'{value}' is NOT valid."))
    alpha = va.make("[a-z]+", "Only alphabets allowed.")
    digits = va.make("[0-9]+", "Only numbers allowed.")

    va.or_(alpha, digits)("ab!")  # "'!' is NOT valid."
"""

from dataclasses import dataclass, field

from valmaker.matchers import make as make_matcher
from valmaker.operators import (
    AndValidator,
    MergedValidator,
    NotValidator,
    OrValidator,
    build_and,
    build_merge,
    build_not,
    build_or,
)
from valmaker.types import DEFAULT_CONFIG, Config, Matcher, MatcherOrMessage, ValidatorOrMatcher


@dataclass(frozen=True)
class ValidatorMaker:
    """The operator family bound to a Config."""

    config: Config = field(default=DEFAULT_CONFIG)

    @staticmethod
    def make(pattern: str, message: str) -> Matcher:
        """Create a Matcher. Independent of the bound Config."""
        return make_matcher(pattern, message)

    def or_(self, *args: MatcherOrMessage) -> OrValidator:
        """Valid when every part of the value is matched by some matcher.

        Reports the first unmatched fragment through the trailing message
        function, or the Config's default message.
        """
        return build_or(args, self.config.default_message)

    def and_(self, *args: MatcherOrMessage) -> AndValidator:
        """Valid when every matcher matches the whole value.

        Reports the first failing matcher's message, or the trailing message
        function applied to the whole value.
        """
        return build_and(args)

    def not_(self, *args: MatcherOrMessage) -> NotValidator:
        """Valid when the single matcher occurs nowhere in the value."""
        return build_not(args, self.config.default_message)

    def merge(self, *entries: ValidatorOrMatcher) -> MergedValidator:
        """Run validators and bare matchers in order, first failure wins."""
        return build_merge(entries)


def create_validator_maker(config: Config) -> ValidatorMaker:
    """Create an operator family bound to config."""
    return ValidatorMaker(config=config)


DEFAULT_MAKER = create_validator_maker(DEFAULT_CONFIG)

make = DEFAULT_MAKER.make
or_ = DEFAULT_MAKER.or_
and_ = DEFAULT_MAKER.and_
not_ = DEFAULT_MAKER.not_
merge = DEFAULT_MAKER.merge
