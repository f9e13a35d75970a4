"""Load validator profiles from YAML files.

A profile binds a default message to a set of named matchers and the
validators composed from them:

    profile: strict
    default_message: "'{value}' is NOT valid."
    matchers:
      alpha: {pattern: "[a-z]+", message: "Only alphabets allowed."}
      five: {preset: length, params: {n: 5}}
    validators:
      code:
        merge:
          - or: [alpha, digits]
          - five
      no_digits:
        not: digits
        message: "'{value}' must not contain numbers."

Matcher references are resolved against the profile's own matchers first,
then against valmaker.presets.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from valmaker.maker import ValidatorMaker, create_validator_maker
from valmaker.matchers import InvalidPatternError
from valmaker.presets import PRESETS, resolve_preset
from valmaker.types import DEFAULT_CONFIG, Config, Matcher, Validator, template_message

logger = logging.getLogger(__name__)

KNOWN_KEYS = {"profile", "description", "default_message", "matchers", "validators"}
OPERATORS = ("or", "and", "not", "merge")


class ProfileError(ValueError):
    """Raised when a profile definition cannot be resolved."""

    def __init__(self, source: str, message: str):
        self.source = source
        super().__init__(f"{source}: {message}")


@dataclass
class Profile:
    """A named set of matchers and validators bound to one Config."""

    name: str
    config: Config
    matchers: dict[str, Matcher] = field(default_factory=dict)
    validators: dict[str, Validator] = field(default_factory=dict)
    description: str = ""
    source: str = "<profile>"

    def get_validator(self, name: str) -> Validator:
        if name not in self.validators:
            raise ProfileError(
                self.source,
                f"Validator '{name}' is not defined in profile '{self.name}'. "
                "Available validators: " + ", ".join(sorted(self.validators)),
            )
        return self.validators[name]

    def validate(self, validator_name: str, value: str) -> str:
        """Run a named validator. Returns "" when value is valid."""
        return self.get_validator(validator_name)(value)


class ProfileBuilder:
    """Resolves one parsed profile document into a Profile."""

    def __init__(self, data: dict[str, Any], source: str = "<profile>"):
        self.data = data
        self.source = source
        self.matchers: dict[str, Matcher] = {}
        self.maker: ValidatorMaker = create_validator_maker(self._resolve_config())

    def build(self) -> Profile:
        name = self.data.get("profile")
        if not name or not isinstance(name, str):
            raise ProfileError(self.source, "'profile' name is required")

        unknown = set(self.data) - KNOWN_KEYS
        if unknown:
            logger.warning(
                "Ignoring unknown keys in profile '%s' (%s): %s",
                name,
                self.source,
                ", ".join(sorted(str(k) for k in unknown)),
            )

        for matcher_name, definition in self._section("matchers").items():
            self.matchers[matcher_name] = self._resolve_matcher_definition(
                definition, f"matchers.{matcher_name}"
            )

        validators: dict[str, Validator] = {}
        for validator_name, expression in self._section("validators").items():
            where = f"validators.{validator_name}"
            resolved = self._resolve_expression(expression, where)
            if isinstance(resolved, Matcher):
                resolved = self.maker.and_(resolved)
            validators[validator_name] = resolved

        return Profile(
            name=name,
            config=self.maker.config,
            matchers=dict(self.matchers),
            validators=validators,
            description=self.data.get("description", ""),
            source=self.source,
        )

    def _section(self, key: str) -> dict[str, Any]:
        section = self.data.get(key) or {}
        if not isinstance(section, dict):
            raise ProfileError(self.source, f"'{key}' must be a mapping")
        return section

    def _resolve_config(self) -> Config:
        template = self.data.get("default_message")
        if template is None:
            return DEFAULT_CONFIG
        if not isinstance(template, str):
            raise ProfileError(self.source, "'default_message' must be a string")
        return Config.from_template(template)

    # -------------------------------------------------------------------------
    # Matchers
    # -------------------------------------------------------------------------

    def _resolve_matcher_definition(self, definition: Any, where: str) -> Matcher:
        if not isinstance(definition, dict):
            raise ProfileError(self.source, f"{where} must be a mapping")

        if "preset" in definition:
            preset = definition["preset"]
            params = definition.get("params")
            if not isinstance(preset, str):
                raise ProfileError(self.source, f"{where}: 'preset' must be a preset name")
            if params is not None and not isinstance(params, dict):
                raise ProfileError(self.source, f"{where}: 'params' must be a mapping")
            try:
                matcher = resolve_preset(preset, params)
            except ValueError as e:
                raise ProfileError(self.source, f"{where}: {e}") from e
            if "message" in definition:
                matcher = Matcher(
                    pattern=matcher.pattern,
                    message=self._require_message(definition["message"], where),
                )
            return matcher

        if "pattern" not in definition:
            raise ProfileError(self.source, f"{where} needs a 'pattern' or a 'preset'")
        if not isinstance(definition["pattern"], str):
            raise ProfileError(self.source, f"{where}: 'pattern' must be a string")
        if "message" not in definition:
            raise ProfileError(self.source, f"{where} needs a 'message'")

        try:
            return self.maker.make(
                definition["pattern"],
                self._require_message(definition["message"], where),
            )
        except InvalidPatternError as e:
            raise ProfileError(self.source, f"{where}: {e}") from e

    def _require_message(self, message: Any, where: str) -> str:
        # An empty message would read as "valid" from and_/merge.
        if not isinstance(message, str) or not message:
            raise ProfileError(self.source, f"{where}: 'message' must be a non-empty string")
        return message

    def _resolve_matcher_ref(self, ref: Any, where: str) -> Matcher:
        if isinstance(ref, dict):
            return self._resolve_matcher_definition(ref, where)
        if not isinstance(ref, str):
            raise ProfileError(self.source, f"{where}: expected a matcher name, got {ref!r}")
        if ref in self.matchers:
            return self.matchers[ref]
        if ref in PRESETS:
            try:
                return resolve_preset(ref)
            except ValueError as e:
                raise ProfileError(self.source, f"{where}: {e}") from e
        raise ProfileError(self.source, f"{where}: matcher '{ref}' is not defined")

    def _resolve_matcher_refs(self, refs: Any, where: str) -> list[Matcher]:
        if not isinstance(refs, list):
            refs = [refs]
        return [
            self._resolve_matcher_ref(ref, f"{where}[{i}]") for i, ref in enumerate(refs)
        ]

    # -------------------------------------------------------------------------
    # Validator expressions
    # -------------------------------------------------------------------------

    def _resolve_expression(self, expression: Any, where: str) -> Validator | Matcher:
        """Resolve a validator expression.

        A plain string names a matcher. A mapping holds exactly one operator
        key (or, and, not, merge) and an optional 'message' template.
        """
        if isinstance(expression, str):
            return self._resolve_matcher_ref(expression, where)
        if not isinstance(expression, dict):
            raise ProfileError(self.source, f"{where}: expected a matcher name or an operator")
        if "pattern" in expression or "preset" in expression:
            return self._resolve_matcher_definition(expression, where)

        operators = [key for key in expression if key in OPERATORS]
        extra = set(expression) - set(OPERATORS) - {"message"}
        if len(operators) != 1 or extra:
            raise ProfileError(
                self.source,
                f"{where} must have exactly one of {', '.join(OPERATORS)} "
                "and optionally 'message'",
            )

        operator = operators[0]
        operand = expression[operator]
        template = expression.get("message")
        message = []
        if template is not None:
            message = [template_message(self._require_message(template, where))]
        where = f"{where}.{operator}"

        if operator == "merge":
            if template is not None:
                raise ProfileError(self.source, f"{where}: merge does not take a 'message'")
            if not isinstance(operand, list):
                raise ProfileError(self.source, f"{where} must be a list")
            return self.maker.merge(
                *(
                    self._resolve_expression(entry, f"{where}[{i}]")
                    for i, entry in enumerate(operand)
                )
            )

        if operator == "not":
            if isinstance(operand, list):
                raise ProfileError(self.source, f"{where} takes a single matcher")
            return self.maker.not_(self._resolve_matcher_ref(operand, where), *message)

        matchers = self._resolve_matcher_refs(operand, where)
        if not matchers:
            raise ProfileError(self.source, f"{where} needs at least one matcher")
        if operator == "or":
            return self.maker.or_(*matchers, *message)
        return self.maker.and_(*matchers, *message)


def build_profile(data: dict[str, Any], source: str = "<profile>") -> Profile:
    """Resolve a parsed profile document."""
    if not isinstance(data, dict):
        raise ProfileError(source, "profile document must be a mapping")
    return ProfileBuilder(data, source).build()


def load_profile_file(path: Path) -> Profile:
    """Load a single profile YAML file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ProfileError(str(path), f"invalid YAML: {e}") from e
    except (OSError, UnicodeDecodeError) as e:
        raise ProfileError(str(path), f"cannot read profile: {e}") from e

    profile = build_profile(data, str(path))
    logger.debug(
        "Loaded profile '%s' from %s (%d validators)",
        profile.name,
        path,
        len(profile.validators),
    )
    return profile


class ProfileLoader:
    """Loads every profile in a directory of YAML files."""

    def __init__(self, profiles_path: Path):
        self.profiles_path = profiles_path
        self.profiles: dict[str, Profile] = {}

    def load_all(self) -> None:
        """Load all *.yaml and *.yml files, rejecting duplicate profile names."""
        if not self.profiles_path.exists():
            raise ProfileError(str(self.profiles_path), "profiles directory not found")

        files = sorted(self.profiles_path.glob("*.yaml")) + sorted(
            self.profiles_path.glob("*.yml")
        )
        for yaml_file in files:
            profile = load_profile_file(yaml_file)
            if profile.name in self.profiles:
                raise ProfileError(
                    str(yaml_file),
                    f"Duplicate profile '{profile.name}' also defined in "
                    f"{self.profiles[profile.name].source}",
                )
            self.profiles[profile.name] = profile

    def get_profile(self, name: str) -> Profile | None:
        return self.profiles.get(name)

    def list_profiles(self) -> list[str]:
        return list(self.profiles.keys())
