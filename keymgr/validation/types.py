"""Token-validation policy configuration."""

import json
import logging
import re
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from keymgr.core.errors import ConfigurationError
from keymgr.core.settings import (
    ENABLE_TOKEN_VALIDATION,
    VALIDATION_TYPE,
    VALIDATION_VALUE,
    KeyManagerConfiguration,
)
from keymgr.core.values import optional_mapping

_log = logging.getLogger(__name__)

VALIDATION_ENTRY_JWT_BODY = "body"


class ValidationMode(StrEnum):
    """How a key manager recognises tokens it should validate."""

    DISABLED = "disabled"
    REGEX = "regex"
    JWT_CLAIMS = "jwt"


class ValidationConfig(BaseModel):
    """Immutable snapshot of a key manager's token-handling rules."""

    model_config = ConfigDict(frozen=True)

    enable_token_validation: bool | None = None
    mode: ValidationMode = ValidationMode.DISABLED
    pattern: str | None = None
    claim_rules: dict[str, dict[str, str]] = Field(default_factory=dict)

    @field_validator("pattern")
    @classmethod
    def _compile_pattern(cls, value: str | None) -> str | None:
        if value:
            _check_regex(value)
        return value

    @field_validator("claim_rules")
    @classmethod
    def _compile_claim_rules(
        cls, value: dict[str, dict[str, str]]
    ) -> dict[str, dict[str, str]]:
        for rules in value.values():
            for regex in rules.values():
                _check_regex(regex)
        return value

    @classmethod
    def from_configuration(
        cls, configuration: KeyManagerConfiguration
    ) -> "ValidationConfig":
        """Build the policy input from a key manager's parameter bag."""
        enabled = configuration.get_bool(ENABLE_TOKEN_VALIDATION)
        raw_type = configuration.get_str(VALIDATION_TYPE)
        try:
            mode = ValidationMode(raw_type) if raw_type else ValidationMode.DISABLED
        except ValueError:
            _log.warning("Unknown token validation type %r", raw_type)
            mode = ValidationMode.DISABLED

        pattern: str | None = None
        claim_rules: dict[str, dict[str, str]] = {}
        if mode is ValidationMode.REGEX:
            pattern = configuration.get_str(VALIDATION_VALUE)
        elif mode is ValidationMode.JWT_CLAIMS:
            claim_rules = _read_claim_rules(configuration)

        try:
            return cls(
                enable_token_validation=enabled,
                mode=mode,
                pattern=pattern,
                claim_rules=claim_rules,
            )
        except ValidationError as exc:
            raise ConfigurationError("Invalid token validation pattern") from exc


def _check_regex(regex: str) -> None:
    try:
        re.compile(regex)
    except re.error as exc:
        raise ValueError(f"Invalid pattern {regex!r}: {exc}") from exc


def _read_claim_rules(
    configuration: KeyManagerConfiguration,
) -> dict[str, dict[str, str]]:
    value = configuration.get_parameter(VALIDATION_VALUE)
    if isinstance(value, str):
        try:
            value = json.loads(value) if value else None
        except json.JSONDecodeError as exc:
            raise ConfigurationError(
                f"Parameter '{VALIDATION_VALUE}' is not valid JSON"
            ) from exc
    sections = optional_mapping(value, VALIDATION_VALUE, ConfigurationError) or {}
    rules: dict[str, dict[str, str]] = {}
    for section, entries in sections.items():
        if not isinstance(entries, dict) or not all(
            isinstance(v, str) for v in entries.values()
        ):
            raise ConfigurationError(
                f"Rule section '{section}' must map claim names to patterns"
            )
        rules[section] = dict(entries)
    return rules
