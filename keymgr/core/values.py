"""Typed accessors over JSON values read from payloads and configuration."""

import json
import re
from collections.abc import Callable

from pydantic import JsonValue

from keymgr.core.errors import (
    InvalidNumericFieldError,
    KeyManagerError,
    MalformedInputError,
)

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_DECIMAL_RE = re.compile(r"[+-]?[0-9]+")

ErrorFactory = Callable[[str], KeyManagerError]


def optional_str(
    value: JsonValue,
    field: str,
    error: ErrorFactory = MalformedInputError,
) -> str | None:
    """Return a string value, or None when the value is null."""
    if value is None:
        return None
    if not isinstance(value, str):
        raise error(f"Field '{field}' must be a string")
    return value


def optional_bool(
    value: JsonValue,
    field: str,
    error: ErrorFactory = MalformedInputError,
) -> bool | None:
    """Return a boolean value, accepting the strings "true" and "false"."""
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if isinstance(value, str) and value.lower() in ("true", "false"):
        return value.lower() == "true"
    raise error(f"Field '{field}' must be a boolean")


def optional_int64(value: JsonValue, field: str) -> int | None:
    """Return a signed 64-bit integer from a JSON integer or decimal string."""
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidNumericFieldError(field, value)
    if isinstance(value, int):
        number = value
    elif isinstance(value, str) and _DECIMAL_RE.fullmatch(value):
        number = int(value)
    else:
        raise InvalidNumericFieldError(field, value)
    if not INT64_MIN <= number <= INT64_MAX:
        raise InvalidNumericFieldError(field, value)
    return number


def optional_str_list(
    value: JsonValue,
    field: str,
    error: ErrorFactory = MalformedInputError,
) -> list[str] | None:
    """Return a list of strings, or None when the value is null."""
    if value is None:
        return None
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise error(f"Field '{field}' must be a list of strings")
    return list(value)


def optional_mapping(
    value: JsonValue,
    field: str,
    error: ErrorFactory = MalformedInputError,
) -> dict[str, JsonValue] | None:
    """Return a string-keyed mapping, or None when the value is null."""
    if value is None:
        return None
    if not isinstance(value, dict):
        raise error(f"Field '{field}' must be an object")
    return value


def to_text(value: JsonValue) -> str:
    """Render a JSON value as the text a pattern is matched against."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
