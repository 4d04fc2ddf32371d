"""Parse JSON object payloads into string-keyed records."""

from pydantic import JsonValue, TypeAdapter, ValidationError

from keymgr.core.errors import MalformedInputError

_JSON_ADAPTER: TypeAdapter[JsonValue] = TypeAdapter(JsonValue)


def parse_json_record(text: str) -> dict[str, JsonValue] | None:
    """Parse text as a JSON object.

    The literal ``null`` yields None. Anything that is not valid JSON, or is
    valid JSON but neither an object nor null, raises MalformedInputError.
    """
    try:
        parsed = _JSON_ADAPTER.validate_json(text)
    except ValidationError as exc:
        raise MalformedInputError("Error occurred while parsing JSON String") from exc
    if parsed is None:
        return None
    if not isinstance(parsed, dict):
        raise MalformedInputError("JSON input must be an object")
    return parsed
