from __future__ import annotations

from typing import Any, Dict, Mapping

from jsonschema import Draft202012Validator

ISO_INSTANT_PATTERN = r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})$"

RESPONSE_BODY_SCHEMA: Dict[str, Any] = {
    "$schema": "https://json-schema.org/draft/2020-12/schema",
    "title": "hello response body",
    "type": "object",
    "required": ["message", "timestamp", "environment", "runtimeVersion"],
    "additionalProperties": False,
    "properties": {
        "message": {"type": "string", "pattern": "Hello"},
        "timestamp": {"type": "string", "format": "date-time", "pattern": ISO_INSTANT_PATTERN},
        "environment": {"type": "string", "minLength": 1},
        "runtimeVersion": {"type": "string", "minLength": 1},
    },
}

_validator = Draft202012Validator(
    RESPONSE_BODY_SCHEMA,
    format_checker=Draft202012Validator.FORMAT_CHECKER,
)


def validate_body(body: Mapping[str, Any]) -> None:
    """Raise ``jsonschema.ValidationError`` if ``body`` breaks the response contract."""
    _validator.validate(body)
