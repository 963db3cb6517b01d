"""
Schema Validation Utilities

Validates raw storage rows before they become typed records.

Raw rows arrive as loosely-typed dictionaries (one per fetched record).
They are checked exactly once, here, at the edge; everything past
`core.utils.serialization` works with frozen dataclasses only.

- `validate_question_row()`, `validate_zone_row()`,
  `validate_membership_row()` run basic checks
- strict mode additionally validates against the bundled JSON Schemas
- Fail fast on any violation
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import jsonschema


QUESTION_REQUIRED = ("snapshot_id", "question_id")
ZONE_REQUIRED = ("snapshot_id", "zone_id", "zone_name")
MEMBERSHIP_REQUIRED = ("snapshot_id", "zone_id", "question_id")


# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when a raw row fails validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


def _is_int(value: Any) -> bool:
    # bool is an int subclass; ids and scores must be real integers
    return isinstance(value, int) and not isinstance(value, bool)


def _is_flag(value: Any) -> bool:
    # SQL bit columns arrive as 0/1
    return isinstance(value, bool) or (_is_int(value) and value in (0, 1))


def _check_required(data: dict[str, Any], required: tuple[str, ...]) -> None:
    if not isinstance(data, dict):
        raise ValidationError(f"Row must be an object, got {type(data).__name__}")
    missing = [f for f in required if f not in data]
    if missing:
        raise ValidationError(
            f"Missing required fields: {missing}",
            path="",
            errors=[f"Missing field: {f}" for f in missing]
        )


def _check_id(data: dict[str, Any], name: str, *, minimum: int) -> None:
    value = data[name]
    if not _is_int(value) or value < minimum:
        raise ValidationError(
            f"Invalid {name}: {value!r} (must be an integer >= {minimum})",
            path=name
        )


def _check_flag(data: dict[str, Any], name: str) -> None:
    if name in data and not _is_flag(data[name]):
        raise ValidationError(
            f"Invalid {name}: {data[name]!r} (must be a boolean)",
            path=name
        )


def _check_strict(data: dict[str, Any], schema_name: str) -> None:
    schema = _load_schema(schema_name)
    try:
        jsonschema.validate(data, schema)
    except jsonschema.ValidationError as e:
        raise ValidationError(
            f"Schema validation failed: {e.message}",
            path=".".join(str(p) for p in e.absolute_path),
            errors=[e.message]
        ) from e


def validate_question_row(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a raw question row.

    Args:
        data: Row dictionary with snake_case keys
        strict: If True, also validate against question.schema.json

    Raises:
        ValidationError: If the row is invalid
    """
    _check_required(data, QUESTION_REQUIRED)
    _check_id(data, "snapshot_id", minimum=0)
    _check_id(data, "question_id", minimum=1)

    score = data.get("score")
    if score is not None and (not _is_int(score) or not (0 <= score <= 100)):
        raise ValidationError(
            f"Invalid score: {score!r} (must be null or an integer 0-100)",
            path="score"
        )

    text = data.get("question_text", "")
    if text is not None and not isinstance(text, str):
        raise ValidationError(
            f"Invalid question_text: {text!r} (must be a string)",
            path="question_text"
        )

    if "test_id" in data and data["test_id"] is not None:
        _check_id(data, "test_id", minimum=0)

    _check_flag(data, "is_relevant")

    if strict:
        _check_strict(data, "question")


def validate_zone_row(data: dict[str, Any], *, strict: bool = False) -> None:
    """
    Validate a raw zone row.

    Args:
        data: Row dictionary with snake_case keys
        strict: If True, also validate against zone.schema.json

    Raises:
        ValidationError: If the row is invalid
    """
    _check_required(data, ZONE_REQUIRED)
    _check_id(data, "snapshot_id", minimum=0)
    _check_id(data, "zone_id", minimum=0)

    name = data["zone_name"]
    if not isinstance(name, str) or not name:
        raise ValidationError(
            f"Invalid zone_name: {name!r} (must be a non-empty string)",
            path="zone_name"
        )

    _check_flag(data, "is_relevant")

    if strict:
        _check_strict(data, "zone")


def validate_membership_row(data: dict[str, Any], *, strict: bool = False) -> None:
    """Validate a raw zone membership row (see validate_zone_row)."""
    _check_required(data, MEMBERSHIP_REQUIRED)
    _check_id(data, "snapshot_id", minimum=0)
    _check_id(data, "zone_id", minimum=0)
    _check_id(data, "question_id", minimum=1)

    if strict:
        _check_strict(data, "zone_membership")
