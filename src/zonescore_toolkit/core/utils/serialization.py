"""
Serialization Utilities

Converts between raw storage rows and the typed core models.

**BOUNDARY:**

Storage hands back loosely-typed rows, sometimes keyed by the database
column names ("SnapshotId", "IsRelevant", ...). This module is the only
place those rows are touched:

- `parse_*_row()` normalizes keys, validates once, and builds a frozen record
- `serialize_report()` turns derived reports back into JSON-compatible dicts
- Nothing downstream of this module sees an untyped row
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Mapping, Union

from ..models.questions import Question
from ..models.reports import PrincipalReport, StudentReport
from ..models.zones import Zone, ZoneMembership
from ..schemas.validator import (
    ValidationError,
    validate_membership_row,
    validate_question_row,
    validate_zone_row,
)


# Storage column name -> model field name
COLUMN_ALIASES: dict[str, str] = {
    "SnapshotId": "snapshot_id",
    "QuestionId": "question_id",
    "QuestionText": "question_text",
    "Score": "score",
    "IsRelevant": "is_relevant",
    "TestId": "test_id",
    "ZoneId": "zone_id",
    "ZoneName": "zone_name",
}


def normalize_row(row: Mapping[str, Any]) -> dict[str, Any]:
    """
    Map storage column names onto snake_case field names.

    Keys that are already snake_case pass through unchanged.

    Example:
        >>> normalize_row({"SnapshotId": 1, "zone_id": 2})
        {'snapshot_id': 1, 'zone_id': 2}
    """
    if not isinstance(row, Mapping):
        raise ValidationError(f"Row must be an object, got {type(row).__name__}")
    return {COLUMN_ALIASES.get(key, key): value for key, value in row.items()}


def _build(factory, data: dict[str, Any]):
    """Construct a model, reporting model-level rejections as ValidationError."""
    try:
        return factory(data)
    except ValueError as e:
        raise ValidationError(str(e), errors=[str(e)]) from e


# ─────────────────────────────────────────────────────────────────────────────
# Raw Row Parsing
# ─────────────────────────────────────────────────────────────────────────────

def parse_question_row(row: Mapping[str, Any], *, strict: bool = False) -> Question:
    """
    Parse a raw question row into a Question.

    Args:
        row: Raw row, snake_case or storage column names
        strict: Whether to validate against the JSON Schema too

    Returns:
        Question instance

    Raises:
        ValidationError: If the row is invalid
    """
    data = normalize_row(row)
    validate_question_row(data, strict=strict)
    return _build(
        lambda d: Question(
            snapshot_id=d["snapshot_id"],
            question_id=d["question_id"],
            text=d.get("question_text") or "",
            score=d.get("score"),
            is_relevant=bool(d.get("is_relevant", True)),
            test_id=d.get("test_id") or 0,
        ),
        data,
    )


def parse_zone_row(row: Mapping[str, Any], *, strict: bool = False) -> Zone:
    """
    Parse a raw zone row into a Zone.

    Raises:
        ValidationError: If the row is invalid
    """
    data = normalize_row(row)
    validate_zone_row(data, strict=strict)
    return _build(
        lambda d: Zone(
            snapshot_id=d["snapshot_id"],
            zone_id=d["zone_id"],
            name=d["zone_name"],
            is_relevant=bool(d.get("is_relevant", True)),
        ),
        data,
    )


def parse_membership_row(
    row: Mapping[str, Any],
    *,
    strict: bool = False,
) -> ZoneMembership:
    """Parse a raw zone membership row into a ZoneMembership."""
    data = normalize_row(row)
    validate_membership_row(data, strict=strict)
    return _build(ZoneMembership.from_dict, data)


# ─────────────────────────────────────────────────────────────────────────────
# Report Serialization
# ─────────────────────────────────────────────────────────────────────────────

def serialize_report(report: Union[StudentReport, PrincipalReport]) -> dict[str, Any]:
    """
    Serialize either report type to a dictionary.

    Args:
        report: StudentReport or PrincipalReport

    Returns:
        Dictionary suitable for JSON serialization
    """
    return report.to_dict()


def dumps_report(report: Union[StudentReport, PrincipalReport], *, indent: int = 2) -> str:
    """Serialize a report to a JSON string."""
    return json.dumps(serialize_report(report), indent=indent)


def write_report(report: Union[StudentReport, PrincipalReport], path: Path) -> None:
    """
    Write a report as JSON to disk.

    Args:
        report: Report to write
        path: Output file path (parent directories are created)
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dumps_report(report), encoding="utf-8")
