"""Raw row parsing and report serialization."""

from .serialization import (
    COLUMN_ALIASES,
    dumps_report,
    normalize_row,
    parse_membership_row,
    parse_question_row,
    parse_zone_row,
    serialize_report,
    write_report,
)

__all__ = [
    "COLUMN_ALIASES",
    "normalize_row",
    "parse_question_row",
    "parse_zone_row",
    "parse_membership_row",
    "serialize_report",
    "dumps_report",
    "write_report",
]
