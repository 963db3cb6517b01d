"""Edge validation for raw storage rows."""

from .validator import (
    ValidationError,
    validate_membership_row,
    validate_question_row,
    validate_zone_row,
)

__all__ = [
    "ValidationError",
    "validate_question_row",
    "validate_zone_row",
    "validate_membership_row",
]
