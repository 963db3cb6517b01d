"""
Module: scores

Purpose:
    Provides the ZoneScore dataclass - the derived, per-zone score summary
    produced by aggregation and consumed by both report builders. Never
    persisted; recomputed on every request.

Key Functions:
    - round_score(value, places): Half-up rounding used for every score
    - mean_score(values, places): Rounded arithmetic mean, None when empty
    - ZoneScore.is_scored: True when the zone carries a score

Dependencies:
    - dataclasses (std)
    - decimal (std)
    - math (std)

Used By:
    - reporting.aggregation.aggregator
    - reporting.ranking.student
    - reporting.ranking.principal
    - core.models.reports
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Optional


DEFAULT_SCORE_PLACES = 2


def round_score(value: float, places: int = DEFAULT_SCORE_PLACES) -> float:
    """
    Round a score half-up to a fixed number of decimal places.

    Python's round() works on the binary float and rounds half-to-even,
    so 0.125 would become 0.12. Scores are rounded the way a DECIMAL
    cast would round them instead.

    Combined cross-snapshot means go through here as well, so they also
    round half-up. A banker's-rounding reporter (half-to-even) would give
    60.12 where this gives 60.13 for a mean of exactly 60.125.

    Args:
        value: Raw score
        places: Number of decimal places to keep

    Returns:
        Rounded score as float

    Example:
        >>> round_score(76.666666)
        76.67
        >>> round_score(0.125)
        0.13
    """
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(repr(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def mean_score(
    values: Iterable[float],
    places: int = DEFAULT_SCORE_PLACES,
) -> Optional[float]:
    """
    Rounded arithmetic mean of the given values.

    Returns None for an empty input so callers never divide by zero.
    """
    items = list(values)
    if not items:
        return None
    return round_score(math.fsum(items) / len(items), places)


@dataclass(frozen=True)
class ZoneScore:
    """
    Score summary for one zone (immutable).

    Attributes:
        zone_id: Zone identifier
        zone_name: Zone display name
        score: Rounded average of answered eligible questions, or None
        total_questions: Distinct eligible questions linked to the zone
        answered_questions: Those of total_questions carrying a score

    Invariants:
        - 0 <= answered_questions <= total_questions
        - score is None exactly when answered_questions == 0

    Example:
        >>> zs = ZoneScore(1, "Math", 76.67, total_questions=3, answered_questions=3)
        >>> zs.is_scored
        True
    """

    zone_id: int
    zone_name: str
    score: Optional[float]
    total_questions: int = 0
    answered_questions: int = 0

    def __post_init__(self) -> None:
        """Validate score summary on construction."""
        if self.answered_questions < 0:
            raise ValueError(
                f"answered_questions must be non-negative: {self.answered_questions}"
            )
        if self.answered_questions > self.total_questions:
            raise ValueError(
                f"answered_questions ({self.answered_questions}) cannot exceed "
                f"total_questions ({self.total_questions})"
            )
        if (self.score is None) != (self.answered_questions == 0):
            raise ValueError(
                f"score must be None exactly when no questions are answered: "
                f"score={self.score}, answered={self.answered_questions}"
            )
        if self.score is not None and not (0 <= self.score <= 100):
            raise ValueError(f"score must be 0-100: {self.score}")

    @property
    def is_scored(self) -> bool:
        """True when at least one eligible question was answered."""
        return self.score is not None

    @property
    def key(self) -> tuple[int, str]:
        """Cross-snapshot identity: (zone_id, zone_name)."""
        return (self.zone_id, self.zone_name)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        Returns:
            Dict representation
        """
        return {
            "zone_id": self.zone_id,
            "zone_name": self.zone_name,
            "score": self.score,
            "total_questions": self.total_questions,
            "answered_questions": self.answered_questions,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ZoneScore:
        return cls(
            zone_id=data["zone_id"],
            zone_name=data["zone_name"],
            score=data.get("score"),
            total_questions=data.get("total_questions", 0),
            answered_questions=data.get("answered_questions", 0),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"ZoneScore({self.zone_name!r}, score={self.score}, "
            f"{self.answered_questions}/{self.total_questions})"
        )
