"""
Module: reporting.config

Purpose:
    Configuration dataclass for report generation. Immutable
    configuration with validation on construction.

Key Classes:
    - ReportConfig: Ranking sizes, threshold, rounding, combination mode

Dependencies:
    - dataclasses (std)

Used By:
    - reporting.controller: Report orchestration
    - reporting.ranking.student: Student report ranking
    - reporting.ranking.principal: Principal report combination
"""

from __future__ import annotations

from dataclasses import dataclass

from zonescore_toolkit.core.models.scores import DEFAULT_SCORE_PLACES

from .combine_mode import CombineMode


@dataclass(frozen=True)
class ReportConfig:
    """
    Configuration for building reports (immutable).

    Attributes:
        top_count: Number of highest-scoring zones in a student report
        bottom_count: Number of lowest-scoring zones in a student report
        low_score_threshold: Zones scoring strictly below this are "low"
        score_places: Decimal places every score is rounded to
        combine_mode: How per-snapshot scores are combined
        max_workers: Thread pool size for multi-snapshot fetches

    Invariants:
        - top_count >= 0, bottom_count >= 0
        - 0 <= low_score_threshold <= 100
        - 0 <= score_places <= 6
        - max_workers >= 1

    Example:
        >>> config = ReportConfig(low_score_threshold=50)
        >>> config.is_low_score(49.99)
        True
    """

    # Student report
    top_count: int = 3
    bottom_count: int = 3
    low_score_threshold: float = 60.0

    # Scoring
    score_places: int = DEFAULT_SCORE_PLACES
    combine_mode: CombineMode = CombineMode.UNWEIGHTED

    # Fetching
    max_workers: int = 4

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.top_count < 0:
            raise ValueError(f"top_count must be non-negative: {self.top_count}")
        if self.bottom_count < 0:
            raise ValueError(f"bottom_count must be non-negative: {self.bottom_count}")
        if not (0 <= self.low_score_threshold <= 100):
            raise ValueError(
                f"low_score_threshold must be 0-100: {self.low_score_threshold}"
            )
        if not (0 <= self.score_places <= 6):
            raise ValueError(f"score_places must be 0-6: {self.score_places}")
        if not isinstance(self.combine_mode, CombineMode):
            raise ValueError(f"Invalid combine_mode: {self.combine_mode!r}")
        if self.max_workers < 1:
            raise ValueError(f"max_workers must be at least 1: {self.max_workers}")

    def is_low_score(self, score: float) -> bool:
        """
        Check whether a score falls under the low-score threshold.

        Args:
            score: Zone score to check

        Returns:
            True if score < low_score_threshold
        """
        return score < self.low_score_threshold
