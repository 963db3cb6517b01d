"""
Module: reports

Purpose:
    Provides the StudentReport and PrincipalReport dataclasses - the two
    report structures produced from zone score summaries. Both are
    constructed per request and discarded after output.

Key Functions:
    - StudentReport.to_dict(): JSON-compatible output
    - PrincipalReport.excluded_snapshots: Requested ids that had no data
    - PrincipalReport.is_partial: True when some snapshots had no data

Dependencies:
    - dataclasses (std)
    - datetime (std)
    - .scores.ZoneScore

Used By:
    - reporting.ranking.student
    - reporting.ranking.principal
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from .scores import ZoneScore


STUDENT_REPORT_TITLE = "Student report"
PRINCIPAL_REPORT_TITLE = "Principal Report"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class StudentReport:
    """
    Single-snapshot report (immutable).

    Attributes:
        snapshot_id: Snapshot the report was built from
        top_zones: Highest scoring zones, descending
        bottom_zones: Lowest scoring zones, ascending
        low_score_zones: Every zone under the low-score threshold, ascending
        created_at: Creation timestamp (UTC)
        title: Report title

    Invariants:
        - every listed zone is scored (score is not None)
        - top_zones is non-increasing, bottom_zones and low_score_zones
          are non-decreasing

    Note:
        top_zones and bottom_zones overlap when fewer than
        top_count + bottom_count zones are scored.
    """

    snapshot_id: int
    top_zones: tuple[ZoneScore, ...] = ()
    bottom_zones: tuple[ZoneScore, ...] = ()
    low_score_zones: tuple[ZoneScore, ...] = ()
    created_at: datetime = field(default_factory=_utc_now)
    title: str = STUDENT_REPORT_TITLE

    def __post_init__(self) -> None:
        """Validate report on construction."""
        for name in ("top_zones", "bottom_zones", "low_score_zones"):
            unscored = [z.zone_name for z in getattr(self, name) if not z.is_scored]
            if unscored:
                raise ValueError(f"{name} contains unscored zones: {unscored}")

    @property
    def is_empty(self) -> bool:
        """True when no zone in the snapshot carried a score."""
        return not (self.top_zones or self.bottom_zones or self.low_score_zones)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        Returns:
            Dict with ISO-8601 created_at and zone lists
        """
        return {
            "title": self.title,
            "created_at": self.created_at.isoformat(),
            "snapshot_id": self.snapshot_id,
            "top_zones": [z.to_dict() for z in self.top_zones],
            "bottom_zones": [z.to_dict() for z in self.bottom_zones],
            "low_score_zones": [z.to_dict() for z in self.low_score_zones],
        }


@dataclass(frozen=True)
class PrincipalReport:
    """
    Cross-snapshot report (immutable).

    Attributes:
        lowest_average_zone: Combined score summary of the worst zone
        analyzed_snapshots: Snapshots that contributed data, in request order
        requested_snapshots: Every snapshot the caller asked for
        created_at: Creation timestamp (UTC)
        title: Report title

    Invariants:
        - lowest_average_zone is scored
        - analyzed_snapshots is a subsequence of requested_snapshots
    """

    lowest_average_zone: ZoneScore
    analyzed_snapshots: tuple[int, ...]
    requested_snapshots: tuple[int, ...] = ()
    created_at: datetime = field(default_factory=_utc_now)
    title: str = PRINCIPAL_REPORT_TITLE

    def __post_init__(self) -> None:
        """Validate report on construction."""
        if not self.lowest_average_zone.is_scored:
            raise ValueError(
                f"lowest_average_zone must be scored: {self.lowest_average_zone!r}"
            )
        if not self.analyzed_snapshots:
            raise ValueError("analyzed_snapshots must not be empty")
        if not self.requested_snapshots:
            # Default: nothing was excluded
            object.__setattr__(self, "requested_snapshots", self.analyzed_snapshots)
        missing = set(self.analyzed_snapshots) - set(self.requested_snapshots)
        if missing:
            raise ValueError(f"analyzed snapshots were not requested: {sorted(missing)}")

    @property
    def excluded_snapshots(self) -> tuple[int, ...]:
        """Requested snapshots that yielded no zone data, in request order."""
        analyzed = set(self.analyzed_snapshots)
        return tuple(s for s in self.requested_snapshots if s not in analyzed)

    @property
    def is_partial(self) -> bool:
        """True when at least one requested snapshot contributed nothing."""
        return bool(self.excluded_snapshots)

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON output.

        Returns:
            Dict with ISO-8601 created_at and the selected zone
        """
        return {
            "title": self.title,
            "created_at": self.created_at.isoformat(),
            "lowest_average_zone": self.lowest_average_zone.to_dict(),
            "analyzed_snapshots": list(self.analyzed_snapshots),
            "excluded_snapshots": list(self.excluded_snapshots),
        }
