"""
Module: reporting.ranking.student

Purpose:
    Build the single-snapshot student report: top zones, bottom zones and
    every zone under the low-score threshold.

Key Functions:
    - build_student_report(): Main entry point for ranking

Key Classes:
    - StudentReportRanker: Ranking orchestrator

Dependencies:
    - zonescore_toolkit.core.models: ZoneScore, StudentReport
    - reporting.config: ReportConfig
    - reporting.results: NoData

Used By:
    - reporting.controller: Student report path
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Sequence

from zonescore_toolkit.core.models import StudentReport, ZoneScore

from ..config import ReportConfig
from ..results import NoData, NoDataReason, StudentReportResult

logger = logging.getLogger(__name__)


def build_student_report(
    snapshot_id: int,
    zone_scores: Sequence[ZoneScore],
    config: ReportConfig | None = None,
) -> StudentReportResult:
    """
    Rank one snapshot's zone scores into a student report.

    Args:
        snapshot_id: Snapshot the scores came from
        zone_scores: Aggregated zone scores, ascending by zone name
        config: Report configuration (defaults: 3 / 3 / < 60)

    Returns:
        StudentReport, or NoData(NO_ZONES) when zone_scores is empty

    Invariants:
        - only scored zones are listed
        - top_zones non-increasing, bottom/low non-decreasing
        - equal scores keep the incoming zone name order

    Example:
        >>> report = build_student_report(1, scores)
        >>> [z.zone_name for z in report.top_zones]
        ['D', 'B', 'E']
    """
    ranker = StudentReportRanker(config or ReportConfig())
    return ranker.build(snapshot_id, zone_scores)


@dataclass
class StudentReportRanker:
    """
    Student report ranking.

    Attributes:
        config: Report configuration
    """

    config: ReportConfig = field(default_factory=ReportConfig)

    def build(self, snapshot_id: int, zone_scores: Sequence[ZoneScore]) -> StudentReportResult:
        """
        Execute the ranking.

        Returns:
            StudentReport or NoData
        """
        if not zone_scores:
            return NoData(
                reason=NoDataReason.NO_ZONES,
                message=f"No data found for snapshot {snapshot_id}",
                snapshot_ids=(snapshot_id,),
            )

        scored = [z for z in zone_scores if z.is_scored]
        if len(scored) < len(zone_scores):
            logger.debug(
                f"Snapshot {snapshot_id}: {len(zone_scores) - len(scored)} "
                f"unscored zones left out of ranking"
            )

        # sorted() is stable in both directions, so ties keep name order
        ascending = sorted(scored, key=lambda z: z.score)
        descending = sorted(scored, key=lambda z: z.score, reverse=True)

        return StudentReport(
            snapshot_id=snapshot_id,
            top_zones=tuple(descending[: self.config.top_count]),
            bottom_zones=tuple(ascending[: self.config.bottom_count]),
            low_score_zones=tuple(self._low_scores(ascending)),
        )

    def _low_scores(self, ascending: List[ZoneScore]) -> List[ZoneScore]:
        return [z for z in ascending if self.config.is_low_score(z.score)]
