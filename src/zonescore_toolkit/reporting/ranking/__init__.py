"""
Module: reporting.ranking

Purpose:
    Ranking and selection over zone score summaries: the single-snapshot
    student report and the cross-snapshot principal report.

Key Functions:
    - build_student_report(): Top / bottom / low-score zones
    - build_principal_report(): Lowest combined zone across snapshots
    - combine_zone_scores(): Per-zone cross-snapshot combination

Key Classes:
    - StudentReportRanker
    - PrincipalReportAggregator
"""

from .student import StudentReportRanker, build_student_report
from .principal import PrincipalReportAggregator, build_principal_report, combine_zone_scores

__all__ = [
    "StudentReportRanker",
    "build_student_report",
    "PrincipalReportAggregator",
    "build_principal_report",
    "combine_zone_scores",
]
