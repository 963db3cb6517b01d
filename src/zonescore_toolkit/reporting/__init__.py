"""
Module: reporting

Purpose:
    Report pipeline: aggregate per-question scores into zone scores for a
    snapshot, then derive the student report (one snapshot) or the
    principal report (several snapshots).

Key Functions:
    - aggregate_zone_scores(): Zone scores for one snapshot
    - build_student_report(): Rank one snapshot's zone scores
    - build_principal_report(): Combine zone scores across snapshots
    - generate_student_report(): Fetch + aggregate + rank
    - generate_principal_report(): Fetch + aggregate + combine

Key Classes:
    - ReportConfig: Configuration for report generation
    - CombineMode: Cross-snapshot combination mode
    - NoData: Explicit no-usable-data result
    - RecordSource: Fetch protocol implemented by record sources

Dependencies:
    - zonescore_toolkit.core.models: Records and derived scores

Used By:
    - zonescore_toolkit.cli: Command-line front end
"""

from .combine_mode import CombineMode
from .config import ReportConfig
from .results import NoData, NoDataReason
from .aggregation import ZoneScoreAggregator, aggregate_zone_scores
from .ranking import (
    PrincipalReportAggregator,
    StudentReportRanker,
    build_principal_report,
    build_student_report,
    combine_zone_scores,
)
from .loading import InMemoryRecordSource, LoaderError, RecordSource, load_record_source
from .controller import (
    InvalidInputError,
    fetch_zone_scores,
    generate_principal_report,
    generate_student_report,
)

__all__ = [
    # Config
    "CombineMode",
    "ReportConfig",
    # Results
    "NoData",
    "NoDataReason",
    # Aggregation
    "ZoneScoreAggregator",
    "aggregate_zone_scores",
    # Ranking
    "StudentReportRanker",
    "build_student_report",
    "PrincipalReportAggregator",
    "build_principal_report",
    "combine_zone_scores",
    # Loading
    "RecordSource",
    "InMemoryRecordSource",
    "load_record_source",
    "LoaderError",
    # Controller
    "InvalidInputError",
    "fetch_zone_scores",
    "generate_student_report",
    "generate_principal_report",
]
