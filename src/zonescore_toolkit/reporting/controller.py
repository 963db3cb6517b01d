"""
Module: reporting.controller

Purpose:
    Orchestrate the complete report pipelines.
    Validate → Fetch → Aggregate → Rank / Combine

Key Functions:
    - generate_student_report(): Single-snapshot report
    - generate_principal_report(): Multi-snapshot report
    - fetch_zone_scores(): Fetch and aggregate one snapshot

Key Classes:
    - InvalidInputError: Exception for rejected identifiers

Dependencies:
    - concurrent.futures: Parallel per-snapshot fetches
    - reporting.aggregation: Zone score aggregation
    - reporting.ranking: Student and principal reports
    - reporting.loading: Record sources

Used By:
    - cli: Command-line front end
"""

from __future__ import annotations

import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Dict, Iterable, List, Optional, Sequence

from zonescore_toolkit.core.models import ZoneScore

from .aggregation import aggregate_zone_scores
from .config import ReportConfig
from .loading import RecordSource
from .ranking import build_principal_report, build_student_report
from .results import NoData, PrincipalReportResult, StudentReportResult

logger = logging.getLogger(__name__)


class InvalidInputError(ValueError):
    """A supplied identifier violates its domain constraint."""
    pass


# ─────────────────────────────────────────────────────────────────────────────
# Input Validation
# ─────────────────────────────────────────────────────────────────────────────

def validate_snapshot_id(snapshot_id: Any) -> int:
    """
    Validate a single snapshot id.

    Args:
        snapshot_id: Candidate id

    Returns:
        The id, unchanged

    Raises:
        InvalidInputError: If not a non-negative integer
    """
    if not isinstance(snapshot_id, int) or isinstance(snapshot_id, bool):
        raise InvalidInputError(f"SnapshotId must be an integer: {snapshot_id!r}")
    if snapshot_id < 0:
        raise InvalidInputError(f"SnapshotId must be non-negative: {snapshot_id}")
    return snapshot_id


def validate_snapshot_ids(snapshot_ids: Optional[Iterable[Any]]) -> List[int]:
    """
    Validate a list of snapshot ids, collapsing duplicates.

    Returns:
        Distinct ids in first-seen order

    Raises:
        InvalidInputError: If the list is empty or any id is invalid
    """
    ids = list(snapshot_ids or [])
    if not ids:
        raise InvalidInputError("At least one snapshot ID is required")

    distinct: List[int] = []
    for snapshot_id in ids:
        validate_snapshot_id(snapshot_id)
        if snapshot_id not in distinct:
            distinct.append(snapshot_id)

    if len(distinct) < len(ids):
        logger.debug(f"Collapsed {len(ids) - len(distinct)} duplicate snapshot ids")
    return distinct


# ─────────────────────────────────────────────────────────────────────────────
# Pipelines
# ─────────────────────────────────────────────────────────────────────────────

def fetch_zone_scores(
    source: RecordSource,
    snapshot_id: int,
    config: Optional[ReportConfig] = None,
) -> List[ZoneScore]:
    """
    Fetch one snapshot's records and aggregate them into zone scores.

    Args:
        source: Record source
        snapshot_id: Snapshot to fetch
        config: Report configuration (rounding)

    Returns:
        Zone scores ascending by zone name (empty when no relevant zones)
    """
    config = config or ReportConfig()
    zones = source.fetch_zones(snapshot_id)
    memberships = source.fetch_zone_memberships(snapshot_id)
    questions = source.fetch_questions(snapshot_id)
    logger.debug(
        f"Snapshot {snapshot_id}: fetched {len(zones)} zones, "
        f"{len(memberships)} memberships, {len(questions)} questions"
    )
    return aggregate_zone_scores(
        snapshot_id, zones, memberships, questions, places=config.score_places
    )


def generate_student_report(
    source: RecordSource,
    snapshot_id: Any,
    config: Optional[ReportConfig] = None,
) -> StudentReportResult:
    """
    Build the student report for one snapshot.

    Pipeline:
    1. Validate snapshot id
    2. Fetch records and aggregate zone scores
    3. Rank into top / bottom / low-score zones

    Args:
        source: Record source
        snapshot_id: Snapshot to report on
        config: Report configuration

    Returns:
        StudentReport, or NoData when the snapshot has no relevant zones

    Raises:
        InvalidInputError: If snapshot_id is invalid

    Example:
        >>> result = generate_student_report(source, 1)
        >>> isinstance(result, StudentReport)
        True
    """
    snapshot_id = validate_snapshot_id(snapshot_id)
    config = config or ReportConfig()

    zone_scores = fetch_zone_scores(source, snapshot_id, config)
    result = build_student_report(snapshot_id, zone_scores, config)

    if isinstance(result, NoData):
        logger.info(result.message)
        return result

    logger.info(
        f"Student report generated for snapshot {snapshot_id} "
        f"with {len(zone_scores)} zones analyzed"
    )
    return result


def generate_principal_report(
    source: RecordSource,
    snapshot_ids: Sequence[Any],
    config: Optional[ReportConfig] = None,
) -> PrincipalReportResult:
    """
    Build the principal report across several snapshots.

    Pipeline:
    1. Validate and de-duplicate snapshot ids
    2. Fetch + aggregate every snapshot (thread pool, independent work)
    3. Combine per zone and pick the lowest combined score

    Args:
        source: Record source (shared read-only between workers)
        snapshot_ids: Snapshots to analyze, in the order to report them
        config: Report configuration

    Returns:
        PrincipalReport, or NoData when no snapshot yields usable data

    Raises:
        InvalidInputError: If the id list is empty or any id is invalid
    """
    ids = validate_snapshot_ids(snapshot_ids)
    config = config or ReportConfig()
    start_time = time.perf_counter()

    per_snapshot = _fetch_all(source, ids, config)
    result = build_principal_report(per_snapshot, config)

    if isinstance(result, NoData):
        logger.info(result.message)
        return result

    zone = result.lowest_average_zone
    logger.info(
        f"Principal report generated across {len(result.analyzed_snapshots)} snapshots. "
        f"Lowest average zone: {zone.zone_name} ({zone.score:.2f})"
    )
    logger.debug(f"Principal report completed in {time.perf_counter() - start_time:.3f}s")
    return result


def _fetch_all(
    source: RecordSource,
    snapshot_ids: List[int],
    config: ReportConfig,
) -> Dict[int, List[ZoneScore]]:
    """Fetch and aggregate every snapshot, keeping request order."""
    if len(snapshot_ids) == 1 or config.max_workers == 1:
        # No thread overhead for the trivial case
        return {sid: fetch_zone_scores(source, sid, config) for sid in snapshot_ids}

    workers = min(config.max_workers, len(snapshot_ids))
    with ThreadPoolExecutor(max_workers=workers) as pool:
        futures = {
            sid: pool.submit(fetch_zone_scores, source, sid, config)
            for sid in snapshot_ids
        }
        return {sid: futures[sid].result() for sid in snapshot_ids}
