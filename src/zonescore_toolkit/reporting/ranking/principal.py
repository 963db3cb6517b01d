"""
Module: reporting.ranking.principal

Purpose:
    Build the cross-snapshot principal report: combine each zone's scores
    across snapshots and pick the zone with the lowest combined score.

Key Functions:
    - combine_zone_scores(): Combine per-snapshot scores per zone
    - build_principal_report(): Main entry point for the principal report

Key Classes:
    - PrincipalReportAggregator: Combination orchestrator

Dependencies:
    - zonescore_toolkit.core.models: ZoneScore, PrincipalReport
    - reporting.config: ReportConfig
    - reporting.combine_mode: CombineMode
    - reporting.results: NoData

Used By:
    - reporting.controller: Principal report path
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Mapping, Sequence, Tuple

from zonescore_toolkit.core.models import PrincipalReport, ZoneScore
from zonescore_toolkit.core.models.scores import DEFAULT_SCORE_PLACES, mean_score, round_score

from ..combine_mode import CombineMode
from ..config import ReportConfig
from ..results import NoData, NoDataReason, PrincipalReportResult

logger = logging.getLogger(__name__)

ZoneKey = Tuple[int, str]


def combine_zone_scores(
    per_snapshot: Sequence[Sequence[ZoneScore]],
    *,
    mode: CombineMode = CombineMode.UNWEIGHTED,
    places: int = DEFAULT_SCORE_PLACES,
) -> List[ZoneScore]:
    """
    Combine zone scores from several snapshots, one entry per zone.

    Zones are matched across snapshots by (zone_id, zone_name). Only
    scored entries take part: question counts are summed over the
    snapshots where the zone was scored, and zones never scored anywhere
    are dropped.

    Args:
        per_snapshot: One zone score list per contributing snapshot
        mode: UNWEIGHTED (mean of means) or WEIGHTED (by answered count)
        places: Decimal places for the combined score

    Returns:
        Combined scores sorted ascending by zone name, then zone id

    Example:
        >>> combined = combine_zone_scores([[x_at_70], [x_at_50]])
        >>> combined[0].score
        60.0
    """
    groups: Dict[ZoneKey, List[ZoneScore]] = {}
    for zone_scores in per_snapshot:
        for zone_score in zone_scores:
            if zone_score.is_scored:
                groups.setdefault(zone_score.key, []).append(zone_score)

    combined = [
        ZoneScore(
            zone_id=zone_id,
            zone_name=zone_name,
            score=_combined_score(entries, mode, places),
            total_questions=sum(e.total_questions for e in entries),
            answered_questions=sum(e.answered_questions for e in entries),
        )
        for (zone_id, zone_name), entries in groups.items()
    ]
    combined.sort(key=lambda z: (z.zone_name, z.zone_id))
    return combined


def _combined_score(entries: List[ZoneScore], mode: CombineMode, places: int) -> float:
    if mode is CombineMode.WEIGHTED:
        weight = sum(e.answered_questions for e in entries)
        return round_score(
            math.fsum(e.score * e.answered_questions for e in entries) / weight,
            places,
        )
    return mean_score((e.score for e in entries), places)


def build_principal_report(
    per_snapshot: Mapping[int, Sequence[ZoneScore]],
    config: ReportConfig | None = None,
) -> PrincipalReportResult:
    """
    Find the zone with the lowest combined score across snapshots.

    Args:
        per_snapshot: Zone scores keyed by snapshot id, in request order
        config: Report configuration (combine mode, rounding)

    Returns:
        PrincipalReport, or NoData when nothing usable was supplied

    Example:
        >>> report = build_principal_report({1: s1_scores, 2: s2_scores})
        >>> report.lowest_average_zone.zone_name
        'Geometry'
    """
    aggregator = PrincipalReportAggregator(config or ReportConfig())
    return aggregator.build(per_snapshot)


@dataclass
class PrincipalReportAggregator:
    """
    Principal report combination.

    Attributes:
        config: Report configuration
    """

    config: ReportConfig = field(default_factory=ReportConfig)

    def build(self, per_snapshot: Mapping[int, Sequence[ZoneScore]]) -> PrincipalReportResult:
        """
        Execute the combination and selection.

        Outcomes:
        1. Empty mapping -> NoData(NO_SNAPSHOTS)
        2. Every snapshot empty -> NoData(NO_ZONE_DATA)
        3. No zone scored anywhere -> NoData(NO_SCORED_ZONES)
        4. Otherwise a PrincipalReport; empty snapshots are listed as excluded

        Returns:
            PrincipalReport or NoData
        """
        requested = tuple(per_snapshot)
        if not requested:
            return NoData(
                reason=NoDataReason.NO_SNAPSHOTS,
                message="At least one snapshot ID is required",
            )

        analyzed = tuple(sid for sid in requested if per_snapshot[sid])
        if not analyzed:
            return NoData(
                reason=NoDataReason.NO_ZONE_DATA,
                message="No data found for any of the provided snapshots",
                snapshot_ids=requested,
            )

        excluded = [sid for sid in requested if sid not in analyzed]
        if excluded:
            logger.warning(f"Snapshots without zone data excluded: {excluded}")

        combined = combine_zone_scores(
            [per_snapshot[sid] for sid in analyzed],
            mode=self.config.combine_mode,
            places=self.config.score_places,
        )
        if not combined:
            return NoData(
                reason=NoDataReason.NO_SCORED_ZONES,
                message="No zones with valid scores found across snapshots",
                snapshot_ids=analyzed,
            )

        lowest = min(combined, key=lambda z: (z.score, z.zone_name, z.zone_id))
        logger.debug(
            f"Combined {len(combined)} zones across {len(analyzed)} snapshots "
            f"({self.config.combine_mode.value})"
        )

        return PrincipalReport(
            lowest_average_zone=lowest,
            analyzed_snapshots=analyzed,
            requested_snapshots=requested,
        )
