"""
Module: reporting.results

Purpose:
    Explicit "no usable data" result values. Report builders return a
    NoData instead of raising, so the caller decides how to surface it
    (a not-found response, an exit code, ...).

Key Classes:
    - NoDataReason: Why no report could be produced
    - NoData: Result value carrying the reason and a message

Used By:
    - reporting.ranking.student
    - reporting.ranking.principal
    - reporting.controller
    - cli
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Union

from zonescore_toolkit.core.models.reports import PrincipalReport, StudentReport


class NoDataReason(Enum):
    """Distinct "no usable data" outcomes."""

    NO_ZONES = "no_zones"                # student: aggregation produced nothing
    NO_SNAPSHOTS = "no_snapshots"        # principal: empty input map
    NO_ZONE_DATA = "no_zone_data"        # principal: every snapshot was empty
    NO_SCORED_ZONES = "no_scored_zones"  # principal: no zone has any score


@dataclass(frozen=True)
class NoData:
    """
    A normal, expected outcome of valid input that yields nothing to report.

    Attributes:
        reason: Which no-data case occurred
        message: Human-readable description
        snapshot_ids: Snapshots the request covered
    """

    reason: NoDataReason
    message: str
    snapshot_ids: tuple[int, ...] = ()

    def __bool__(self) -> bool:
        # Lets callers write `if not result:` for the no-data branch
        return False

    def to_dict(self) -> dict:
        return {
            "reason": self.reason.value,
            "message": self.message,
            "snapshot_ids": list(self.snapshot_ids),
        }


StudentReportResult = Union[StudentReport, NoData]
PrincipalReportResult = Union[PrincipalReport, NoData]
