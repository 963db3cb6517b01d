"""
Module: zones

Purpose:
    Provides the Zone and ZoneMembership dataclasses. A zone groups the
    questions of one subject/topic area inside a snapshot; memberships link
    zones to questions (many-to-many, same snapshot only).

Dependencies:
    - dataclasses (std)

Used By:
    - reporting.aggregation.aggregator
    - core.utils.serialization
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Zone:
    """
    A zone record scoped to one snapshot (immutable).

    Attributes:
        snapshot_id: Snapshot this zone belongs to
        zone_id: Zone identifier, recurring across snapshots
        name: Display name (also the ordering key for reports)
        is_relevant: Irrelevant zones are left out of every report

    Example:
        >>> Zone(snapshot_id=1, zone_id=3, name="Algebra").is_relevant
        True
    """

    snapshot_id: int
    zone_id: int
    name: str
    is_relevant: bool = True

    def __post_init__(self) -> None:
        """Validate zone on construction."""
        if self.snapshot_id < 0:
            raise ValueError(f"snapshot_id must be non-negative: {self.snapshot_id}")
        if self.zone_id < 0:
            raise ValueError(f"zone_id must be non-negative: {self.zone_id}")
        if not self.name:
            raise ValueError(f"zone name must be non-empty (zone_id={self.zone_id})")

    @property
    def key(self) -> tuple[int, str]:
        """Cross-snapshot identity: (zone_id, name)."""
        return (self.zone_id, self.name)

    def to_dict(self) -> dict:
        return {
            "snapshot_id": self.snapshot_id,
            "zone_id": self.zone_id,
            "zone_name": self.name,
            "is_relevant": self.is_relevant,
        }

    @classmethod
    def from_dict(cls, data: dict) -> Zone:
        return cls(
            snapshot_id=data["snapshot_id"],
            zone_id=data["zone_id"],
            name=data["zone_name"],
            is_relevant=data.get("is_relevant", True),
        )


@dataclass(frozen=True)
class ZoneMembership:
    """
    Link between a zone and a question in the same snapshot.

    Memberships pointing at a question that does not exist are tolerated
    and simply treated as no link during aggregation.
    """

    snapshot_id: int
    zone_id: int
    question_id: int

    def __post_init__(self) -> None:
        """Validate membership on construction."""
        if self.snapshot_id < 0:
            raise ValueError(f"snapshot_id must be non-negative: {self.snapshot_id}")
        if self.zone_id < 0:
            raise ValueError(f"zone_id must be non-negative: {self.zone_id}")
        if self.question_id <= 0:
            raise ValueError(f"question_id must be positive: {self.question_id}")

    def to_dict(self) -> dict:
        return {
            "snapshot_id": self.snapshot_id,
            "zone_id": self.zone_id,
            "question_id": self.question_id,
        }

    @classmethod
    def from_dict(cls, data: dict) -> ZoneMembership:
        return cls(
            snapshot_id=data["snapshot_id"],
            zone_id=data["zone_id"],
            question_id=data["question_id"],
        )
