"""
Module: reporting.aggregation.aggregator

Purpose:
    Compute one ZoneScore per relevant zone of a snapshot from the fetched
    question, zone and membership records.

Key Functions:
    - aggregate_zone_scores(): Main entry point for aggregation

Key Classes:
    - ZoneScoreAggregator: Aggregation orchestrator

Dependencies:
    - zonescore_toolkit.core.models: Question, Zone, ZoneMembership, ZoneScore

Used By:
    - reporting.controller: Student and principal report paths
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Set

from zonescore_toolkit.core.models import Question, Zone, ZoneMembership, ZoneScore
from zonescore_toolkit.core.models.scores import DEFAULT_SCORE_PLACES, mean_score

logger = logging.getLogger(__name__)


def aggregate_zone_scores(
    snapshot_id: int,
    zones: Iterable[Zone],
    memberships: Iterable[ZoneMembership],
    questions: Iterable[Question],
    *,
    places: int = DEFAULT_SCORE_PLACES,
) -> List[ZoneScore]:
    """
    Aggregate question scores into zone scores for one snapshot.

    Rules:
    1. Only relevant zones of the snapshot appear in the output
    2. Only relevant questions of the snapshot count, linked or not
    3. A zone with no eligible questions still appears, unscored
    4. Memberships naming unknown questions are ignored

    Args:
        snapshot_id: Snapshot to aggregate
        zones: Zone records (other snapshots are ignored)
        memberships: Zone/question links (other snapshots are ignored)
        questions: Question records (other snapshots are ignored)
        places: Decimal places for the rounded averages

    Returns:
        List of ZoneScore sorted ascending by zone name; empty when the
        snapshot has no relevant zones

    Invariants:
        - answered_questions <= total_questions
        - score is None iff answered_questions == 0

    Example:
        >>> scores = aggregate_zone_scores(1, zones, memberships, questions)
        >>> [(z.zone_name, z.score) for z in scores]
        [('Math', 76.67), ('Science', None)]
    """
    aggregator = ZoneScoreAggregator(snapshot_id, places=places)
    return aggregator.aggregate(zones, memberships, questions)


@dataclass
class ZoneScoreAggregator:
    """
    Zone score aggregation for a single snapshot.

    Pure over its inputs: no I/O, no state kept between calls.

    Attributes:
        snapshot_id: Snapshot being aggregated
        places: Decimal places for the rounded averages
    """

    snapshot_id: int
    places: int = DEFAULT_SCORE_PLACES

    def aggregate(
        self,
        zones: Iterable[Zone],
        memberships: Iterable[ZoneMembership],
        questions: Iterable[Question],
    ) -> List[ZoneScore]:
        """
        Execute the aggregation.

        Returns:
            Zone scores sorted ascending by zone name
        """
        relevant_zones = self._relevant_zones(zones)
        if not relevant_zones:
            logger.debug(f"Snapshot {self.snapshot_id}: no relevant zones")
            return []

        eligible = self._eligible_questions(questions)
        links = self._link_questions(relevant_zones, memberships, eligible)

        results = [
            self._score_zone(zone, [eligible[qid] for qid in sorted(links[zone.zone_id])])
            for zone in relevant_zones.values()
        ]

        # Stable: zones sharing a name keep their fetch order
        results.sort(key=lambda z: z.zone_name)

        logger.debug(
            f"Snapshot {self.snapshot_id}: aggregated {len(results)} zones from "
            f"{len(eligible)} eligible questions"
        )
        return results

    # ─────────────────────────────────────────────────────────────────────────
    # Internal Steps
    # ─────────────────────────────────────────────────────────────────────────

    def _relevant_zones(self, zones: Iterable[Zone]) -> Dict[int, Zone]:
        """Relevant zones of this snapshot keyed by zone id (first record wins)."""
        result: Dict[int, Zone] = {}
        for zone in zones:
            if zone.snapshot_id != self.snapshot_id or not zone.is_relevant:
                continue
            result.setdefault(zone.zone_id, zone)
        return result

    def _eligible_questions(self, questions: Iterable[Question]) -> Dict[int, Question]:
        """Relevant questions of this snapshot keyed by question id."""
        result: Dict[int, Question] = {}
        for question in questions:
            if question.snapshot_id != self.snapshot_id or not question.is_eligible:
                continue
            result.setdefault(question.question_id, question)
        return result

    def _link_questions(
        self,
        zones: Dict[int, Zone],
        memberships: Iterable[ZoneMembership],
        eligible: Dict[int, Question],
    ) -> Dict[int, Set[int]]:
        """Distinct eligible question ids per zone id."""
        links: Dict[int, Set[int]] = {zone_id: set() for zone_id in zones}
        ignored = 0
        for link in memberships:
            if link.snapshot_id != self.snapshot_id:
                continue
            if link.zone_id not in links or link.question_id not in eligible:
                ignored += 1
                continue
            links[link.zone_id].add(link.question_id)

        if ignored:
            logger.debug(
                f"Snapshot {self.snapshot_id}: ignored {ignored} memberships "
                f"to irrelevant or unknown records"
            )
        return links

    def _score_zone(self, zone: Zone, questions: List[Question]) -> ZoneScore:
        answered = [q.score for q in questions if q.is_answered]
        return ZoneScore(
            zone_id=zone.zone_id,
            zone_name=zone.name,
            score=mean_score(answered, self.places),
            total_questions=len(questions),
            answered_questions=len(answered),
        )
