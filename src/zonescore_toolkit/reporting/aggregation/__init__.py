"""
Module: reporting.aggregation

Purpose:
    Per-snapshot zone score aggregation.

Key Functions:
    - aggregate_zone_scores(): Main entry point for aggregation

Key Classes:
    - ZoneScoreAggregator: Aggregation orchestrator
"""

from .aggregator import ZoneScoreAggregator, aggregate_zone_scores

__all__ = [
    "ZoneScoreAggregator",
    "aggregate_zone_scores",
]
