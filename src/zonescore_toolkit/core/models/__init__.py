"""
Core Models Package

Immutable, validated data models that serve as the single source of truth.

**DESIGN RATIONALE:**

All models in this package are frozen dataclasses. This ensures:
1. Fetched records cannot be mutated while a report is being built
2. Safe to share between the worker threads of a multi-snapshot report
3. Can be used as dict keys or in sets

| Model | Role |
|-------|------|
| `Question` | Fetched record, nullable score |
| `Zone` / `ZoneMembership` | Fetched records, zone grouping |
| `ZoneScore` | Derived per-zone summary, never stored |
| `StudentReport` / `PrincipalReport` | Derived report output |
"""

from .questions import Question
from .zones import Zone, ZoneMembership
from .scores import ZoneScore, mean_score, round_score
from .reports import PrincipalReport, StudentReport

__all__ = [
    "Question",
    "Zone",
    "ZoneMembership",
    "ZoneScore",
    "mean_score",
    "round_score",
    "StudentReport",
    "PrincipalReport",
]
