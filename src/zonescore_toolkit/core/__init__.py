"""
Zone Score Toolkit Core Package

Shared data models and edge utilities. These models are the single source
of truth for every reporting module.

1. **Immutable Data Models**
   - Fetched records and derived scores are frozen dataclasses

2. **Calculated Scores (Never Stored)**
   - `ZoneScore` is recomputed from questions on every request

3. **Validated Once, at the Edge**
   - Raw rows pass through `core.utils.serialization` exactly once
"""

from .models import (
    PrincipalReport,
    Question,
    StudentReport,
    Zone,
    ZoneMembership,
    ZoneScore,
)

__all__ = [
    "Question",
    "Zone",
    "ZoneMembership",
    "ZoneScore",
    "StudentReport",
    "PrincipalReport",
]
