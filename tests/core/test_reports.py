"""
Unit Tests for Report Models

Tests for StudentReport and PrincipalReport dataclasses.
"""

from datetime import datetime, timezone

import pytest

from zonescore_toolkit.core.models import PrincipalReport, StudentReport, ZoneScore


MATH = ZoneScore(1, "Math", 76.67, total_questions=3, answered_questions=3)
SCIENCE = ZoneScore(2, "Science", None, total_questions=2, answered_questions=0)
ART = ZoneScore(3, "Art", 40.0, total_questions=1, answered_questions=1)


class TestStudentReport:
    """Tests for StudentReport dataclass."""

    def test_init_when_defaults_then_titled_and_timestamped(self):
        report = StudentReport(snapshot_id=1, top_zones=(MATH,), bottom_zones=(MATH,))
        assert report.title == "Student report"
        assert report.created_at.tzinfo is timezone.utc
        assert report.is_empty is False

    def test_init_when_unscored_zone_listed_then_raises_error(self):
        with pytest.raises(ValueError, match="unscored zones"):
            StudentReport(snapshot_id=1, top_zones=(SCIENCE,))

    def test_is_empty_when_no_lists_then_true(self):
        assert StudentReport(snapshot_id=1).is_empty is True

    def test_to_dict_when_called_then_json_compatible(self):
        created = datetime(2026, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
        report = StudentReport(
            snapshot_id=1,
            top_zones=(MATH, ART),
            bottom_zones=(ART, MATH),
            low_score_zones=(ART,),
            created_at=created,
        )
        data = report.to_dict()
        assert data["created_at"] == "2026-01-02T03:04:05+00:00"
        assert [z["zone_name"] for z in data["top_zones"]] == ["Math", "Art"]
        assert [z["zone_name"] for z in data["low_score_zones"]] == ["Art"]


class TestPrincipalReport:
    """Tests for PrincipalReport dataclass."""

    def test_init_when_no_requested_then_defaults_to_analyzed(self):
        report = PrincipalReport(lowest_average_zone=ART, analyzed_snapshots=(1, 2))
        assert report.requested_snapshots == (1, 2)
        assert report.is_partial is False
        assert report.title == "Principal Report"

    def test_excluded_when_partial_then_lists_missing_in_order(self):
        report = PrincipalReport(
            lowest_average_zone=ART,
            analyzed_snapshots=(1, 3),
            requested_snapshots=(4, 1, 2, 3),
        )
        assert report.excluded_snapshots == (4, 2)
        assert report.is_partial is True
        assert report.to_dict()["excluded_snapshots"] == [4, 2]

    def test_init_when_zone_unscored_then_raises_error(self):
        with pytest.raises(ValueError, match="must be scored"):
            PrincipalReport(lowest_average_zone=SCIENCE, analyzed_snapshots=(1,))

    def test_init_when_no_snapshots_then_raises_error(self):
        with pytest.raises(ValueError, match="must not be empty"):
            PrincipalReport(lowest_average_zone=ART, analyzed_snapshots=())

    def test_init_when_analyzed_not_requested_then_raises_error(self):
        with pytest.raises(ValueError, match="were not requested"):
            PrincipalReport(
                lowest_average_zone=ART,
                analyzed_snapshots=(1, 9),
                requested_snapshots=(1, 2),
            )
