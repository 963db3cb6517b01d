"""
Unit tests for the student report ranking.
"""

import pytest

from zonescore_toolkit.core.models import StudentReport
from zonescore_toolkit.reporting import ReportConfig
from zonescore_toolkit.reporting.aggregation import aggregate_zone_scores
from zonescore_toolkit.reporting.ranking import StudentReportRanker, build_student_report
from zonescore_toolkit.reporting.results import NoData, NoDataReason


def names(zones) -> list[str]:
    return [z.zone_name for z in zones]


class TestBuildStudentReport:
    """Tests for build_student_report."""

    def test_build_when_scenario_a_then_math_top_and_bottom(self, scenario_a):
        """Science has a null score and is left out of every list."""
        zones, memberships, questions = scenario_a
        zone_scores = aggregate_zone_scores(1, zones, memberships, questions)

        report = build_student_report(1, zone_scores)

        assert isinstance(report, StudentReport)
        assert names(report.top_zones) == ["Math"]
        assert names(report.bottom_zones) == ["Math"]
        assert report.low_score_zones == ()

    def test_build_when_scenario_b_then_top_bottom_and_low(self, six_zone_scores):
        report = build_student_report(1, six_zone_scores)

        assert names(report.top_zones) == ["D", "B", "E"]
        assert names(report.bottom_zones) == ["F", "A", "C"]
        assert names(report.low_score_zones) == ["F", "A", "C"]
        assert [z.score for z in report.low_score_zones] == [40.0, 50.0, 55.0]

    def test_build_when_empty_input_then_no_data(self):
        result = build_student_report(4, [])

        assert isinstance(result, NoData)
        assert result.reason is NoDataReason.NO_ZONES
        assert result.snapshot_ids == (4,)
        assert not result

    def test_build_when_all_unscored_then_empty_report(self, zone_score_factory):
        """Zones exist but none carry data: a report with empty lists."""
        zone_scores = [zone_score_factory(1, "A", None), zone_score_factory(2, "B", None)]

        report = build_student_report(1, zone_scores)

        assert isinstance(report, StudentReport)
        assert report.is_empty is True

    def test_build_when_fewer_than_three_scored_then_overlap(self, zone_score_factory):
        zone_scores = [zone_score_factory(1, "A", 80.0), zone_score_factory(2, "B", 30.0)]

        report = build_student_report(1, zone_scores)

        assert names(report.top_zones) == ["A", "B"]
        assert names(report.bottom_zones) == ["B", "A"]

    def test_build_when_ties_then_name_order_kept(self, zone_score_factory):
        """Equal scores keep the ascending-name order of the input."""
        zone_scores = [
            zone_score_factory(1, "Alpha", 70.0),
            zone_score_factory(2, "Beta", 70.0),
            zone_score_factory(3, "Gamma", 70.0),
            zone_score_factory(4, "Delta", 90.0),
        ]
        zone_scores.sort(key=lambda z: z.zone_name)

        report = build_student_report(1, zone_scores)

        assert names(report.top_zones) == ["Delta", "Alpha", "Beta"]
        assert names(report.bottom_zones) == ["Alpha", "Beta", "Gamma"]

    def test_build_when_score_exactly_threshold_then_not_low(self, zone_score_factory):
        zone_scores = [zone_score_factory(1, "A", 60.0), zone_score_factory(2, "B", 59.99)]

        report = build_student_report(1, zone_scores)

        assert names(report.low_score_zones) == ["B"]

    def test_build_when_many_low_zones_then_unbounded(self, zone_score_factory):
        zone_scores = [zone_score_factory(i, f"Z{i:02d}", float(i)) for i in range(1, 11)]

        report = build_student_report(1, zone_scores)

        assert len(report.low_score_zones) == 10
        assert len(report.top_zones) == 3
        assert len(report.bottom_zones) == 3

    def test_build_when_any_input_then_orderings_hold(self, six_zone_scores, zone_score_factory):
        zone_scores = six_zone_scores + [zone_score_factory(9, "G", None)]

        report = build_student_report(1, zone_scores)

        top = [z.score for z in report.top_zones]
        bottom = [z.score for z in report.bottom_zones]
        assert top == sorted(top, reverse=True)
        assert bottom == sorted(bottom)
        assert all(z.is_scored for z in report.top_zones + report.bottom_zones)


class TestStudentReportRanker:
    """Tests for configurable ranking."""

    def test_build_when_custom_counts_then_respected(self, six_zone_scores):
        ranker = StudentReportRanker(ReportConfig(top_count=1, bottom_count=2, low_score_threshold=45))

        report = ranker.build(1, six_zone_scores)

        assert names(report.top_zones) == ["D"]
        assert names(report.bottom_zones) == ["F", "A"]
        assert names(report.low_score_zones) == ["F"]

    def test_build_when_zero_counts_then_only_low_list(self, six_zone_scores):
        ranker = StudentReportRanker(ReportConfig(top_count=0, bottom_count=0))

        report = ranker.build(1, six_zone_scores)

        assert report.top_zones == ()
        assert report.bottom_zones == ()
        assert len(report.low_score_zones) == 3

    @pytest.mark.parametrize("threshold, expected", [(0, []), (100, ["F", "A", "C", "E", "B", "D"])])
    def test_build_when_threshold_extremes_then_low_list(self, six_zone_scores, threshold, expected):
        report = StudentReportRanker(ReportConfig(low_score_threshold=threshold)).build(1, six_zone_scores)

        assert names(report.low_score_zones) == expected
