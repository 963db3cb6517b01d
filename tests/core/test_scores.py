"""
Unit Tests for ZoneScore and score rounding.
"""

import pytest

from zonescore_toolkit.core.models import ZoneScore, mean_score, round_score


class TestRoundScore:
    """Tests for half-up rounding."""

    def test_round_when_repeating_decimal_then_two_places(self):
        assert round_score(230 / 3) == 76.67

    def test_round_when_exact_half_then_rounds_up(self):
        # Banker's rounding would give 0.12
        assert round_score(0.125) == 0.13
        assert round_score(2.675) == 2.68

    def test_round_when_zero_places_then_integer_value(self):
        assert round_score(59.5, places=0) == 60.0


class TestMeanScore:
    """Tests for mean_score helper."""

    def test_mean_when_empty_then_none(self):
        """No values must yield None, never zero."""
        assert mean_score([]) is None

    def test_mean_when_values_then_rounded_average(self):
        assert mean_score([80, 60, 90]) == 76.67

    def test_mean_when_generator_then_consumed_once(self):
        assert mean_score(v for v in (70.0, 50.0)) == 60.0


class TestZoneScore:
    """Tests for ZoneScore invariants."""

    def test_init_when_scored_then_is_scored(self):
        zs = ZoneScore(1, "Math", 76.67, total_questions=3, answered_questions=3)
        assert zs.is_scored is True
        assert zs.key == (1, "Math")

    def test_init_when_no_questions_then_unscored(self):
        zs = ZoneScore(2, "Science", None)
        assert zs.is_scored is False
        assert zs.total_questions == 0

    def test_init_when_answered_exceeds_total_then_raises_error(self):
        with pytest.raises(ValueError, match="cannot exceed"):
            ZoneScore(1, "Math", 50.0, total_questions=1, answered_questions=2)

    def test_init_when_score_without_answers_then_raises_error(self):
        """A zero answered count must come with a null score."""
        with pytest.raises(ValueError, match="score must be None exactly"):
            ZoneScore(1, "Math", 0.0, total_questions=2, answered_questions=0)

    def test_init_when_answers_without_score_then_raises_error(self):
        with pytest.raises(ValueError, match="score must be None exactly"):
            ZoneScore(1, "Math", None, total_questions=2, answered_questions=1)

    def test_to_dict_when_called_then_snake_case_keys(self):
        zs = ZoneScore(1, "Math", 76.67, total_questions=3, answered_questions=3)
        assert zs.to_dict() == {
            "zone_id": 1,
            "zone_name": "Math",
            "score": 76.67,
            "total_questions": 3,
            "answered_questions": 3,
        }
        assert ZoneScore.from_dict(zs.to_dict()) == zs
