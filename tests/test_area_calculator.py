# tests/test_area_calculator.py

"""
Area Scoring Tests - area averages and the answered-count weighted overall
"""

from decimal import Decimal

import pytest

from conftest import area_levels, build_response, uniform_levels
from tech_health.scoring.area_calculator import AreaScoreCalculator, score_areas
from tech_health.scoring.utils import (
    clamp,
    mean,
    round_half_up,
    to_decimal,
    to_percentage,
    weighted_mean,
)


class TestDecimalUtils:

    def test_to_decimal(self):
        assert to_decimal(2.33333) == Decimal("2.3333")
        assert to_decimal(2.25, 1) == Decimal("2.3")

    def test_clamp(self):
        assert clamp(Decimal("120")) == Decimal("100")
        assert clamp(Decimal("-5")) == Decimal("0")

    def test_mean_empty(self):
        assert mean([]) == Decimal("0")

    def test_weighted_mean(self):
        values = [Decimal("4"), Decimal("1")]
        weights = [Decimal("1"), Decimal("2")]
        assert weighted_mean(values, weights) == Decimal("2.0000")

    def test_weighted_mean_zero_weight(self):
        assert weighted_mean([], []) == Decimal("0")

    def test_weighted_mean_length_mismatch(self):
        with pytest.raises(ValueError):
            weighted_mean([Decimal("1")], [])

    def test_round_half_up(self):
        assert round_half_up(Decimal("62.5")) == 63
        assert round_half_up(Decimal("62.4999")) == 62

    def test_to_percentage(self):
        assert to_percentage(Decimal("2.5")) == 63
        assert to_percentage(Decimal("4")) == 100
        assert to_percentage(Decimal("0")) == 0


class TestAreaScoreCalculator:
    """Area averages only count answered sub-axes."""

    def test_empty_response(self, framework, empty_response):
        result = AreaScoreCalculator().calculate(framework, empty_response)
        assert result.overall == Decimal("0")
        assert result.answered_count == 0
        assert result.total_count == 25
        assert [a.average_score for a in result.area_scores] == [0.0] * 5
        assert all(a.answered_count == 0 for a in result.area_scores)

    def test_all_level_four(self, framework, full_high_response):
        result = AreaScoreCalculator().calculate(framework, full_high_response)
        assert result.overall == Decimal("4")
        assert all(a.average_score == 4.0 for a in result.area_scores)
        assert result.answered_count == 25

    def test_area_scores_follow_framework_order(self, framework, empty_response):
        result = AreaScoreCalculator().calculate(framework, empty_response)
        assert [a.area_id for a in result.area_scores] == [a.id for a in framework.areas]
        first = result.area_scores[0]
        assert [s.sub_axis_id for s in first.sub_axis_scores] == [
            s.id for s in framework.areas[0].sub_axes
        ]
        assert all(s.level == 0 for s in first.sub_axis_scores)

    def test_single_answer_sets_area_and_overall(self, framework):
        response = build_response({"code-quality": 1})
        result = AreaScoreCalculator().calculate(framework, response)
        tech_debt = result.area_scores[0]
        assert tech_debt.average_score == 1.0
        assert tech_debt.answered_count == 1
        assert result.overall == Decimal("1")
        assert all(a.average_score == 0.0 for a in result.area_scores[1:])

    def test_partial_area_weighting(self, framework):
        """An area with 1/5 answered counts one fifth as much as a full one."""
        levels = area_levels(framework, "testing-automation", 3)
        levels["code-quality"] = 1
        area_scores, overall = score_areas(framework, build_response(levels))
        # (1 × 1 + 3 × 5) / 6
        assert overall == pytest.approx(2.6667)
        assert area_scores[0].average_score == 1.0
        assert area_scores[1].average_score == 3.0

    def test_partial_area_average_is_rounded_to_four_places(self, framework):
        levels = {"code-quality": 1, "architecture-domain": 3, "infrastructure": 3}
        area_scores, overall = score_areas(framework, build_response(levels))
        assert area_scores[0].average_score == 2.3333
        assert overall == 2.3333

    def test_zero_and_unknown_answers_ignored(self, framework):
        levels = {"code-quality": 0, "not-a-sub-axis": 4, "knowledge": 2}
        result = AreaScoreCalculator().calculate(framework, build_response(levels))
        assert result.area_scores[0].answered_count == 1
        assert result.area_scores[0].average_score == 2.0
        assert result.overall == Decimal("2")

    def test_comments_carried_through(self, framework):
        response = build_response({}).with_score("monitoring", 2, comment="No dashboards")
        result = AreaScoreCalculator().calculate(framework, response)
        obs = result.area_scores[2]
        monitoring = obs.sub_axis_scores[0]
        assert monitoring.sub_axis_id == "monitoring"
        assert monitoring.level == 2
        assert monitoring.comment == "No dashboards"

    def test_uniform_levels(self, framework):
        for level in (1, 2, 3, 4):
            _, overall = score_areas(framework, build_response(uniform_levels(framework, level)))
            assert overall == float(level)
