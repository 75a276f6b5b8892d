# tests/test_report.py

"""
Report Tests - display helpers and the markdown report
"""

import pytest

from tech_health.scoring import calculate_results
from tech_health.scoring.recommendation_engine import EXCELLENT_HEALTH_MESSAGE
from tech_health.services.report_generator import (
    format_date,
    generate_assessment_report,
    score_band,
)


class TestScoreBand:

    @pytest.mark.parametrize(
        "score, expected",
        [
            (0.0, "low"),
            (1.99, "low"),
            (2.0, "medium"),
            (2.99, "medium"),
            (3.0, "good"),
            (3.49, "good"),
            (3.5, "excellent"),
            (4.0, "excellent"),
        ],
    )
    def test_bands(self, score, expected):
        assert score_band(score) == expected


class TestFormatDate:

    def test_date(self):
        assert format_date("2025-10-24") == "October 24, 2025"

    def test_timestamp(self):
        assert format_date("2025-01-05T09:30:00Z") == "January 5, 2025"

    def test_empty(self):
        assert format_date("") == ""

    def test_unparseable_passthrough(self):
        assert format_date("last week") == "last week"


class TestAssessmentReport:

    def test_sections(self, mixed_response, fixed_now):
        results = calculate_results(mixed_response, now=fixed_now)
        report = generate_assessment_report(mixed_response, results)

        assert report.startswith("# Tech Health Assessment — Platform Team")
        assert "Date: October 24, 2025" in report
        assert "Participants: Alice, Bob" in report
        assert "**2.75 / 4** — Emerging discipline" in report
        assert "| Tech Debt | 1.00 | 5/5 | low |" in report
        assert "| Governance & Knowledge | 0.00 | 0/5 | low |" in report
        assert "Speed **100** | Sustainability **25**" in report
        assert "Speed-Heavy" in report
        assert "Average: **5.0 / 10**" in report
        assert "> More time for refactoring" in report
        assert "1. **[HIGH] Tech Debt** — Code Quality Debt is at Level 1" in report
        assert "4. **[MEDIUM] Observability & Stability**" in report
        assert EXCELLENT_HEALTH_MESSAGE not in report

    def test_excellent_health(self, full_high_response, fixed_now):
        results = calculate_results(full_high_response, now=fixed_now)
        report = generate_assessment_report(full_high_response, results)
        assert EXCELLENT_HEALTH_MESSAGE in report
        assert "Optimized, data-driven" in report
        assert "| Tech Debt | 4.00 | 5/5 | excellent |" in report

    def test_bar_width(self, full_high_response, fixed_now):
        results = calculate_results(full_high_response, now=fixed_now)
        report = generate_assessment_report(full_high_response, results, bar_width=10)
        assert "`##########`" in report

    def test_unnamed_team(self, empty_response, fixed_now):
        response = empty_response.model_copy(
            update={"team_info": empty_response.team_info.model_copy(update={"team_name": ""})}
        )
        report = generate_assessment_report(response, calculate_results(response, now=fixed_now))
        assert report.startswith("# Tech Health Assessment — Unnamed team")
