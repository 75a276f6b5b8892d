"""
scoring/assessment_scorer.py

Full pipeline: AssessmentResponse → AssessmentResults.

Class: AssessmentScorer
Method: score(response) → AssessmentResults

Pipeline steps:
  1. AreaScoreCalculator   → area averages + overall
  2. classify_maturity     → maturity level
  3. PulseCalculator       → pulse average
  4. CompassCalculator     → speed / sustainability (from step 1 averages)
  5. RecommendationEngine  → ranked recommendations (from step 1 averages)
  6. Stamp completed_at

Stateless: the same response always yields the same results apart from
completed_at. Nothing here reads or writes storage.
"""

from datetime import datetime, timezone
from typing import Optional

import structlog

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AssessmentResults
from tech_health.scoring.area_calculator import AreaScoreCalculator
from tech_health.scoring.compass_calculator import CompassCalculator
from tech_health.scoring.maturity import classify_maturity
from tech_health.scoring.pulse_calculator import PulseCalculator
from tech_health.scoring.recommendation_engine import RecommendationEngine

logger = structlog.get_logger(__name__)


class AssessmentScorer:
    """Compose the calculators into a single scoring call."""

    def __init__(self, framework: Framework = FRAMEWORK):
        self.framework = framework
        self.area_calculator = AreaScoreCalculator()
        self.pulse_calculator = PulseCalculator()
        self.compass_calculator = CompassCalculator()
        self.recommendation_engine = RecommendationEngine()

    def score(
        self,
        response: AssessmentResponse,
        now: Optional[datetime] = None,
    ) -> AssessmentResults:
        """
        Score a (possibly partial) response.

        Args:
            response: The answers to score. Not mutated.
            now: Timestamp for completed_at; defaults to the current UTC time.

        Returns:
            AssessmentResults.
        """
        areas = self.area_calculator.calculate(self.framework, response)
        maturity = classify_maturity(areas.overall)
        pulse = self.pulse_calculator.calculate(self.framework, response)
        compass = self.compass_calculator.calculate(areas.area_scores)
        recommendations = self.recommendation_engine.generate(areas.area_scores)

        results = AssessmentResults(
            overall=float(areas.overall),
            maturity_level=maturity,
            area_scores=areas.area_scores,
            pulse_average=float(pulse.average),
            compass=compass,
            recommendations=tuple(recommendations),
            completed_at=now or datetime.now(timezone.utc),
        )

        logger.info(
            "assessment_scored",
            team=response.team_info.team_name,
            overall=results.overall,
            maturity_level=maturity.value,
            answered=areas.answered_count,
            total=areas.total_count,
            pulse_average=results.pulse_average,
            recommendations=len(recommendations),
        )
        return results


def calculate_results(
    response: AssessmentResponse,
    framework: Framework = FRAMEWORK,
    now: Optional[datetime] = None,
) -> AssessmentResults:
    """Score a response against the framework (defaults to the catalogue)."""
    return AssessmentScorer(framework).score(response, now=now)
