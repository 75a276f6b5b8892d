"""
Area Score Calculator
tech_health/scoring/area_calculator.py

Computes per-area averages and the overall maturity score.

Formula:
    area_avg  = Σ answered levels in area / answered_in_area    (0 if none)
    overall   = Σ (area_avg × answered_in_area) / Σ answered_in_area

Areas are weighted by how many of their sub-axes were answered, not equally:
an area with 5/5 answered carries five times the weight of one with 1/5.
Unanswered sub-axes (absent, None or level 0) never enter the numerator or
the denominator, and areas with no answers do not participate at all.
"""

from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Tuple

import structlog

from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AreaScore, SubAxisResult
from tech_health.scoring.utils import FOUR_PLACES, mean, weighted_mean

logger = structlog.get_logger(__name__)


@dataclass
class AreaScoringResult:
    """Output of AreaScoreCalculator.calculate()."""
    area_scores: Tuple[AreaScore, ...]
    overall: Decimal        # [0, 4], quantized to 0.0001
    answered_count: int     # answered sub-axes across the framework
    total_count: int        # sub-axes in the framework


class AreaScoreCalculator:
    """Calculate area averages and the answered-count weighted overall score."""

    def calculate(
        self,
        framework: Framework,
        response: AssessmentResponse,
    ) -> AreaScoringResult:
        """
        Args:
            framework: The rubric catalogue.
            response: Possibly partial answers. Keys that do not match a
                      framework sub-axis are ignored.

        Returns:
            AreaScoringResult with one AreaScore per framework area (in order)
            and the overall score.
        """
        area_scores: List[AreaScore] = []
        area_averages: List[Decimal] = []
        area_weights: List[Decimal] = []

        for area in framework.areas:
            sub_axis_scores = []
            answered: List[Decimal] = []
            for sub_axis in area.sub_axes:
                level = response.level_for(sub_axis.id)
                score = response.scores.get(sub_axis.id)
                sub_axis_scores.append(
                    SubAxisResult(
                        sub_axis_id=sub_axis.id,
                        sub_axis_title=sub_axis.title,
                        level=level,
                        comment=score.comment if score is not None else None,
                    )
                )
                if level > 0:
                    answered.append(Decimal(level))

            average = mean(answered)
            if answered:
                area_averages.append(average)
                area_weights.append(Decimal(len(answered)))

            area_scores.append(
                AreaScore(
                    area_id=area.id,
                    area_title=area.title,
                    average_score=float(average.quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)),
                    answered_count=len(answered),
                    sub_axis_scores=tuple(sub_axis_scores),
                )
            )

        overall = weighted_mean(area_averages, area_weights)
        answered_count = int(sum(area_weights, Decimal("0")))

        logger.info(
            "area_scores_calculated",
            overall=float(overall),
            answered_count=answered_count,
            total_count=framework.sub_axis_count,
            area_averages={a.area_id: a.average_score for a in area_scores},
        )

        return AreaScoringResult(
            area_scores=tuple(area_scores),
            overall=overall,
            answered_count=answered_count,
            total_count=framework.sub_axis_count,
        )


def score_areas(
    framework: Framework,
    response: AssessmentResponse,
) -> Tuple[Tuple[AreaScore, ...], float]:
    """Functional form: (area_scores, overall)."""
    result = AreaScoreCalculator().calculate(framework, response)
    return result.area_scores, float(result.overall)
