"""
Speed-Sustainability Compass
tech_health/scoring/compass_calculator.py

Two-axis position derived from the area averages of AreaScoreCalculator.
It reuses those averages rather than recomputing from raw levels, so the
area-level exclusion rules carry over unchanged.

Formula:
    speed          = round(mean(delivery-dora, testing-automation) / 4 × 100)
    sustainability = round(mean(observability-stability, tech-debt,
                                governance-knowledge) / 4 × 100)

    Missing or unanswered areas contribute 0 and keep their place in the
    divisor. Rounding is half-up.

Interpretation:
    |speed − sustainability| ≤ 10   → balanced
    speed > sustainability          → speed-heavy
    otherwise                       → sustainability-heavy
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Dict, Sequence, Tuple

import structlog

from tech_health.models.enumerations import CompassInterpretation
from tech_health.models.results import AreaScore, CompassPosition
from tech_health.scoring.utils import mean, to_decimal, to_percentage

logger = structlog.get_logger(__name__)

SPEED_AREAS: Tuple[str, ...] = ("delivery-dora", "testing-automation")
SUSTAINABILITY_AREAS: Tuple[str, ...] = (
    "observability-stability",
    "tech-debt",
    "governance-knowledge",
)
BALANCE_TOLERANCE = 10


@dataclass(frozen=True)
class CompassDescription:
    label: str
    emoji: str
    description: str
    action: str


COMPASS_DESCRIPTIONS: Dict[CompassInterpretation, CompassDescription] = {
    CompassInterpretation.SPEED_HEAVY: CompassDescription(
        label="Speed-Heavy",
        emoji="⚡",
        description=(
            "Fast but potentially fragile. You can deliver quickly, "
            "but may have reliability challenges."
        ),
        action=(
            "Increase stability allocation to 40%; focus on alerting, monitoring, "
            "and CI reliability to prevent burnout."
        ),
    ),
    CompassInterpretation.SUSTAINABILITY_HEAVY: CompassDescription(
        label="Sustainability-Heavy",
        emoji="🛡️",
        description=(
            "Over-invested in maintenance. Systems are stable "
            "but innovation may be slowing down."
        ),
        action=(
            "Shift 10% capacity back to feature delivery. "
            "Your foundation is strong - time to build on it."
        ),
    ),
    CompassInterpretation.BALANCED: CompassDescription(
        label="Balanced",
        emoji="🎯",
        description="Healthy balance between execution speed and system resilience.",
        action="Maintain current practices and share your learnings with other teams.",
    ),
}


class CompassCalculator:
    """Calculate the speed vs. sustainability compass position."""

    def calculate(self, area_scores: Sequence[AreaScore]) -> CompassPosition:
        averages = {a.area_id: to_decimal(a.average_score) for a in area_scores}

        speed = self._axis(averages, SPEED_AREAS)
        sustainability = self._axis(averages, SUSTAINABILITY_AREAS)
        interpretation = interpret(speed, sustainability)

        logger.info(
            "compass_calculated",
            speed=speed,
            sustainability=sustainability,
            interpretation=interpretation.value,
        )

        return CompassPosition(
            speed=speed,
            sustainability=sustainability,
            interpretation=interpretation,
        )

    @staticmethod
    def _axis(averages: Dict[str, Decimal], area_ids: Tuple[str, ...]) -> int:
        components = [averages.get(area_id, Decimal("0")) for area_id in area_ids]
        return to_percentage(mean(components))


def interpret(speed: int, sustainability: int) -> CompassInterpretation:
    if abs(speed - sustainability) <= BALANCE_TOLERANCE:
        return CompassInterpretation.BALANCED
    if speed > sustainability:
        return CompassInterpretation.SPEED_HEAVY
    return CompassInterpretation.SUSTAINABILITY_HEAVY


def compute_compass(area_scores: Sequence[AreaScore]) -> CompassPosition:
    return CompassCalculator().calculate(area_scores)


def describe_compass(interpretation: CompassInterpretation) -> CompassDescription:
    return COMPASS_DESCRIPTIONS[interpretation]
