"""
Pulse Survey Aggregation
tech_health/scoring/pulse_calculator.py

Resolves raw pulse answers against each question's declared kind and
averages the numeric ones.

Resolution rules:
    - unknown question id            → dropped
    - null answer                    → dropped (unanswered)
    - numeric question, number       → NumericAnswer
    - numeric question, non-number   → dropped (unanswered)
    - free-text question, any value  → TextAnswer (never averaged)

    pulse_average = mean(NumericAnswer values), 0 if none
"""

from dataclasses import dataclass, field
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Literal, Optional, Union

import structlog

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.enumerations import PulseKind
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse, PulseValue
from tech_health.scoring.utils import FOUR_PLACES, mean

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class NumericAnswer:
    question_id: str
    value: Decimal
    kind: Literal["numeric"] = "numeric"


@dataclass(frozen=True)
class TextAnswer:
    question_id: str
    text: str
    kind: Literal["free-text"] = "free-text"


PulseAnswer = Union[NumericAnswer, TextAnswer]


@dataclass
class PulseSummary:
    """Output of PulseCalculator.calculate()."""
    average: Decimal                      # quantized to 0.0001
    numeric_count: int
    text_answers: List[TextAnswer] = field(default_factory=list)


def _is_number(value: PulseValue) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def resolve_answer(
    framework: Framework,
    question_id: str,
    value: Optional[PulseValue],
) -> Optional[PulseAnswer]:
    """Turn a raw stored value into a tagged answer, or None if unanswered."""
    question = framework.get_pulse_question(question_id)
    if question is None or value is None:
        return None

    if question.kind == PulseKind.FREE_TEXT:
        text = str(value).strip()
        return TextAnswer(question_id=question_id, text=text) if text else None

    if not _is_number(value):
        return None
    return NumericAnswer(question_id=question_id, value=Decimal(str(value)))


class PulseCalculator:
    """Aggregate pulse survey answers."""

    def calculate(
        self,
        framework: Framework,
        response: AssessmentResponse,
    ) -> PulseSummary:
        numeric: List[Decimal] = []
        texts: List[TextAnswer] = []

        for question_id, value in response.pulse_scores.items():
            answer = resolve_answer(framework, question_id, value)
            if answer is None:
                continue
            if answer.kind == "numeric":
                numeric.append(answer.value)
            else:
                texts.append(answer)

        average = mean(numeric).quantize(FOUR_PLACES, rounding=ROUND_HALF_UP)

        logger.debug(
            "pulse_aggregated",
            pulse_average=float(average),
            numeric_count=len(numeric),
            text_count=len(texts),
        )

        return PulseSummary(
            average=average,
            numeric_count=len(numeric),
            text_answers=texts,
        )


def aggregate_pulse(
    response: AssessmentResponse,
    framework: Framework = FRAMEWORK,
) -> float:
    """Functional form: mean of numeric pulse answers, 0 if none."""
    return float(PulseCalculator().calculate(framework, response).average)
