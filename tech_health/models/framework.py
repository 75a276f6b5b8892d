"""
Framework Models - Tech Health Assessment
tech_health/models/framework.py

Immutable description of the assessment rubric: areas, their sub-axes, the
four maturity levels of every sub-axis, and the pulse survey questions.

Structural invariants are checked once when the catalogue is built:
  - every sub-axis defines exactly the levels {1, 2, 3, 4}
  - ids are unique across areas, sub-axes and pulse questions
  - every pulse question has min < max
"""

from typing import Iterator, Optional, Tuple

from pydantic import Field, model_validator

from tech_health.core.exceptions import FrameworkDefinitionError
from tech_health.models.base import FrozenCamelModel
from tech_health.models.enumerations import PulseKind

REQUIRED_LEVELS = (1, 2, 3, 4)


class Level(FrozenCamelModel):
    """One maturity level of a sub-axis. Display metadata only."""

    level: int = Field(..., ge=1, le=4)
    label: str = ""
    description: str = ""
    example: str = ""


class SubAxis(FrozenCamelModel):
    """A single scored dimension within an area."""

    id: str = Field(..., min_length=1)
    title: str
    levels: Tuple[Level, ...]

    def get_level(self, level: int) -> Optional[Level]:
        for candidate in self.levels:
            if candidate.level == level:
                return candidate
        return None


class Area(FrozenCamelModel):
    """An assessment area grouping several sub-axes."""

    id: str = Field(..., min_length=1)
    title: str
    emoji: str = ""
    description: str = ""
    sub_axes: Tuple[SubAxis, ...]


class PulseQuestion(FrozenCamelModel):
    """Supplementary sentiment question, aggregated apart from the levels."""

    id: str = Field(..., min_length=1)
    question: str
    purpose: str = ""
    kind: PulseKind = PulseKind.NUMERIC
    min_value: float = Field(default=0, alias="min")
    max_value: float = Field(default=10, alias="max")

    def in_bounds(self, value: float) -> bool:
        return self.min_value <= value <= self.max_value


class Framework(FrozenCamelModel):
    """The complete rubric. Built once at import time and never mutated."""

    areas: Tuple[Area, ...]
    pulse_survey: Tuple[PulseQuestion, ...] = ()

    @model_validator(mode="after")
    def validate_structure(self):
        seen = set()

        def _claim(entity_id: str) -> None:
            if entity_id in seen:
                raise FrameworkDefinitionError(
                    f"Duplicate id '{entity_id}' in framework", entity_id
                )
            seen.add(entity_id)

        for area in self.areas:
            _claim(area.id)
            for sub_axis in area.sub_axes:
                _claim(sub_axis.id)
                levels = tuple(sorted(lvl.level for lvl in sub_axis.levels))
                if levels != REQUIRED_LEVELS:
                    raise FrameworkDefinitionError(
                        f"Sub-axis '{sub_axis.id}' must define levels 1-4 exactly once, "
                        f"got {list(levels)}",
                        sub_axis.id,
                    )

        for question in self.pulse_survey:
            _claim(question.id)
            if question.min_value >= question.max_value:
                raise FrameworkDefinitionError(
                    f"Pulse question '{question.id}' has min >= max", question.id
                )
        return self

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    @property
    def sub_axis_count(self) -> int:
        return sum(len(area.sub_axes) for area in self.areas)

    def iter_sub_axes(self) -> Iterator[Tuple[Area, SubAxis]]:
        """Yield (area, sub_axis) pairs in declared order."""
        for area in self.areas:
            for sub_axis in area.sub_axes:
                yield area, sub_axis

    def get_area(self, area_id: str) -> Optional[Area]:
        return next((a for a in self.areas if a.id == area_id), None)

    def get_sub_axis(self, sub_axis_id: str) -> Optional[SubAxis]:
        return next(
            (s for _, s in self.iter_sub_axes() if s.id == sub_axis_id), None
        )

    def get_pulse_question(self, question_id: str) -> Optional[PulseQuestion]:
        return next((q for q in self.pulse_survey if q.id == question_id), None)
