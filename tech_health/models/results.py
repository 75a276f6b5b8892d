"""
Results Models - Tech Health Assessment
tech_health/models/results.py

Derived, immutable output of the scoring engine. Recomputed on every call;
only ever stored as a cached display artifact inside an export document.
"""

from datetime import datetime, timezone
from typing import Optional, Tuple

from pydantic import Field

from tech_health.models.base import FrozenCamelModel
from tech_health.models.enumerations import (
    CompassInterpretation,
    MaturityLevel,
    Priority,
)


class SubAxisResult(FrozenCamelModel):
    sub_axis_id: str
    sub_axis_title: str
    level: int = Field(..., description="Answered level, 0 when unanswered")
    comment: Optional[str] = None


class AreaScore(FrozenCamelModel):
    """Per-area summary. ``average_score`` only counts answered sub-axes."""

    area_id: str
    area_title: str
    average_score: float = Field(..., description="Mean of answered levels, 0 if none")
    answered_count: int = Field(default=0, ge=0)
    sub_axis_scores: Tuple[SubAxisResult, ...] = ()


class CompassPosition(FrozenCamelModel):
    """Speed vs. sustainability position derived from area averages."""

    speed: int = Field(..., ge=0, le=100)
    sustainability: int = Field(..., ge=0, le=100)
    interpretation: CompassInterpretation


class Recommendation(FrozenCamelModel):
    priority: Priority
    area_id: str
    area_title: str
    issue: str
    action: str
    impact: str
    sub_axis_id: Optional[str] = Field(
        default=None,
        description="Flagged sub-axis; None for area-level recommendations",
    )


class AssessmentResults(FrozenCamelModel):
    """Output of calculate_results()."""

    overall: float = Field(..., description="Weighted mean maturity, 0.0-4.0")
    maturity_level: MaturityLevel
    area_scores: Tuple[AreaScore, ...]
    pulse_average: float = Field(default=0.0, description="Mean of numeric pulse answers")
    compass: CompassPosition
    recommendations: Tuple[Recommendation, ...] = ()
    completed_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Computation timestamp (UTC)",
    )

    def get_area_score(self, area_id: str) -> Optional[AreaScore]:
        return next((a for a in self.area_scores if a.area_id == area_id), None)
