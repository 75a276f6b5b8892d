"""
Response Models - Tech Health Assessment
tech_health/models/response.py

The user's answers. Built one answer at a time during data entry and handed
to the scoring engine when results are needed. Partial responses are a
first-class state: any sub-axis or pulse question may be missing.
"""

from datetime import date as date_type
from typing import Dict, List, Optional, Union

from pydantic import Field, StrictBool, StrictFloat, StrictInt

from tech_health.models.base import CamelModel

# Numeric slider answer or free text, depending on the question's kind.
# Booleans stay booleans so they are never averaged as 0 or 1.
PulseValue = Union[StrictInt, StrictFloat, StrictBool, str]


class TeamInfo(CamelModel):
    """Team metadata captured on the first page of the questionnaire."""

    team_name: str = Field(
        default="",
        max_length=255,
        description="Team name; required for a complete response, may be blank in drafts",
    )

    date: str = Field(
        default="",
        description="Assessment date (ISO format, YYYY-MM-DD)",
    )

    participants: List[str] = Field(
        default_factory=list,
        description="Ordered list of participant names",
    )

    notes: Optional[str] = Field(
        default=None,
        description="Free-text notes about the session",
    )

    criticality: Optional[str] = Field(
        default=None,
        max_length=64,
        description="Optional criticality tag of the team's systems",
    )


class SubAxisScore(CamelModel):
    """Answer for one sub-axis. Level 0 or None means unanswered."""

    level: Optional[int] = Field(default=None, ge=0, le=4)
    comment: Optional[str] = None

    @property
    def answered(self) -> bool:
        return bool(self.level)


class AssessmentResponse(CamelModel):
    """
    A filled-in (or partially filled-in) questionnaire.

    Keys of ``scores`` and ``pulse_scores`` should reference framework ids;
    unknown keys are tolerated and ignored by the scoring engine.
    """

    team_info: TeamInfo = Field(default_factory=TeamInfo)
    scores: Dict[str, SubAxisScore] = Field(default_factory=dict)
    pulse_scores: Dict[str, Optional[PulseValue]] = Field(default_factory=dict)

    @classmethod
    def empty(cls, team_name: str = "", date: Optional[str] = None) -> "AssessmentResponse":
        """Start a new response for a team, dated today unless given."""
        return cls(
            team_info=TeamInfo(
                team_name=team_name,
                date=date or date_type.today().isoformat(),
            )
        )

    def level_for(self, sub_axis_id: str) -> int:
        """Answered level of a sub-axis, 0 when unanswered."""
        score = self.scores.get(sub_axis_id)
        if score is None or not score.level:
            return 0
        return score.level

    def with_score(
        self,
        sub_axis_id: str,
        level: int,
        comment: Optional[str] = None,
    ) -> "AssessmentResponse":
        """Return a copy with one sub-axis answered."""
        scores = dict(self.scores)
        scores[sub_axis_id] = SubAxisScore(level=level, comment=comment)
        return self.model_copy(update={"scores": scores})

    def with_pulse(self, question_id: str, value: Optional[PulseValue]) -> "AssessmentResponse":
        """Return a copy with one pulse question answered (None clears it)."""
        pulse_scores = dict(self.pulse_scores)
        pulse_scores[question_id] = value
        return self.model_copy(update={"pulse_scores": pulse_scores})
