"""
Completion Tracking - Tech Health Assessment
tech_health/services/completion.py

How much of a response has been filled in. Only framework sub-axes with a
level > 0 count as answered, so stale or unknown keys never push the
percentage past 100.
"""

from decimal import Decimal
from typing import Dict, Tuple

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse, TeamInfo
from tech_health.scoring.utils import round_half_up


def area_completion(
    response: AssessmentResponse,
    framework: Framework = FRAMEWORK,
) -> Dict[str, Tuple[int, int]]:
    """Per area id: (answered, total)."""
    return {
        area.id: (
            sum(1 for s in area.sub_axes if response.level_for(s.id) > 0),
            len(area.sub_axes),
        )
        for area in framework.areas
    }


def completion_percentage(
    response: AssessmentResponse,
    framework: Framework = FRAMEWORK,
) -> int:
    total = framework.sub_axis_count
    if total == 0:
        return 0
    answered = sum(done for done, _ in area_completion(response, framework).values())
    return round_half_up(Decimal(answered) / Decimal(total) * Decimal("100"))


def is_team_info_complete(team_info: TeamInfo) -> bool:
    return len(team_info.team_name.strip()) > 0


def is_complete(
    response: AssessmentResponse,
    framework: Framework = FRAMEWORK,
) -> bool:
    """Team info filled in and every sub-axis answered."""
    return is_team_info_complete(response.team_info) and all(
        done == total for done, total in area_completion(response, framework).values()
    )
