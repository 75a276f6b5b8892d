# tests/conftest.py

"""
Pytest Fixtures - Shared framework, responses and builders for all tests

FRAMEWORK ID REFERENCE:
- Areas:      tech-debt, testing-automation, observability-stability,
              delivery-dora, governance-knowledge (5 sub-axes each)
- Pulse:      pulse-tech-debt, pulse-release, pulse-time, pulse-support,
              pulse-tools (numeric 0-10), pulse-improvement (free text)
"""

from datetime import datetime, timezone
from typing import Dict

import pytest

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse, SubAxisScore, TeamInfo


FIXED_NOW = datetime(2025, 10, 24, 9, 30, tzinfo=timezone.utc)


def build_response(
    levels: Dict[str, int],
    pulse: Dict[str, object] = None,
    team_name: str = "Platform Team",
) -> AssessmentResponse:
    """Response with the given sub-axis levels and pulse answers."""
    return AssessmentResponse(
        team_info=TeamInfo(
            team_name=team_name,
            date="2025-10-24",
            participants=["Alice", "Bob"],
        ),
        scores={sid: SubAxisScore(level=lvl) for sid, lvl in levels.items()},
        pulse_scores=dict(pulse or {}),
    )


def uniform_levels(framework: Framework, level: int) -> Dict[str, int]:
    """Every sub-axis of the framework answered at the same level."""
    return {s.id: level for _, s in framework.iter_sub_axes()}


def area_levels(framework: Framework, area_id: str, level: int) -> Dict[str, int]:
    """Every sub-axis of one area answered at the same level."""
    return {s.id: level for s in framework.get_area(area_id).sub_axes}


# =============================================================================
# FRAMEWORK FIXTURES
# =============================================================================

@pytest.fixture
def framework():
    """The built-in catalogue."""
    return FRAMEWORK


@pytest.fixture
def raw_framework():
    """Minimal valid framework definition as plain data (snake_case keys)."""
    levels = [{"level": n, "label": f"L{n}"} for n in (1, 2, 3, 4)]
    return {
        "areas": [
            {
                "id": "area-a",
                "title": "Area A",
                "sub_axes": [
                    {"id": "a-1", "title": "A One", "levels": levels},
                    {"id": "a-2", "title": "A Two", "levels": levels},
                ],
            },
        ],
        "pulse_survey": [
            {"id": "p-1", "question": "How is it going?", "min": 0, "max": 10},
        ],
    }


# =============================================================================
# RESPONSE FIXTURES
# =============================================================================

@pytest.fixture
def fixed_now():
    return FIXED_NOW


@pytest.fixture
def empty_response():
    """Team info only, no answers."""
    return build_response({})


@pytest.fixture
def full_high_response(framework):
    """Every sub-axis at level 4, every numeric pulse at 8."""
    pulse = {q.id: 8 for q in framework.pulse_survey if q.kind.value == "numeric"}
    return build_response(uniform_levels(framework, 4), pulse)


@pytest.fixture
def mixed_response(framework):
    """Fast delivery, weak foundations, plus pulse answers of both kinds."""
    levels = {}
    levels.update(area_levels(framework, "delivery-dora", 4))
    levels.update(area_levels(framework, "testing-automation", 4))
    levels.update(area_levels(framework, "tech-debt", 1))
    levels.update(area_levels(framework, "observability-stability", 2))
    pulse = {
        "pulse-tech-debt": 3,
        "pulse-release": 7,
        "pulse-improvement": "More time for refactoring",
    }
    return build_response(levels, pulse)
