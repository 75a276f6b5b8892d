"""
Dependencies - Tech Health Assessment
tech_health/core/dependencies.py

Cached shared instances for the CLI and other callers.
"""

from functools import lru_cache

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.framework import Framework
from tech_health.scoring.assessment_scorer import AssessmentScorer


@lru_cache()
def get_framework() -> Framework:
    """Get the validated framework catalogue."""
    return FRAMEWORK


@lru_cache()
def get_assessment_scorer() -> AssessmentScorer:
    """Get cached AssessmentScorer bound to the catalogue."""
    return AssessmentScorer(get_framework())
