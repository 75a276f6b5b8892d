"""
Core Package - Tech Health Assessment
tech_health/core/__init__.py

Core infrastructure: exceptions, cached dependencies.
"""

from tech_health.core.exceptions import (
    ExportException,
    FrameworkDefinitionError,
    ImportValidationException,
    TechHealthError,
)

__all__ = [
    "ExportException",
    "FrameworkDefinitionError",
    "ImportValidationException",
    "TechHealthError",
]
