"""
Custom Exceptions - Tech Health Assessment
tech_health/core/exceptions.py

Exception classes raised outside the scoring engine: catalogue validation,
the import collaborator and file export. The engine itself never raises for
well-typed input.
"""

from typing import Any, Dict, Optional


class TechHealthError(Exception):
    """Base exception for the assessment tool."""

    pass


class FrameworkDefinitionError(TechHealthError):
    """The framework catalogue violates a structural invariant."""

    def __init__(self, message: str, entity_id: Optional[str] = None):
        self.message = message
        self.entity_id = entity_id
        super().__init__(message)


class ImportValidationException(TechHealthError):
    """An imported assessment document was rejected."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ExportException(TechHealthError):
    """An export document could not be written."""

    def __init__(self, message: str = "Failed to write export document"):
        self.message = message
        super().__init__(message)
