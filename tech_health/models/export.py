"""
Export Document Model - Tech Health Assessment
tech_health/models/export.py

The JSON interchange document written by export and read back by import:

    {
      "assessment": {...},          # AssessmentResponse
      "results": {...},             # completed exports only
      "status": "in-progress",      # drafts only
      "exportedAt": "2025-10-24T09:30:00+00:00"
    }
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from pydantic import Field, model_validator

from tech_health.models.base import CamelModel
from tech_health.models.enumerations import ExportStatus
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AssessmentResults


class ExportDocument(CamelModel):
    """A response, optionally paired with its results, stamped with exportedAt."""

    assessment: AssessmentResponse
    results: Optional[AssessmentResults] = None
    status: Optional[ExportStatus] = Field(
        default=None,
        description="'in-progress' for drafts; omitted for completed exports",
    )
    exported_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
    )

    @model_validator(mode="after")
    def validate_status(self):
        """Drafts carry no results; completed exports carry no status."""
        if self.status == ExportStatus.IN_PROGRESS and self.results is not None:
            raise ValueError("in-progress exports must not include results")
        return self

    @property
    def is_draft(self) -> bool:
        return self.results is None

    def to_payload(self) -> Dict[str, Any]:
        """JSON-ready dict with camelCase keys and absent optional sections."""
        payload: Dict[str, Any] = {
            "assessment": self.assessment.model_dump(mode="json", by_alias=True),
        }
        if self.results is not None:
            payload["results"] = self.results.model_dump(mode="json", by_alias=True)
        if self.status is not None:
            payload["status"] = self.status.value
        payload["exportedAt"] = self.exported_at.isoformat()
        return payload
