"""
Export Service - Tech Health Assessment
tech_health/services/export_service.py

Wraps a response (and, for completed assessments, its results) into the
JSON interchange document and writes it to disk.

Completed export:  assessment + results + exportedAt     (no status)
Draft export:      assessment + status="in-progress" + exportedAt (no results)
"""

import json
import logging
import re
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Union

from tech_health.core.exceptions import ExportException
from tech_health.models.enumerations import ExportStatus
from tech_health.models.export import ExportDocument
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AssessmentResults

logger = logging.getLogger(__name__)

COMPLETED_PREFIX = "tech-health-assessment"
DRAFT_PREFIX = "tech-health-draft"
UNNAMED_TEAM = "unnamed-team"


def build_export(
    response: AssessmentResponse,
    results: Optional[AssessmentResults] = None,
    exported_at: Optional[datetime] = None,
) -> ExportDocument:
    """Build a completed export when results are given, a draft otherwise."""
    return ExportDocument(
        assessment=response,
        results=results,
        status=None if results is not None else ExportStatus.IN_PROGRESS,
        exported_at=exported_at or datetime.now(timezone.utc),
    )


def export_to_json(document: ExportDocument, indent: int = 2) -> str:
    return json.dumps(document.to_payload(), indent=indent, ensure_ascii=False)


def export_filename(
    team_name: str,
    when: Optional[datetime] = None,
    draft: bool = False,
) -> str:
    """
    Canonical file name for an export.

    Examples:
        >>> export_filename("Platform  Team", datetime(2025, 10, 24))
        'tech-health-assessment-Platform-Team-2025-10-24.json'
    """
    when = when or datetime.now(timezone.utc)
    slug = re.sub(r"\s+", "-", team_name.strip()) or UNNAMED_TEAM
    prefix = DRAFT_PREFIX if draft else COMPLETED_PREFIX
    return f"{prefix}-{slug}-{when.date().isoformat()}.json"


def save_export(
    document: ExportDocument,
    path: Union[str, Path],
    indent: int = 2,
) -> Path:
    """Write the document to an explicit path, creating parent directories."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(export_to_json(document, indent=indent), encoding="utf-8")
    except OSError as e:
        raise ExportException(f"Failed to write export to {path}: {e}") from e

    logger.info(
        "export_written",
        extra={
            "path": str(path),
            "draft": document.is_draft,
            "team": document.assessment.team_info.team_name,
        },
    )
    return path


def write_export(
    document: ExportDocument,
    out_dir: Union[str, Path] = ".",
    indent: int = 2,
) -> Path:
    """Write the document under its canonical name in out_dir."""
    name = export_filename(
        document.assessment.team_info.team_name,
        document.exported_at,
        draft=document.is_draft,
    )
    return save_export(document, Path(out_dir) / name, indent=indent)
