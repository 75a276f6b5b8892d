"""
Import Service - Tech Health Assessment
tech_health/services/import_service.py

Validates an externally supplied export document before anything is scored.
The scoring engine performs no schema validation itself; this module is the
gate in front of it.

Checks, in order (first failure wins):
  1. payload parses as a JSON object         → "Invalid JSON format"
  2. has an "assessment" section             → "Missing assessment data"
  3. assessment.teamInfo.teamName present    → "Missing team name - ..."
  4. scores / pulseScores are objects        → "Invalid ... data format"
  5. the assessment validates as a model     → "Invalid assessment data"
  6. numeric pulse answers are within bounds → "Pulse answer out of range"

Draft routing: a document is a draft (back to data entry) when it says
status "in-progress", has no results, or has an empty scores object.
Otherwise it goes straight to the results view.
"""

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from pydantic import ValidationError

from tech_health.core.exceptions import ImportValidationException
from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.enumerations import ExportStatus, PulseKind
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AssessmentResults

logger = logging.getLogger(__name__)


@dataclass
class ImportedAssessment:
    """Outcome of parse_import()."""
    response: AssessmentResponse
    results: Optional[AssessmentResults]   # None for drafts or stale result shapes
    is_draft: bool
    exported_at: Optional[str]


def _validation_details(error: ValidationError) -> Dict[str, Any]:
    errors: List[Dict[str, str]] = []
    for err in error.errors():
        errors.append({
            "field": ".".join(str(part) for part in err["loc"]),
            "message": err["msg"],
        })
    return {"errors": errors}


def _load(payload: Union[str, bytes, Dict[str, Any]]) -> Dict[str, Any]:
    if isinstance(payload, dict):
        return payload
    try:
        data = json.loads(payload)
    except (TypeError, ValueError) as e:
        raise ImportValidationException("Invalid JSON format") from e
    if not isinstance(data, dict):
        raise ImportValidationException("Invalid JSON format")
    return data


def validate_pulse_bounds(framework: Framework, response: AssessmentResponse) -> None:
    """Reject numeric pulse answers outside their question's [min, max]."""
    for question_id, value in response.pulse_scores.items():
        question = framework.get_pulse_question(question_id)
        if question is None or question.kind != PulseKind.NUMERIC:
            continue
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue
        if not question.in_bounds(value):
            raise ImportValidationException(
                "Pulse answer out of range",
                details={
                    "question_id": question_id,
                    "value": value,
                    "min": question.min_value,
                    "max": question.max_value,
                },
            )


def is_draft_document(data: Dict[str, Any]) -> bool:
    scores = data.get("assessment", {}).get("scores")
    return (
        data.get("status") == ExportStatus.IN_PROGRESS.value
        or not data.get("results")
        or (isinstance(scores, dict) and len(scores) == 0)
    )


def parse_import(
    payload: Union[str, bytes, Dict[str, Any]],
    framework: Framework = FRAMEWORK,
) -> ImportedAssessment:
    """
    Validate and parse an export document.

    Args:
        payload: Raw JSON text/bytes or an already-decoded dict.
        framework: Catalogue used for pulse bound checks.

    Returns:
        ImportedAssessment.

    Raises:
        ImportValidationException: with a user-facing message.
    """
    data = _load(payload)

    assessment = data.get("assessment")
    if not assessment or not isinstance(assessment, dict):
        raise ImportValidationException("Missing assessment data")

    team_info = assessment.get("teamInfo")
    if not isinstance(team_info, dict) or not team_info.get("teamName"):
        raise ImportValidationException(
            "Missing team name - at least team information is required"
        )

    # null maps count as absent
    assessment = {
        key: value for key, value in assessment.items()
        if not (key in ("scores", "pulseScores") and value is None)
    }

    if "scores" in assessment and not isinstance(assessment["scores"], dict):
        raise ImportValidationException("Invalid scores data format")

    if "pulseScores" in assessment and not isinstance(assessment["pulseScores"], dict):
        raise ImportValidationException("Invalid pulse scores data format")

    try:
        response = AssessmentResponse.model_validate(assessment)
    except ValidationError as e:
        raise ImportValidationException(
            "Invalid assessment data", details=_validation_details(e)
        ) from e

    validate_pulse_bounds(framework, response)

    is_draft = is_draft_document(data)
    results = None
    raw_results = data.get("results")
    if raw_results and not is_draft:
        try:
            results = AssessmentResults.model_validate(raw_results)
        except ValidationError as e:
            # Older exports carry a different results shape; results are
            # recomputed from the response anyway.
            logger.warning(
                "import_results_ignored",
                extra={"team": response.team_info.team_name, "errors": e.error_count()},
            )

    logger.info(
        "assessment_imported",
        extra={
            "team": response.team_info.team_name,
            "draft": is_draft,
            "answered": sum(1 for s in response.scores.values() if s.answered),
        },
    )

    return ImportedAssessment(
        response=response,
        results=results,
        is_draft=is_draft,
        exported_at=data.get("exportedAt"),
    )


def load_import_file(
    path: Union[str, Path],
    framework: Framework = FRAMEWORK,
) -> ImportedAssessment:
    """Read and parse an export document from disk."""
    file_path = Path(path)
    if file_path.suffix.lower() != ".json":
        raise ImportValidationException("Please select a JSON file")
    try:
        raw = file_path.read_bytes()
    except OSError as e:
        raise ImportValidationException(
            f"Failed to read {file_path}", details={"error": str(e)}
        ) from e
    return parse_import(raw, framework=framework)
