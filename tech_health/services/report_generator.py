"""
Report Generator Service
tech_health/services/report_generator.py

Display helpers and a markdown summary of one scored assessment. Consumes
AssessmentResults read-only.
"""

import logging
from datetime import datetime
from typing import List

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.framework import Framework
from tech_health.models.response import AssessmentResponse
from tech_health.models.results import AssessmentResults
from tech_health.scoring.compass_calculator import describe_compass
from tech_health.scoring.maturity import describe_maturity
from tech_health.scoring.pulse_calculator import PulseCalculator
from tech_health.scoring.recommendation_engine import EXCELLENT_HEALTH_MESSAGE

logger = logging.getLogger(__name__)

PRIORITY_BADGE = {
    "high": "HIGH",
    "medium": "MEDIUM",
    "low": "LOW",
}


def score_band(score: float) -> str:
    """Coarse band for a 0-4 score, used to colour or label values."""
    if score < 2: return "low"
    if score < 3: return "medium"
    if score < 3.5: return "good"
    return "excellent"


def format_date(iso_string: str) -> str:
    """
    Format an ISO date or timestamp for display.

    Examples:
        >>> format_date("2025-10-24")
        'October 24, 2025'
    """
    if not iso_string:
        return ""
    try:
        parsed = datetime.fromisoformat(iso_string.replace("Z", "+00:00"))
    except ValueError:
        return iso_string
    return f"{parsed.strftime('%B')} {parsed.day}, {parsed.year}"


def _bar(score: float, width: int = 20) -> str:
    filled = int(round(score / 4 * width))
    return "#" * filled + "." * (width - filled)


# =====================================================================
# Single Assessment Report
# =====================================================================

def generate_assessment_report(
    response: AssessmentResponse,
    results: AssessmentResults,
    framework: Framework = FRAMEWORK,
    bar_width: int = 20,
) -> str:
    """Generate a markdown report for one scored assessment."""

    team = response.team_info
    maturity = describe_maturity(results.maturity_level)
    compass = describe_compass(results.compass.interpretation)

    lines: List[str] = []
    lines.append(f"# Tech Health Assessment — {team.team_name or 'Unnamed team'}")
    lines.append("")
    meta = f"> Date: {format_date(team.date) or '—'}"
    if team.participants:
        meta += f" | Participants: {', '.join(team.participants)}"
    if team.criticality:
        meta += f" | Criticality: {team.criticality}"
    lines.append(meta)
    lines.append("")
    lines.append("---")
    lines.append("")

    # ── Overall ──
    lines.append("## Overall")
    lines.append("")
    lines.append(f"**{results.overall:.2f} / 4** — {maturity.label}")
    lines.append("")
    lines.append(maturity.description)
    lines.append("")
    lines.append(f"Recommended action: {maturity.action}")
    lines.append("")

    # ── Areas ──
    lines.append("## Areas")
    lines.append("")
    lines.append("| Area | Average | Answered | Band | |")
    lines.append("|:---|---:|---:|:---|:---|")
    for area in results.area_scores:
        total = len(area.sub_axis_scores)
        lines.append(
            f"| {area.area_title} | {area.average_score:.2f} | "
            f"{area.answered_count}/{total} | {score_band(area.average_score)} | "
            f"`{_bar(area.average_score, bar_width)}` |"
        )
    lines.append("")

    # ── Compass ──
    lines.append("## Speed vs. Sustainability")
    lines.append("")
    lines.append(
        f"Speed **{results.compass.speed}** | "
        f"Sustainability **{results.compass.sustainability}** | "
        f"{compass.emoji} {compass.label}"
    )
    lines.append("")
    lines.append(compass.description)
    lines.append("")
    lines.append(f"Recommended action: {compass.action}")
    lines.append("")

    # ── Pulse ──
    lines.append("## Pulse Survey")
    lines.append("")
    lines.append(f"Average: **{results.pulse_average:.1f} / 10**")
    texts = PulseCalculator().calculate(framework, response).text_answers
    for answer in texts:
        question = framework.get_pulse_question(answer.question_id)
        lines.append("")
        lines.append(f"*{question.question}*")
        lines.append(f"> {answer.text}")
    lines.append("")

    # ── Recommendations ──
    lines.append("## Recommendations")
    lines.append("")
    if not results.recommendations:
        lines.append(EXCELLENT_HEALTH_MESSAGE)
    for i, rec in enumerate(results.recommendations, start=1):
        lines.append(f"{i}. **[{PRIORITY_BADGE[rec.priority.value]}] {rec.area_title}** — {rec.issue}")
        lines.append(f"   - Action: {rec.action}")
        lines.append(f"   - Impact: {rec.impact}")
    lines.append("")

    lines.append("---")
    lines.append(f"*Completed at {results.completed_at.isoformat()}*")

    logger.info(
        "report_generated",
        extra={"team": team.team_name, "recommendations": len(results.recommendations)},
    )
    return "\n".join(lines)
