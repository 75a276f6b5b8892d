"""
Recommendation Engine
tech_health/scoring/recommendation_engine.py

Turns area scores into a ranked, capped list of improvement recommendations.

Algorithm, per area in framework order:
  1. Take answered sub-axes at level 1 or 2 (levels 3 and 4 are never
     flagged), stable-sorted ascending by level so ties keep framework order.
  2. If any exist, emit ONE recommendation for the lowest of them:
     level 1 → high, level 2 → medium.
  3. Independently, if 0 < area average < 2.5, emit an extra high-priority
     area-level recommendation. Both may fire for the same area.
Then stable-sort everything by priority (high, medium, low) and keep the
first 10. An empty list means nothing needs attention; display code shows
EXCELLENT_HEALTH_MESSAGE in that case.
"""

from decimal import Decimal, ROUND_HALF_UP
from typing import Dict, List, Sequence, Tuple

import structlog

from tech_health.models.enumerations import Priority
from tech_health.models.results import AreaScore, Recommendation, SubAxisResult
from tech_health.scoring.utils import to_decimal

logger = structlog.get_logger(__name__)

MAX_RECOMMENDATIONS = 10
LOW_AREA_THRESHOLD = Decimal("2.5")
FLAGGED_LEVELS = (1, 2)
ONE_PLACE = Decimal("0.1")

EXCELLENT_HEALTH_MESSAGE = (
    "Excellent work! Your team shows strong technical health across all areas. "
    "Keep up the great practices and consider sharing your learnings with other teams."
)

# Level 3 is unreachable under FLAGGED_LEVELS; kept so the table is total.
LEVEL_PRIORITY: Dict[int, Priority] = {
    1: Priority.HIGH,
    2: Priority.MEDIUM,
    3: Priority.LOW,
}

PRIORITY_RANK: Dict[Priority, int] = {
    Priority.HIGH: 1,
    Priority.MEDIUM: 2,
    Priority.LOW: 3,
}

DEFAULT_ACTION = "Prioritize improvement in this area"
DEFAULT_IMPACT = "Improves overall technical health"


# ---------------------------------------------------------------------------
# Action table, keyed by (area_id, sub_axis_id)
# ---------------------------------------------------------------------------

SUB_AXIS_ACTIONS: Dict[Tuple[str, str], str] = {
    # ── Tech Debt ─────────────────────────────────────────────────────
    ("tech-debt", "code-quality"):
        "Implement SonarQube in CI pipeline and establish code review standards",
    ("tech-debt", "architecture-domain"):
        "Document bounded contexts and define clear service boundaries",
    ("tech-debt", "infrastructure"):
        "Start infrastructure-as-code initiative with Terraform or similar",
    ("tech-debt", "process-delivery"):
        "Establish release checklist and deployment calendar",
    ("tech-debt", "knowledge"):
        "Create Architecture Decision Record (ADR) template and start documenting key decisions",

    # ── Testing & Automation ──────────────────────────────────────────
    ("testing-automation", "unit-testing"):
        "Set minimum test coverage requirement and add to CI",
    ("testing-automation", "integration-testing"):
        "Implement contract testing between main services",
    ("testing-automation", "e2e-flow"):
        "Automate critical user journeys with Cypress or Playwright",
    ("testing-automation", "pipeline-reliability"):
        "Investigate and fix flaky tests, track CI success rate",
    ("testing-automation", "deployment-automation"):
        "Implement one-click deployment with documented rollback",

    # ── Observability & Stability ─────────────────────────────────────
    ("observability-stability", "monitoring"):
        "Define SLIs and SLOs for critical services",
    ("observability-stability", "alert-hygiene"):
        "Audit alerts, add runbooks, and establish on-call rotation",
    ("observability-stability", "incident-response"):
        "Implement incident management process with clear severity levels",
    ("observability-stability", "logging-tracing"):
        "Centralize logs and add correlation IDs to requests",
    ("observability-stability", "postmortems"):
        "Establish blameless postmortem process for all P1/P2 incidents",

    # ── Delivery Performance (DORA) ───────────────────────────────────
    ("delivery-dora", "deployment-frequency"):
        "Reduce batch size and increase deployment frequency",
    ("delivery-dora", "lead-time"):
        "Identify and remove bottlenecks in deployment pipeline",
    ("delivery-dora", "change-failure-rate"):
        "Invest in test automation and deployment safety checks",
    ("delivery-dora", "mean-time-recovery"):
        "Improve monitoring and practice rollback procedures",
    ("delivery-dora", "rollback-frequency"):
        "Increase test coverage and implement canary deployments",

    # ── Governance & Knowledge ────────────────────────────────────────
    ("governance-knowledge", "adr-discipline"):
        "Require ADRs for all significant technical decisions",
    ("governance-knowledge", "decision-traceability"):
        "Link ADRs to Epics and initiatives in project management tool",
    ("governance-knowledge", "architecture-docs"):
        "Create C4 diagrams for main services and update quarterly",
    ("governance-knowledge", "ownership-clarity"):
        "Document service ownership and on-call responsibilities",
    ("governance-knowledge", "transparency"):
        "Establish regular knowledge sharing sessions across teams",
}

AREA_IMPACTS: Dict[str, str] = {
    "tech-debt": (
        "Reduces technical friction, enables faster feature delivery, "
        "and improves code maintainability"
    ),
    "testing-automation": (
        "Increases deployment confidence, reduces production incidents, "
        "and accelerates feedback loops"
    ),
    "observability-stability": (
        "Enables proactive incident prevention, faster recovery times, "
        "and better user experience"
    ),
    "delivery-dora": (
        "Improves time-to-market, reduces deployment risk, "
        "and enables continuous delivery"
    ),
    "governance-knowledge": (
        "Preserves organizational knowledge, improves decision quality, "
        "and enables team scalability"
    ),
}


def action_for(area_id: str, sub_axis_id: str) -> str:
    return SUB_AXIS_ACTIONS.get((area_id, sub_axis_id), DEFAULT_ACTION)


def impact_for(area_id: str) -> str:
    return AREA_IMPACTS.get(area_id, DEFAULT_IMPACT)


class RecommendationEngine:
    """Generate ranked recommendations from area scores."""

    def __init__(self, limit: int = MAX_RECOMMENDATIONS):
        self.limit = limit

    def generate(self, area_scores: Sequence[AreaScore]) -> List[Recommendation]:
        recommendations: List[Recommendation] = []

        for area in area_scores:
            lowest = self._lowest_flagged(area.sub_axis_scores)
            if lowest is not None:
                recommendations.append(self._sub_axis_recommendation(area, lowest))

            average = to_decimal(area.average_score)
            if Decimal("0") < average < LOW_AREA_THRESHOLD:
                recommendations.append(self._area_recommendation(area, average))

        # sorted() is stable: equal priorities keep area/emission order
        ranked = sorted(recommendations, key=lambda r: PRIORITY_RANK[r.priority])
        top = ranked[: self.limit]

        logger.info(
            "recommendations_generated",
            generated=len(recommendations),
            returned=len(top),
            high=sum(1 for r in top if r.priority == Priority.HIGH),
        )
        return top

    @staticmethod
    def _lowest_flagged(sub_axis_scores: Sequence[SubAxisResult]):
        flagged = [s for s in sub_axis_scores if s.level in FLAGGED_LEVELS]
        if not flagged:
            return None
        return sorted(flagged, key=lambda s: s.level)[0]

    @staticmethod
    def _sub_axis_recommendation(area: AreaScore, sub_axis: SubAxisResult) -> Recommendation:
        return Recommendation(
            priority=LEVEL_PRIORITY[sub_axis.level],
            area_id=area.area_id,
            area_title=area.area_title,
            issue=f"{sub_axis.sub_axis_title} is at Level {sub_axis.level}",
            action=action_for(area.area_id, sub_axis.sub_axis_id),
            impact=impact_for(area.area_id),
            sub_axis_id=sub_axis.sub_axis_id,
        )

    @staticmethod
    def _area_recommendation(area: AreaScore, average: Decimal) -> Recommendation:
        return Recommendation(
            priority=Priority.HIGH,
            area_id=area.area_id,
            area_title=area.area_title,
            issue=f"Overall {area.area_title} score is {average.quantize(ONE_PLACE, rounding=ROUND_HALF_UP)}",
            action=f"Invest in {area.area_title} as a strategic priority this quarter",
            impact=impact_for(area.area_id),
        )


def recommend(area_scores: Sequence[AreaScore]) -> List[Recommendation]:
    return RecommendationEngine().generate(area_scores)
