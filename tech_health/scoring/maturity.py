"""
Maturity Classification
tech_health/scoring/maturity.py

Step function from the overall score (0-4) to a coarse maturity level:

    overall < 2.0          → unstable
    2.0 ≤ overall < 3.0    → emerging
    3.0 ≤ overall < 3.5    → defined
    overall ≥ 3.5          → optimized

Each level maps to fixed display metadata (label, description, action).
"""

from dataclasses import dataclass
from typing import Dict, Union
from decimal import Decimal

from tech_health.models.enumerations import MaturityLevel

EMERGING_THRESHOLD = Decimal("2.0")
DEFINED_THRESHOLD = Decimal("3.0")
OPTIMIZED_THRESHOLD = Decimal("3.5")


@dataclass(frozen=True)
class MaturityDescription:
    label: str
    description: str
    action: str


MATURITY_DESCRIPTIONS: Dict[MaturityLevel, MaturityDescription] = {
    MaturityLevel.UNSTABLE: MaturityDescription(
        label="Unstable, reactive",
        description="Your team is in reactive mode with significant technical challenges.",
        action="Create recovery plan; add to Tech Big Rocks.",
    ),
    MaturityLevel.EMERGING: MaturityDescription(
        label="Emerging discipline",
        description=(
            "Your team has started building good practices "
            "but they're not yet consistent."
        ),
        action="Prioritize automation & documentation.",
    ),
    MaturityLevel.DEFINED: MaturityDescription(
        label="Stable baseline",
        description=(
            "Your team has established solid processes and metrics "
            "for critical flows."
        ),
        action="Sustain & optimize critical paths.",
    ),
    MaturityLevel.OPTIMIZED: MaturityDescription(
        label="Optimized, data-driven",
        description=(
            "Your team operates with excellent automation, measurement, "
            "and continuous improvement."
        ),
        action="Share practices; help mentor others.",
    ),
}


def classify_maturity(overall: Union[float, Decimal]) -> MaturityLevel:
    """Classify an overall score into a MaturityLevel."""
    score = Decimal(str(overall))
    if score < EMERGING_THRESHOLD:
        return MaturityLevel.UNSTABLE
    if score < DEFINED_THRESHOLD:
        return MaturityLevel.EMERGING
    if score < OPTIMIZED_THRESHOLD:
        return MaturityLevel.DEFINED
    return MaturityLevel.OPTIMIZED


def describe_maturity(level: MaturityLevel) -> MaturityDescription:
    return MATURITY_DESCRIPTIONS[level]
