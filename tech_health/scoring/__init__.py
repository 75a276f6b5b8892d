"""
scoring/ - Tech Health scoring engine

Pure functions and calculators; no I/O, no shared mutable state.

Modules:
    utils.py                  - Decimal utilities (mean, weighted mean, half-up rounding)
    area_calculator.py        - Area averages + answered-count weighted overall
    maturity.py               - Overall score → maturity level (+ narrative table)
    pulse_calculator.py       - Pulse answers → tagged variants → numeric average
    compass_calculator.py     - Speed vs. sustainability compass (+ narrative table)
    recommendation_engine.py  - Ranked, capped improvement recommendations
    assessment_scorer.py      - Full pipeline: response → results
"""

from tech_health.scoring.assessment_scorer import AssessmentScorer, calculate_results

__all__ = ["AssessmentScorer", "calculate_results"]
