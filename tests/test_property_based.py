# tests/test_property_based.py
"""
Property-Based Tests - scoring engine invariants

Hypothesis draws arbitrary partial responses (any subset of sub-axes at
levels 0-4, any subset of numeric pulse answers in range, optional free
text, unknown ids) and checks:
  - bounds of overall, pulse average, compass and recommendation count
  - determinism
  - export / import round trip
  - completion never exceeds 100
"""

from datetime import datetime, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from tech_health.data.framework_catalogue import FRAMEWORK
from tech_health.models.enumerations import PulseKind
from tech_health.models.response import AssessmentResponse, SubAxisScore, TeamInfo
from tech_health.scoring import calculate_results
from tech_health.scoring.maturity import classify_maturity
from tech_health.services.completion import completion_percentage
from tech_health.services.export_service import build_export, export_to_json
from tech_health.services.import_service import parse_import

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------

SUB_AXIS_IDS = [s.id for _, s in FRAMEWORK.iter_sub_axes()]
NUMERIC_PULSE_IDS = [q.id for q in FRAMEWORK.pulse_survey if q.kind == PulseKind.NUMERIC]
NOW = datetime(2025, 10, 24, tzinfo=timezone.utc)

level_st = st.integers(min_value=0, max_value=4)
pulse_value_st = st.one_of(
    st.integers(min_value=0, max_value=10),
    st.floats(min_value=0.0, max_value=10.0, allow_nan=False, allow_infinity=False),
)


@st.composite
def response_st(draw):
    """Draw a random, possibly partial, AssessmentResponse."""
    scores = draw(st.dictionaries(st.sampled_from(SUB_AXIS_IDS), level_st, max_size=25))
    unknown = draw(st.dictionaries(st.sampled_from(["legacy-a", "legacy-b"]), level_st, max_size=2))
    scores.update(unknown)

    pulse = draw(st.dictionaries(st.sampled_from(NUMERIC_PULSE_IDS), pulse_value_st, max_size=5))
    text = draw(st.one_of(st.none(), st.text(max_size=40)))
    if text is not None:
        pulse["pulse-improvement"] = text

    return AssessmentResponse(
        team_info=TeamInfo(team_name=draw(st.text(min_size=1, max_size=20).filter(str.strip))),
        scores={k: SubAxisScore(level=v) for k, v in scores.items()},
        pulse_scores=pulse,
    )


class TestScoringPropertyBased:

    @given(response_st())
    @settings(max_examples=200)
    def test_results_bounded(self, response):
        """overall in [0, 4], pulse in [0, 10], compass in [0, 100], at most 10 recommendations."""
        results = calculate_results(response, now=NOW)
        assert 0 <= results.overall <= 4
        assert 0 <= results.pulse_average <= 10
        assert 0 <= results.compass.speed <= 100
        assert 0 <= results.compass.sustainability <= 100
        assert len(results.recommendations) <= 10
        for area in results.area_scores:
            assert 0 <= area.average_score <= 4
            assert 0 <= area.answered_count <= len(area.sub_axis_scores)

    @given(response_st())
    @settings(max_examples=200)
    def test_deterministic(self, response):
        """Scoring the same response twice yields identical results."""
        assert calculate_results(response, now=NOW) == calculate_results(response, now=NOW)

    @given(response_st())
    @settings(max_examples=200)
    def test_maturity_consistent_with_overall(self, response):
        results = calculate_results(response, now=NOW)
        assert results.maturity_level == classify_maturity(results.overall)

    @given(response_st())
    @settings(max_examples=200)
    def test_one_sub_axis_recommendation_per_area(self, response):
        results = calculate_results(response, now=NOW)
        flagged = [r.area_id for r in results.recommendations if r.sub_axis_id is not None]
        assert len(flagged) == len(set(flagged))

    @given(response_st())
    @settings(max_examples=100)
    def test_round_trip(self, response):
        """Export then import reconstructs an equivalent response."""
        results = calculate_results(response, now=NOW)
        imported = parse_import(export_to_json(build_export(response, results)))
        assert imported.response.model_dump() == response.model_dump()

    @given(response_st())
    @settings(max_examples=200)
    def test_completion_bounded(self, response):
        assert 0 <= completion_percentage(response) <= 100
