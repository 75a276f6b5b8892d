# tests/test_models.py

"""
Model Validation Tests - Framework catalogue, responses and results
"""

import copy

import pytest
from pydantic import ValidationError

from tech_health.core.exceptions import FrameworkDefinitionError
from tech_health.models.enumerations import (
    CompassInterpretation,
    ExportStatus,
    MaturityLevel,
    Priority,
    PulseKind,
)
from tech_health.models.framework import Framework, PulseQuestion
from tech_health.models.response import AssessmentResponse, SubAxisScore, TeamInfo


# ENUMERATION TESTS


class TestEnumerations:
    """Tests for enumeration values used in the JSON documents."""

    def test_maturity_levels(self):
        expected = ["unstable", "emerging", "defined", "optimized"]
        assert [m.value for m in MaturityLevel] == expected

    def test_priorities(self):
        assert [p.value for p in Priority] == ["high", "medium", "low"]

    def test_compass_interpretations(self):
        expected = ["balanced", "speed-heavy", "sustainability-heavy"]
        assert [c.value for c in CompassInterpretation] == expected

    def test_export_status(self):
        assert ExportStatus.IN_PROGRESS.value == "in-progress"


# CATALOGUE TESTS


class TestFrameworkCatalogue:
    """Tests for the built-in framework."""

    def test_area_count(self, framework):
        assert len(framework.areas) == 5

    def test_area_order(self, framework):
        expected = [
            "tech-debt", "testing-automation", "observability-stability",
            "delivery-dora", "governance-knowledge",
        ]
        assert [a.id for a in framework.areas] == expected

    def test_sub_axis_count(self, framework):
        assert framework.sub_axis_count == 25
        assert all(len(a.sub_axes) == 5 for a in framework.areas)

    def test_every_sub_axis_has_four_levels(self, framework):
        for _, sub_axis in framework.iter_sub_axes():
            assert [lvl.level for lvl in sub_axis.levels] == [1, 2, 3, 4]

    def test_pulse_survey(self, framework):
        assert len(framework.pulse_survey) == 6
        numeric = [q for q in framework.pulse_survey if q.kind == PulseKind.NUMERIC]
        assert len(numeric) == 5
        assert all(q.min_value == 0 and q.max_value == 10 for q in numeric)

    def test_ids_are_unique(self, framework):
        ids = [a.id for a in framework.areas]
        ids += [s.id for _, s in framework.iter_sub_axes()]
        ids += [q.id for q in framework.pulse_survey]
        assert len(ids) == len(set(ids))

    def test_lookups(self, framework):
        assert framework.get_area("delivery-dora").title == "Delivery Performance (DORA)"
        assert framework.get_sub_axis("code-quality").title == "Code Quality Debt"
        assert framework.get_pulse_question("pulse-improvement").kind == PulseKind.FREE_TEXT
        assert framework.get_area("nope") is None
        assert framework.get_sub_axis("nope") is None

    def test_sub_axis_get_level(self, framework):
        sub_axis = framework.get_sub_axis("unit-testing")
        assert sub_axis.get_level(3).level == 3
        assert sub_axis.get_level(7) is None

    def test_framework_is_frozen(self, framework):
        with pytest.raises(ValidationError):
            framework.areas = ()


class TestFrameworkValidation:
    """Structural invariants raise FrameworkDefinitionError."""

    def test_valid_definition(self, raw_framework):
        fw = Framework.model_validate(raw_framework)
        assert fw.sub_axis_count == 2

    def test_duplicate_sub_axis_id(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        data["areas"][0]["sub_axes"][1]["id"] = "a-1"
        with pytest.raises(FrameworkDefinitionError) as exc:
            Framework.model_validate(data)
        assert exc.value.entity_id == "a-1"

    def test_duplicate_across_kinds(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        data["pulse_survey"][0]["id"] = "area-a"
        with pytest.raises(FrameworkDefinitionError):
            Framework.model_validate(data)

    def test_missing_level(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        data["areas"][0]["sub_axes"][0]["levels"] = data["areas"][0]["sub_axes"][0]["levels"][:3]
        with pytest.raises(FrameworkDefinitionError) as exc:
            Framework.model_validate(data)
        assert exc.value.entity_id == "a-1"

    def test_repeated_level(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        levels = [{"level": n} for n in (1, 2, 2, 4)]
        data["areas"][0]["sub_axes"][0]["levels"] = levels
        with pytest.raises(FrameworkDefinitionError):
            Framework.model_validate(data)

    def test_level_out_of_range_is_a_validation_error(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        data["areas"][0]["sub_axes"][0]["levels"][0]["level"] = 5
        with pytest.raises(ValidationError):
            Framework.model_validate(data)

    def test_pulse_min_must_be_below_max(self, raw_framework):
        data = copy.deepcopy(raw_framework)
        data["pulse_survey"][0]["min"] = 10
        with pytest.raises(FrameworkDefinitionError):
            Framework.model_validate(data)


class TestPulseQuestion:

    def test_aliases(self):
        q = PulseQuestion.model_validate({"id": "q", "question": "?", "min": 1, "max": 5})
        assert q.min_value == 1
        assert q.max_value == 5
        assert q.kind == PulseKind.NUMERIC

    def test_in_bounds(self):
        q = PulseQuestion(id="q", question="?", min_value=0, max_value=10)
        assert q.in_bounds(0)
        assert q.in_bounds(10)
        assert not q.in_bounds(10.5)
        assert not q.in_bounds(-1)


# RESPONSE TESTS


class TestAssessmentResponse:
    """Tests for the mutable response model."""

    def test_camel_case_input(self):
        response = AssessmentResponse.model_validate({
            "teamInfo": {"teamName": "Core", "date": "2025-10-24", "participants": ["A"]},
            "scores": {"code-quality": {"level": 3, "comment": "ok"}},
            "pulseScores": {"pulse-tools": 6},
        })
        assert response.team_info.team_name == "Core"
        assert response.scores["code-quality"].level == 3
        assert response.pulse_scores["pulse-tools"] == 6

    def test_camel_case_dump(self):
        response = AssessmentResponse(team_info=TeamInfo(team_name="Core"))
        dumped = response.model_dump(by_alias=True)
        assert "teamInfo" in dumped
        assert "pulseScores" in dumped
        assert dumped["teamInfo"]["teamName"] == "Core"

    def test_level_above_four_rejected(self):
        with pytest.raises(ValidationError):
            SubAxisScore(level=5)

    def test_negative_level_rejected(self):
        with pytest.raises(ValidationError):
            SubAxisScore(level=-1)

    def test_answered(self):
        assert SubAxisScore(level=2).answered
        assert not SubAxisScore(level=0).answered
        assert not SubAxisScore().answered

    def test_level_for(self):
        response = AssessmentResponse(scores={
            "code-quality": SubAxisScore(level=2),
            "knowledge": SubAxisScore(level=None),
        })
        assert response.level_for("code-quality") == 2
        assert response.level_for("knowledge") == 0
        assert response.level_for("missing") == 0

    def test_empty_defaults_date(self):
        response = AssessmentResponse.empty("Core")
        assert response.team_info.team_name == "Core"
        assert len(response.team_info.date) == 10
        assert response.scores == {}

    def test_with_score_returns_copy(self):
        original = AssessmentResponse.empty("Core", date="2025-10-24")
        updated = original.with_score("code-quality", 3, comment="fine")
        assert original.scores == {}
        assert updated.level_for("code-quality") == 3
        assert updated.scores["code-quality"].comment == "fine"

    def test_with_pulse(self):
        original = AssessmentResponse.empty("Core", date="2025-10-24")
        updated = original.with_pulse("pulse-tools", 7).with_pulse("pulse-improvement", "CI")
        assert original.pulse_scores == {}
        assert updated.pulse_scores == {"pulse-tools": 7, "pulse-improvement": "CI"}

    def test_pulse_values_keep_type(self):
        response = AssessmentResponse(pulse_scores={"a": 7, "b": 7.5, "c": "text", "d": None})
        assert response.pulse_scores["a"] == 7
        assert response.pulse_scores["b"] == 7.5
        assert response.pulse_scores["c"] == "text"
        assert response.pulse_scores["d"] is None

    def test_boolean_pulse_value_not_coerced(self):
        response = AssessmentResponse.model_validate({"pulseScores": {"pulse-release": True}})
        assert response.pulse_scores["pulse-release"] is True
