# tests/test_models.py

"""
Model Validation Tests - Tests for the ESG Pydantic models and enumerations
"""

import pytest
from datetime import datetime, timezone
from pydantic import ValidationError

from app.models.enumerations import ESGSection, ScoreRating, StorageBackend, rate_score
from app.models.esg import (
    ElectricityInput,
    ESGInput,
    ESGRecord,
    GovernanceInput,
    SubmitResponse,
)
from tests.payloads import build_payload


# ENUMERATION TESTS


class TestESGSectionEnum:

    def test_all_sections_exist(self):
        expected = [
            "fossilFuel", "fugitive", "electricity", "water", "waste",
            "travel", "offsets", "social", "governance",
        ]
        assert [s.value for s in ESGSection] == expected

    def test_sections_match_input_aliases(self):
        aliases = [field.alias for field in ESGInput.model_fields.values()]
        assert aliases == [s.value for s in ESGSection]


class TestScoreRating:

    @pytest.mark.parametrize("score,expected", [
        (100, ScoreRating.EXCELLENT),
        (80, ScoreRating.EXCELLENT),
        (79.99, ScoreRating.GOOD),
        (60, ScoreRating.GOOD),
        (59.99, ScoreRating.FAIR),
        (40, ScoreRating.FAIR),
        (39.99, ScoreRating.NEEDS_IMPROVEMENT),
        (0, ScoreRating.NEEDS_IMPROVEMENT),
    ])
    def test_rating_bands(self, score, expected):
        assert rate_score(score) == expected

    def test_rating_values(self):
        assert ScoreRating.NEEDS_IMPROVEMENT.value == "Needs Improvement"

    def test_storage_backends(self):
        assert {b.value for b in StorageBackend} == {"memory", "snowflake"}


# INPUT MODEL TESTS


class TestESGInput:

    def test_camel_case_payload(self, baseline_payload):
        esg_input = ESGInput.model_validate(baseline_payload)
        assert esg_input.fossil_fuel.diesel == 100
        assert esg_input.electricity.grid_emission_factor == 0.5
        assert esg_input.governance.executive_pay_ratio == 250.5

    def test_dump_by_alias_restores_payload(self, baseline_payload):
        assert ESGInput.model_validate(baseline_payload).model_dump(by_alias=True) == baseline_payload

    def test_snake_case_accepted(self):
        electricity = ElectricityInput(consumption=10, renewable_percent=20)
        assert electricity.renewable_percent == 20
        assert electricity.grid_emission_factor is None

    @pytest.mark.parametrize("section,field,value", [
        ("fossilFuel", "diesel", -1),
        ("electricity", "renewablePercent", 101),
        ("electricity", "gridEmissionFactor", -0.1),
        ("waste", "recycledPercent", -5),
        ("social", "genderDiversityPercent", 150),
        ("governance", "shareholderRightsScore", 11),
        ("governance", "executivePayRatio", 0.5),
    ])
    def test_out_of_range_rejected(self, section, field, value):
        with pytest.raises(ValidationError) as exc_info:
            ESGInput.model_validate(build_payload(**{section: {field: value}}))
        assert exc_info.value.errors()[0]["loc"] == (section, field)

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            ESGInput.model_validate(build_payload(water={"usage": "a lot"}))

    def test_governance_flags_are_booleans(self):
        governance = GovernanceInput(
            board_independence_percent=60,
            audit_committee=True,
            anti_corruption_policy=False,
            executive_pay_ratio=20,
            shareholder_rights_score=7,
        )
        assert governance.audit_committee is True
        assert governance.anti_corruption_policy is False

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    def test_non_finite_rejected(self, value):
        with pytest.raises(ValidationError) as exc_info:
            ESGInput.model_validate(build_payload(fossilFuel={"diesel": value}))
        error = exc_info.value.errors()[0]
        assert error["loc"] == ("fossilFuel", "diesel")
        assert error["type"] == "finite_number"

    @pytest.mark.parametrize("value", [1, "true", "yes"])
    def test_governance_flags_strict(self, value):
        with pytest.raises(ValidationError):
            ESGInput.model_validate(build_payload(governance={"auditCommittee": value}))


# RECORD / RESPONSE MODEL TESTS


class TestESGRecord:

    def test_from_submission(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        created_at = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)

        record = ESGRecord.from_submission("user-1", baseline_input, scores, created_at=created_at)

        assert record.user_id == "user-1"
        assert record.created_at == created_at
        assert record.id is not None
        assert record.to_input().model_dump() == baseline_input.model_dump()
        assert record.to_scores().model_dump() == scores.model_dump()

    def test_trend_point(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        created_at = datetime(2026, 3, 1, 23, 59, tzinfo=timezone.utc)

        point = ESGRecord.from_submission("user-1", baseline_input, scores, created_at).to_trend_point()

        assert point.date == "2026-03-01"
        assert point.environmental == scores.environmental_score
        assert point.social == scores.social_score
        assert point.governance == scores.governance_score
        assert point.overall == scores.overall_esg_score

    def test_empty_user_rejected(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        with pytest.raises(ValidationError):
            ESGRecord.from_submission("", baseline_input, scores)

    def test_serialized_keys_are_camel_case(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        data = ESGRecord.from_submission("user-1", baseline_input, scores).model_dump(by_alias=True)
        for key in ("userId", "createdAt", "overallESGScore", "environmentalCalculations", "fossilFuel"):
            assert key in data
        assert "netEmissions" in data["environmentalCalculations"]


class TestESGScores:

    def test_scores_are_frozen(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        with pytest.raises(ValidationError):
            scores.social_score = 99

    def test_ratings(self, baseline_input, calculator):
        ratings = calculator.compute_scores(baseline_input).ratings()
        assert ratings == {
            "environmental": ScoreRating.EXCELLENT,
            "social": ScoreRating.FAIR,
            "governance": ScoreRating.NEEDS_IMPROVEMENT,
            "overall": ScoreRating.GOOD,
        }

    def test_submit_response_default_message(self, baseline_input, calculator):
        scores = calculator.compute_scores(baseline_input)
        record = ESGRecord.from_submission("user-1", baseline_input, scores)
        response = SubmitResponse(id=record.id, scores=scores, ratings=scores.ratings())
        assert response.message == "ESG data submitted successfully"
        assert response.model_dump(mode="json", by_alias=True)["ratings"]["overall"] == "Good"
