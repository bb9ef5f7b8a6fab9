# tests/test_property_based.py
"""
Property-Based Tests - ESG scoring engine

Hypothesis tests with max_examples=500, covering:
  - normalization primitives (bounds, mirror, degenerate ranges)
  - offset improvement ceiling
  - ESGCalculator (bounded scores, non-negative net emissions, determinism)
"""

import pytest
from hypothesis import assume, given, settings
from hypothesis import strategies as st

from app.models.esg import ESGInput
from app.scoring.environmental_calculator import EnvironmentalCalculator
from app.scoring.esg_calculator import ESGCalculator
from app.scoring.utils import (
    clamp_score,
    normalize_higher_is_better,
    normalize_lower_is_better,
)

# ---------------------------------------------------------------------------
# Shared strategies
# ---------------------------------------------------------------------------


def finite(min_value, max_value):
    return st.floats(
        min_value=min_value, max_value=max_value, allow_nan=False, allow_infinity=False
    )


quantity_st = finite(0.0, 1e7)
percent_st = finite(0.0, 100.0)
bound_st = finite(-1000.0, 1000.0)
width_st = finite(0.01, 1e5)


@st.composite
def esg_payload_st(draw):
    """Draw a complete, in-range submission payload."""
    return {
        "fossilFuel": {
            "diesel": draw(quantity_st),
            "petrol": draw(quantity_st),
            "naturalGas": draw(quantity_st),
        },
        "fugitive": {
            "refrigerantLeakage": draw(quantity_st),
            "gasLeakage": draw(quantity_st),
        },
        "electricity": {
            "consumption": draw(quantity_st),
            "renewablePercent": draw(percent_st),
            "gridEmissionFactor": draw(st.one_of(st.none(), finite(0.0, 2.0))),
        },
        "water": {"usage": draw(quantity_st), "intensity": draw(quantity_st)},
        "waste": {"generated": draw(quantity_st), "recycledPercent": draw(percent_st)},
        "travel": {"businessTravelEmissions": draw(quantity_st)},
        "offsets": {"carbonOffsets": draw(quantity_st)},
        "social": {
            "employeeTurnoverPercent": draw(percent_st),
            "injuryRate": draw(finite(0.0, 100.0)),
            "genderDiversityPercent": draw(percent_st),
            "trainingHoursPerEmployee": draw(finite(0.0, 500.0)),
            "communityInvestmentPercent": draw(finite(0.0, 50.0)),
        },
        "governance": {
            "boardIndependencePercent": draw(percent_st),
            "auditCommittee": draw(st.booleans()),
            "antiCorruptionPolicy": draw(st.booleans()),
            "executivePayRatio": draw(finite(1.0, 2000.0)),
            "shareholderRightsScore": draw(finite(0.0, 10.0)),
        },
    }


# ---------------------------------------------------------------------------
# Normalization Property Tests
# ---------------------------------------------------------------------------


class TestNormalizationPropertyBased:

    @given(finite(-1e9, 1e9), bound_st, width_st)
    @settings(max_examples=500)
    def test_normalizers_always_bounded(self, value, min_val, width):
        """Both normalizers stay in [0, 100] for any finite value."""
        max_val = min_val + width
        assert 0 <= normalize_higher_is_better(value, min_val, max_val) <= 100
        assert 0 <= normalize_lower_is_better(value, min_val, max_val) <= 100

    @given(bound_st, width_st)
    @settings(max_examples=500)
    def test_endpoints(self, min_val, width):
        """higher(min) == 0, higher(max) == 100 and the reverse for lower."""
        max_val = min_val + width
        assume(max_val > min_val)
        assert normalize_higher_is_better(min_val, min_val, max_val) == 0
        assert normalize_higher_is_better(max_val, min_val, max_val) == 100
        assert normalize_lower_is_better(min_val, min_val, max_val) == 100
        assert normalize_lower_is_better(max_val, min_val, max_val) == 0

    @given(bound_st, width_st, finite(0.0, 1.0))
    @settings(max_examples=500)
    def test_lower_mirrors_higher(self, min_val, width, fraction):
        """lower(v) == 100 - higher(v) for v in [min, max]."""
        max_val = min_val + width
        value = min_val + fraction * width
        assert normalize_lower_is_better(value, min_val, max_val) == pytest.approx(
            100 - normalize_higher_is_better(value, min_val, max_val), abs=1e-6
        )

    @given(finite(-1e9, 1e9), bound_st, finite(0.0, 1e5))
    @settings(max_examples=500)
    def test_degenerate_range_is_fifty(self, value, max_val, gap):
        """max <= min always yields exactly 50."""
        min_val = max_val + gap
        assert normalize_higher_is_better(value, min_val, max_val) == 50
        assert normalize_lower_is_better(value, min_val, max_val) == 50

    @given(finite(-1e9, 1e9), finite(-1e9, 1e9), bound_st, width_st)
    @settings(max_examples=500)
    def test_monotone(self, a, b, min_val, width):
        """higher is non-decreasing and lower non-increasing in value."""
        max_val = min_val + width
        lo, hi = min(a, b), max(a, b)
        assert normalize_higher_is_better(lo, min_val, max_val) <= normalize_higher_is_better(hi, min_val, max_val)
        assert normalize_lower_is_better(lo, min_val, max_val) >= normalize_lower_is_better(hi, min_val, max_val)

    @given(st.floats())
    @settings(max_examples=500)
    def test_clamp_score_bounded(self, value):
        """clamp_score never returns a value outside [0, 100], even for NaN/inf."""
        assert 0 <= clamp_score(value) <= 100


# ---------------------------------------------------------------------------
# Offset Improvement Property Tests
# ---------------------------------------------------------------------------


class TestOffsetPropertyBased:

    @given(finite(0.0, 100.0), finite(0.0, 1.0), finite(0.0, 1e7))
    @settings(max_examples=500)
    def test_improvement_never_exceeds_hundred(self, base, ratio, total):
        improved = EnvironmentalCalculator.apply_offset_improvement(base, ratio * total, total)
        assert improved <= 100

    @given(finite(0.0, 100.0), finite(0.0, 1.0), finite(1.0, 1e7))
    @settings(max_examples=500)
    def test_improvement_never_lowers_score(self, base, ratio, total):
        improved = EnvironmentalCalculator.apply_offset_improvement(base, ratio * total, total)
        assert improved >= base or improved == 100


# ---------------------------------------------------------------------------
# ESG Calculator Property Tests
# ---------------------------------------------------------------------------


class TestESGCalculatorPropertyBased:

    @given(esg_payload_st())
    @settings(max_examples=500)
    def test_scores_always_bounded(self, payload):
        """All four scores are in [0, 100] for any valid submission."""
        scores = ESGCalculator().compute_scores(ESGInput.model_validate(payload))
        for value in (
            scores.environmental_score,
            scores.social_score,
            scores.governance_score,
            scores.overall_esg_score,
        ):
            assert 0 <= value <= 100

    @given(esg_payload_st())
    @settings(max_examples=500)
    def test_net_emissions_non_negative(self, payload):
        """Offsets never push net emissions below zero."""
        calc = ESGCalculator().compute_scores(ESGInput.model_validate(payload)).environmental_calculations
        assert calc.net_emissions >= 0
        assert calc.net_emissions <= calc.total_emissions

    @given(esg_payload_st())
    @settings(max_examples=500)
    def test_scores_have_two_decimals(self, payload):
        scores = ESGCalculator().compute_scores(ESGInput.model_validate(payload))
        assert round(scores.overall_esg_score, 2) == scores.overall_esg_score

    @given(esg_payload_st())
    @settings(max_examples=500)
    def test_deterministic(self, payload):
        """Calling compute_scores() twice with identical input yields identical output."""
        calc = ESGCalculator()
        esg_input = ESGInput.model_validate(payload)
        assert calc.compute_scores(esg_input) == calc.compute_scores(esg_input)
