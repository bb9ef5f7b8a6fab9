"""
Normalization Utilities
app/scoring/utils.py

Pure mapping functions shared by every ESG calculator:
raw metric + benchmark range -> 0-100 "goodness" score.
"""

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Iterable, Tuple

from app.scoring.constants import NEUTRAL_SCORE, BenchmarkRange

SCORE_MIN = 0.0
SCORE_MAX = 100.0


def clamp_score(value: float) -> float:
    """
    Clamp to [0, 100].

    Non-finite input (NaN, ±inf) maps to 0 so a bad intermediate value
    can never leak into a returned score.
    """
    if value is None or not math.isfinite(value):
        return SCORE_MIN
    return max(SCORE_MIN, min(SCORE_MAX, float(value)))


def normalize_higher_is_better(value: float, min_val: float, max_val: float) -> float:
    """
    Map value onto [0, 100] where larger raw values are better.

    Formula: (value - min) / (max - min) × 100
    Returns 50 for a degenerate range (max <= min).
    """
    if max_val <= min_val:
        return NEUTRAL_SCORE
    if value <= min_val:
        return SCORE_MIN
    if value >= max_val:
        return SCORE_MAX
    return clamp_score((value - min_val) / (max_val - min_val) * 100)


def normalize_lower_is_better(value: float, min_val: float, max_val: float) -> float:
    """
    Map value onto [0, 100] where smaller raw values are better.

    Formula: (max - value) / (max - min) × 100
    Returns 50 for a degenerate range (max <= min).
    """
    if max_val <= min_val:
        return NEUTRAL_SCORE
    if value <= min_val:
        return SCORE_MAX
    if value >= max_val:
        return SCORE_MIN
    return clamp_score((max_val - value) / (max_val - min_val) * 100)


def score_higher(value: float, benchmark: BenchmarkRange) -> float:
    return normalize_higher_is_better(value, benchmark.min, benchmark.max)


def score_lower(value: float, benchmark: BenchmarkRange) -> float:
    return normalize_lower_is_better(value, benchmark.min, benchmark.max)


def weighted_sum(terms: Iterable[Tuple[float, float]]) -> float:
    """Σ(score_i × weight_i) over (score, weight) pairs."""
    return sum(score * weight for score, weight in terms)


def to_decimal(value: float, places: int = 2) -> Decimal:
    """Convert float to Decimal, rounding half away from zero."""
    return Decimal(str(value)).quantize(
        Decimal(10) ** -places, rounding=ROUND_HALF_UP
    )


def round_score(value: float, places: int = 2) -> float:
    """Round a score for output (half away from zero, 2 places by default)."""
    return float(to_decimal(value, places))
