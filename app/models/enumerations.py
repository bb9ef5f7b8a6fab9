from enum import Enum


class ESGSection(str, Enum):
    FOSSIL_FUEL = "fossilFuel"
    FUGITIVE = "fugitive"
    ELECTRICITY = "electricity"
    WATER = "water"
    WASTE = "waste"
    TRAVEL = "travel"
    OFFSETS = "offsets"
    SOCIAL = "social"
    GOVERNANCE = "governance"


class ScoreRating(str, Enum):
    EXCELLENT = "Excellent"                  # >= 80
    GOOD = "Good"                            # >= 60
    FAIR = "Fair"                            # >= 40
    NEEDS_IMPROVEMENT = "Needs Improvement"  # < 40


class StorageBackend(str, Enum):
    MEMORY = "memory"
    SNOWFLAKE = "snowflake"


def rate_score(score: float) -> ScoreRating:
    """Map a 0-100 score onto its rating band."""
    if score >= 80:
        return ScoreRating.EXCELLENT
    if score >= 60:
        return ScoreRating.GOOD
    if score >= 40:
        return ScoreRating.FAIR
    return ScoreRating.NEEDS_IMPROVEMENT
