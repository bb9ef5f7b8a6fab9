"""
scoring/social_calculator.py

Social pillar score.

Formula:
    S = clamp( 0.20 × lower(turnover%, 0, 50)
             + 0.25 × lower(injury_rate, 0, 20)
             + 0.20 × higher(gender_diversity%, 0, 100)
             + 0.20 × higher(training_hours, 0, 80)
             + 0.15 × higher(community_investment%, 0, 5) )
"""

from dataclasses import dataclass

import structlog

from app.models.esg import SocialInput
from app.scoring.constants import DEFAULT_SCORING_CONFIG, ScoringConfig
from app.scoring.utils import clamp_score, score_higher, score_lower, weighted_sum

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class SocialResult:
    """Output of SocialCalculator.calculate()."""
    score: float
    employee_turnover: float
    injury_rate: float
    gender_diversity: float
    training_hours: float
    community_investment: float


class SocialCalculator:
    """Calculate the social pillar score."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config

    def calculate(self, social: SocialInput) -> SocialResult:
        bench = self.config.benchmarks.social
        weights = self.config.social_weights

        turnover = score_lower(social.employee_turnover_percent, bench.employee_turnover)
        injury = score_lower(social.injury_rate, bench.injury_rate)
        diversity = score_higher(social.gender_diversity_percent, bench.gender_diversity)
        training = score_higher(social.training_hours_per_employee, bench.training_hours)
        community = score_higher(social.community_investment_percent, bench.community_investment)

        score = clamp_score(weighted_sum([
            (turnover, weights.employee_turnover),
            (injury, weights.injury_rate),
            (diversity, weights.gender_diversity),
            (training, weights.training_hours),
            (community, weights.community_investment),
        ]))

        logger.debug("social_calculated", social_score=score)

        return SocialResult(
            score=score,
            employee_turnover=turnover,
            injury_rate=injury,
            gender_diversity=diversity,
            training_hours=training,
            community_investment=community,
        )
