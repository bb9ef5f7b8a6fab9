"""
scoring/esg_calculator.py

Composite ESG score from the three pillar calculators.

Formula:
    Overall = E × 0.40 + S × 0.30 + G × 0.30

E, S, G and Overall are each clamped to [0, 100] and rounded to 2 decimal
places (half away from zero). Overall is computed from the unrounded
pillar scores.

The calculator is stateless apart from its immutable ScoringConfig, so one
instance can be shared across concurrent requests.
"""

import structlog

from app.models.esg import ESGInput, ESGScores
from app.scoring.constants import DEFAULT_SCORING_CONFIG, ScoringConfig
from app.scoring.environmental_calculator import EnvironmentalCalculator
from app.scoring.governance_calculator import GovernanceCalculator
from app.scoring.social_calculator import SocialCalculator
from app.scoring.utils import clamp_score, round_score, weighted_sum

logger = structlog.get_logger(__name__)


class ESGCalculator:
    """Compute the four ESG scores for one submission."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config.validate()
        self.environmental = EnvironmentalCalculator(self.config)
        self.social = SocialCalculator(self.config)
        self.governance = GovernanceCalculator(self.config)

    def compute_scores(self, esg_input: ESGInput) -> ESGScores:
        """
        Args:
            esg_input: A complete submission (all nine sections present).

        Returns:
            ESGScores with environmental/social/governance/overall scores in
            [0, 100] rounded to 2 places, plus the environmental calculations.
        """
        env = self.environmental.calculate(esg_input)
        social = self.social.calculate(esg_input.social)
        governance = self.governance.calculate(esg_input.governance)

        weights = self.config.overall_weights
        overall = weighted_sum([
            (env.score, weights.environmental),
            (social.score, weights.social),
            (governance.score, weights.governance),
        ])

        scores = ESGScores(
            environmental_score=round_score(clamp_score(env.score)),
            social_score=round_score(clamp_score(social.score)),
            governance_score=round_score(clamp_score(governance.score)),
            overall_esg_score=round_score(clamp_score(overall)),
            environmental_calculations=env.calculations,
        )

        logger.info(
            "esg_calculated",
            environmental_score=scores.environmental_score,
            social_score=scores.social_score,
            governance_score=scores.governance_score,
            overall_esg_score=scores.overall_esg_score,
            total_emissions=env.calculations.total_emissions,
            net_emissions=env.calculations.net_emissions,
        )

        return scores


_default_calculator = ESGCalculator()


def compute_scores(esg_input: ESGInput) -> ESGScores:
    """Score a submission with the built-in constant tables."""
    return _default_calculator.compute_scores(esg_input)
