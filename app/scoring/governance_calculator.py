"""
scoring/governance_calculator.py

Governance pillar score.

Formula:
    G = clamp( 0.25 × higher(board_independence%, 0, 100)
             + 0.20 × (100 if audit_committee else 0)
             + 0.20 × (100 if anti_corruption_policy else 0)
             + 0.20 × lower(executive_pay_ratio, 1, 500)
             + 0.15 × higher(shareholder_rights, 0, 10) )

A lower pay ratio is treated as more equitable.
"""

from dataclasses import dataclass

import structlog

from app.models.esg import GovernanceInput
from app.scoring.constants import DEFAULT_SCORING_CONFIG, ScoringConfig
from app.scoring.utils import SCORE_MAX, SCORE_MIN, clamp_score, score_higher, score_lower, weighted_sum

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class GovernanceResult:
    """Output of GovernanceCalculator.calculate()."""
    score: float
    board_independence: float
    audit_committee: float
    anti_corruption: float
    executive_pay_ratio: float
    shareholder_rights: float


def flag_score(flag: bool) -> float:
    return SCORE_MAX if flag else SCORE_MIN


class GovernanceCalculator:
    """Calculate the governance pillar score."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config

    def calculate(self, governance: GovernanceInput) -> GovernanceResult:
        bench = self.config.benchmarks.governance
        weights = self.config.governance_weights

        board = score_higher(governance.board_independence_percent, bench.board_independence)
        audit = flag_score(governance.audit_committee)
        corruption = flag_score(governance.anti_corruption_policy)
        pay_ratio = score_lower(governance.executive_pay_ratio, bench.executive_pay_ratio)
        rights = score_higher(governance.shareholder_rights_score, bench.shareholder_rights)

        score = clamp_score(weighted_sum([
            (board, weights.board_independence),
            (audit, weights.audit_committee),
            (corruption, weights.anti_corruption),
            (pay_ratio, weights.executive_pay_ratio),
            (rights, weights.shareholder_rights),
        ]))

        logger.debug(
            "governance_calculated",
            audit_committee=governance.audit_committee,
            anti_corruption_policy=governance.anti_corruption_policy,
            governance_score=score,
        )

        return GovernanceResult(
            score=score,
            board_independence=board,
            audit_committee=audit,
            anti_corruption=corruption,
            executive_pay_ratio=pay_ratio,
            shareholder_rights=rights,
        )
