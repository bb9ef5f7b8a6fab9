"""
Scoring Configuration
app/scoring/constants.py

Immutable constant tables for the ESG scoring engine:
emission factors, normalization benchmarks and weight sets.

All tables are frozen dataclasses bundled into a single ScoringConfig.
The engine receives a ScoringConfig at construction, so a regional
benchmark set can be swapped in without touching calculator logic.

Weight sets (each sums to 1.0):
    environmental  energy_and_fuel 0.35, travel 0.20, water 0.15,
                   waste 0.15, fugitive 0.15
    social         injury_rate 0.25, employee_turnover 0.20,
                   gender_diversity 0.20, training_hours 0.20,
                   community_investment 0.15
    governance     board_independence 0.25, audit_committee 0.20,
                   anti_corruption 0.20, executive_pay_ratio 0.20,
                   shareholder_rights 0.15
    overall        environmental 0.40, social 0.30, governance 0.30
"""

from dataclasses import asdict, dataclass, field, fields, replace
from typing import Any, Dict

WEIGHT_TOLERANCE = 0.001

# Proportional offset improvement ceiling (15% of the base score)
OFFSET_IMPROVEMENT_MAX = 0.15

# Waste impact blend: generation weighted more heavily than recycling
WASTE_GENERATION_WEIGHT = 0.6
WASTE_RECYCLING_WEIGHT = 0.4

# Returned by both normalizers when max <= min
NEUTRAL_SCORE = 50.0


@dataclass(frozen=True)
class EmissionFactors:
    """kg CO2e per unit of fuel / per kWh."""
    diesel: float = 2.68        # per liter
    petrol: float = 2.31        # per liter
    natural_gas: float = 1.88   # per cubic meter
    default_grid: float = 0.5   # per kWh, global average


@dataclass(frozen=True)
class BenchmarkRange:
    """Normalization interval [min, max]."""
    min: float
    max: float

    @property
    def is_degenerate(self) -> bool:
        return self.max <= self.min


@dataclass(frozen=True)
class EmissionBenchmarks:
    fossil_fuel: BenchmarkRange = BenchmarkRange(0, 50000)     # kg CO2e
    electricity: BenchmarkRange = BenchmarkRange(0, 100000)    # kg CO2e
    travel: BenchmarkRange = BenchmarkRange(0, 25000)          # kg CO2e
    fugitive: BenchmarkRange = BenchmarkRange(0, 10000)        # kg CO2e


@dataclass(frozen=True)
class WaterBenchmarks:
    usage: BenchmarkRange = BenchmarkRange(0, 10000)           # m³
    intensity: BenchmarkRange = BenchmarkRange(0, 500)         # m³/unit


@dataclass(frozen=True)
class WasteBenchmarks:
    generated: BenchmarkRange = BenchmarkRange(0, 100000)      # kg


@dataclass(frozen=True)
class SocialBenchmarks:
    employee_turnover: BenchmarkRange = BenchmarkRange(0, 50)      # %
    injury_rate: BenchmarkRange = BenchmarkRange(0, 20)            # per 100 employees
    gender_diversity: BenchmarkRange = BenchmarkRange(0, 100)      # %
    training_hours: BenchmarkRange = BenchmarkRange(0, 80)         # hours/employee
    community_investment: BenchmarkRange = BenchmarkRange(0, 5)    # % of revenue


@dataclass(frozen=True)
class GovernanceBenchmarks:
    board_independence: BenchmarkRange = BenchmarkRange(0, 100)    # %
    executive_pay_ratio: BenchmarkRange = BenchmarkRange(1, 500)   # ratio
    shareholder_rights: BenchmarkRange = BenchmarkRange(0, 10)     # score


@dataclass(frozen=True)
class Benchmarks:
    emissions: EmissionBenchmarks = field(default_factory=EmissionBenchmarks)
    water: WaterBenchmarks = field(default_factory=WaterBenchmarks)
    waste: WasteBenchmarks = field(default_factory=WasteBenchmarks)
    social: SocialBenchmarks = field(default_factory=SocialBenchmarks)
    governance: GovernanceBenchmarks = field(default_factory=GovernanceBenchmarks)


class _WeightSet:
    """Mixin for frozen weight dataclasses."""

    def total(self) -> float:
        return sum(getattr(self, f.name) for f in fields(self))

    def is_valid(self) -> bool:
        return abs(self.total() - 1.0) <= WEIGHT_TOLERANCE


@dataclass(frozen=True)
class EnvironmentalWeights(_WeightSet):
    energy_and_fuel: float = 0.35
    travel: float = 0.20
    water: float = 0.15
    waste: float = 0.15
    fugitive: float = 0.15


@dataclass(frozen=True)
class SocialWeights(_WeightSet):
    injury_rate: float = 0.25
    employee_turnover: float = 0.20
    gender_diversity: float = 0.20
    training_hours: float = 0.20
    community_investment: float = 0.15


@dataclass(frozen=True)
class GovernanceWeights(_WeightSet):
    board_independence: float = 0.25
    audit_committee: float = 0.20
    anti_corruption: float = 0.20
    executive_pay_ratio: float = 0.20
    shareholder_rights: float = 0.15


@dataclass(frozen=True)
class OverallWeights(_WeightSet):
    environmental: float = 0.40
    social: float = 0.30
    governance: float = 0.30


@dataclass(frozen=True)
class ScoringConfig:
    """Everything the engine reads. Never mutated after construction."""
    emission_factors: EmissionFactors = field(default_factory=EmissionFactors)
    benchmarks: Benchmarks = field(default_factory=Benchmarks)
    environmental_weights: EnvironmentalWeights = field(default_factory=EnvironmentalWeights)
    social_weights: SocialWeights = field(default_factory=SocialWeights)
    governance_weights: GovernanceWeights = field(default_factory=GovernanceWeights)
    overall_weights: OverallWeights = field(default_factory=OverallWeights)
    # When True, a supplied grid factor of 0 falls back to the default (legacy behaviour)
    zero_grid_factor_uses_default: bool = False

    def validate(self) -> "ScoringConfig":
        """Raise ValueError if any weight set does not sum to 1.0."""
        for name in (
            "environmental_weights",
            "social_weights",
            "governance_weights",
            "overall_weights",
        ):
            weight_set = getattr(self, name)
            if not weight_set.is_valid():
                raise ValueError(
                    f"{name} must sum to 1.0, got {weight_set.total():.4f}"
                )
        return self

    def with_overrides(self, **changes: Any) -> "ScoringConfig":
        """Return a validated copy with top-level fields replaced."""
        return replace(self, **changes).validate()

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


DEFAULT_SCORING_CONFIG = ScoringConfig().validate()
