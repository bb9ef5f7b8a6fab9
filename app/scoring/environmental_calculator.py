# app/scoring/environmental_calculator.py
"""
Environmental Calculator
------------------------
Converts raw environmental measurements into emissions (kg CO2e) and a
0-100 environmental pillar score.

Emissions:
    fossil_fuel  = diesel × 2.68 + petrol × 2.31 + natural_gas × 1.88
    electricity  = consumption × grid_factor × (1 - renewable% / 100)
    fugitive     = refrigerant_leakage + gas_leakage
    travel       = business_travel_emissions
    total        = fossil_fuel + electricity + fugitive + travel
    offsets_eff  = min(carbon_offsets, total)
    net          = max(0, total - offsets_eff)

Sub-scores (lower emissions are better):
    energy_and_fuel = lower(fossil_fuel + electricity, 0, 50000 + 100000)
    travel          = lower(travel, 0, 25000)
    fugitive        = lower(fugitive, 0, 10000)
    water           = mean(lower(usage), lower(intensity))
    waste           = 0.6 × lower(generated) + 0.4 × higher(recycled%, 0, 100)

Pillar score:
    base  = Σ sub_score × env_weight
    final = clamp(base + base × (offsets_eff / total) × 0.15)   if total > 0 and offsets_eff > 0
    E     = clamp(final)
"""

from dataclasses import dataclass
from typing import Optional

import structlog

from app.models.esg import (
    ElectricityInput,
    EnvironmentalCalculations,
    ESGInput,
    FossilFuelInput,
    FugitiveInput,
    WasteInput,
    WaterInput,
)
from app.scoring.constants import (
    DEFAULT_SCORING_CONFIG,
    OFFSET_IMPROVEMENT_MAX,
    WASTE_GENERATION_WEIGHT,
    WASTE_RECYCLING_WEIGHT,
    ScoringConfig,
)
from app.scoring.utils import (
    clamp_score,
    normalize_higher_is_better,
    normalize_lower_is_better,
    score_lower,
    weighted_sum,
)

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class EnvironmentalSubScores:
    energy_and_fuel: float
    travel: float
    water: float
    waste: float
    fugitive: float


@dataclass(frozen=True)
class EnvironmentalResult:
    """Output of EnvironmentalCalculator.calculate()."""
    score: float                   # Final E in [0, 100], unrounded
    base_score: float              # Weighted sub-scores before offset improvement
    effective_offsets: float       # min(carbon_offsets, total_emissions)
    offset_ratio: float            # effective_offsets / total_emissions, 0 when total is 0
    sub_scores: EnvironmentalSubScores
    calculations: EnvironmentalCalculations


class EnvironmentalCalculator:
    """Compute emissions and the environmental pillar score."""

    def __init__(self, config: ScoringConfig = DEFAULT_SCORING_CONFIG):
        self.config = config

    # ------------------------------------------------------------------
    # Emissions (kg CO2e, never clamped)
    # ------------------------------------------------------------------

    def fossil_fuel_emissions(self, fossil_fuel: FossilFuelInput) -> float:
        factors = self.config.emission_factors
        return (
            fossil_fuel.diesel * factors.diesel
            + fossil_fuel.petrol * factors.petrol
            + fossil_fuel.natural_gas * factors.natural_gas
        )

    def grid_factor(self, electricity: ElectricityInput) -> float:
        """Supplied grid factor, or the default when none was given."""
        supplied: Optional[float] = electricity.grid_emission_factor
        if supplied is None:
            return self.config.emission_factors.default_grid
        if supplied == 0 and self.config.zero_grid_factor_uses_default:
            return self.config.emission_factors.default_grid
        return supplied

    def electricity_emissions(self, electricity: ElectricityInput) -> float:
        renewable_factor = 1 - electricity.renewable_percent / 100
        return electricity.consumption * self.grid_factor(electricity) * renewable_factor

    @staticmethod
    def fugitive_emissions(fugitive: FugitiveInput) -> float:
        return fugitive.refrigerant_leakage + fugitive.gas_leakage

    # ------------------------------------------------------------------
    # Impact scores (0-100)
    # ------------------------------------------------------------------

    def water_impact(self, water: WaterInput) -> float:
        bench = self.config.benchmarks.water
        usage_score = score_lower(water.usage, bench.usage)
        intensity_score = score_lower(water.intensity, bench.intensity)
        return (usage_score + intensity_score) / 2

    def waste_impact(self, waste: WasteInput) -> float:
        generation_score = score_lower(waste.generated, self.config.benchmarks.waste.generated)
        recycling_score = normalize_higher_is_better(waste.recycled_percent, 0, 100)
        return (
            generation_score * WASTE_GENERATION_WEIGHT
            + recycling_score * WASTE_RECYCLING_WEIGHT
        )

    def energy_and_fuel_score(self, fossil_fuel_emissions: float, electricity_emissions: float) -> float:
        # Both categories share one range: fossil min .. fossil max + electricity max
        bench = self.config.benchmarks.emissions
        return normalize_lower_is_better(
            fossil_fuel_emissions + electricity_emissions,
            bench.fossil_fuel.min,
            bench.fossil_fuel.max + bench.electricity.max,
        )

    @staticmethod
    def apply_offset_improvement(base_score: float, effective_offsets: float, total_emissions: float) -> float:
        """
        Scale base_score up by at most 15%, proportional to the offset ratio.

        Formula: clamp(base + base × (offsets / total) × 0.15)
        No improvement when there are no emissions or no offsets.
        A non-finite emissions total yields 0.
        """
        if total_emissions <= 0 or effective_offsets <= 0:
            return base_score
        offset_ratio = effective_offsets / total_emissions
        return clamp_score(base_score + base_score * offset_ratio * OFFSET_IMPROVEMENT_MAX)

    # ------------------------------------------------------------------
    # Pillar
    # ------------------------------------------------------------------

    def calculate(self, esg_input: ESGInput) -> EnvironmentalResult:
        """
        Args:
            esg_input: Validated submission; only environmental sections are read.

        Returns:
            EnvironmentalResult with the unrounded pillar score and the
            derived environmental calculations.
        """
        fossil_fuel = self.fossil_fuel_emissions(esg_input.fossil_fuel)
        electricity = self.electricity_emissions(esg_input.electricity)
        fugitive = self.fugitive_emissions(esg_input.fugitive)
        travel = esg_input.travel.business_travel_emissions

        total = fossil_fuel + electricity + fugitive + travel
        effective_offsets = min(esg_input.offsets.carbon_offsets, total)
        net = max(0.0, total - effective_offsets)

        bench = self.config.benchmarks.emissions
        sub_scores = EnvironmentalSubScores(
            energy_and_fuel=self.energy_and_fuel_score(fossil_fuel, electricity),
            travel=score_lower(travel, bench.travel),
            water=self.water_impact(esg_input.water),
            waste=self.waste_impact(esg_input.waste),
            fugitive=score_lower(fugitive, bench.fugitive),
        )

        weights = self.config.environmental_weights
        base_score = weighted_sum([
            (sub_scores.energy_and_fuel, weights.energy_and_fuel),
            (sub_scores.travel, weights.travel),
            (sub_scores.water, weights.water),
            (sub_scores.waste, weights.waste),
            (sub_scores.fugitive, weights.fugitive),
        ])

        improved = self.apply_offset_improvement(base_score, effective_offsets, total)
        score = clamp_score(improved)
        offset_ratio = effective_offsets / total if total > 0 else 0.0

        calculations = EnvironmentalCalculations(
            fossil_fuel_emissions=fossil_fuel,
            electricity_emissions=electricity,
            fugitive_emissions=fugitive,
            travel_emissions=travel,
            total_emissions=total,
            net_emissions=net,
            water_impact=sub_scores.water,
            waste_impact=sub_scores.waste,
        )

        logger.debug(
            "environmental_calculated",
            total_emissions=total,
            net_emissions=net,
            effective_offsets=effective_offsets,
            base_score=base_score,
            environmental_score=score,
        )

        return EnvironmentalResult(
            score=score,
            base_score=base_score,
            effective_offsets=effective_offsets,
            offset_ratio=offset_ratio,
            sub_scores=sub_scores,
            calculations=calculations,
        )
