"""
ESG Models
app/models/esg.py

Pydantic models for ESG submissions, engine output and stored records.
Field names are snake_case; the wire format is camelCase via aliases.
"""

from datetime import datetime, timezone
from typing import Dict, Optional
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, StrictBool
from pydantic.alias_generators import to_camel

from app.models.enumerations import ScoreRating, rate_score


class CamelModel(BaseModel):
    """Base model accepting both camelCase and snake_case keys. NaN and ±inf are rejected."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        allow_inf_nan=False,
    )


# =============================================================================
# INPUT SECTIONS
# =============================================================================

class FossilFuelInput(CamelModel):
    diesel: float = Field(..., ge=0, description="Diesel burned (liters)")
    petrol: float = Field(..., ge=0, description="Petrol burned (liters)")
    natural_gas: float = Field(..., ge=0, description="Natural gas burned (m³)")


class FugitiveInput(CamelModel):
    refrigerant_leakage: float = Field(..., ge=0, description="kg CO2e")
    gas_leakage: float = Field(..., ge=0, description="kg CO2e")


class ElectricityInput(CamelModel):
    consumption: float = Field(..., ge=0, description="Electricity consumed (kWh)")
    renewable_percent: float = Field(..., ge=0, le=100, description="Renewable share (%)")
    grid_emission_factor: Optional[float] = Field(
        default=None,
        ge=0,
        description="kg CO2e per kWh; None falls back to the default grid factor",
    )


class WaterInput(CamelModel):
    usage: float = Field(..., ge=0, description="Water used (m³)")
    intensity: float = Field(..., ge=0, description="m³ per unit of output")


class WasteInput(CamelModel):
    generated: float = Field(..., ge=0, description="Waste generated (kg)")
    recycled_percent: float = Field(..., ge=0, le=100, description="Share recycled (%)")


class TravelInput(CamelModel):
    business_travel_emissions: float = Field(..., ge=0, description="kg CO2e")


class OffsetsInput(CamelModel):
    carbon_offsets: float = Field(..., ge=0, description="kg CO2e")


class SocialInput(CamelModel):
    employee_turnover_percent: float = Field(..., ge=0, le=100)
    injury_rate: float = Field(..., ge=0, description="Injuries per 100 employees")
    gender_diversity_percent: float = Field(..., ge=0, le=100)
    training_hours_per_employee: float = Field(..., ge=0)
    community_investment_percent: float = Field(..., ge=0, description="% of revenue")


class GovernanceInput(CamelModel):
    board_independence_percent: float = Field(..., ge=0, le=100)
    audit_committee: StrictBool
    anti_corruption_policy: StrictBool
    executive_pay_ratio: float = Field(..., ge=1)
    shareholder_rights_score: float = Field(..., ge=0, le=10)


class ESGInput(CamelModel):
    """A complete submission: nine required sections."""

    fossil_fuel: FossilFuelInput
    fugitive: FugitiveInput
    electricity: ElectricityInput
    water: WaterInput
    waste: WasteInput
    travel: TravelInput
    offsets: OffsetsInput
    social: SocialInput
    governance: GovernanceInput


# =============================================================================
# ENGINE OUTPUT
# =============================================================================

class EnvironmentalCalculations(CamelModel):
    """Derived environmental quantities (emissions in kg CO2e, impacts 0-100)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True, allow_inf_nan=True)
    # Emissions may overflow to inf for extreme finite inputs

    fossil_fuel_emissions: float
    electricity_emissions: float
    fugitive_emissions: float
    travel_emissions: float
    total_emissions: float
    net_emissions: float
    water_impact: float
    waste_impact: float


class ESGScores(CamelModel):
    """Output record of the scoring engine."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    environmental_score: float = Field(..., ge=0, le=100)
    social_score: float = Field(..., ge=0, le=100)
    governance_score: float = Field(..., ge=0, le=100)
    overall_esg_score: float = Field(..., ge=0, le=100, alias="overallESGScore")
    environmental_calculations: EnvironmentalCalculations

    def ratings(self) -> Dict[str, ScoreRating]:
        return {
            "environmental": rate_score(self.environmental_score),
            "social": rate_score(self.social_score),
            "governance": rate_score(self.governance_score),
            "overall": rate_score(self.overall_esg_score),
        }


# =============================================================================
# PERSISTED RECORDS
# =============================================================================

class ESGRecord(ESGInput):
    """One stored submission: input sections verbatim plus engine output."""

    id: UUID = Field(default_factory=uuid4)
    user_id: str = Field(..., min_length=1)
    environmental_calculations: EnvironmentalCalculations
    environmental_score: float = Field(..., ge=0, le=100)
    social_score: float = Field(..., ge=0, le=100)
    governance_score: float = Field(..., ge=0, le=100)
    overall_esg_score: float = Field(..., ge=0, le=100, alias="overallESGScore")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Record creation timestamp (UTC)",
    )

    @classmethod
    def from_submission(
        cls,
        user_id: str,
        esg_input: ESGInput,
        scores: ESGScores,
        created_at: Optional[datetime] = None,
    ) -> "ESGRecord":
        data = esg_input.model_dump()
        data.update(scores.model_dump())
        data["user_id"] = user_id
        if created_at is not None:
            data["created_at"] = created_at
        return cls.model_validate(data)

    def to_input(self) -> ESGInput:
        return ESGInput.model_validate(self.model_dump(include=set(ESGInput.model_fields)))

    def to_scores(self) -> ESGScores:
        return ESGScores(
            environmental_score=self.environmental_score,
            social_score=self.social_score,
            governance_score=self.governance_score,
            overall_esg_score=self.overall_esg_score,
            environmental_calculations=self.environmental_calculations,
        )

    def to_trend_point(self) -> "TrendPoint":
        return TrendPoint(
            date=self.created_at.date().isoformat(),
            environmental=self.environmental_score,
            social=self.social_score,
            governance=self.governance_score,
            overall=self.overall_esg_score,
        )


class TrendPoint(BaseModel):
    date: str = Field(..., description="Creation date (YYYY-MM-DD)")
    environmental: float
    social: float
    governance: float
    overall: float


# =============================================================================
# API RESPONSES
# =============================================================================

class SubmitResponse(CamelModel):
    message: str = "ESG data submitted successfully"
    id: UUID
    scores: ESGScores
    ratings: Dict[str, ScoreRating]


class ErrorResponse(BaseModel):
    """
    Standard error response model.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: Optional[dict] = Field(default=None, description="Additional error details")
    timestamp: datetime = Field(..., description="Error occurrence timestamp")
