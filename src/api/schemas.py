"""Pydantic schemas for API request/response models."""

from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, ConfigDict, Field

from src.models.zone import (
    ContaminationLevel,
    InternetStatus,
    PortType,
    SoilType,
    Tier,
    UptimeStatus,
    WaterQualityGrade,
    WaterStatus,
)


class _FromAttributes(BaseModel):
    model_config = ConfigDict(from_attributes=True)


# ---- Request schemas ----

class ComparisonRequest(BaseModel):
    zone_ids: list[str] = Field(..., min_length=1, description="Zone ids to compare, in display order")


# ---- Response schemas ----

class ZoneLocationResponse(_FromAttributes):
    lat: Decimal
    lng: Decimal
    district: str | None = None


class ZoneResponse(_FromAttributes):
    id: str
    name: str
    type: str
    location: ZoneLocationResponse
    address: str
    total_area: str
    available_plots: int
    sectors: list[str] = []
    incentives: list[str] = []
    utilities: list[str] = []
    land_price: Decimal | None = None


class SoilSuitabilityResponse(_FromAttributes):
    heavy_industry: int
    light_manufacturing: int
    agriculture: int
    technology: int


class SoilQualityResponse(_FromAttributes):
    type: SoilType
    ph_level: Decimal
    drainage_rating: int
    contamination_level: ContaminationLevel
    suitability: SoilSuitabilityResponse


class InfrastructureResponse(_FromAttributes):
    power_line_distance: Decimal
    power_capacity_mw: int
    power_reliability: Decimal
    gas_line_distance: Decimal
    gas_pressure_psi: int
    gas_availability: Tier
    port_distance: Decimal
    nearest_port: str
    port_type: PortType
    airport_distance: Decimal
    nearest_airport: str
    rail_distance: Decimal
    rail_capacity: Tier
    highway_distance: Decimal
    road_quality: int


class UtilityStatusResponse(_FromAttributes):
    power_uptime: Decimal | None = None
    water_pressure: int | None = None
    internet_speed: int | None = None
    waste_treatment: bool
    last_updated: datetime


class EnvironmentalResponse(_FromAttributes):
    air_quality_index: int
    water_quality_grade: WaterQualityGrade
    noise_level: int
    green_cover_percent: int
    effluent_treatment_plant: bool
    solar_potential_kwh: int


class EconomicsResponse(_FromAttributes):
    land_price_per_acre: Decimal
    labor_cost_per_month: Decimal
    water_cost_per_unit: Decimal
    electricity_cost_per_kwh: Decimal
    development_cost_per_sqft: Decimal


class ZoneIntelligenceResponse(_FromAttributes):
    zone_id: str
    soil_quality: SoilQualityResponse
    infrastructure: InfrastructureResponse
    utility_status: UtilityStatusResponse
    environmental: EnvironmentalResponse
    economics: EconomicsResponse


class UtilityStatusSummaryResponse(_FromAttributes):
    zone_id: str
    power_uptime: Decimal | None = None
    power_status: UptimeStatus
    water_pressure: int | None = None
    water_status: WaterStatus
    internet_speed: int | None = None
    internet_status: InternetStatus
    waste_treatment: bool
    waste_label: str
    last_updated: datetime


class SubScoresResponse(BaseModel):
    power_access: Decimal
    gas_access: Decimal
    logistics: Decimal
    utility_reliability: Decimal
    environmental: Decimal
    cost_competitiveness: Decimal


class ZoneComparisonResponse(BaseModel):
    zone_id: str
    zone_name: str
    scores: SubScoresResponse
    total_score: Decimal


class ZoneRankingResponse(BaseModel):
    rank: int
    zone: ZoneResponse
    suitability_score: Decimal
    strengths: list[str] = []
    weaknesses: list[str] = []


class RankingResponse(BaseModel):
    sector: str | None = None
    profile: str
    results: list[ZoneRankingResponse]


class SectorProfileResponse(BaseModel):
    name: str
    keywords: list[str]
    weights: dict[str, Decimal]
