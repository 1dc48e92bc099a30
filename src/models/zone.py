"""Investment zone data types."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum


class SoilType(Enum):
    CLAY = "clay"
    LOAM = "loam"
    SANDY = "sandy"
    ALLUVIAL = "alluvial"
    MIXED = "mixed"


class ContaminationLevel(Enum):
    NONE = "none"
    LOW = "low"
    MODERATE = "moderate"


class Tier(Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class WaterQualityGrade(Enum):
    A = "A"
    B = "B"
    C = "C"
    D = "D"


class PortType(Enum):
    SEAPORT = "seaport"
    RIVER_PORT = "river-port"
    DRY_PORT = "dry-port"


@dataclass(frozen=True)
class ZoneLocation:
    lat: Decimal
    lng: Decimal
    district: str | None = None


@dataclass(frozen=True)
class Zone:
    """Catalogue entry for an SEZ / EPZ / hi-tech park."""
    id: str
    name: str
    type: str  # SEZ / EPZ / Hi-Tech Park
    location: ZoneLocation
    address: str = ""
    total_area: str = ""
    available_plots: int = 0
    sectors: list[str] = field(default_factory=list)
    incentives: list[str] = field(default_factory=list)
    utilities: list[str] = field(default_factory=list)
    land_price: Decimal | None = None


@dataclass(frozen=True)
class SoilSuitability:
    heavy_industry: int  # 1-10
    light_manufacturing: int
    agriculture: int
    technology: int


@dataclass(frozen=True)
class SoilQuality:
    type: SoilType
    ph_level: Decimal
    drainage_rating: int  # 1-10
    contamination_level: ContaminationLevel
    suitability: SoilSuitability


@dataclass(frozen=True)
class Infrastructure:
    # Distances in km
    power_line_distance: Decimal
    power_capacity_mw: int
    power_reliability: Decimal  # % uptime

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
    road_quality: int  # 1-10


@dataclass(frozen=True)
class UtilityStatus:
    power_uptime: Decimal | None  # %, None when the feed drops a reading
    water_pressure: int | None  # PSI
    internet_speed: int | None  # Mbps
    waste_treatment: bool
    last_updated: datetime


@dataclass(frozen=True)
class Environmental:
    air_quality_index: int
    water_quality_grade: WaterQualityGrade
    noise_level: int  # dB
    green_cover_percent: int
    effluent_treatment_plant: bool
    solar_potential_kwh: int


@dataclass(frozen=True)
class Economics:
    # All BDT
    land_price_per_acre: Decimal
    labor_cost_per_month: Decimal
    water_cost_per_unit: Decimal
    electricity_cost_per_kwh: Decimal
    development_cost_per_sqft: Decimal


@dataclass(frozen=True)
class ZoneIntelligence:
    zone_id: str
    soil_quality: SoilQuality
    infrastructure: Infrastructure
    utility_status: UtilityStatus
    environmental: Environmental
    economics: Economics


@dataclass(frozen=True)
class SubScores:
    """The six 0-100 sub-scores for a zone."""
    power_access: Decimal
    gas_access: Decimal
    logistics: Decimal
    utility_reliability: Decimal
    environmental: Decimal
    cost_competitiveness: Decimal


@dataclass(frozen=True)
class SuitabilityAnalysis:
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ZoneRanking:
    zone: Zone
    intelligence: ZoneIntelligence
    suitability_score: Decimal
    strengths: list[str] = field(default_factory=list)
    weaknesses: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class ZoneComparison:
    zone_id: str
    zone_name: str
    scores: SubScores
    total_score: Decimal


class UptimeStatus(Enum):
    EXCELLENT = "excellent"  # >= 98%
    GOOD = "good"  # >= 95%
    FAIR = "fair"  # >= 90%
    POOR = "poor"
    UNKNOWN = "unknown"


class WaterStatus(Enum):
    EXCELLENT = "excellent"
    GOOD = "good"
    FAIR = "fair"
    UNKNOWN = "unknown"


class InternetStatus(Enum):
    GIGABIT = "gigabit"
    HIGH_SPEED = "high-speed"
    STANDARD = "standard"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class UtilityStatusSummary:
    zone_id: str
    power_uptime: Decimal | None
    power_status: UptimeStatus
    water_pressure: int | None
    water_status: WaterStatus
    internet_speed: int | None
    internet_status: InternetStatus
    waste_treatment: bool
    waste_label: str
    last_updated: datetime
