"""Zone suitability scoring engine.

Six sub-scores, each 0-100:
  Power access:         grid proximity, capacity, reliability
  Gas access:           pipeline proximity, pressure, availability
  Logistics:            seaport, airport, rail, roads
  Utility reliability:  uptime, water pressure, internet
  Environmental:        air, water grade, green cover, effluent treatment
  Cost competitiveness: land, labor, electricity (inverse)

Sector suitability re-weights these (plus a few raw attributes) with a
preset picked from the investor's free-text sector name.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable

from src.engine.zone_intelligence import get_zone_intelligence
from src.models.zone import (
    SubScores,
    SuitabilityAnalysis,
    Tier,
    WaterQualityGrade,
    Zone,
    ZoneComparison,
    ZoneIntelligence,
    ZoneRanking,
)

logger = logging.getLogger(__name__)

ZERO = Decimal("0")
HUNDRED = Decimal("100")

# Reference ceilings
POWER_CAPACITY_REF_MW = Decimal("200")
GAS_PRESSURE_REF_PSI = Decimal("300")
WATER_PRESSURE_REF_PSI = Decimal("80")
INTERNET_REF_MBPS = Decimal("1000")
LAND_PRICE_REF = Decimal("20000000")
LABOR_COST_REF = Decimal("25000")
ELECTRICITY_COST_REF = Decimal("12")

TIER_SCORES: dict[Tier, Decimal] = {
    Tier.HIGH: Decimal("100"),
    Tier.MEDIUM: Decimal("65"),
    Tier.LOW: Decimal("30"),
}

WATER_GRADE_SCORES: dict[WaterQualityGrade, Decimal] = {
    WaterQualityGrade.A: Decimal("100"),
    WaterQualityGrade.B: Decimal("75"),
}


def _d(value) -> Decimal:
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def _clamp(value: Decimal) -> Decimal:
    return max(ZERO, min(HUNDRED, value))


def _term(value, normalize: Callable[[Decimal], Decimal]) -> Decimal:
    """Normalize a raw attribute to 0-100. A missing attribute contributes 0."""
    if value is None:
        return ZERO
    return _clamp(normalize(_d(value)))


def _tier_score(tier: Tier | None) -> Decimal:
    return TIER_SCORES.get(tier, TIER_SCORES[Tier.LOW])


def power_score(intel: ZoneIntelligence) -> Decimal:
    infra = intel.infrastructure
    distance = _term(infra.power_line_distance, lambda km: HUNDRED - km * 5)
    capacity = _term(infra.power_capacity_mw, lambda mw: mw / POWER_CAPACITY_REF_MW * HUNDRED)
    reliability = _term(infra.power_reliability, lambda pct: pct)
    return _clamp(distance * Decimal("0.3") + capacity * Decimal("0.3") + reliability * Decimal("0.4"))


def gas_score(intel: ZoneIntelligence) -> Decimal:
    infra = intel.infrastructure
    distance = _term(infra.gas_line_distance, lambda km: HUNDRED - km * 4)
    pressure = _term(infra.gas_pressure_psi, lambda psi: psi / GAS_PRESSURE_REF_PSI * HUNDRED)
    availability = _tier_score(infra.gas_availability)
    return _clamp(distance * Decimal("0.4") + pressure * Decimal("0.3") + availability * Decimal("0.3"))


def logistics_score(intel: ZoneIntelligence) -> Decimal:
    infra = intel.infrastructure
    port = _term(infra.port_distance, lambda km: HUNDRED - km * Decimal("0.5"))
    airport = _term(infra.airport_distance, lambda km: HUNDRED - km)
    rail = _tier_score(infra.rail_capacity)
    road = _term(infra.road_quality, lambda q: q * 10)
    return _clamp(
        port * Decimal("0.35")
        + airport * Decimal("0.25")
        + rail * Decimal("0.2")
        + road * Decimal("0.2")
    )


def utility_score(intel: ZoneIntelligence) -> Decimal:
    status = intel.utility_status
    uptime = _term(status.power_uptime, lambda pct: pct)
    water = _term(status.water_pressure, lambda psi: psi / WATER_PRESSURE_REF_PSI * HUNDRED)
    internet = _term(status.internet_speed, lambda mbps: mbps / INTERNET_REF_MBPS * HUNDRED)
    return _clamp(uptime * Decimal("0.5") + water * Decimal("0.25") + internet * Decimal("0.25"))


def environmental_score(intel: ZoneIntelligence) -> Decimal:
    env = intel.environmental
    air = _term(env.air_quality_index, lambda aqi: HUNDRED - aqi)
    water = WATER_GRADE_SCORES.get(env.water_quality_grade, Decimal("50"))
    green = _term(env.green_cover_percent, lambda pct: pct * 2)
    treatment = HUNDRED if env.effluent_treatment_plant else ZERO
    return _clamp(
        air * Decimal("0.3")
        + water * Decimal("0.3")
        + green * Decimal("0.2")
        + treatment * Decimal("0.2")
    )


def cost_score(intel: ZoneIntelligence) -> Decimal:
    """Lower costs score higher. A missing cost scores 0, not 100."""
    econ = intel.economics
    land = _term(econ.land_price_per_acre, lambda bdt: HUNDRED - bdt / LAND_PRICE_REF * HUNDRED)
    labor = _term(econ.labor_cost_per_month, lambda bdt: HUNDRED - bdt / LABOR_COST_REF * HUNDRED)
    power = _term(econ.electricity_cost_per_kwh, lambda bdt: HUNDRED - bdt / ELECTRICITY_COST_REF * HUNDRED)
    return _clamp(land * Decimal("0.4") + labor * Decimal("0.35") + power * Decimal("0.25"))


def _connectivity_score(intel: ZoneIntelligence) -> Decimal:
    return _term(intel.utility_status.internet_speed, lambda mbps: mbps / 10)


def _technology_land_score(intel: ZoneIntelligence) -> Decimal:
    return _term(intel.soil_quality.suitability.technology, lambda s: s * 10)


def _heavy_industry_land_score(intel: ZoneIntelligence) -> Decimal:
    return _term(intel.soil_quality.suitability.heavy_industry, lambda s: s * 10)


def _effluent_treatment_score(intel: ZoneIntelligence) -> Decimal:
    return HUNDRED if intel.environmental.effluent_treatment_plant else Decimal("50")


COMPONENTS: dict[str, Callable[[ZoneIntelligence], Decimal]] = {
    "power": power_score,
    "gas": gas_score,
    "logistics": logistics_score,
    "utility": utility_score,
    "environmental": environmental_score,
    "cost": cost_score,
    "connectivity": _connectivity_score,
    "technology_land": _technology_land_score,
    "heavy_industry_land": _heavy_industry_land_score,
    "effluent_treatment": _effluent_treatment_score,
}

OVERALL_WEIGHTS: dict[str, Decimal] = {
    "power": Decimal("0.2"),
    "gas": Decimal("0.15"),
    "logistics": Decimal("0.25"),
    "utility": Decimal("0.15"),
    "environmental": Decimal("0.1"),
    "cost": Decimal("0.15"),
}


@dataclass(frozen=True)
class SectorProfile:
    """Weight preset selected by keywords in a sector name.

    `keywords` match anywhere in the name; `words` only as whole words.
    """
    name: str
    weights: dict[str, Decimal]
    keywords: tuple[str, ...] = ()
    words: tuple[str, ...] = ()

    def matches(self, sector: str) -> bool:
        sector_lower = sector.lower()
        if any(k in sector_lower for k in self.keywords):
            return True
        return any(re.search(rf"\b{re.escape(w)}\b", sector_lower) for w in self.words)


# Checked in order, first match wins
SECTOR_PROFILES: tuple[SectorProfile, ...] = (
    SectorProfile(
        name="textiles",
        keywords=("textile", "garment"),
        weights={
            "power": Decimal("0.25"),
            "utility": Decimal("0.25"),
            "logistics": Decimal("0.2"),
            "cost": Decimal("0.3"),
        },
    ),
    SectorProfile(
        name="technology",
        keywords=("tech", "software"),
        words=("it",),
        weights={
            "connectivity": Decimal("0.4"),
            "power": Decimal("0.3"),
            "environmental": Decimal("0.15"),
            "technology_land": Decimal("0.15"),
        },
    ),
    SectorProfile(
        name="pharmaceuticals",
        keywords=("pharma", "chemical"),
        weights={
            "utility": Decimal("0.3"),
            "environmental": Decimal("0.3"),
            "effluent_treatment": Decimal("0.25"),
            "logistics": Decimal("0.15"),
        },
    ),
    SectorProfile(
        name="heavy_industry",
        keywords=("heavy", "steel", "manufacturing"),
        weights={
            "heavy_industry_land": Decimal("0.3"),
            "gas": Decimal("0.25"),
            "power": Decimal("0.25"),
            "logistics": Decimal("0.2"),
        },
    ),
)

GENERAL_PROFILE = SectorProfile(name="general", weights=OVERALL_WEIGHTS)


def _weighted(intel: ZoneIntelligence, weights: dict[str, Decimal]) -> Decimal:
    return sum((COMPONENTS[name](intel) * w for name, w in weights.items()), ZERO)


def compute_sub_scores(intel: ZoneIntelligence) -> SubScores:
    return SubScores(
        power_access=power_score(intel),
        gas_access=gas_score(intel),
        logistics=logistics_score(intel),
        utility_reliability=utility_score(intel),
        environmental=environmental_score(intel),
        cost_competitiveness=cost_score(intel),
    )


def overall_score(intel: ZoneIntelligence) -> Decimal:
    return _weighted(intel, OVERALL_WEIGHTS)


def match_sector_profile(sector: str | None) -> SectorProfile:
    """Pick the weight preset for a sector name; general when nothing matches."""
    if not sector:
        return GENERAL_PROFILE
    for profile in SECTOR_PROFILES:
        if profile.matches(sector):
            return profile
    return GENERAL_PROFILE


def calculate_sector_suitability(intel: ZoneIntelligence, sector: str | None) -> Decimal:
    """Sector-weighted suitability; empty or unknown sectors use the overall score."""
    profile = match_sector_profile(sector)
    if profile is GENERAL_PROFILE:
        return overall_score(intel)
    return _weighted(intel, profile.weights)


def analyze_suitability(intel: ZoneIntelligence) -> SuitabilityAnalysis:
    """Qualitative strengths and weaknesses from fixed thresholds."""
    strengths: list[str] = []
    weaknesses: list[str] = []

    power = power_score(intel)
    if power > 80:
        strengths.append("Excellent power infrastructure")
    elif power < 50:
        weaknesses.append("Limited power access")

    # Raw-attribute checks are skipped when the attribute is missing
    port_distance = intel.infrastructure.port_distance
    if port_distance is not None:
        if port_distance < 30:
            strengths.append("Close to seaport")
        elif port_distance > 100:
            weaknesses.append("Far from seaport")

    cost = cost_score(intel)
    if cost > 70:
        strengths.append("Cost competitive")
    elif cost < 40:
        weaknesses.append("Higher operational costs")

    uptime = intel.utility_status.power_uptime
    if uptime is not None and uptime > 98:
        strengths.append("Highly reliable power")
    internet = intel.utility_status.internet_speed
    if internet is not None and internet >= 1000:
        strengths.append("Gigabit internet available")

    if intel.environmental.effluent_treatment_plant:
        strengths.append("Effluent treatment facility")
    aqi = intel.environmental.air_quality_index
    if aqi is not None and aqi < 60:
        strengths.append("Good air quality")

    return SuitabilityAnalysis(strengths=strengths, weaknesses=weaknesses)


def rank_zones_by_suitability(zones: list[Zone], sector: str | None) -> list[ZoneRanking]:
    """Rank zones by sector suitability, best first. Ties keep input order."""
    profile = match_sector_profile(sector)
    logger.debug("Ranking %d zones for sector %r using %s profile", len(zones), sector, profile.name)

    results = []
    for zone in zones:
        intel = get_zone_intelligence(zone.id, zone)
        analysis = analyze_suitability(intel)
        results.append(ZoneRanking(
            zone=zone,
            intelligence=intel,
            suitability_score=calculate_sector_suitability(intel, sector),
            strengths=analysis.strengths,
            weaknesses=analysis.weaknesses,
        ))

    return sorted(results, key=lambda r: r.suitability_score, reverse=True)


def compare_zone_infrastructure(zone_ids: list[str], zones: list[Zone]) -> list[ZoneComparison]:
    """Side-by-side sub-scores for the requested zones, in request order.

    Raises:
        ZoneDataUnavailableError: an id has neither a surveyed record nor zone metadata.
    """
    zone_map = {z.id: z for z in zones}
    comparisons = []
    for zone_id in zone_ids:
        zone = zone_map.get(zone_id)
        intel = get_zone_intelligence(zone_id, zone)
        comparisons.append(ZoneComparison(
            zone_id=zone_id,
            zone_name=zone.name if zone else zone_id,
            scores=compute_sub_scores(intel),
            total_score=overall_score(intel),
        ))
    return comparisons
