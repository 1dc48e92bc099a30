"""Zone intelligence lookup.

Surveyed zones resolve to their fixed record. Any other zone gets a
synthesized record: bounded random values, nudged by whether the zone sits
near Dhaka (airport, land and labor prices) or Chittagong (seaport).
Synthesis is seeded from the zone id so repeated lookups agree.
"""

import hashlib
import logging
import random
from datetime import datetime, timezone
from decimal import Decimal

from src.config import settings
from src.data.zone_catalog import ZONE_INTELLIGENCE_DB
from src.models.zone import (
    ContaminationLevel,
    Economics,
    Environmental,
    Infrastructure,
    PortType,
    SoilQuality,
    SoilSuitability,
    SoilType,
    Tier,
    UtilityStatus,
    WaterQualityGrade,
    Zone,
    ZoneIntelligence,
)

logger = logging.getLogger(__name__)


class ZoneDataUnavailableError(LookupError):
    """No intelligence record exists and no zone metadata was given to synthesize one."""

    def __init__(self, zone_id: str):
        self.zone_id = zone_id
        super().__init__(f"Zone data unavailable for {zone_id}")


def _seeded_rng(zone_id: str) -> random.Random:
    raw = f"{settings.synthesis_salt}:{zone_id}".encode()
    return random.Random(int(hashlib.sha256(raw).hexdigest()[:16], 16))


def _uniform(rng: random.Random, low: float, span: float, places: int = 2) -> Decimal:
    """low + U[0,1) * span, rounded to `places`. Rounding can land on low + span."""
    return Decimal(str(round(low + rng.random() * span, places)))


def _floor_int(rng: random.Random, low: int, span: int) -> int:
    """low + floor(U[0,1) * span), i.e. an int in [low, low + span - 1]."""
    return low + int(rng.random() * span)


def _near(zone: Zone) -> tuple[bool, bool]:
    """Return (near_dhaka, near_chittagong) from the zone's district."""
    district = (zone.location.district or "").lower()
    near_dhaka = "dhaka" in district
    near_chittagong = "chit" in district or "chatt" in district
    return near_dhaka, near_chittagong


def generate_default_intelligence(
    zone_id: str,
    zone: Zone,
    rng: random.Random | None = None,
) -> ZoneIntelligence:
    """Synthesize a plausible intelligence record for an unsurveyed zone.

    Every value stays inside the same bounds as the surveyed records
    (e.g. power reliability 95-99%, road quality 6-9).
    """
    if rng is None:
        rng = _seeded_rng(zone_id)
    near_dhaka, near_chittagong = _near(zone)
    logger.debug(
        "Synthesizing intelligence for %s (near_dhaka=%s, near_chittagong=%s)",
        zone_id, near_dhaka, near_chittagong,
    )

    soil = SoilQuality(
        type=SoilType.MIXED,
        ph_level=_uniform(rng, 6.5, 1.5),
        drainage_rating=_floor_int(rng, 6, 4),
        contamination_level=ContaminationLevel.LOW if rng.random() > 0.8 else ContaminationLevel.NONE,
        suitability=SoilSuitability(
            heavy_industry=_floor_int(rng, 5, 5),
            light_manufacturing=_floor_int(rng, 6, 4),
            agriculture=_floor_int(rng, 3, 4),
            technology=_floor_int(rng, 4, 6),
        ),
    )

    infrastructure = Infrastructure(
        power_line_distance=_uniform(rng, 1, 8),
        power_capacity_mw=_floor_int(rng, 100, 150),
        power_reliability=_uniform(rng, 95, 4),
        gas_line_distance=_uniform(rng, 1, 10),
        gas_pressure_psi=_floor_int(rng, 200, 150),
        gas_availability=Tier.HIGH if rng.random() > 0.3 else Tier.MEDIUM,
        port_distance=_uniform(rng, 10, 20) if near_chittagong else _uniform(rng, 50, 150),
        nearest_port="Chittagong Seaport" if near_chittagong else "Mongla Port",
        port_type=PortType.SEAPORT,
        airport_distance=_uniform(rng, 15, 20) if near_dhaka else _uniform(rng, 40, 60),
        nearest_airport="Hazrat Shahjalal Intl" if near_dhaka else "Shah Amanat Intl",
        rail_distance=_uniform(rng, 5, 15),
        rail_capacity=Tier.MEDIUM if rng.random() > 0.5 else Tier.LOW,
        highway_distance=_uniform(rng, 2, 8),
        road_quality=_floor_int(rng, 6, 4),
    )

    utility_status = UtilityStatus(
        power_uptime=_uniform(rng, 96, 3),
        water_pressure=_floor_int(rng, 55, 20),
        internet_speed=1000 if rng.random() > 0.5 else 500,
        waste_treatment=rng.random() > 0.3,
        last_updated=datetime.now(timezone.utc),
    )

    environmental = Environmental(
        air_quality_index=_floor_int(rng, 50, 40),
        water_quality_grade=WaterQualityGrade.A if rng.random() > 0.6 else WaterQualityGrade.B,
        noise_level=_floor_int(rng, 45, 25),
        green_cover_percent=_floor_int(rng, 15, 20),
        effluent_treatment_plant=rng.random() > 0.4,
        solar_potential_kwh=_floor_int(rng, 4000, 2500),
    )

    if near_dhaka:
        land_price = _uniform(rng, 12_000_000, 5_000_000, 0)
        labor_cost = _uniform(rng, 16_000, 4_000, 0)
    else:
        land_price = _uniform(rng, 6_000_000, 4_000_000, 0)
        labor_cost = _uniform(rng, 12_000, 3_000, 0)

    economics = Economics(
        land_price_per_acre=land_price,
        labor_cost_per_month=labor_cost,
        water_cost_per_unit=_uniform(rng, 18, 10),
        electricity_cost_per_kwh=_uniform(rng, 7.5, 1.5),
        development_cost_per_sqft=_uniform(rng, 350, 150),
    )

    return ZoneIntelligence(
        zone_id=zone_id,
        soil_quality=soil,
        infrastructure=infrastructure,
        utility_status=utility_status,
        environmental=environmental,
        economics=economics,
    )


def get_zone_intelligence(
    zone_id: str,
    zone: Zone | None = None,
    rng: random.Random | None = None,
) -> ZoneIntelligence:
    """Resolve the intelligence record for a zone.

    Raises:
        ZoneDataUnavailableError: no surveyed record and no `zone` to synthesize from.
    """
    record = ZONE_INTELLIGENCE_DB.get(zone_id)
    if record is not None:
        return record

    if zone is not None:
        return generate_default_intelligence(zone_id, zone, rng)

    logger.warning("No intelligence record or zone metadata for %s", zone_id)
    raise ZoneDataUnavailableError(zone_id)


def get_all_zone_intelligence(zones: list[Zone]) -> list[ZoneIntelligence]:
    return [get_zone_intelligence(z.id, z) for z in zones]
