"""Shared zone fixtures.

`ideal_intelligence` maxes out every sub-score (all six = 100) so tests can
perturb one attribute at a time with `dataclasses.replace`.
"""

from datetime import datetime, timezone
from decimal import Decimal

import pytest

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
    ZoneLocation,
)


@pytest.fixture
def ideal_intelligence() -> ZoneIntelligence:
    return ZoneIntelligence(
        zone_id="TEST-IDEAL",
        soil_quality=SoilQuality(
            type=SoilType.LOAM,
            ph_level=Decimal("7.0"),
            drainage_rating=10,
            contamination_level=ContaminationLevel.NONE,
            suitability=SoilSuitability(
                heavy_industry=10, light_manufacturing=10, agriculture=10, technology=10,
            ),
        ),
        infrastructure=Infrastructure(
            power_line_distance=Decimal("0"),
            power_capacity_mw=200,
            power_reliability=Decimal("100"),
            gas_line_distance=Decimal("0"),
            gas_pressure_psi=300,
            gas_availability=Tier.HIGH,
            port_distance=Decimal("0"),
            nearest_port="Chittagong Seaport",
            port_type=PortType.SEAPORT,
            airport_distance=Decimal("0"),
            nearest_airport="Shah Amanat Intl",
            rail_distance=Decimal("0"),
            rail_capacity=Tier.HIGH,
            highway_distance=Decimal("0"),
            road_quality=10,
        ),
        utility_status=UtilityStatus(
            power_uptime=Decimal("100"),
            water_pressure=80,
            internet_speed=1000,
            waste_treatment=True,
            last_updated=datetime(2025, 1, 1, tzinfo=timezone.utc),
        ),
        environmental=Environmental(
            air_quality_index=0,
            water_quality_grade=WaterQualityGrade.A,
            noise_level=40,
            green_cover_percent=50,
            effluent_treatment_plant=True,
            solar_potential_kwh=6000,
        ),
        economics=Economics(
            land_price_per_acre=Decimal("0"),
            labor_cost_per_month=Decimal("0"),
            water_cost_per_unit=Decimal("0"),
            electricity_cost_per_kwh=Decimal("0"),
            development_cost_per_sqft=Decimal("0"),
        ),
    )


@pytest.fixture
def ctg_intelligence() -> ZoneIntelligence:
    """Surveyed Chittagong EPZ record."""
    return ZONE_INTELLIGENCE_DB["BEPZA-CTG-02"]


@pytest.fixture
def dhaka_zone() -> Zone:
    return Zone(
        id="test-dhk",
        name="Test Dhaka Zone",
        type="EPZ",
        location=ZoneLocation(Decimal("23.8"), Decimal("90.4"), "Dhaka"),
    )


@pytest.fixture
def chattogram_zone() -> Zone:
    return Zone(
        id="test-ctg",
        name="Test Chattogram Zone",
        type="SEZ",
        location=ZoneLocation(Decimal("22.3"), Decimal("91.8"), "Chattogram"),
    )


@pytest.fixture
def rural_zone() -> Zone:
    return Zone(
        id="test-rural",
        name="Test Rural Zone",
        type="SEZ",
        location=ZoneLocation(Decimal("25.0"), Decimal("89.9"), "Jamalpur"),
    )
