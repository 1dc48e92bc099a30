"""Tests for zone intelligence lookup and synthesis."""

import random
from decimal import Decimal

import pytest

from src.data.zone_catalog import ZONE_INTELLIGENCE_DB
from src.engine.zone_intelligence import (
    ZoneDataUnavailableError,
    generate_default_intelligence,
    get_all_zone_intelligence,
    get_zone_intelligence,
)
from src.models.zone import ContaminationLevel, SoilType, Tier, WaterQualityGrade

SAMPLES = 300


def _between(value, low, high) -> bool:
    return Decimal(str(low)) <= Decimal(str(value)) <= Decimal(str(high))


class TestLookup:
    def test_surveyed_record_returned(self):
        intel = get_zone_intelligence("BEPZA-DHK-01")
        assert intel is ZONE_INTELLIGENCE_DB["BEPZA-DHK-01"]

    def test_surveyed_record_wins_over_zone_metadata(self, rural_zone):
        intel = get_zone_intelligence("BEZA-BGD-03", rural_zone)
        assert intel.infrastructure.nearest_port == "Payra Seaport"

    def test_unknown_zone_synthesized(self, rural_zone):
        intel = get_zone_intelligence(rural_zone.id, rural_zone)
        assert intel.zone_id == rural_zone.id
        assert intel.soil_quality.type == SoilType.MIXED

    def test_unknown_zone_without_metadata_raises(self):
        with pytest.raises(ZoneDataUnavailableError) as exc:
            get_zone_intelligence("no-such-zone")
        assert exc.value.zone_id == "no-such-zone"
        assert "unavailable" in str(exc.value)

    def test_error_is_lookup_error(self):
        with pytest.raises(LookupError):
            get_zone_intelligence("no-such-zone")

    def test_get_all(self, dhaka_zone, rural_zone):
        intels = get_all_zone_intelligence([dhaka_zone, rural_zone])
        assert [i.zone_id for i in intels] == [dhaka_zone.id, rural_zone.id]


class TestSynthesis:
    def test_same_zone_same_attributes(self, rural_zone):
        a = get_zone_intelligence(rural_zone.id, rural_zone)
        b = get_zone_intelligence(rural_zone.id, rural_zone)
        assert a.infrastructure == b.infrastructure
        assert a.economics == b.economics
        assert a.environmental == b.environmental

    def test_explicit_rng_is_used(self, rural_zone):
        a = generate_default_intelligence(rural_zone.id, rural_zone, random.Random(1))
        b = generate_default_intelligence(rural_zone.id, rural_zone, random.Random(1))
        assert a.infrastructure == b.infrastructure

    def test_near_chittagong_gets_close_port(self, chattogram_zone):
        for i in range(50):
            intel = generate_default_intelligence(chattogram_zone.id, chattogram_zone, random.Random(i))
            assert _between(intel.infrastructure.port_distance, 10, 30)
            assert intel.infrastructure.nearest_port == "Chittagong Seaport"

    def test_old_chittagong_spelling(self, chattogram_zone):
        from dataclasses import replace

        location = replace(chattogram_zone.location, district="Chittagong")
        zone = replace(chattogram_zone, location=location)
        intel = generate_default_intelligence(zone.id, zone, random.Random(7))
        assert intel.infrastructure.nearest_port == "Chittagong Seaport"

    def test_near_dhaka_gets_airport_and_prices(self, dhaka_zone):
        for i in range(50):
            intel = generate_default_intelligence(dhaka_zone.id, dhaka_zone, random.Random(i))
            assert intel.infrastructure.nearest_airport == "Hazrat Shahjalal Intl"
            assert _between(intel.infrastructure.airport_distance, 15, 35)
            assert _between(intel.economics.land_price_per_acre, 12_000_000, 17_000_000)
            assert _between(intel.economics.labor_cost_per_month, 16_000, 20_000)
            assert intel.infrastructure.nearest_port == "Mongla Port"

    def test_missing_district_treated_as_rural(self, rural_zone):
        from dataclasses import replace

        zone = replace(rural_zone, location=replace(rural_zone.location, district=None))
        intel = generate_default_intelligence(zone.id, zone, random.Random(3))
        assert _between(intel.infrastructure.port_distance, 50, 200)
        assert _between(intel.infrastructure.airport_distance, 40, 100)

    @pytest.mark.parametrize("zone_fixture", ["dhaka_zone", "chattogram_zone", "rural_zone"])
    def test_sampled_records_stay_in_bounds(self, zone_fixture, request):
        zone = request.getfixturevalue(zone_fixture)
        for i in range(SAMPLES):
            intel = generate_default_intelligence(f"{zone.id}-{i}", zone, random.Random(i))
            soil = intel.soil_quality
            infra = intel.infrastructure
            util = intel.utility_status
            env = intel.environmental
            econ = intel.economics

            assert _between(soil.ph_level, 6.5, 8.0)
            assert 6 <= soil.drainage_rating <= 9
            assert soil.contamination_level in (ContaminationLevel.NONE, ContaminationLevel.LOW)
            assert 5 <= soil.suitability.heavy_industry <= 9
            assert 6 <= soil.suitability.light_manufacturing <= 9
            assert 3 <= soil.suitability.agriculture <= 6
            assert 4 <= soil.suitability.technology <= 9

            assert _between(infra.power_line_distance, 1, 9)
            assert 100 <= infra.power_capacity_mw <= 249
            assert _between(infra.power_reliability, 95, 99)
            assert _between(infra.gas_line_distance, 1, 11)
            assert 200 <= infra.gas_pressure_psi <= 349
            assert infra.gas_availability in (Tier.HIGH, Tier.MEDIUM)
            assert _between(infra.port_distance, 10, 200)
            assert _between(infra.airport_distance, 15, 100)
            assert _between(infra.rail_distance, 5, 20)
            assert infra.rail_capacity in (Tier.MEDIUM, Tier.LOW)
            assert _between(infra.highway_distance, 2, 10)
            assert 1 <= infra.road_quality <= 10
            assert 6 <= infra.road_quality <= 9

            assert _between(util.power_uptime, 96, 99)
            assert 55 <= util.water_pressure <= 74
            assert util.internet_speed in (500, 1000)

            assert 50 <= env.air_quality_index <= 89
            assert env.water_quality_grade in (WaterQualityGrade.A, WaterQualityGrade.B)
            assert 45 <= env.noise_level <= 69
            assert 15 <= env.green_cover_percent <= 34
            assert 4000 <= env.solar_potential_kwh <= 6499

            assert _between(econ.land_price_per_acre, 6_000_000, 17_000_000)
            assert _between(econ.labor_cost_per_month, 12_000, 20_000)
            assert _between(econ.water_cost_per_unit, 18, 28)
            assert _between(econ.electricity_cost_per_kwh, 7.5, 9.0)
            assert _between(econ.development_cost_per_sqft, 350, 500)

    def test_rounded_draws_can_reach_upper_bound(self, rural_zone):
        class TopOfRange(random.Random):
            def random(self):
                return 0.999999

        intel = generate_default_intelligence(rural_zone.id, rural_zone, TopOfRange())
        assert intel.soil_quality.ph_level == Decimal("8")
        assert intel.soil_quality.drainage_rating == 9
        assert intel.infrastructure.power_line_distance == Decimal("9")
        assert intel.infrastructure.power_reliability == Decimal("99")
        assert intel.infrastructure.port_distance == Decimal("200")
        assert intel.utility_status.power_uptime == Decimal("99")
