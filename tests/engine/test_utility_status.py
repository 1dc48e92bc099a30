"""Tests for the utility reliability summary."""

from dataclasses import replace
from decimal import Decimal

from src.engine.utility_status import (
    classify_internet,
    classify_uptime,
    classify_water_pressure,
    summarize_utility_status,
)
from src.models.zone import InternetStatus, UptimeStatus, WaterStatus


class TestClassification:
    def test_uptime_tiers(self):
        assert classify_uptime(Decimal("99.2")) == UptimeStatus.EXCELLENT
        assert classify_uptime(Decimal("98")) == UptimeStatus.EXCELLENT
        assert classify_uptime(Decimal("96.5")) == UptimeStatus.GOOD
        assert classify_uptime(Decimal("90")) == UptimeStatus.FAIR
        assert classify_uptime(Decimal("85")) == UptimeStatus.POOR

    def test_water_pressure_tiers(self):
        assert classify_water_pressure(65) == WaterStatus.EXCELLENT
        assert classify_water_pressure(50) == WaterStatus.GOOD
        assert classify_water_pressure(30) == WaterStatus.FAIR

    def test_internet_tiers(self):
        assert classify_internet(1000) == InternetStatus.GIGABIT
        assert classify_internet(500) == InternetStatus.HIGH_SPEED
        assert classify_internet(100) == InternetStatus.STANDARD

    def test_missing_readings_are_unknown(self):
        assert classify_uptime(None) == UptimeStatus.UNKNOWN
        assert classify_water_pressure(None) == WaterStatus.UNKNOWN
        assert classify_internet(None) == InternetStatus.UNKNOWN


class TestSummary:
    def test_surveyed_zone(self, ctg_intelligence):
        summary = summarize_utility_status(ctg_intelligence)
        assert summary.zone_id == "BEPZA-CTG-02"
        assert summary.power_status == UptimeStatus.EXCELLENT
        assert summary.water_status == WaterStatus.EXCELLENT
        assert summary.internet_status == InternetStatus.GIGABIT
        assert summary.waste_label == "ETP active"

    def test_no_waste_treatment(self, ideal_intelligence):
        status = replace(ideal_intelligence.utility_status, waste_treatment=False)
        summary = summarize_utility_status(replace(ideal_intelligence, utility_status=status))
        assert summary.waste_treatment is False
        assert summary.waste_label == "No ETP"

    def test_missing_readings_do_not_raise(self, ideal_intelligence):
        status = replace(
            ideal_intelligence.utility_status,
            power_uptime=None,
            water_pressure=None,
            internet_speed=None,
        )
        summary = summarize_utility_status(replace(ideal_intelligence, utility_status=status))
        assert summary.power_uptime is None
        assert summary.power_status == UptimeStatus.UNKNOWN
        assert summary.water_status == WaterStatus.UNKNOWN
        assert summary.internet_status == InternetStatus.UNKNOWN
        assert summary.waste_label == "ETP active"
