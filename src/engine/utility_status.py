"""Utility reliability summary for a zone's live utility feed.

Readings missing from the feed classify as UNKNOWN rather than failing.
"""

from decimal import Decimal

from src.models.zone import (
    InternetStatus,
    UptimeStatus,
    UtilityStatusSummary,
    WaterStatus,
    ZoneIntelligence,
)


def classify_uptime(uptime: Decimal | None) -> UptimeStatus:
    if uptime is None:
        return UptimeStatus.UNKNOWN
    if uptime >= 98:
        return UptimeStatus.EXCELLENT
    if uptime >= 95:
        return UptimeStatus.GOOD
    if uptime >= 90:
        return UptimeStatus.FAIR
    return UptimeStatus.POOR


def classify_water_pressure(psi: int | None) -> WaterStatus:
    if psi is None:
        return WaterStatus.UNKNOWN
    if psi >= 60:
        return WaterStatus.EXCELLENT
    if psi >= 45:
        return WaterStatus.GOOD
    return WaterStatus.FAIR


def classify_internet(mbps: int | None) -> InternetStatus:
    if mbps is None:
        return InternetStatus.UNKNOWN
    if mbps >= 1000:
        return InternetStatus.GIGABIT
    if mbps >= 500:
        return InternetStatus.HIGH_SPEED
    return InternetStatus.STANDARD


def summarize_utility_status(intel: ZoneIntelligence) -> UtilityStatusSummary:
    status = intel.utility_status
    return UtilityStatusSummary(
        zone_id=intel.zone_id,
        power_uptime=status.power_uptime,
        power_status=classify_uptime(status.power_uptime),
        water_pressure=status.water_pressure,
        water_status=classify_water_pressure(status.water_pressure),
        internet_speed=status.internet_speed,
        internet_status=classify_internet(status.internet_speed),
        waste_treatment=status.waste_treatment,
        waste_label="ETP active" if status.waste_treatment else "No ETP",
        last_updated=status.last_updated,
    )
