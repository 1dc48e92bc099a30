"""Zone catalogue and intelligence routes."""

from fastapi import APIRouter, Depends, HTTPException

from src.api.deps import get_zones
from src.api.schemas import (
    UtilityStatusSummaryResponse,
    ZoneIntelligenceResponse,
    ZoneResponse,
)
from src.engine.utility_status import summarize_utility_status
from src.engine.zone_intelligence import ZoneDataUnavailableError, get_zone_intelligence
from src.models.zone import Zone, ZoneIntelligence

router = APIRouter(prefix="/api/v1/zones", tags=["zones"])


def _find_zone(zone_id: str, zones: list[Zone]) -> Zone | None:
    return next((z for z in zones if z.id == zone_id), None)


def _resolve_intelligence(zone_id: str, zones: list[Zone]) -> ZoneIntelligence:
    try:
        return get_zone_intelligence(zone_id, _find_zone(zone_id, zones))
    except ZoneDataUnavailableError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("", response_model=list[ZoneResponse])
async def list_zones(zone_type: str | None = None, zones: list[Zone] = Depends(get_zones)):
    """List catalogue zones, optionally filtered by type (SEZ, EPZ, Hi-Tech Park)."""
    if zone_type:
        zones = [z for z in zones if z.type.lower() == zone_type.lower()]
    return [ZoneResponse.model_validate(z) for z in zones]


@router.get("/{zone_id}", response_model=ZoneResponse)
async def get_zone(zone_id: str, zones: list[Zone] = Depends(get_zones)):
    zone = _find_zone(zone_id, zones)
    if zone is None:
        raise HTTPException(status_code=404, detail=f"Zone {zone_id} not found")
    return ZoneResponse.model_validate(zone)


@router.get("/{zone_id}/intelligence", response_model=ZoneIntelligenceResponse)
async def get_intelligence(zone_id: str, zones: list[Zone] = Depends(get_zones)):
    """Soil, infrastructure, utility, environmental and cost attributes for a zone."""
    return ZoneIntelligenceResponse.model_validate(_resolve_intelligence(zone_id, zones))


@router.get("/{zone_id}/utilities", response_model=UtilityStatusSummaryResponse)
async def get_utility_status(zone_id: str, zones: list[Zone] = Depends(get_zones)):
    """Live utility status with display tiers."""
    intel = _resolve_intelligence(zone_id, zones)
    return UtilityStatusSummaryResponse.model_validate(summarize_utility_status(intel))
