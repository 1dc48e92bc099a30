"""Zone recommendation routes: sector ranking and side-by-side comparison."""

from decimal import Decimal

from fastapi import APIRouter, Depends, HTTPException, Query

from src.api.deps import get_zones
from src.api.schemas import (
    ComparisonRequest,
    RankingResponse,
    SectorProfileResponse,
    SubScoresResponse,
    ZoneComparisonResponse,
    ZoneRankingResponse,
    ZoneResponse,
)
from src.config import settings
from src.engine.zone_intelligence import ZoneDataUnavailableError
from src.engine.zone_scoring import (
    GENERAL_PROFILE,
    SECTOR_PROFILES,
    compare_zone_infrastructure,
    match_sector_profile,
    rank_zones_by_suitability,
)
from src.models.zone import Zone

router = APIRouter(prefix="/api/v1/recommendations", tags=["recommendations"])

_CENTS = Decimal("0.01")


def _round(value: Decimal) -> Decimal:
    return value.quantize(_CENTS)


@router.get("/rank", response_model=RankingResponse)
async def rank_zones(
    sector: str | None = None,
    limit: int | None = Query(None, ge=1),
    zones: list[Zone] = Depends(get_zones),
):
    """Rank catalogue zones for an industry sector, best first."""
    ranked = rank_zones_by_suitability(zones, sector)
    ranked = ranked[: limit or settings.default_rank_limit]

    return RankingResponse(
        sector=sector,
        profile=match_sector_profile(sector).name,
        results=[
            ZoneRankingResponse(
                rank=i,
                zone=ZoneResponse.model_validate(r.zone),
                suitability_score=_round(r.suitability_score),
                strengths=r.strengths,
                weaknesses=r.weaknesses,
            )
            for i, r in enumerate(ranked, start=1)
        ],
    )


@router.post("/compare", response_model=list[ZoneComparisonResponse])
async def compare_zones(req: ComparisonRequest, zones: list[Zone] = Depends(get_zones)):
    """Side-by-side infrastructure sub-scores for the requested zones."""
    try:
        comparisons = compare_zone_infrastructure(req.zone_ids, zones)
    except ZoneDataUnavailableError as e:
        raise HTTPException(status_code=404, detail=str(e))

    return [
        ZoneComparisonResponse(
            zone_id=c.zone_id,
            zone_name=c.zone_name,
            scores=SubScoresResponse(
                power_access=_round(c.scores.power_access),
                gas_access=_round(c.scores.gas_access),
                logistics=_round(c.scores.logistics),
                utility_reliability=_round(c.scores.utility_reliability),
                environmental=_round(c.scores.environmental),
                cost_competitiveness=_round(c.scores.cost_competitiveness),
            ),
            total_score=_round(c.total_score),
        )
        for c in comparisons
    ]


@router.get("/sectors", response_model=list[SectorProfileResponse])
async def list_sector_profiles():
    """Weight presets used to score each sector family."""
    return [
        SectorProfileResponse(
            name=p.name,
            keywords=list(p.keywords + p.words),
            weights=p.weights,
        )
        for p in (*SECTOR_PROFILES, GENERAL_PROFILE)
    ]
