"""Public standings endpoints: full standings, navigation, per-stage views, selector options."""

from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.errors import unwrap_result
from app.schemas.standings import (
    BracketStandings,
    CategoryOptionListResponse,
    GroupStageStandings,
    SeasonOptionListResponse,
    SportOptionListResponse,
    StandingsFilters,
    StandingsNavigation,
    StandingsResponse,
)
from app.services.standings import (
    get_bracket_standings,
    get_group_stage_standings,
    get_standings,
)
from app.services.standings_navigation import get_standings_navigation
from app.services.standings_options import (
    get_available_categories,
    get_available_seasons,
    get_available_sports,
)

router = APIRouter(prefix="/standings", tags=["standings"])

LANG_QUERY = Query(default="en", pattern="^(en|fil)$")


@router.get("", response_model=StandingsResponse)
async def read_standings(
    season_id: int | None = Query(default=None, gt=0),
    sport_id: int | None = Query(default=None, gt=0),
    sport_category_id: int | None = Query(default=None, gt=0),
    stage_id: int | None = Query(default=None, gt=0, description="Defaults to the first stage"),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    """
    Get standings for a season + sport + category.

    Group stages are returned as a points table, play-ins/playoffs/finals
    as a bracket.
    """
    filters = StandingsFilters(
        season_id=season_id,
        sport_id=sport_id,
        sport_category_id=sport_category_id,
        stage_id=stage_id,
    )
    return unwrap_result(await get_standings(db, filters), lang)


@router.get("/navigation", response_model=StandingsNavigation)
async def read_standings_navigation(
    season_id: int | None = Query(default=None, gt=0),
    sport_id: int | None = Query(default=None, gt=0),
    sport_category_id: int | None = Query(default=None, gt=0),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    filters = StandingsFilters(
        season_id=season_id,
        sport_id=sport_id,
        sport_category_id=sport_category_id,
    )
    return unwrap_result(await get_standings_navigation(db, filters), lang)


@router.get("/stages/{stage_id}/group", response_model=GroupStageStandings)
async def read_group_stage_standings(
    stage_id: int = Path(gt=0),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    return unwrap_result(await get_group_stage_standings(db, stage_id), lang)


@router.get("/stages/{stage_id}/bracket", response_model=BracketStandings)
async def read_bracket_standings(
    stage_id: int = Path(gt=0),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    return unwrap_result(await get_bracket_standings(db, stage_id), lang)


@router.get("/seasons", response_model=SeasonOptionListResponse)
async def read_available_seasons(
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    items = unwrap_result(await get_available_seasons(db), lang)
    return SeasonOptionListResponse(items=items, total=len(items))


@router.get("/seasons/{season_id}/sports", response_model=SportOptionListResponse)
async def read_available_sports(
    season_id: int = Path(gt=0),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    items = unwrap_result(await get_available_sports(db, season_id), lang)
    return SportOptionListResponse(items=items, total=len(items))


@router.get(
    "/seasons/{season_id}/sports/{sport_id}/categories",
    response_model=CategoryOptionListResponse,
)
async def read_available_categories(
    season_id: int = Path(gt=0),
    sport_id: int = Path(gt=0),
    lang: str = LANG_QUERY,
    db: AsyncSession = Depends(get_db),
):
    items = unwrap_result(await get_available_categories(db, season_id, sport_id), lang)
    return CategoryOptionListResponse(items=items, total=len(items))
