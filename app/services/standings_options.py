"""Season/sport/category choices offered by the standings page selectors."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Season, SportCategory, SportsSeasonStage
from app.schemas.standings import CategoryOption, SeasonOption, SportOption
from app.services.results import ServiceError, ServiceResult
from app.services.standings_navigation import build_category_option, build_season_option

logger = logging.getLogger(__name__)


async def _season_exists(db: AsyncSession, season_id: int) -> bool:
    result = await db.execute(select(Season.id).where(Season.id == season_id))
    return result.scalar_one_or_none() is not None


async def get_available_seasons(db: AsyncSession) -> ServiceResult[list[SeasonOption]]:
    """All seasons, newest first."""
    try:
        result = await db.execute(select(Season).order_by(Season.start_at.desc(), Season.id.desc()))
        seasons = result.scalars().all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to load available seasons")
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    return ServiceResult.ok([build_season_option(s) for s in seasons])


async def get_available_sports(
    db: AsyncSession, season_id: int
) -> ServiceResult[list[SportOption]]:
    """Distinct sports with at least one stage in the season."""
    try:
        if not await _season_exists(db, season_id):
            return ServiceResult.fail(ServiceError.season_not_found)

        result = await db.execute(
            select(SportCategory)
            .join(SportsSeasonStage, SportsSeasonStage.sport_category_id == SportCategory.id)
            .where(SportsSeasonStage.season_id == season_id)
            .options(selectinload(SportCategory.sport))
            .order_by(SportsSeasonStage.order_index, SportsSeasonStage.id)
        )
        categories = result.scalars().all()
    except SQLAlchemyError as exc:
        logger.exception("Failed to load available sports for season %s", season_id)
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    sports: dict[int, SportOption] = {}
    for category in categories:
        sport = category.sport
        if sport.id not in sports:
            sports[sport.id] = SportOption(id=sport.id, name=sport.name)

    return ServiceResult.ok(list(sports.values()))


async def get_available_categories(
    db: AsyncSession, season_id: int, sport_id: int
) -> ServiceResult[list[CategoryOption]]:
    """Distinct categories of a sport with at least one stage in the season."""
    try:
        if not await _season_exists(db, season_id):
            return ServiceResult.fail(ServiceError.season_not_found)

        result = await db.execute(
            select(SportCategory)
            .join(SportsSeasonStage, SportsSeasonStage.sport_category_id == SportCategory.id)
            .where(
                SportsSeasonStage.season_id == season_id,
                SportCategory.sport_id == sport_id,
            )
            .order_by(SportsSeasonStage.order_index, SportsSeasonStage.id)
        )
        rows = result.scalars().all()
    except SQLAlchemyError as exc:
        logger.exception(
            "Failed to load available categories for season %s sport %s", season_id, sport_id
        )
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    options: dict[int, CategoryOption] = {}
    for category in rows:
        if category.id not in options:
            options[category.id] = build_category_option(category)

    return ServiceResult.ok(list(options.values()))
