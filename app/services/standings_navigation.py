"""Stage list and season/sport/category metadata for the standings page."""

import logging
from datetime import datetime

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Season, SportCategory, SportsSeasonStage
from app.schemas.standings import (
    CategoryOption,
    SeasonOption,
    SportOption,
    StandingsFilters,
    StandingsNavigation,
    StandingsStage,
)
from app.services.results import ServiceError, ServiceResult
from app.utils.sports import format_category_name

logger = logging.getLogger(__name__)


def format_season_name(start_at: datetime, end_at: datetime) -> str:
    """Season label from its start/end years, e.g. "2024-2025"."""
    return f"{start_at.year}-{end_at.year}"


def build_season_option(season: Season) -> SeasonOption:
    return SeasonOption(
        id=season.id,
        name=format_season_name(season.start_at, season.end_at),
        start_at=season.start_at,
        end_at=season.end_at,
    )


def build_category_option(category: SportCategory) -> CategoryOption:
    return CategoryOption(
        id=category.id,
        division=category.division.value,
        levels=category.levels.value,
        display_name=format_category_name(category.division, category.levels),
    )


def build_stage_item(stage: SportsSeasonStage) -> StandingsStage:
    return StandingsStage(
        id=stage.id,
        name=stage.name,
        competition_stage=stage.competition_stage.value,
        order=stage.order_index,
    )


async def get_standings_navigation(
    db: AsyncSession, filters: StandingsFilters
) -> ServiceResult[StandingsNavigation]:
    """
    Resolve the ordered stage list for a season + sport + category.

    Stages are ordered by their explicit order_index. Season, sport and
    category metadata are taken from the first stage, since every stage in
    the result shares them.
    """
    if not filters.has_scope:
        return ServiceResult.fail(ServiceError.missing_filters)

    query = (
        select(SportsSeasonStage)
        .join(SportCategory, SportCategory.id == SportsSeasonStage.sport_category_id)
        .where(
            SportsSeasonStage.season_id == filters.season_id,
            SportsSeasonStage.sport_category_id == filters.sport_category_id,
            SportCategory.sport_id == filters.sport_id,
        )
        .options(
            selectinload(SportsSeasonStage.season),
            selectinload(SportsSeasonStage.sport_category).selectinload(SportCategory.sport),
        )
        .order_by(SportsSeasonStage.order_index, SportsSeasonStage.id)
    )

    try:
        result = await db.execute(query)
        stages = list(result.scalars().all())
    except SQLAlchemyError as exc:
        logger.exception("Failed to load standings navigation for %s", filters.model_dump())
        return ServiceResult.fail(ServiceError.database_error, str(exc))
    except LookupError:
        # Stored competition_stage outside CompetitionStage
        logger.error("Unrecognized competition stage among stages for %s", filters.model_dump())
        return ServiceResult.fail(ServiceError.unrecognized_competition_stage)

    if not stages:
        return ServiceResult.fail(ServiceError.stage_not_found)

    first_stage = stages[0]
    category = first_stage.sport_category
    sport = category.sport

    navigation = StandingsNavigation(
        season=build_season_option(first_stage.season),
        sport=SportOption(id=sport.id, name=sport.name),
        category=build_category_option(category),
        stages=[build_stage_item(stage) for stage in stages],
    )
    return ServiceResult.ok(navigation)
