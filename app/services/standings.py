"""Standings calculation: group-stage tables, bracket views and the dispatching façade.

The pure builders (aggregate_results, rank_standings, build_bracket, ...)
work on narrow MatchForStandings records and never touch the database.
The async entry points do a single read per request, map ORM rows to those
records, and return a ServiceResult instead of raising.
"""

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import (
    CompetitionStage,
    Match,
    MatchParticipant,
    MatchStatus,
    SchoolTeam,
    SportsSeasonStage,
)
from app.schemas.standings import (
    BracketMatch,
    BracketStandings,
    BracketTeam,
    GroupStageStandings,
    GroupStanding,
    StandingsEntry,
    StandingsFilters,
    StandingsResponse,
    StandingsStage,
)
from app.services.results import ServiceError, ServiceResult
from app.services.standings_navigation import build_stage_item, get_standings_navigation

logger = logging.getLogger(__name__)

POINTS_FOR_WIN = 3
POINTS_FOR_DRAW = 1

FINISHED = MatchStatus.finished.value
GROUP_STAGE = CompetitionStage.group_stage.value
BRACKET_STAGES = frozenset({
    CompetitionStage.playins.value,
    CompetitionStage.playoffs.value,
    CompetitionStage.finals.value,
})


@dataclass(frozen=True)
class TeamSnapshot:
    team_id: UUID
    team_name: str
    school_name: str
    school_abbreviation: str
    school_logo_url: str | None = None


@dataclass(frozen=True)
class ParticipantForStandings:
    team: TeamSnapshot
    score: int | None = None


@dataclass(frozen=True)
class MatchForStandings:
    """Exactly the match fields the standings builders read."""
    match_id: int
    match_name: str
    status: str
    venue: str
    scheduled_at: datetime | None = None
    participants: tuple[ParticipantForStandings, ...] = ()


StageStandings = GroupStageStandings | BracketStandings


# ──────────────────────────────────────────
#  Group stage: aggregation + ranking
# ──────────────────────────────────────────


def _empty_stats(team: TeamSnapshot) -> dict:
    return {
        "team_id": team.team_id,
        "team_name": team.team_name,
        "school_name": team.school_name,
        "school_abbreviation": team.school_abbreviation,
        "school_logo_url": team.school_logo_url,
        "matches_played": 0,
        "wins": 0,
        "losses": 0,
        "draws": 0,
        "goals_for": 0,
        "goals_against": 0,
        "points": 0,
    }


def aggregate_results(matches: Iterable[MatchForStandings]) -> dict[UUID, StandingsEntry]:
    """
    Fold finished matches into per-team records.

    Every team seen in any supplied match gets an entry, keyed in first-seen
    order. Only matches with exactly two participants change the numbers;
    others are skipped. A missing score counts as 0.
    """
    matches = list(matches)
    team_stats: dict[UUID, dict] = {}

    for match in matches:
        for participant in match.participants:
            team = participant.team
            if team.team_id not in team_stats:
                team_stats[team.team_id] = _empty_stats(team)

    for match in matches:
        if len(match.participants) != 2:
            logger.debug(
                "Skipping match %s: expected 2 participants, got %s",
                match.match_id,
                len(match.participants),
            )
            continue

        first, second = match.participants
        first_score = first.score if first.score is not None else 0
        second_score = second.score if second.score is not None else 0

        first_stats = team_stats[first.team.team_id]
        second_stats = team_stats[second.team.team_id]

        for stats, scored, conceded in (
            (first_stats, first_score, second_score),
            (second_stats, second_score, first_score),
        ):
            stats["matches_played"] += 1
            stats["goals_for"] += scored
            stats["goals_against"] += conceded

            if scored > conceded:
                stats["wins"] += 1
                stats["points"] += POINTS_FOR_WIN
            elif scored < conceded:
                stats["losses"] += 1
            else:
                stats["draws"] += 1
                stats["points"] += POINTS_FOR_DRAW

    return {team_id: StandingsEntry(**stats) for team_id, stats in team_stats.items()}


def standings_sort_key(entry: StandingsEntry) -> tuple[int, int, int]:
    return (-entry.points, -entry.goal_difference, -entry.goals_for)


def rank_standings(entries: Iterable[StandingsEntry]) -> list[StandingsEntry]:
    """Order by points, goal difference, goals for; full ties keep input order.

    Returns new entries with 1-based positions; the inputs are left untouched.
    """
    ordered = sorted(entries, key=standings_sort_key)
    return [entry.model_copy(update={"position": i}) for i, entry in enumerate(ordered, 1)]


def build_group_stage_standings(
    stage: StandingsStage, matches: Sequence[MatchForStandings]
) -> GroupStageStandings:
    finished = [match for match in matches if match.status == FINISHED]
    table = rank_standings(aggregate_results(finished).values())
    return GroupStageStandings(
        stage_id=stage.id,
        stage_name=stage.name,
        competition_stage=stage.competition_stage,
        groups=[GroupStanding(group_name=None, teams=table)],
    )


# ──────────────────────────────────────────
#  Brackets
# ──────────────────────────────────────────


def _bracket_team(participant: ParticipantForStandings) -> BracketTeam:
    team = participant.team
    return BracketTeam(
        team_id=team.team_id,
        team_name=team.team_name,
        school_name=team.school_name,
        school_abbreviation=team.school_abbreviation,
        school_logo_url=team.school_logo_url,
        score=participant.score,
    )


def resolve_winner(
    status: str, team1: BracketTeam | None, team2: BracketTeam | None
) -> BracketTeam | None:
    """Higher-scoring side of a finished match with both scores present.

    Unfinished matches, missing sides, missing scores and level scores
    all resolve to no winner.
    """
    if status != FINISHED or team1 is None or team2 is None:
        return None
    if team1.score is None or team2.score is None:
        return None
    if team1.score > team2.score:
        return team1
    if team2.score > team1.score:
        return team2
    return None


def build_bracket(matches: Sequence[MatchForStandings]) -> list[BracketMatch]:
    """
    Lay matches out as bracket slots in the order given.

    Match i goes to round i // 2 + 1 at position i. This assumes the
    matches already arrive in bracket order, two per round.
    """
    bracket: list[BracketMatch] = []
    for index, match in enumerate(matches):
        participants = match.participants
        team1 = _bracket_team(participants[0]) if len(participants) >= 1 else None
        team2 = _bracket_team(participants[1]) if len(participants) >= 2 else None

        bracket.append(
            BracketMatch(
                match_id=match.match_id,
                match_name=match.match_name,
                round=index // 2 + 1,
                position=index,
                team1=team1,
                team2=team2,
                winner=resolve_winner(match.status, team1, team2),
                match_status=match.status,
                scheduled_at=match.scheduled_at,
                venue=match.venue,
            )
        )
    return bracket


def build_bracket_standings(
    stage: StandingsStage, matches: Sequence[MatchForStandings]
) -> BracketStandings:
    return BracketStandings(
        stage_id=stage.id,
        stage_name=stage.name,
        competition_stage=stage.competition_stage,
        bracket=build_bracket(matches),
    )


# ──────────────────────────────────────────
#  Dispatch
# ──────────────────────────────────────────


def select_standings_builder(
    competition_stage: str,
) -> Callable[[StandingsStage, Sequence[MatchForStandings]], StageStandings] | None:
    """Builder for a competition stage tag, or None for an unknown tag."""
    if competition_stage == GROUP_STAGE:
        return build_group_stage_standings
    if competition_stage in BRACKET_STAGES:
        return build_bracket_standings
    return None


def _unrecognized_stage(stage_id: int, competition_stage: str | None) -> ServiceResult:
    logger.error("Stage %s has unrecognized competition stage %r", stage_id, competition_stage)
    return ServiceResult.fail(ServiceError.unrecognized_competition_stage)


def compute_stage_standings(
    stage: StandingsStage, matches: Sequence[MatchForStandings]
) -> ServiceResult[StageStandings]:
    builder = select_standings_builder(stage.competition_stage)
    if builder is None:
        return _unrecognized_stage(stage.id, stage.competition_stage)
    return ServiceResult.ok(builder(stage, matches))


def select_target_stage(
    stages: Sequence[StandingsStage], stage_id: int | None
) -> ServiceResult[StandingsStage]:
    """Explicit stage_id when given, else the first stage in order."""
    if not stages:
        return ServiceResult.fail(ServiceError.stage_not_found)
    if stage_id is None:
        return ServiceResult.ok(stages[0])
    for stage in stages:
        if stage.id == stage_id:
            return ServiceResult.ok(stage)
    return ServiceResult.fail(ServiceError.invalid_stage)


# ──────────────────────────────────────────
#  Data access
# ──────────────────────────────────────────


def _team_snapshot(team: SchoolTeam) -> TeamSnapshot:
    school = team.school
    return TeamSnapshot(
        team_id=team.id,
        team_name=team.name,
        school_name=school.name,
        school_abbreviation=school.abbreviation,
        school_logo_url=school.logo_url,
    )


def to_match_for_standings(match: Match) -> MatchForStandings:
    return MatchForStandings(
        match_id=match.id,
        match_name=match.name,
        status=match.status.value,
        venue=match.venue,
        scheduled_at=match.scheduled_at,
        participants=tuple(
            ParticipantForStandings(team=_team_snapshot(p.team), score=p.match_score)
            for p in match.participants
        ),
    )


async def load_stage_matches(
    db: AsyncSession, stage_id: int, finished_only: bool = False
) -> list[MatchForStandings]:
    """Matches of a stage by scheduled time (unscheduled last), then id."""
    query = (
        select(Match)
        .where(Match.stage_id == stage_id)
        .options(
            selectinload(Match.participants)
            .selectinload(MatchParticipant.team)
            .selectinload(SchoolTeam.school)
        )
        .order_by(Match.scheduled_at.asc().nulls_last(), Match.id)
    )
    if finished_only:
        query = query.where(Match.status == MatchStatus.finished)

    result = await db.execute(query)
    return [to_match_for_standings(match) for match in result.scalars().all()]


async def _load_stage(db: AsyncSession, stage_id: int) -> ServiceResult[StandingsStage]:
    """Stage by id; a stored tag outside CompetitionStage fails to load as LookupError."""
    try:
        result = await db.execute(select(SportsSeasonStage).where(SportsSeasonStage.id == stage_id))
        stage = result.scalar_one_or_none()
    except LookupError:
        return _unrecognized_stage(stage_id, None)

    if stage is None:
        return ServiceResult.fail(ServiceError.invalid_stage)
    return ServiceResult.ok(build_stage_item(stage))


async def _stage_standings(db: AsyncSession, stage: StandingsStage) -> ServiceResult[StageStandings]:
    builder = select_standings_builder(stage.competition_stage)
    if builder is None:
        return _unrecognized_stage(stage.id, stage.competition_stage)

    matches = await load_stage_matches(
        db, stage.id, finished_only=stage.competition_stage == GROUP_STAGE
    )
    return ServiceResult.ok(builder(stage, matches))


async def get_group_stage_standings(
    db: AsyncSession, stage_id: int
) -> ServiceResult[GroupStageStandings]:
    """Points table for one stage, counting finished matches only."""
    try:
        stage_result = await _load_stage(db, stage_id)
        if not stage_result.success:
            return ServiceResult.fail(stage_result.error)
        stage = stage_result.data
        matches = await load_stage_matches(db, stage_id, finished_only=True)
    except SQLAlchemyError as exc:
        logger.exception("Failed to calculate group stage standings for stage %s", stage_id)
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    return ServiceResult.ok(build_group_stage_standings(stage, matches))


async def get_bracket_standings(
    db: AsyncSession, stage_id: int
) -> ServiceResult[BracketStandings]:
    """Bracket view for one stage, matches of any status."""
    try:
        stage_result = await _load_stage(db, stage_id)
        if not stage_result.success:
            return ServiceResult.fail(stage_result.error)
        stage = stage_result.data
        matches = await load_stage_matches(db, stage_id)
    except SQLAlchemyError as exc:
        logger.exception("Failed to get bracket standings for stage %s", stage_id)
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    return ServiceResult.ok(build_bracket_standings(stage, matches))


async def get_standings(
    db: AsyncSession, filters: StandingsFilters
) -> ServiceResult[StandingsResponse]:
    """Navigation plus the standings shape of the selected stage."""
    if not filters.has_scope:
        return ServiceResult.fail(ServiceError.missing_filters)

    navigation_result = await get_standings_navigation(db, filters)
    if not navigation_result.success:
        return ServiceResult.fail(navigation_result.error, navigation_result.detail)
    navigation = navigation_result.data

    target_result = select_target_stage(navigation.stages, filters.stage_id)
    if not target_result.success:
        return ServiceResult.fail(target_result.error)
    stage = target_result.data

    logger.info(
        "Computing %s standings for stage %s (season %s, category %s)",
        stage.competition_stage,
        stage.id,
        filters.season_id,
        filters.sport_category_id,
    )

    try:
        standings_result = await _stage_standings(db, stage)
    except SQLAlchemyError as exc:
        logger.exception("Failed to retrieve standings for stage %s", stage.id)
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    if not standings_result.success:
        return ServiceResult.fail(standings_result.error)

    return ServiceResult.ok(
        StandingsResponse(navigation=navigation, standings=standings_result.data)
    )
