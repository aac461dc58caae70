import pytest
from typing import AsyncGenerator
from uuid import UUID
from datetime import datetime

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool

from app.main import app
from app.database import Base
from app.api.deps import get_db  # Import from where routes actually use it
from app.models import (
    Season, Sport, SportCategory, SportDivision, SportLevel,
    School, SchoolTeam, SportsSeasonStage, CompetitionStage,
    Match, MatchStatus, MatchParticipant,
)


TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

TEAM_IDS = {
    "USC": UUID("11111111-1111-1111-1111-111111111111"),
    "UC": UUID("22222222-2222-2222-2222-222222222222"),
    "CIT": UUID("33333333-3333-3333-3333-333333333333"),
    "SWU": UUID("44444444-4444-4444-4444-444444444444"),
}


@pytest.fixture(scope="function")
async def test_engine():
    """Create test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture(scope="function")
async def test_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session = async_sessionmaker(
        test_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session


@pytest.fixture(scope="function")
async def client(test_session) -> AsyncGenerator[AsyncClient, None]:
    """Create test client with overridden database dependency."""

    async def override_get_db():
        yield test_session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


# --- Data Fixtures ---

@pytest.fixture
async def sample_season(test_session) -> Season:
    """Create a sample season."""
    season = Season(
        id=1,
        number=25,
        start_at=datetime(2024, 8, 1),
        end_at=datetime(2025, 5, 31),
    )
    test_session.add(season)
    await test_session.commit()
    await test_session.refresh(season)
    return season


@pytest.fixture
async def sample_sport(test_session) -> Sport:
    """Basketball with men's college and women's college categories."""
    sport = Sport(id=1, name="Basketball")
    test_session.add(sport)
    test_session.add_all([
        SportCategory(id=1, sport_id=1, division=SportDivision.men, levels=SportLevel.college),
        SportCategory(id=2, sport_id=1, division=SportDivision.women, levels=SportLevel.college),
    ])
    await test_session.commit()
    await test_session.refresh(sport)
    return sport


@pytest.fixture
async def sample_teams(test_session, sample_season, sample_sport) -> dict[str, SchoolTeam]:
    """One men's college team per school, keyed by school abbreviation."""
    schools = [
        School(id=1, name="University of San Carlos", abbreviation="USC", logo_url="https://cdn.test/usc.png"),
        School(id=2, name="University of Cebu", abbreviation="UC", logo_url=None),
        School(id=3, name="Cebu Institute of Technology", abbreviation="CIT", logo_url="https://cdn.test/cit.png"),
        School(id=4, name="Southwestern University", abbreviation="SWU", logo_url=None),
    ]
    test_session.add_all(schools)

    teams = {
        school.abbreviation: SchoolTeam(
            id=TEAM_IDS[school.abbreviation],
            name=f"{school.abbreviation} Warriors",
            school_id=school.id,
            season_id=sample_season.id,
            sport_category_id=1,
        )
        for school in schools
    }
    test_session.add_all(teams.values())
    await test_session.commit()
    return teams


@pytest.fixture
async def sample_stages(test_session, sample_season, sample_sport) -> dict[str, SportsSeasonStage]:
    """Men's college stages; ids deliberately out of order_index order."""
    stages = {
        "finals": SportsSeasonStage(
            id=10, name="Finals", competition_stage=CompetitionStage.finals,
            order_index=3, season_id=sample_season.id, sport_category_id=1,
        ),
        "group": SportsSeasonStage(
            id=11, name="Elimination Round", competition_stage=CompetitionStage.group_stage,
            order_index=1, season_id=sample_season.id, sport_category_id=1,
        ),
        "playoffs": SportsSeasonStage(
            id=12, name="Playoffs", competition_stage=CompetitionStage.playoffs,
            order_index=2, season_id=sample_season.id, sport_category_id=1,
        ),
    }
    test_session.add_all(stages.values())
    await test_session.commit()
    return stages


@pytest.fixture
def add_match(test_session):
    """Factory: add a match with (team, score) participants to a stage."""
    counter = {"id": 100}

    async def _add_match(
        stage: SportsSeasonStage,
        participants: list[tuple[SchoolTeam, int | None]],
        status: MatchStatus = MatchStatus.finished,
        scheduled_at: datetime | None = None,
        name: str | None = None,
    ) -> Match:
        counter["id"] += 1
        match = Match(
            id=counter["id"],
            name=name or f"Match {counter['id']}",
            venue="Cebu Coliseum",
            status=status,
            scheduled_at=scheduled_at,
            stage_id=stage.id,
        )
        test_session.add(match)
        await test_session.flush()
        test_session.add_all([
            MatchParticipant(match_id=match.id, team_id=team.id, match_score=score)
            for team, score in participants
        ])
        await test_session.commit()
        return match

    return _add_match


@pytest.fixture
async def round_robin(sample_teams, sample_stages, add_match) -> list[Match]:
    """USC beats UC 2-1, UC beats CIT 1-0, USC draws CIT 1-1, plus one upcoming match."""
    usc, uc, cit = sample_teams["USC"], sample_teams["UC"], sample_teams["CIT"]
    group = sample_stages["group"]
    return [
        await add_match(group, [(usc, 2), (uc, 1)], scheduled_at=datetime(2024, 9, 1, 13)),
        await add_match(group, [(uc, 1), (cit, 0)], scheduled_at=datetime(2024, 9, 2, 13)),
        await add_match(group, [(usc, 1), (cit, 1)], scheduled_at=datetime(2024, 9, 3, 13)),
        await add_match(
            group, [(usc, None), (sample_teams["SWU"], None)],
            status=MatchStatus.upcoming, scheduled_at=datetime(2024, 9, 10, 13),
        ),
    ]
