from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, computed_field


class StandingsFilters(BaseModel):
    season_id: int | None = None
    sport_id: int | None = None
    sport_category_id: int | None = None
    stage_id: int | None = None

    @property
    def has_scope(self) -> bool:
        """True when season, sport and category are all given."""
        return bool(self.season_id and self.sport_id and self.sport_category_id)


class StandingsEntry(BaseModel):
    team_id: UUID
    team_name: str
    school_name: str
    school_abbreviation: str
    school_logo_url: str | None = None

    # Match statistics
    matches_played: int = 0
    wins: int = 0
    losses: int = 0
    draws: int = 0

    # Scoring statistics
    goals_for: int = 0
    goals_against: int = 0

    points: int = 0
    position: int = 0

    @computed_field
    @property
    def goal_difference(self) -> int:
        return self.goals_for - self.goals_against


class GroupStanding(BaseModel):
    group_name: str | None = None
    teams: list[StandingsEntry]


class GroupStageStandings(BaseModel):
    stage_id: int
    stage_name: str
    competition_stage: str
    groups: list[GroupStanding]


class BracketTeam(BaseModel):
    team_id: UUID
    team_name: str
    school_name: str
    school_abbreviation: str
    school_logo_url: str | None = None
    score: int | None = None


class BracketMatch(BaseModel):
    match_id: int
    match_name: str
    round: int
    position: int
    team1: BracketTeam | None = None
    team2: BracketTeam | None = None
    winner: BracketTeam | None = None
    match_status: str
    scheduled_at: datetime | None = None
    venue: str


class BracketStandings(BaseModel):
    stage_id: int
    stage_name: str
    competition_stage: str
    bracket: list[BracketMatch]


class SeasonOption(BaseModel):
    id: int
    name: str
    start_at: datetime
    end_at: datetime


class SportOption(BaseModel):
    id: int
    name: str


class CategoryOption(BaseModel):
    id: int
    division: str
    levels: str
    display_name: str


class StandingsStage(BaseModel):
    id: int
    name: str
    competition_stage: str
    order: int


class StandingsNavigation(BaseModel):
    season: SeasonOption
    sport: SportOption
    category: CategoryOption
    stages: list[StandingsStage]


class StandingsResponse(BaseModel):
    navigation: StandingsNavigation
    standings: GroupStageStandings | BracketStandings


class SeasonOptionListResponse(BaseModel):
    items: list[SeasonOption]
    total: int


class SportOptionListResponse(BaseModel):
    items: list[SportOption]
    total: int


class CategoryOptionListResponse(BaseModel):
    items: list[CategoryOption]
    total: int
