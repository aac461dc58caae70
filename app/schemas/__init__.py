from app.schemas.standings import (
    StandingsFilters,
    StandingsEntry,
    GroupStanding,
    GroupStageStandings,
    BracketTeam,
    BracketMatch,
    BracketStandings,
    SeasonOption,
    SportOption,
    CategoryOption,
    StandingsStage,
    StandingsNavigation,
    StandingsResponse,
)
from app.schemas.match import ParticipantScoreSummary

__all__ = [
    "StandingsFilters",
    "StandingsEntry",
    "GroupStanding",
    "GroupStageStandings",
    "BracketTeam",
    "BracketMatch",
    "BracketStandings",
    "SeasonOption",
    "SportOption",
    "CategoryOption",
    "StandingsStage",
    "StandingsNavigation",
    "StandingsResponse",
    "ParticipantScoreSummary",
]
