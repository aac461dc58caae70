from app.models.season import Season
from app.models.sport import Sport, SportCategory, SportDivision, SportLevel
from app.models.school import School
from app.models.school_team import SchoolTeam
from app.models.stage import SportsSeasonStage, CompetitionStage
from app.models.match import Match, MatchStatus
from app.models.match_participant import MatchParticipant
from app.models.game import Game
from app.models.game_score import GameScore

__all__ = [
    "Season",
    "Sport",
    "SportCategory",
    "SportDivision",
    "SportLevel",
    "School",
    "SchoolTeam",
    "SportsSeasonStage",
    "CompetitionStage",
    "Match",
    "MatchStatus",
    "MatchParticipant",
    "Game",
    "GameScore",
]
