from pydantic import BaseModel


class ParticipantScoreSummary(BaseModel):
    participant_id: int
    total_score: int = 0
    average_score: float = 0.0
    game_count: int = 0
    highest_score: int = 0
    lowest_score: int = 0
