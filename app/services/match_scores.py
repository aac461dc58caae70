"""Per-participant game score aggregates."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import GameScore, MatchParticipant
from app.schemas.match import ParticipantScoreSummary
from app.services.results import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


def summarize_scores(participant_id: int, scores: list[int]) -> ParticipantScoreSummary:
    """Total/average/extremes over a participant's game scores; zeros when empty."""
    if not scores:
        return ParticipantScoreSummary(participant_id=participant_id)

    total = sum(scores)
    return ParticipantScoreSummary(
        participant_id=participant_id,
        total_score=total,
        average_score=total / len(scores),
        game_count=len(scores),
        highest_score=max(scores),
        lowest_score=min(scores),
    )


async def get_participant_score_summary(
    db: AsyncSession, participant_id: int
) -> ServiceResult[ParticipantScoreSummary]:
    try:
        participant = await db.execute(
            select(MatchParticipant.id).where(MatchParticipant.id == participant_id)
        )
        if participant.scalar_one_or_none() is None:
            return ServiceResult.fail(ServiceError.participant_not_found)

        result = await db.execute(
            select(GameScore.score).where(GameScore.match_participant_id == participant_id)
        )
        scores = [row[0] for row in result.all()]
    except SQLAlchemyError as exc:
        logger.exception("Failed to aggregate game scores for participant %s", participant_id)
        return ServiceResult.fail(ServiceError.database_error, str(exc))

    return ServiceResult.ok(summarize_scores(participant_id, scores))
