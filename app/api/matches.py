from fastapi import APIRouter, Depends, Path, Query
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.api.errors import unwrap_result
from app.schemas.match import ParticipantScoreSummary
from app.services.match_scores import get_participant_score_summary

router = APIRouter(prefix="/matches", tags=["matches"])


@router.get(
    "/participants/{participant_id}/score-summary",
    response_model=ParticipantScoreSummary,
)
async def read_participant_score_summary(
    participant_id: int = Path(gt=0),
    lang: str = Query(default="en", pattern="^(en|fil)$"),
    db: AsyncSession = Depends(get_db),
):
    """Total, average and extremes of a participant's scores across the match's games."""
    return unwrap_result(await get_participant_score_summary(db, participant_id), lang)
