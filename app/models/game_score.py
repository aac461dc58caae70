from datetime import datetime
from sqlalchemy import Integer, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class GameScore(Base):
    __tablename__ = "game_scores"
    __table_args__ = (
        UniqueConstraint("game_id", "match_participant_id", name="uq_game_scores_game_participant"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    game_id: Mapped[int] = mapped_column(Integer, ForeignKey("games.id"), nullable=False, index=True)
    match_participant_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("match_participants.id"), nullable=False, index=True
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships
    game: Mapped["Game"] = relationship("Game", back_populates="scores")
    participant: Mapped["MatchParticipant"] = relationship(
        "MatchParticipant", back_populates="game_scores"
    )
