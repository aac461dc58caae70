import uuid
from datetime import datetime
from sqlalchemy import Integer, DateTime, ForeignKey, Uuid, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class MatchParticipant(Base):
    __tablename__ = "match_participants"
    __table_args__ = (
        UniqueConstraint("match_id", "team_id", name="uq_match_participants_match_team"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    match_id: Mapped[int] = mapped_column(Integer, ForeignKey("matches.id"), nullable=False, index=True)
    team_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("schools_teams.id"), nullable=False, index=True
    )
    match_score: Mapped[int | None] = mapped_column(Integer)  # NULL until scores are entered
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships
    match: Mapped["Match"] = relationship("Match", back_populates="participants")
    team: Mapped["SchoolTeam"] = relationship("SchoolTeam", back_populates="participations")
    game_scores: Mapped[list["GameScore"]] = relationship(
        "GameScore", back_populates="participant", cascade="all, delete-orphan"
    )
