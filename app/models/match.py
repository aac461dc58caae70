import enum
from datetime import datetime
from sqlalchemy import Integer, String, Text, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class MatchStatus(str, enum.Enum):
    """Match lifecycle: upcoming -> ongoing -> finished, or cancelled."""
    upcoming = "upcoming"
    ongoing = "ongoing"
    finished = "finished"
    cancelled = "cancelled"


class Match(Base):
    __tablename__ = "matches"
    __table_args__ = (
        Index("ix_matches_stage_scheduled_at", "stage_id", "scheduled_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="", server_default="")
    venue: Mapped[str] = mapped_column(String(255), nullable=False)
    scheduled_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    start_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    end_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    best_of: Mapped[int] = mapped_column(Integer, nullable=False, default=1, server_default="1")
    status: Mapped[MatchStatus] = mapped_column(
        Enum(MatchStatus), nullable=False, default=MatchStatus.upcoming, server_default="upcoming"
    )
    stage_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sports_seasons_stages.id"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships
    stage: Mapped["SportsSeasonStage"] = relationship("SportsSeasonStage", back_populates="matches")
    participants: Mapped[list["MatchParticipant"]] = relationship(
        "MatchParticipant",
        back_populates="match",
        cascade="all, delete-orphan",
        order_by="MatchParticipant.id",
    )
    games: Mapped[list["Game"]] = relationship(
        "Game", back_populates="match", cascade="all, delete-orphan", order_by="Game.game_number"
    )
