import enum
from datetime import datetime
from sqlalchemy import Integer, String, DateTime, ForeignKey, Enum, Index
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class CompetitionStage(str, enum.Enum):
    """Phase of a competition; decides which standings shape is rendered."""
    group_stage = "group_stage"
    playins = "playins"
    playoffs = "playoffs"
    finals = "finals"


class SportsSeasonStage(Base):
    """One ordered phase of a sport category's competition within a season."""
    __tablename__ = "sports_seasons_stages"
    __table_args__ = (
        Index("ix_sports_seasons_stages_season_category", "season_id", "sport_category_id"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    competition_stage: Mapped[CompetitionStage] = mapped_column(
        Enum(CompetitionStage), nullable=False
    )
    order_index: Mapped[int] = mapped_column(Integer, nullable=False, default=0, server_default="0")
    season_id: Mapped[int] = mapped_column(Integer, ForeignKey("seasons.id"), nullable=False)
    sport_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sports_categories.id"), nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships
    season: Mapped["Season"] = relationship("Season", back_populates="stages")
    sport_category: Mapped["SportCategory"] = relationship("SportCategory", back_populates="stages")
    matches: Mapped[list["Match"]] = relationship("Match", back_populates="stage")
