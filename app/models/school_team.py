import uuid
from datetime import datetime
from sqlalchemy import Integer, String, Boolean, DateTime, ForeignKey, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.utils.timestamps import utcnow


class SchoolTeam(Base):
    """A school's team entered in one sport category for one season."""
    __tablename__ = "schools_teams"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    school_id: Mapped[int] = mapped_column(Integer, ForeignKey("schools.id"), nullable=False, index=True)
    season_id: Mapped[int] = mapped_column(Integer, ForeignKey("seasons.id"), nullable=False, index=True)
    sport_category_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("sports_categories.id"), nullable=False, index=True
    )
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True, server_default="true")
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), default=utcnow)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )

    # Relationships
    school: Mapped["School"] = relationship("School", back_populates="teams")
    season: Mapped["Season"] = relationship("Season", back_populates="teams")
    sport_category: Mapped["SportCategory"] = relationship("SportCategory")
    participations: Mapped[list["MatchParticipant"]] = relationship(
        "MatchParticipant", back_populates="team"
    )
