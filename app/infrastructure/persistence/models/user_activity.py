"""User activity ORM model. Recent searches per user."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base, JsonDocument
from app.infrastructure.persistence.models.mixins import CuidTimestampModel


class UserActivity(CuidTimestampModel, Base):
    """Activity record. Table: user_activity. One row per user."""

    __tablename__ = "user_activity"

    user_id: Mapped[str] = mapped_column(String, nullable=False, unique=True, index=True)
    recent_searches: Mapped[list[str]] = mapped_column(
        JsonDocument, nullable=False, default=list
    )
