"""Tag ORM model. Tags are global (no city) and have no English title."""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin


class Tag(IntegerIdMixin, TimestampMixin, Base):
    """Tag. Table: tags."""

    __tablename__ = "tags"

    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
