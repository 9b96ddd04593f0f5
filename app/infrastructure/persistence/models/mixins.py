"""SQLAlchemy mixins for common model patterns (DRY).

Provides: IntegerIdMixin, TimestampMixin, CityScopedMixin, and the combined
SearchableModel used by attractions, selections and trips.
"""

from datetime import datetime
from typing import TYPE_CHECKING

from sqlalchemy import DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, declared_attr, mapped_column, relationship
from sqlalchemy.sql import func

if TYPE_CHECKING:
    from app.infrastructure.persistence.models.geography import City


class IntegerIdMixin:
    """Mixin for models with an autoincrement integer primary key."""

    @declared_attr
    def id(cls) -> Mapped[int]:
        return mapped_column(Integer, primary_key=True, autoincrement=True)


class TimestampMixin:
    """Mixin for created_at and updated_at (server defaults, timezone-aware)."""

    @declared_attr
    def created_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True), server_default=func.now(), nullable=False
        )

    @declared_attr
    def updated_at(cls) -> Mapped[datetime]:
        return mapped_column(
            DateTime(timezone=True),
            server_default=func.now(),
            onupdate=func.now(),
            nullable=False,
        )


class CityScopedMixin:
    """Mixin for records owned by exactly one city (city_id FK + city relationship).

    The relationship raises on lazy load: callers must eager-load city (and
    city.region) in the query that fetches the records.
    """

    @declared_attr
    def city_id(cls) -> Mapped[int]:
        return mapped_column(
            Integer,
            ForeignKey("cities.id", ondelete="CASCADE"),
            nullable=False,
            index=True,
        )

    @declared_attr
    def city(cls) -> Mapped["City"]:
        return relationship("City", lazy="raise")


class LocalizedTextMixin:
    """Mixin for title/description with English counterparts (title_en, description_en)."""

    @declared_attr
    def title(cls) -> Mapped[str]:
        return mapped_column(String(255), nullable=False)

    @declared_attr
    def description(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)

    @declared_attr
    def title_en(cls) -> Mapped[str | None]:
        return mapped_column(String(255), nullable=True)

    @declared_attr
    def description_en(cls) -> Mapped[str | None]:
        return mapped_column(Text, nullable=True)


class SearchableModel(IntegerIdMixin, CityScopedMixin, LocalizedTextMixin, TimestampMixin):
    """Combined mixin: integer id + city_id + localized title/description + timestamps."""

    __abstract__ = True
