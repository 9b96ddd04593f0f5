"""Region and City ORM models. Every city belongs to exactly one region."""

from sqlalchemy import CheckConstraint, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import IntegerIdMixin, TimestampMixin


class Region(IntegerIdMixin, TimestampMixin, Base):
    """Geographic region. Table: regions. Region name is the grouping key of search results."""

    __tablename__ = "regions"
    # "tags" is the key of the tag list in region-grouped search results.
    __table_args__ = (
        CheckConstraint("name <> 'tags'", name="ck_regions_name_not_tags"),
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)


class City(IntegerIdMixin, TimestampMixin, Base):
    """City. Table: cities. Owns attractions, selections and trips."""

    __tablename__ = "cities"

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    region_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("regions.id", ondelete="CASCADE"), nullable=False, index=True
    )

    region: Mapped[Region] = relationship(Region, lazy="raise")
