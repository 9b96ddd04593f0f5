"""Pattern search repository. Uses PostgreSQL case-insensitive regex (~*)."""

from __future__ import annotations

from typing import Any

from sqlalchemy import or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.application.dtos.search import (
    CityRecord,
    LanguageColumns,
    SearchRecord,
    TagRecord,
)
from app.domain.enums import EntityType
from app.domain.exceptions import UnsupportedEntityTypeException
from app.infrastructure.persistence.models.geography import City
from app.infrastructure.persistence.models.mixins import SearchableModel
from app.infrastructure.persistence.models.searchable import Attraction, Selection, Trip
from app.infrastructure.persistence.models.tag import Tag

RECORD_MODELS: dict[EntityType, type[SearchableModel]] = {
    EntityType.ATTRACTIONS: Attraction,
    EntityType.SELECTIONS: Selection,
    EntityType.TRIPS: Trip,
}

# Columns a lookup may match against; anything else is a programming error.
SEARCHABLE_COLUMNS = frozenset({"title", "description", "title_en", "description_en"})


def _to_search_record(row: Any) -> SearchRecord:
    return SearchRecord(
        id=row.id,
        title=row.title,
        description=row.description,
        title_en=row.title_en,
        description_en=row.description_en,
        city=CityRecord(
            id=row.city.id,
            name=row.city.name,
            region_name=row.city.region.name,
        ),
    )


class SearchRepository:
    """Regex search across attractions, selections, trips (city-scoped) and tags."""

    def __init__(self, db: AsyncSession) -> None:
        self.db = db

    async def find_records(
        self,
        entity_type: EntityType,
        columns: LanguageColumns,
        pattern: str,
        city_id: int | None = None,
    ) -> list[SearchRecord]:
        """Return records where (city matches) AND (title ~* pattern OR description ~* pattern).

        City and region are loaded with selectinload so formatting and region
        grouping need no further queries. Ordered by id. An empty pattern
        matches nothing.
        """
        if not pattern:
            return []
        model: Any = RECORD_MODELS.get(entity_type)
        if model is None:
            value = getattr(entity_type, "value", entity_type)
            raise UnsupportedEntityTypeException(str(value))
        for column in (columns.title_column, columns.description_column):
            if column not in SEARCHABLE_COLUMNS:
                raise ValueError(f"Column is not searchable: {column!r}")

        title = getattr(model, columns.title_column)
        description = getattr(model, columns.description_column)
        stmt = (
            select(model)
            .where(
                or_(
                    title.regexp_match(pattern, flags="i"),
                    description.regexp_match(pattern, flags="i"),
                )
            )
            .options(selectinload(model.city).selectinload(City.region))
            .order_by(model.id)
        )
        if city_id is not None:
            stmt = stmt.where(model.city_id == city_id)
        result = await self.db.execute(stmt)
        return [_to_search_record(row) for row in result.scalars().all()]

    async def find_tags(self, pattern: str) -> list[TagRecord]:
        """Return tags where title ~* pattern, ordered by id. Only id and title are read."""
        if not pattern:
            return []
        stmt = (
            select(Tag.id, Tag.title)
            .where(Tag.title.regexp_match(pattern, flags="i"))
            .order_by(Tag.id)
        )
        result = await self.db.execute(stmt)
        return [TagRecord(id=row.id, title=row.title) for row in result.all()]
