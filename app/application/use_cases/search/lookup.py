"""Per-type lookup: match, eager-load city/region, format in the request language."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.application.dtos.search import SearchItem, TagItem
from app.application.services.formatters import format_tag, get_record_formatter
from app.application.services.language_resolver import resolve_language
from app.domain.enums import EntityType
from app.domain.exceptions import UnsupportedEntityTypeException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ISearchRepository


class EntityLookup:
    """Runs one pattern lookup against one searchable collection."""

    def __init__(self, search_repo: "ISearchRepository") -> None:
        self.search_repo = search_repo

    async def lookup(
        self,
        entity_type: EntityType | str,
        pattern: str,
        city_id: int | None = None,
        language: str | None = None,
    ) -> list[SearchItem]:
        """Return formatted attractions, selections or trips matching pattern.

        Title/description columns and the formatter follow the language. Tags
        are not served here (no city, no language variant); use lookup_tags.

        Raises:
            UnsupportedEntityTypeException: entity_type is tags or unknown.
        """
        try:
            entity_type = EntityType(entity_type)
        except ValueError as e:
            raise UnsupportedEntityTypeException(str(entity_type)) from e
        if not entity_type.is_city_scoped:
            raise UnsupportedEntityTypeException(entity_type.value)

        columns = resolve_language(language)
        formatter = get_record_formatter(entity_type, columns.variant)
        records = await self.search_repo.find_records(
            entity_type, columns, pattern, city_id
        )
        return [formatter(record) for record in records]

    async def lookup_tags(self, pattern: str) -> list[TagItem]:
        """Return formatted tags whose title matches pattern (city and language ignored)."""
        records = await self.search_repo.find_tags(pattern)
        return [format_tag(record) for record in records]
