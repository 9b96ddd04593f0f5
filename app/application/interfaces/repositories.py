"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.search import LanguageColumns, SearchRecord, TagRecord
    from app.domain.enums import EntityType


class ISearchRepository(Protocol):
    """Protocol for pattern search over attractions, selections, trips and tags."""

    async def find_records(
        self,
        entity_type: EntityType,
        columns: LanguageColumns,
        pattern: str,
        city_id: int | None = None,
    ) -> list[SearchRecord]:
        """Return records whose title or description column matches pattern (~*).

        When city_id is given only records of that city are returned. City and
        region are loaded in the same fetch.
        """

    async def find_tags(self, pattern: str) -> list[TagRecord]:
        """Return tags whose title matches pattern (~*)."""


class ICityRepository(Protocol):
    """Protocol for city lookups used by request validation."""

    async def exists(self, entity_id: int) -> bool:
        """Return True if a city with this id exists."""
