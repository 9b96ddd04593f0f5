"""Application DTOs (read-models and request objects, no ORM)."""

from app.application.dtos.search import (
    CityItem,
    CityRecord,
    LanguageColumns,
    RegionHit,
    RegionItem,
    SearchItem,
    SearchRecord,
    SearchRequest,
    SearchResult,
    TagItem,
    TagRecord,
    ValidatedSearch,
)

__all__ = [
    "CityItem",
    "CityRecord",
    "LanguageColumns",
    "RegionHit",
    "RegionItem",
    "SearchItem",
    "SearchRecord",
    "SearchRequest",
    "SearchResult",
    "TagItem",
    "TagRecord",
    "ValidatedSearch",
]
