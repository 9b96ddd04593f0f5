"""Formatters: shape storage records into caller-facing items per language.

Each city-scoped collection has its own default and English formatter; tags
have a single language-invariant formatter. Formatters are looked up through
an explicit (entity type, variant) table.
"""

from collections.abc import Callable

from app.application.dtos.search import (
    CityItem,
    RegionItem,
    SearchItem,
    SearchRecord,
    TagItem,
    TagRecord,
)
from app.domain.enums import EntityType, LanguageVariant
from app.domain.exceptions import UnsupportedEntityTypeException

RecordFormatter = Callable[[SearchRecord], SearchItem]


def _city_item(record: SearchRecord) -> CityItem:
    return CityItem(
        id=record.city.id,
        name=record.city.name,
        region=RegionItem(name=record.city.region_name),
    )


def format_attraction(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title,
        description=record.description,
        city=_city_item(record),
    )


def format_attraction_en(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title_en,
        description=record.description_en,
        city=_city_item(record),
    )


def format_selection(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title,
        description=record.description,
        city=_city_item(record),
    )


def format_selection_en(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title_en,
        description=record.description_en,
        city=_city_item(record),
    )


def format_trip(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title,
        description=record.description,
        city=_city_item(record),
    )


def format_trip_en(record: SearchRecord) -> SearchItem:
    return SearchItem(
        id=record.id,
        title=record.title_en,
        description=record.description_en,
        city=_city_item(record),
    )


def format_tag(record: TagRecord) -> TagItem:
    return TagItem(id=record.id, title=record.title)


RECORD_FORMATTERS: dict[EntityType, dict[LanguageVariant, RecordFormatter]] = {
    EntityType.ATTRACTIONS: {
        LanguageVariant.DEFAULT: format_attraction,
        LanguageVariant.ENGLISH: format_attraction_en,
    },
    EntityType.SELECTIONS: {
        LanguageVariant.DEFAULT: format_selection,
        LanguageVariant.ENGLISH: format_selection_en,
    },
    EntityType.TRIPS: {
        LanguageVariant.DEFAULT: format_trip,
        LanguageVariant.ENGLISH: format_trip_en,
    },
}


def get_record_formatter(
    entity_type: EntityType, variant: LanguageVariant
) -> RecordFormatter:
    """Return the formatter for a city-scoped type and language variant.

    Raises:
        UnsupportedEntityTypeException: For tags (use format_tag) or unknown types.
    """
    try:
        return RECORD_FORMATTERS[entity_type][variant]
    except KeyError as e:
        value = getattr(entity_type, "value", entity_type)
        raise UnsupportedEntityTypeException(str(value)) from e
