"""DTOs for multi-entity search (no dependency on ORM).

Records are what the storage layer returns (both language variants);
items are what formatters produce for the caller in one language.
"""

from dataclasses import dataclass

from app.domain.enums import EntityType, LanguageVariant


@dataclass(frozen=True)
class SearchRequest:
    """Raw search input as received from the caller (not yet validated)."""

    query: str | None
    type: str | None = None
    city: str | int | None = None
    lang: str | None = None


@dataclass(frozen=True)
class ValidatedSearch:
    """Search input that passed validation. query is trimmed, blanks are None."""

    query: str
    entity_type: EntityType | None
    city_id: int | None
    language: str | None


@dataclass(frozen=True)
class LanguageColumns:
    """Columns to match and formatter variant for one request language."""

    title_column: str
    description_column: str
    variant: LanguageVariant


@dataclass(frozen=True)
class CityRecord:
    """City of a searchable record with its region name (eager-loaded)."""

    id: int
    name: str
    region_name: str


@dataclass(frozen=True)
class SearchRecord:
    """Attraction, selection or trip as read from storage (both languages)."""

    id: int
    title: str
    description: str | None
    title_en: str | None
    description_en: str | None
    city: CityRecord


@dataclass(frozen=True)
class TagRecord:
    """Tag as read from storage."""

    id: int
    title: str


@dataclass(frozen=True)
class RegionItem:
    name: str


@dataclass(frozen=True)
class CityItem:
    id: int
    name: str
    region: RegionItem


@dataclass(frozen=True)
class SearchItem:
    """Formatted attraction, selection or trip in the request language."""

    id: int
    title: str | None
    description: str | None
    city: CityItem

    @property
    def region_name(self) -> str:
        return self.city.region.name


@dataclass(frozen=True)
class TagItem:
    """Formatted tag (language-invariant)."""

    id: int
    title: str


@dataclass(frozen=True)
class RegionHit:
    """Item inside a region bucket, labelled with the collection it came from."""

    type: EntityType
    item: SearchItem


# Flat list (single type with city, or tags), region mapping (single type
# without city), per-type mapping (all types with city) or region mapping with
# a "tags" bucket (all types without city).
SearchResult = (
    list[SearchItem]
    | list[TagItem]
    | dict[str, list[SearchItem]]
    | dict[str, list[SearchItem] | list[TagItem]]
    | dict[str, list[RegionHit | TagItem]]
)
