"""All-types search: run every lookup and merge the results.

With a city the four result lists are returned side by side under their type
name. Without a city, attractions, selections and trips are bucketed by the
name of their region (each item labelled with its type) and tags, which have
no region, go under a separate "tags" key when there are any.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING

from app.application.dtos.search import RegionHit, SearchItem, SearchResult, TagItem
from app.domain.enums import EntityType

if TYPE_CHECKING:
    from app.application.use_cases.search.lookup import EntityLookup

logger = logging.getLogger(__name__)

TAGS_KEY = EntityType.TAGS.value


def group_by_region(items: Iterable[SearchItem]) -> dict[str, list[SearchItem]]:
    """Bucket items by region name; regions and items keep their first-seen order."""
    grouped: dict[str, list[SearchItem]] = {}
    for item in items:
        grouped.setdefault(item.region_name, []).append(item)
    return grouped


def merge_by_region(
    results: Mapping[EntityType, list[SearchItem]],
    tags: list[TagItem],
) -> dict[str, list[RegionHit | TagItem]]:
    """Merge per-type results into region buckets of (type, item) hits.

    Within a region, hits are ordered attractions, then selections, then trips,
    each in lookup order, regardless of the mapping's own order. A region named
    "tags" shares its key with the tag list: its hits come first, then the tags.
    """
    merged: dict[str, list[RegionHit | TagItem]] = {}
    for entity_type in EntityType.city_scoped():
        for item in results.get(entity_type, []):
            merged.setdefault(item.region_name, []).append(
                RegionHit(type=entity_type, item=item)
            )
    if tags:
        if TAGS_KEY in merged:
            logger.warning("Region named %r shares the tags key", TAGS_KEY)
        merged.setdefault(TAGS_KEY, []).extend(tags)
    return merged


class ResultAggregator:
    """Searches attractions, selections, trips and tags and merges the results."""

    def __init__(self, entity_lookup: "EntityLookup") -> None:
        self.entity_lookup = entity_lookup

    async def aggregate_all(
        self,
        pattern: str,
        city_id: int | None = None,
        language: str | None = None,
    ) -> SearchResult:
        """Run all four lookups (no short-circuit) and merge them.

        Lookups share one database session, so they are awaited one after another.
        """
        results: dict[EntityType, list[SearchItem]] = {}
        for entity_type in EntityType.city_scoped():
            results[entity_type] = await self.entity_lookup.lookup(
                entity_type, pattern, city_id, language
            )
        tags = await self.entity_lookup.lookup_tags(pattern)

        if city_id is not None:
            flat: dict[str, list[SearchItem] | list[TagItem]] = {
                entity_type.value: items for entity_type, items in results.items()
            }
            flat[TAGS_KEY] = tags
            return flat
        return merge_by_region(results, tags)
