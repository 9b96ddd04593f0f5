"""Search entry point: validate, normalize, dispatch."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from app.application.dtos.search import SearchRequest, SearchResult
from app.application.services.query_normalizer import normalize_query, query_tokens
from app.application.use_cases.search.aggregator import group_by_region
from app.domain.enums import EntityType
from app.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from app.application.services.search_request_validator import SearchRequestValidator
    from app.application.use_cases.search.aggregator import ResultAggregator
    from app.application.use_cases.search.lookup import EntityLookup

logger = logging.getLogger(__name__)


class SearchService:
    """Multi-entity search over attractions, selections, trips and tags."""

    def __init__(
        self,
        validator: "SearchRequestValidator",
        entity_lookup: "EntityLookup",
        aggregator: "ResultAggregator",
    ) -> None:
        self.validator = validator
        self.entity_lookup = entity_lookup
        self.aggregator = aggregator

    async def search(self, request: SearchRequest) -> SearchResult:
        """Validate the request and return the search result.

        Without a type every collection is searched (ResultAggregator); with a
        type only that collection is. The normalized pattern is computed once
        and shared by every lookup of the request.

        Raises:
            ValidationException: First failing rule (query, city, type).
        """
        try:
            validated = await self.validator.validate(request)
        except ValidationException as e:
            logger.info(
                "Search request rejected (field=%s): %s",
                e.details.get("field"),
                e.message,
            )
            raise

        pattern = normalize_query(validated.query)
        logger.debug(
            "Search pattern=%r tokens=%d type=%s city_id=%s lang=%s",
            pattern,
            len(query_tokens(pattern)),
            validated.entity_type.value if validated.entity_type else "all",
            validated.city_id,
            validated.language,
        )

        if validated.entity_type is None:
            return await self.aggregator.aggregate_all(
                pattern, validated.city_id, validated.language
            )
        return await self.search_type(
            validated.entity_type, pattern, validated.city_id, validated.language
        )

    async def search_type(
        self,
        entity_type: EntityType,
        pattern: str,
        city_id: int | None = None,
        language: str | None = None,
    ) -> SearchResult:
        """Search a single collection.

        Tags are always a flat list. Other types are a flat list for a city and
        grouped by region name otherwise.
        """
        if entity_type is EntityType.TAGS:
            return await self.entity_lookup.lookup_tags(pattern)
        items = await self.entity_lookup.lookup(entity_type, pattern, city_id, language)
        if city_id is not None:
            return items
        return group_by_region(items)
