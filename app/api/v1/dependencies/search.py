"""Search dependencies (composition root)."""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.services.search_request_validator import SearchRequestValidator
from app.application.use_cases.search import EntityLookup, ResultAggregator, SearchService
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import CityRepository, SearchRepository


async def get_search_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SearchRepository:
    """Search repository for regex search (read-only)."""
    return SearchRepository(db)


async def get_city_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> CityRepository:
    """City repository (existence check for the city filter)."""
    return CityRepository(db)


async def get_search_service(
    search_repo: Annotated[SearchRepository, Depends(get_search_repo)],
    city_repo: Annotated[CityRepository, Depends(get_city_repo)],
) -> SearchService:
    """Search use case (attractions, selections, trips, tags)."""
    lookup = EntityLookup(search_repo)
    return SearchService(
        validator=SearchRequestValidator(city_repo),
        entity_lookup=lookup,
        aggregator=ResultAggregator(lookup),
    )
