"""Pytest configuration and fixtures for the search service.

Uses app.main:app for HTTP tests and app.infrastructure.persistence.database
for DB-dependent fixtures. Unit and API tests run against in-memory fake
repositories that apply the same case-insensitive regex semantics as
PostgreSQL's ~* operator, so they need no database.
"""

import re
from collections.abc import AsyncIterator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.v1.dependencies import get_city_repo, get_search_repo
from app.application.dtos.search import (
    CityRecord,
    LanguageColumns,
    SearchRecord,
    TagRecord,
)
from app.application.services.search_request_validator import SearchRequestValidator
from app.application.use_cases.search import EntityLookup, ResultAggregator, SearchService
from app.domain.enums import EntityType
from app.infrastructure.persistence import database
from app.main import app

MOSCOW_REGION = "Московская область"
LENINGRAD_REGION = "Ленинградская область"

MOSCOW = CityRecord(id=5, name="Москва", region_name=MOSCOW_REGION)
SERGIEV_POSAD = CityRecord(id=6, name="Сергиев Посад", region_name=MOSCOW_REGION)
SAINT_PETERSBURG = CityRecord(id=7, name="Санкт-Петербург", region_name=LENINGRAD_REGION)


def make_record(
    record_id: int,
    title: str,
    city: CityRecord,
    description: str | None = None,
    title_en: str | None = None,
    description_en: str | None = None,
) -> SearchRecord:
    return SearchRecord(
        id=record_id,
        title=title,
        description=description,
        title_en=title_en,
        description_en=description_en,
        city=city,
    )


GUIDE_RECORDS: dict[EntityType, list[SearchRecord]] = {
    EntityType.ATTRACTIONS: [
        make_record(
            1,
            "Исторический музей",
            MOSCOW,
            "Музей на Красной площади, Москва",
            "Historical Museum",
            "Museum on Red Square",
        ),
        make_record(
            2,
            "Эрмитаж",
            SAINT_PETERSBURG,
            "Музей в Зимнем дворце",
            "Hermitage",
            "Museum in the Winter Palace",
        ),
        make_record(3, "Кремль", MOSCOW, "Московский Кремль", "Kremlin", "Moscow Kremlin"),
    ],
    EntityType.SELECTIONS: [
        make_record(
            10,
            "Музеи Москвы",
            MOSCOW,
            "Лучший музей для детей",
            "Moscow museums",
            "The best museum for kids",
        ),
    ],
    EntityType.TRIPS: [
        make_record(
            20,
            "Из Москвы в Лавру",
            SERGIEV_POSAD,
            "Поездка на один день",
            "From Moscow to the Lavra",
            "A day trip",
        ),
        make_record(
            21,
            "Петергоф",
            SAINT_PETERSBURG,
            "Фонтаны и музей",
            "Peterhof",
            "Fountains and museum",
        ),
    ],
}

GUIDE_TAGS = [
    TagRecord(id=100, title="музей"),
    TagRecord(id=101, title="Москва"),
    TagRecord(id=102, title="фонтаны"),
]


class FakeSearchRepository:
    """In-memory ISearchRepository; records every call for assertions."""

    def __init__(
        self,
        records: dict[EntityType, list[SearchRecord]] | None = None,
        tags: list[TagRecord] | None = None,
    ) -> None:
        self.records = records if records is not None else GUIDE_RECORDS
        self.tags = tags if tags is not None else GUIDE_TAGS
        self.calls: list[tuple] = []

    async def find_records(
        self,
        entity_type: EntityType,
        columns: LanguageColumns,
        pattern: str,
        city_id: int | None = None,
    ) -> list[SearchRecord]:
        self.calls.append(("records", entity_type, columns, pattern, city_id))
        if not pattern:
            return []
        rx = re.compile(pattern, re.IGNORECASE)

        def _matches(record: SearchRecord) -> bool:
            values = (
                getattr(record, columns.title_column),
                getattr(record, columns.description_column),
            )
            return any(v is not None and rx.search(v) for v in values)

        return [
            r
            for r in self.records.get(entity_type, [])
            if (city_id is None or r.city.id == city_id) and _matches(r)
        ]

    async def find_tags(self, pattern: str) -> list[TagRecord]:
        self.calls.append(("tags", pattern))
        if not pattern:
            return []
        rx = re.compile(pattern, re.IGNORECASE)
        return [t for t in self.tags if rx.search(t.title)]


class FakeCityRepository:
    """In-memory ICityRepository."""

    def __init__(self, city_ids: set[int] | None = None) -> None:
        self.city_ids = city_ids if city_ids is not None else {5, 6, 7}

    async def exists(self, entity_id: int) -> bool:
        return entity_id in self.city_ids


@pytest.fixture
def search_repo() -> FakeSearchRepository:
    return FakeSearchRepository()


@pytest.fixture
def city_repo() -> FakeCityRepository:
    return FakeCityRepository()


@pytest.fixture
def search_service(
    search_repo: FakeSearchRepository, city_repo: FakeCityRepository
) -> SearchService:
    """SearchService wired like the composition root, over fake repositories."""
    lookup = EntityLookup(search_repo)
    return SearchService(
        validator=SearchRequestValidator(city_repo),
        entity_lookup=lookup,
        aggregator=ResultAggregator(lookup),
    )


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    """Async HTTP client against the FastAPI app (ASGI), no dependency overrides."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
async def search_client(
    search_repo: FakeSearchRepository, city_repo: FakeCityRepository
) -> AsyncIterator[AsyncClient]:
    """Async HTTP client with search repositories replaced by the fakes."""
    app.dependency_overrides[get_search_repo] = lambda: search_repo
    app.dependency_overrides[get_city_repo] = lambda: city_repo
    transport = ASGITransport(app=app)
    try:
        async with AsyncClient(transport=transport, base_url="http://test") as ac:
            yield ac
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
async def db_session() -> AsyncIterator[AsyncSession]:
    """Database session for repository/integration tests. Rolls back after test.

    Requires DATABASE_URL and a migrated schema. Skips (pytest.skip) when
    Postgres is not configured. Use @pytest.mark.requires_db to mark tests
    that need this fixture; run without DB via: pytest -m 'not requires_db'.
    """
    database._ensure_engine()
    if database.AsyncSessionLocal is None:
        pytest.skip(
            "Postgres not configured: set DATABASE_URL, then run: alembic upgrade head"
        )
    async with database.AsyncSessionLocal() as session:
        yield session
        await session.rollback()
    await database.dispose_engine()
