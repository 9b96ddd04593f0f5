"""Search and city repository integration tests. Require Postgres; session is rolled back after each test."""

import uuid

import pytest
from sqlalchemy.exc import IntegrityError

from app.application.services.language_resolver import DEFAULT_COLUMNS, ENGLISH_COLUMNS
from app.domain.enums import EntityType
from app.infrastructure.persistence.models import Attraction, City, Region, Tag, Trip
from app.infrastructure.persistence.repositories import CityRepository, SearchRepository


async def _seed_city(db_session, suffix: str) -> City:
    region = Region(name=f"Регион {suffix}")
    db_session.add(region)
    await db_session.flush()
    city = City(name=f"Город {suffix}", region_id=region.id)
    db_session.add(city)
    await db_session.flush()
    return city


@pytest.mark.requires_db
async def test_find_records_matches_title_or_description(db_session) -> None:
    marker = uuid.uuid4().hex[:12]
    city = await _seed_city(db_session, marker)
    db_session.add_all(
        [
            Attraction(title=f"Музей {marker}", description=None, city_id=city.id),
            Attraction(title="Парк", description=f"Рядом с {marker}", city_id=city.id),
            Attraction(title="Мост", description="Старый мост", city_id=city.id),
        ]
    )
    await db_session.flush()

    repo = SearchRepository(db_session)
    found = await repo.find_records(
        EntityType.ATTRACTIONS, DEFAULT_COLUMNS, marker.upper(), city.id
    )
    assert [r.title for r in found] == [f"Музей {marker}", "Парк"]
    assert found[0].city.id == city.id
    assert found[0].city.region_name == f"Регион {marker}"


@pytest.mark.requires_db
async def test_find_records_alternation_and_english_columns(db_session) -> None:
    marker = uuid.uuid4().hex[:12]
    city = await _seed_city(db_session, marker)
    db_session.add_all(
        [
            Trip(title="Поездка", title_en=f"Trip {marker}", city_id=city.id),
            Trip(title="Экскурсия", description_en=f"Walk {marker}x", city_id=city.id),
        ]
    )
    await db_session.flush()

    repo = SearchRepository(db_session)
    found = await repo.find_records(
        EntityType.TRIPS, ENGLISH_COLUMNS, f"nothing-here|{marker}", city.id
    )
    assert [r.title for r in found] == ["Поездка", "Экскурсия"]
    assert await repo.find_records(EntityType.TRIPS, DEFAULT_COLUMNS, marker, city.id) == []


@pytest.mark.requires_db
async def test_find_records_empty_pattern_matches_nothing(db_session) -> None:
    repo = SearchRepository(db_session)
    assert await repo.find_records(EntityType.SELECTIONS, DEFAULT_COLUMNS, "") == []


@pytest.mark.requires_db
async def test_find_tags(db_session) -> None:
    marker = uuid.uuid4().hex[:12]
    db_session.add_all([Tag(title=f"тег-{marker}"), Tag(title=f"другой-{marker}")])
    await db_session.flush()

    repo = SearchRepository(db_session)
    found = await repo.find_tags(f"ТЕГ-{marker}")
    assert [t.title for t in found] == [f"тег-{marker}"]


@pytest.mark.requires_db
async def test_city_exists(db_session) -> None:
    city = await _seed_city(db_session, uuid.uuid4().hex[:12])
    repo = CityRepository(db_session)
    assert await repo.exists(city.id) is True
    assert await repo.exists(2**31 - 1) is False


@pytest.mark.requires_db
async def test_region_cannot_be_named_tags(db_session) -> None:
    """"tags" is the tag-list key in region-grouped results."""
    db_session.add(Region(name="tags"))
    with pytest.raises(IntegrityError):
        await db_session.flush()
