"""Seed dev data from scripts/seed-data.json into Postgres.

Loads regions and cities (by name; created if missing), then attractions,
selections, trips (skipped when a record with the same title exists in the
city) and tags (by title).

Usage:
    python -m scripts.seed_dev_data [path/to/seed-data.json]

Default path: scripts/seed-data.json (relative to project root).
Requires: DATABASE_URL (Postgres) and an up-to-date schema (alembic upgrade head).
"""

from __future__ import annotations

import asyncio
import json
import sys
from pathlib import Path
from typing import Any

from dotenv import load_dotenv
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.enums import EntityType
from app.infrastructure.persistence.database import _ensure_engine
from app.infrastructure.persistence.models import City, Region, Tag
from app.infrastructure.persistence.repositories.search_repo import RECORD_MODELS


def _project_root() -> Path:
    return Path(__file__).resolve().parent.parent


def _load_env() -> None:
    """Load .env from project root so get_settings() sees DATABASE_URL when run as script."""
    load_dotenv(_project_root() / ".env", override=True)


async def _get_or_create_region(session: AsyncSession, name: str) -> Region:
    if name == EntityType.TAGS.value:
        raise ValueError(f"Region name {name!r} is reserved for the tag list")
    result = await session.execute(select(Region).where(Region.name == name))
    region = result.scalar_one_or_none()
    if region is None:
        region = Region(name=name)
        session.add(region)
        await session.flush()
        print(f"Region {name} -> {region.id}")
    return region


async def _get_or_create_city(session: AsyncSession, name: str, region: Region) -> City:
    result = await session.execute(
        select(City).where(City.name == name, City.region_id == region.id)
    )
    city = result.scalar_one_or_none()
    if city is None:
        city = City(name=name, region_id=region.id)
        session.add(city)
        await session.flush()
        print(f"  City {name} -> {city.id}")
    return city


async def _seed_records(
    session: AsyncSession,
    entity_type: EntityType,
    rows: list[dict[str, Any]],
    city_ids: dict[str, int],
) -> None:
    model: Any = RECORD_MODELS[entity_type]
    for row in rows:
        city_id = city_ids.get(row["city"])
        if city_id is None:
            print(f"  {entity_type.value}: unknown city {row['city']!r}, skip", file=sys.stderr)
            continue
        existing = await session.execute(
            select(model.id).where(model.city_id == city_id, model.title == row["title"])
        )
        if existing.scalar_one_or_none() is not None:
            continue
        session.add(
            model(
                city_id=city_id,
                title=row["title"],
                description=row.get("description"),
                title_en=row.get("title_en"),
                description_en=row.get("description_en"),
            )
        )
    await session.flush()
    print(f"  {entity_type.value}: {len(rows)} rows processed")


async def run(path: Path) -> None:
    _load_env()
    if not path.exists():
        print(f"Seed file not found: {path}", file=sys.stderr)
        sys.exit(1)
    with path.open(encoding="utf-8") as f:
        data = json.load(f)

    _ensure_engine()
    from app.infrastructure.persistence import database as db_mod

    if db_mod.AsyncSessionLocal is None:
        print(
            "AsyncSessionLocal not configured. Set DATABASE_URL and run: alembic upgrade head",
            file=sys.stderr,
        )
        sys.exit(1)

    async with db_mod.AsyncSessionLocal() as session:
        async with session.begin():
            city_ids: dict[str, int] = {}
            for region_data in data.get("regions", []):
                region = await _get_or_create_region(session, region_data["name"])
                for city_name in region_data.get("cities", []):
                    city = await _get_or_create_city(session, city_name, region)
                    city_ids[city_name] = city.id

            for entity_type in EntityType.city_scoped():
                await _seed_records(
                    session, entity_type, data.get(entity_type.value, []), city_ids
                )

            for title in data.get("tags", []):
                existing = await session.execute(select(Tag.id).where(Tag.title == title))
                if existing.scalar_one_or_none() is None:
                    session.add(Tag(title=title))
            print(f"  tags: {len(data.get('tags', []))} rows processed")

    await db_mod.dispose_engine()


def main() -> None:
    default_path = _project_root() / "scripts" / "seed-data.json"
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else default_path
    asyncio.run(run(path))


if __name__ == "__main__":
    main()
