"""City repository. Used by search validation to check that a city exists."""

from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.models.geography import City
from app.infrastructure.persistence.repositories.base import BaseRepository


class CityRepository(BaseRepository[City]):
    """Read access to cities (ICityRepository)."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, City)
