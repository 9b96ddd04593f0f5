"""Base repository: read-only helpers shared by model repositories."""

from typing import Any, Generic, TypeVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.infrastructure.persistence.database import Base


ModelType = TypeVar("ModelType", bound=Base)


class BaseRepository(Generic[ModelType]):
    """Base repository bound to one model (existence checks by primary key).

    The search service never writes, so there are no create/update/delete hooks.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    async def exists(self, entity_id: int) -> bool:
        """Return True if a record with this primary key exists (no row load)."""
        model: Any = self.model
        result = await self.db.execute(
            select(model.id).where(model.id == entity_id).limit(1)
        )
        return result.scalar_one_or_none() is not None
