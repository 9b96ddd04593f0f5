"""Persistence repositories. Re-exports for dependency injection."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.city_repo import CityRepository
from app.infrastructure.persistence.repositories.search_repo import SearchRepository

__all__ = [
    "BaseRepository",
    "CityRepository",
    "SearchRepository",
]
