"""Application ports: repository protocols implemented by infrastructure."""

from app.application.interfaces.repositories import ICityRepository, ISearchRepository

__all__ = ["ICityRepository", "ISearchRepository"]
