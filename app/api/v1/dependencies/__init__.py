"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB-backed repositories and use cases.
Routes depend only on these dependencies, not on infrastructure directly.
Both repositories of a request share the session yielded by get_db.
"""

from app.api.v1.dependencies.search import (
    get_city_repo,
    get_search_repo,
    get_search_service,
)

__all__ = [
    "get_city_repo",
    "get_search_repo",
    "get_search_service",
]
