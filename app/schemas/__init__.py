"""Pydantic request/response schemas for the API."""

from app.schemas.health import HealthResponse
from app.schemas.search import SearchErrorResponse

__all__ = ["HealthResponse", "SearchErrorResponse"]
