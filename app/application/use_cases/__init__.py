"""Application use cases: one entry point per workflow."""

from app.application.use_cases.search import SearchService

__all__ = ["SearchService"]
