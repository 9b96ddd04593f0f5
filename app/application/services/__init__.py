"""Application services: query normalization, language resolution, formatting, validation."""

from app.application.services.formatters import (
    RECORD_FORMATTERS,
    format_tag,
    get_record_formatter,
)
from app.application.services.language_resolver import resolve_language
from app.application.services.query_normalizer import normalize_query
from app.application.services.search_request_validator import SearchRequestValidator

__all__ = [
    "RECORD_FORMATTERS",
    "SearchRequestValidator",
    "format_tag",
    "get_record_formatter",
    "normalize_query",
    "resolve_language",
]
