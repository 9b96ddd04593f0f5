"""Search request validation.

Rules are checked field by field in the order query → city → type and the
first failure is raised; messages are user-facing and returned verbatim.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING

from app.application.dtos.search import SearchRequest, ValidatedSearch
from app.domain.enums import EntityType
from app.domain.exceptions import ValidationException

if TYPE_CHECKING:
    from app.application.interfaces.repositories import ICityRepository

MIN_QUERY_LENGTH = 3
MIN_TOKEN_LENGTH = 3
# cities.id is a 32-bit serial; larger values cannot exist and would overflow the bind.
MAX_CITY_ID = 2**31 - 1

QUERY_REQUIRED_MESSAGE = "Отсутствует ключевое слово."
QUERY_TOO_SHORT_MESSAGE = "Введите не менее трёх символов."
QUERY_TOKEN_TOO_SHORT_MESSAGE = (
    "Отдельно взятые слова должны состоять из трёх или более символов."
)
CITY_NOT_FOUND_MESSAGE = "Город не найден."
UNKNOWN_TYPE_MESSAGE = "Указан несуществующий тип данных."

_TOKEN_SEPARATOR_RE = re.compile(r"[ |]")
# Signed ASCII decimal only: no "_" separators, no non-ASCII digits.
_CITY_ID_RE = re.compile(r"[+-]?[0-9]+")


def _blank_to_none(value: str | int | None) -> str | None:
    """Trim strings; empty strings become None (parameter treated as absent)."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def validate_query(raw: str | None) -> str:
    """Return the trimmed query or raise ValidationException.

    Tokens are split on single spaces and on "|" (which the normalizer keeps as
    an alternation separator), so two consecutive separators produce an empty
    token and fail the token-length rule.
    """
    query = _blank_to_none(raw)
    if query is None:
        raise ValidationException(QUERY_REQUIRED_MESSAGE, field="query")
    if len(query) < MIN_QUERY_LENGTH:
        raise ValidationException(QUERY_TOO_SHORT_MESSAGE, field="query")
    tokens = _TOKEN_SEPARATOR_RE.split(query)
    if any(len(token) < MIN_TOKEN_LENGTH for token in tokens):
        raise ValidationException(QUERY_TOKEN_TOO_SHORT_MESSAGE, field="query")
    return query


def validate_entity_type(raw: str | None) -> EntityType | None:
    """Return the EntityType for raw, None when absent, or raise ValidationException."""
    value = _blank_to_none(raw)
    if value is None:
        return None
    try:
        return EntityType(value)
    except ValueError as e:
        raise ValidationException(UNKNOWN_TYPE_MESSAGE, field="type") from e


class SearchRequestValidator:
    """Validates SearchRequest against the query, city and type rules."""

    def __init__(self, city_repo: "ICityRepository") -> None:
        self.city_repo = city_repo

    async def validate(self, request: SearchRequest) -> ValidatedSearch:
        """Return ValidatedSearch or raise ValidationException with the first failing message."""
        query = validate_query(request.query)
        city_id = await self.validate_city(request.city)
        entity_type = validate_entity_type(request.type)
        return ValidatedSearch(
            query=query,
            entity_type=entity_type,
            city_id=city_id,
            language=_blank_to_none(request.lang),
        )

    async def validate_city(self, raw: str | int | None) -> int | None:
        """Return the city id when it references an existing city; None when absent.

        A value that is not an integer cannot reference a city and is reported
        as not found.
        """
        value = _blank_to_none(raw)
        if value is None:
            return None
        if not _CITY_ID_RE.fullmatch(value):
            raise ValidationException(CITY_NOT_FOUND_MESSAGE, field="city")
        city_id = int(value)
        if not 0 < city_id <= MAX_CITY_ID or not await self.city_repo.exists(city_id):
            raise ValidationException(CITY_NOT_FOUND_MESSAGE, field="city")
        return city_id
