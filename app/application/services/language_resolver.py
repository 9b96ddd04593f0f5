"""Language → columns/formatter variant resolution for searchable records."""

from app.application.dtos.search import LanguageColumns
from app.domain.enums import ENGLISH_LANGUAGE_MARKER, LanguageVariant

DEFAULT_COLUMNS = LanguageColumns(
    title_column="title",
    description_column="description",
    variant=LanguageVariant.DEFAULT,
)
ENGLISH_COLUMNS = LanguageColumns(
    title_column="title_en",
    description_column="description_en",
    variant=LanguageVariant.ENGLISH,
)


def resolve_language(language: str | None) -> LanguageColumns:
    """Return title/description columns and formatter variant for a language.

    Only the exact English marker ("En") selects the *_en columns; any other
    value, including None, falls back to the default columns.
    """
    if language == ENGLISH_LANGUAGE_MARKER:
        return ENGLISH_COLUMNS
    return DEFAULT_COLUMNS
