"""Domain layer: enums and exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.enums import ENGLISH_LANGUAGE_MARKER, EntityType, LanguageVariant
from app.domain.exceptions import (
    SqlNotConfiguredException,
    TravelSearchException,
    UnsupportedEntityTypeException,
    ValidationException,
)

__all__ = [
    # Enums
    "ENGLISH_LANGUAGE_MARKER",
    "EntityType",
    "LanguageVariant",
    # Exceptions
    "SqlNotConfiguredException",
    "TravelSearchException",
    "UnsupportedEntityTypeException",
    "ValidationException",
]
