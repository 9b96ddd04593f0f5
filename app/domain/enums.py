"""Domain enumerations for the travel search service.

Enums represent fixed sets of domain values (searchable entity types, languages).
"""

from enum import Enum


class EntityType(str, Enum):
    """Searchable collection selected by the ``type`` filter.

    Attractions, selections and trips are city-scoped and have English columns.
    Tags are global and language-invariant.
    """

    ATTRACTIONS = "attractions"
    SELECTIONS = "selections"
    TRIPS = "trips"
    TAGS = "tags"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid type values as strings.

        Returns:
            List of enum value strings (e.g. for validation or serialization).
        """
        return [entity_type.value for entity_type in cls]

    @classmethod
    def city_scoped(cls) -> tuple["EntityType", ...]:
        """Return the city-scoped types in lookup order (attractions, selections, trips)."""
        return (cls.ATTRACTIONS, cls.SELECTIONS, cls.TRIPS)

    @property
    def is_city_scoped(self) -> bool:
        return self is not EntityType.TAGS


class LanguageVariant(str, Enum):
    """Formatter variant resolved from the request language."""

    DEFAULT = "default"
    ENGLISH = "english"


# Value of the ``lang`` parameter that selects the English columns and formatters.
ENGLISH_LANGUAGE_MARKER = "En"
