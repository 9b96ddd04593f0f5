"""Persistence models: ORM entities and mixins."""

from app.infrastructure.persistence.models.geography import City, Region
from app.infrastructure.persistence.models.mixins import (
    CityScopedMixin,
    IntegerIdMixin,
    LocalizedTextMixin,
    SearchableModel,
    TimestampMixin,
)
from app.infrastructure.persistence.models.searchable import Attraction, Selection, Trip
from app.infrastructure.persistence.models.tag import Tag

__all__ = [
    "Attraction",
    "City",
    "CityScopedMixin",
    "IntegerIdMixin",
    "LocalizedTextMixin",
    "Region",
    "SearchableModel",
    "Selection",
    "Tag",
    "TimestampMixin",
    "Trip",
]
