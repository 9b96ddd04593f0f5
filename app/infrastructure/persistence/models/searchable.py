"""Searchable city-scoped records: Attraction, Selection, Trip.

All three share the same columns (SearchableModel); they are separate tables
because they are separate collections in the guide.
"""

from app.infrastructure.persistence.database import Base
from app.infrastructure.persistence.models.mixins import SearchableModel


class Attraction(SearchableModel, Base):
    """Point of interest in a city. Table: attractions."""

    __tablename__ = "attractions"


class Selection(SearchableModel, Base):
    """Curated selection of places in a city. Table: selections."""

    __tablename__ = "selections"


class Trip(SearchableModel, Base):
    """Trip / excursion starting in a city. Table: trips."""

    __tablename__ = "trips"
