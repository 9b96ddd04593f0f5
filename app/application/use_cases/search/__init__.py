"""Search use cases: per-type lookup, all-types aggregation, and the search entry point."""

from app.application.use_cases.search.aggregator import (
    ResultAggregator,
    group_by_region,
    merge_by_region,
)
from app.application.use_cases.search.lookup import EntityLookup
from app.application.use_cases.search.service import SearchService

__all__ = [
    "EntityLookup",
    "ResultAggregator",
    "SearchService",
    "group_by_region",
    "merge_by_region",
]
