"""Search API: pattern search across attractions, selections, trips and tags."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query

from app.api.v1.dependencies import get_search_service
from app.application.dtos.search import SearchRequest
from app.application.use_cases.search import SearchService
from app.schemas.search import SearchErrorResponse

router = APIRouter()


@router.get(
    "",
    responses={
        200: {
            "description": (
                "List of items (type given), per-type mapping (city given), "
                "or mapping of region name to items (no city)"
            )
        },
        422: {"description": "Validation failed", "model": SearchErrorResponse},
    },
)
async def search(
    search_svc: Annotated[SearchService, Depends(get_search_service)],
    query: str | None = Query(None, description="Search text (3+ characters per word)"),
    entity_type: str | None = Query(
        None,
        alias="type",
        description="attractions | selections | trips | tags (omit to search all)",
    ),
    city: str | None = Query(None, description="City id; disables grouping by region"),
    lang: str | None = Query(None, description="'En' for English titles/descriptions"),
):
    """Search by keyword; validation errors return 422 with the first message."""
    return await search_svc.search(
        SearchRequest(query=query, type=entity_type, city=city, lang=lang)
    )
