"""Search API schemas."""

from pydantic import BaseModel, Field


class SearchErrorResponse(BaseModel):
    """Body of a rejected search request (HTTP 422)."""

    message: str = Field(..., description="First failing validation message")
    code: int = Field(422, description="HTTP status code, repeated in the body")
