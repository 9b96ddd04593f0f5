"""Centralized exception handlers for the FastAPI app.

Register with register_exception_handlers(app). Maps domain and framework
exceptions to HTTP responses.
"""

import logging
from typing import Any

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.core.config import get_settings
from app.domain.exceptions import TravelSearchException, ValidationException
from app.schemas.search import SearchErrorResponse

logger = logging.getLogger(__name__)

# Map domain error_code to HTTP status when applicable
_ERROR_CODE_STATUS: dict[str, int] = {
    "VALIDATION_ERROR": 422,
    "UNSUPPORTED_ENTITY_TYPE": 400,
    "SERVICE_UNAVAILABLE": 503,
}


def _search_validation_handler(
    request: Request, exc: ValidationException
) -> JSONResponse:
    """Return 422 with {message, code}: the first failing validation message."""
    return JSONResponse(
        status_code=422,
        content=SearchErrorResponse(message=exc.message, code=422).model_dump(),
    )


def _travel_search_exception_handler(
    request: Request, exc: TravelSearchException
) -> JSONResponse:
    """Return JSON from TravelSearchException.to_dict() with appropriate status code."""
    status = _ERROR_CODE_STATUS.get(exc.error_code, 400)
    if status >= 500:
        logger.error("%s: %s", exc.error_code, exc.message)
    return JSONResponse(
        status_code=status,
        content=exc.to_dict(),
    )


def _request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return 422 in the same {message, code} shape, with framework details."""
    return JSONResponse(
        status_code=422,
        content={
            "message": "Request validation failed",
            "code": 422,
            "details": exc.errors(),
        },
    )


def _http_exception_handler(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    """Return JSON for Starlette HTTP exceptions (status + detail)."""
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail, "code": exc.status_code},
    )


def _generic_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Return 500; include detail only when debug is True."""
    logger.exception("Unhandled exception: %s", exc)
    settings = get_settings()
    detail: Any = str(exc) if settings.debug else "Internal server error"
    return JSONResponse(
        status_code=500,
        content={"message": detail, "code": 500},
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Register all exception handlers on the FastAPI app.

    Call once after creating the app. Handlers: ValidationException,
    TravelSearchException (other subclasses), RequestValidationError,
    StarletteHTTPException, generic Exception (storage errors end up here).
    """
    app.add_exception_handler(ValidationException, _search_validation_handler)
    app.add_exception_handler(TravelSearchException, _travel_search_exception_handler)
    app.add_exception_handler(RequestValidationError, _request_validation_handler)
    app.add_exception_handler(StarletteHTTPException, _http_exception_handler)
    app.add_exception_handler(Exception, _generic_exception_handler)
