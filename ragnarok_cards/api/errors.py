"""
Exception handlers.

Resolves every failure into an ApiError body and a status code at the
HTTP boundary.
"""

import logging

from fastapi import FastAPI, Request, status
from starlette.exceptions import HTTPException as StarletteHTTPException

from ragnarok_cards.api.middleware import UTF8JSONResponse, response_headers
from ragnarok_cards.models.failure import (
    ApiError,
    FailureKind,
    KnownError,
    RouteNotFoundError,
)

logger = logging.getLogger(__name__)


def error_response(error: ApiError, status_code: int) -> UTF8JSONResponse:
    return UTF8JSONResponse(
        status_code=status_code,
        content=error.model_dump(exclude_none=True),
    )


async def known_error_handler(request: Request, exc: KnownError) -> UTF8JSONResponse:
    if exc.kind is FailureKind.SERVICE_UNAVAILABLE:
        logger.error("%s %s failed: storage unavailable", request.method, request.url.path)
    return error_response(exc.to_response(), exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> UTF8JSONResponse:
    # Unknown paths and known paths with the wrong verb are both "no route"
    if exc.status_code in (status.HTTP_404_NOT_FOUND, status.HTTP_405_METHOD_NOT_ALLOWED):
        not_found = RouteNotFoundError()
        return error_response(not_found.to_response(), not_found.status_code)
    return error_response(ApiError(error=str(exc.detail)), exc.status_code)


async def unexpected_error_handler(request: Request, exc: Exception) -> UTF8JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    response = error_response(
        ApiError(error="Unexpected server error"), status.HTTP_500_INTERNAL_SERVER_ERROR
    )
    # Runs outside the header middleware
    response.headers.update(response_headers())
    return response


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(KnownError, known_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(Exception, unexpected_error_handler)
