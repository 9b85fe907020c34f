"""
Response header middleware.

Answers every OPTIONS request directly and stamps CORS headers on all
other responses, whatever route (or error handler) produced them.
"""

from collections.abc import Awaitable, Callable

from fastapi import Request, Response, status
from fastapi.responses import JSONResponse

from ragnarok_cards.config import settings


class UTF8JSONResponse(JSONResponse):
    """JSON response declaring its charset explicitly."""

    media_type = "application/json; charset=utf-8"


def cors_headers() -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": settings.cors_origin,
        "Access-Control-Allow-Methods": "GET,OPTIONS",
        "Access-Control-Allow-Headers": "Content-Type",
    }


def response_headers() -> dict[str, str]:
    return {"X-Powered-By": "Yggdrasil", **cors_headers()}


async def add_response_headers(
    request: Request, call_next: Callable[[Request], Awaitable[Response]]
) -> Response:
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_204_NO_CONTENT, headers=cors_headers())

    response = await call_next(request)
    for name, value in response_headers().items():
        response.headers.setdefault(name, value)
    return response
