"""
Failure classification for API responses.

Every failure reaching a client is one of the kinds below and is rendered
as an ApiError body. Handlers in ragnarok_cards.api.errors do the rendering.
"""

from enum import Enum

from pydantic import BaseModel, Field


class FailureKind(str, Enum):
    """Classification of failure types."""

    NOT_FOUND = "not_found"
    ROUTE_NOT_FOUND = "route_not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"


STANDARD_MESSAGES: dict[FailureKind, str] = {
    FailureKind.NOT_FOUND: "This card was lost in Ragnarok",
    FailureKind.ROUTE_NOT_FOUND: "You have wandered into Niflheim",
    FailureKind.SERVICE_UNAVAILABLE: "The card archive is unreachable",
}

STANDARD_HINTS: dict[FailureKind, str] = {
    FailureKind.NOT_FOUND: "Check the ID or browse /cards",
    FailureKind.ROUTE_NOT_FOUND: "Check /docs for available routes",
    FailureKind.SERVICE_UNAVAILABLE: "Try again later",
}


class ApiError(BaseModel):
    """Error body returned for every non-success response."""

    error: str = Field(..., examples=["This card was lost in Ragnarok"])
    hint: str | None = Field(default=None, examples=["Check the ID or browse /cards"])


class KnownError(Exception):
    """
    Base class for exceptions that represent known, explainable failures.

    Subclass this for errors where the system knows exactly what went wrong.
    """

    def __init__(
        self,
        kind: FailureKind,
        message: str | None = None,
        hint: str | None = None,
        status_code: int = 400,
    ):
        self.kind = kind
        self.message = message or STANDARD_MESSAGES[kind]
        self.hint = hint or STANDARD_HINTS[kind]
        self.status_code = status_code
        super().__init__(self.message)

    def to_response(self) -> ApiError:
        """Convert to an ApiError body."""
        return ApiError(error=self.message, hint=self.hint)


class CardNotFoundError(KnownError):
    """Raised when no card has the requested identifier."""

    def __init__(self, art_id: str):
        self.art_id = art_id
        super().__init__(FailureKind.NOT_FOUND, status_code=404)


class RouteNotFoundError(KnownError):
    """Raised when no route matches the request method and path."""

    def __init__(self) -> None:
        super().__init__(FailureKind.ROUTE_NOT_FOUND, status_code=404)


class StorageUnavailableError(KnownError):
    """
    Raised when the backing store cannot be reached or a query fails.

    Not retried; the request fails as a whole.
    """

    def __init__(self, detail: str | None = None):
        self.detail = detail
        super().__init__(FailureKind.SERVICE_UNAVAILABLE, status_code=503)
