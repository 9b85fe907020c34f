from ragnarok_cards.models.card import CHESS_PIECES, ELEMENTS, FACTIONS, RARITIES, CardRow
from ragnarok_cards.models.failure import (
    STANDARD_HINTS,
    STANDARD_MESSAGES,
    ApiError,
    CardNotFoundError,
    FailureKind,
    KnownError,
    RouteNotFoundError,
    StorageUnavailableError,
)
from ragnarok_cards.models.views import (
    CardStats,
    PaginatedResult,
    Pagination,
    PublicCard,
    SimpleCard,
    TableCard,
)

__all__ = [
    "CHESS_PIECES",
    "ELEMENTS",
    "FACTIONS",
    "RARITIES",
    "STANDARD_HINTS",
    "STANDARD_MESSAGES",
    "ApiError",
    "CardNotFoundError",
    "CardRow",
    "CardStats",
    "FailureKind",
    "KnownError",
    "PaginatedResult",
    "Pagination",
    "PublicCard",
    "RouteNotFoundError",
    "SimpleCard",
    "StorageUnavailableError",
    "TableCard",
]
