"""
Catalog query service.

Chooses which catalog query to run for a request and wraps the
transformed rows into response shapes.
"""

import math
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from ragnarok_cards.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ragnarok_cards.db import (
    count_cards,
    get_all_cards,
    get_card_by_id,
    get_cards_by_element,
    get_cards_by_faction,
    get_cards_paginated,
    search_cards,
)
from ragnarok_cards.models.card import CardRow
from ragnarok_cards.models.views import (
    PaginatedResult,
    Pagination,
    PublicCard,
    SimpleCard,
    TableCard,
)
from ragnarok_cards.services.views import to_public_card, to_simple_card, to_table_card


@dataclass(frozen=True, slots=True)
class CardFilter:
    """
    Optional listing filters.

    Only one filter applies per call, in priority order:
    faction, then element, then query. Empty values count as absent.
    """

    faction: str | None = None
    element: str | None = None
    query: str | None = None


async def fetch_cards(session: AsyncSession, card_filter: CardFilter | None = None) -> list[CardRow]:
    """Run the query selected by the highest-priority filter present."""
    if card_filter is None:
        return await get_all_cards(session)
    if card_filter.faction:
        return await get_cards_by_faction(session, card_filter.faction)
    if card_filter.element:
        return await get_cards_by_element(session, card_filter.element)
    if card_filter.query:
        return await search_cards(session, card_filter.query)
    return await get_all_cards(session)


async def list_cards(
    session: AsyncSession, card_filter: CardFilter | None = None
) -> list[SimpleCard]:
    rows = await fetch_cards(session, card_filter)
    return [to_simple_card(row) for row in rows]


async def list_cards_with_stats(
    session: AsyncSession, card_filter: CardFilter | None = None
) -> list[PublicCard]:
    rows = await fetch_cards(session, card_filter)
    return [to_public_card(row) for row in rows]


async def get_card(session: AsyncSession, art_id: str) -> PublicCard | None:
    """
    Get the full view of one card.

    Returns None if no card has this identifier.
    """
    row = await get_card_by_id(session, art_id)
    return to_public_card(row) if row else None


# --- Pagination ---


def parse_int_param(value: str | None, default: int) -> int:
    """Parse a query parameter as int, falling back to default when missing or non-numeric."""
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


def clamp_page(page: int) -> int:
    return max(1, page)


def clamp_limit(limit: int) -> int:
    return min(MAX_PAGE_SIZE, max(1, limit))


async def list_all_cards(
    session: AsyncSession,
    page: int = DEFAULT_PAGE,
    limit: int = DEFAULT_PAGE_SIZE,
) -> PaginatedResult[TableCard]:
    """
    Get one page of the full catalog in table form.

    Pagination never applies filters: total always counts every card.

    Args:
        page: 1-based page number, clamped to >= 1
        limit: Page size, clamped to [1, MAX_PAGE_SIZE]
    """
    page = clamp_page(page)
    limit = clamp_limit(limit)

    # AsyncSession runs one statement at a time, so these are sequential
    total = await count_cards(session)
    rows = []
    # Pages past the end are empty; the offset never reaches the query
    if (page - 1) * limit < total:
        rows = await get_cards_paginated(session, page, limit)

    return PaginatedResult[TableCard](
        data=[to_table_card(row) for row in rows],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        ),
    )
