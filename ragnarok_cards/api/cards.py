"""
Card catalog API endpoints.

Read-only listing, search and lookup of cards.
"""

import re
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ragnarok_cards.config import DEFAULT_PAGE, DEFAULT_PAGE_SIZE, MAX_PAGE_SIZE
from ragnarok_cards.db.database import get_session
from ragnarok_cards.models.card import ELEMENTS, FACTIONS
from ragnarok_cards.models.failure import ApiError, CardNotFoundError, RouteNotFoundError
from ragnarok_cards.models.views import PaginatedResult, PublicCard, SimpleCard, TableCard
from ragnarok_cards.services.catalog import (
    CardFilter,
    get_card,
    list_all_cards,
    list_cards,
    list_cards_with_stats,
    parse_int_param,
)

CARD_ID_PATTERN = re.compile(r"^[a-zA-Z0-9_-]+$")

router = APIRouter(prefix="/cards", tags=["cards"])

FactionParam = Annotated[
    str | None,
    Query(description=f"Filter by faction ({', '.join(FACTIONS)})"),
]
ElementParam = Annotated[
    str | None,
    Query(description=f"Filter by element ({', '.join(ELEMENTS)}). Ignored if faction is set."),
]
SearchParam = Annotated[
    str | None,
    Query(
        description="Search by exact id, partial id, then name. "
        "Ignored if faction or element is set."
    ),
]


@router.get("", response_model=list[SimpleCard])
async def list_simple_cards(
    session: Annotated[AsyncSession, Depends(get_session)],
    faction: FactionParam = None,
    element: ElementParam = None,
    q: SearchParam = None,
) -> list[SimpleCard]:
    """
    List cards (simple).

    Returns id, name and image URL only.
    """
    return await list_cards(session, CardFilter(faction=faction, element=element, query=q))


@router.get("/stats", response_model=list[PublicCard])
async def list_full_cards(
    session: Annotated[AsyncSession, Depends(get_session)],
    faction: FactionParam = None,
    element: ElementParam = None,
    q: SearchParam = None,
) -> list[PublicCard]:
    """
    List cards (full with stats).

    Returns every character attribute, stats and the main art flag.
    """
    return await list_cards_with_stats(
        session, CardFilter(faction=faction, element=element, query=q)
    )


@router.get("/all", response_model=PaginatedResult[TableCard])
async def list_card_table(
    session: Annotated[AsyncSession, Depends(get_session)],
    page: Annotated[
        str | None, Query(description=f"Page number (default: {DEFAULT_PAGE})")
    ] = None,
    limit: Annotated[
        str | None,
        Query(description=f"Items per page (default: {DEFAULT_PAGE_SIZE}, max: {MAX_PAGE_SIZE})"),
    ] = None,
) -> PaginatedResult[TableCard]:
    """
    List all cards (paginated) for table display.

    Invalid page or limit values fall back to defaults and are clamped,
    never rejected. Filters do not apply here.
    """
    return await list_all_cards(
        session,
        page=parse_int_param(page, DEFAULT_PAGE),
        limit=parse_int_param(limit, DEFAULT_PAGE_SIZE),
    )


@router.get(
    "/{card_id}",
    response_model=PublicCard,
    responses={404: {"model": ApiError}},
)
async def get_card_by_art_id(
    card_id: str,
    session: Annotated[AsyncSession, Depends(get_session)],
) -> PublicCard:
    """Get a card by ID."""
    if not CARD_ID_PATTERN.match(card_id):
        raise RouteNotFoundError()

    card = await get_card(session, card_id)
    if card is None:
        raise CardNotFoundError(card_id)
    return card
