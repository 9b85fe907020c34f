"""
Card catalog read operations.

Every query shares one join of cards, characters and stats and returns
CardRow values. Failures talking to the store surface as
StorageUnavailableError.
"""

import logging

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from ragnarok_cards.models.card import CardRow
from ragnarok_cards.models.db import CardDB, CharacterDB, StatsDB
from ragnarok_cards.models.failure import StorageUnavailableError

logger = logging.getLogger(__name__)

# Labels match CardRow field names
_CARD_COLUMNS = (
    CardDB.art_id.label("art_id"),
    CardDB.character_id.label("character_id"),
    CharacterDB.name_slug.label("name_slug"),
    CardDB.is_main.label("is_main"),
    CharacterDB.full_name.label("full_name"),
    CharacterDB.category.label("category"),
    CharacterDB.short_description.label("short_description"),
    CharacterDB.lore.label("lore"),
    CharacterDB.element_type.label("element_type"),
    CharacterDB.chess_piece.label("chess_piece"),
    CharacterDB.faction.label("faction"),
    CharacterDB.rarity.label("rarity"),
    CharacterDB.link.label("link"),
    StatsDB.health.label("health"),
    StatsDB.stamina.label("stamina"),
    StatsDB.attack.label("attack"),
    StatsDB.speed.label("speed"),
    StatsDB.mana.label("mana"),
    StatsDB.weight.label("weight"),
)


def _base_query() -> Select:
    """SELECT over cards joined with their character and (optional) stats."""
    return (
        select(*_CARD_COLUMNS)
        .join(CharacterDB, CardDB.character_id == CharacterDB.character_id)
        .outerjoin(StatsDB, CardDB.character_id == StatsDB.character_id)
    )


def _by_name(query: Select) -> Select:
    # art_id breaks ties between art variants of the same character
    return query.order_by(CharacterDB.full_name.asc(), CardDB.art_id.asc())


async def _fetch_rows(session: AsyncSession, query: Select) -> list[CardRow]:
    try:
        result = await session.execute(query)
    except (SQLAlchemyError, OSError) as e:
        logger.error("Card query failed: %s", e)
        raise StorageUnavailableError(str(e)) from e
    return [CardRow(**row._mapping) for row in result]


# --- Listing ---


async def get_all_cards(session: AsyncSession) -> list[CardRow]:
    """Get every card, ordered by character name."""
    return await _fetch_rows(session, _by_name(_base_query()))


async def get_cards_by_faction(session: AsyncSession, faction: str) -> list[CardRow]:
    """Get cards whose character belongs to a faction (exact match)."""
    return await _fetch_rows(
        session, _by_name(_base_query().where(CharacterDB.faction == faction))
    )


async def get_cards_by_element(session: AsyncSession, element: str) -> list[CardRow]:
    """Get cards whose character has an element (exact match)."""
    return await _fetch_rows(
        session, _by_name(_base_query().where(CharacterDB.element_type == element))
    )


async def get_cards_by_rarity(session: AsyncSession, rarity: str) -> list[CardRow]:
    """Get cards whose character has a rarity (exact match)."""
    return await _fetch_rows(
        session, _by_name(_base_query().where(CharacterDB.rarity == rarity))
    )


# --- Lookup ---


async def search_cards(session: AsyncSession, text: str) -> list[CardRow]:
    """
    Search cards by identifier or name.

    Tries, in order, stopping at the first non-empty result:
        1. Exact art_id match
        2. Case-insensitive art_id substring, ordered by art_id
        3. Case-insensitive name substring, ordered by name

    Returns an empty list if nothing matches.
    """
    by_id = await _fetch_rows(session, _base_query().where(CardDB.art_id == text))
    if by_id:
        logger.debug("Search %r matched by exact id", text)
        return by_id

    pattern = f"%{text}%"
    by_partial_id = await _fetch_rows(
        session,
        _base_query().where(CardDB.art_id.ilike(pattern)).order_by(CardDB.art_id.asc()),
    )
    if by_partial_id:
        logger.debug("Search %r matched %d cards by partial id", text, len(by_partial_id))
        return by_partial_id

    by_name = await _fetch_rows(
        session, _by_name(_base_query().where(CharacterDB.full_name.ilike(pattern)))
    )
    logger.debug("Search %r matched %d cards by name", text, len(by_name))
    return by_name


async def get_card_by_id(session: AsyncSession, art_id: str) -> CardRow | None:
    """
    Get a card by its art_id.

    Returns None if no card has this identifier.
    """
    rows = await _fetch_rows(session, _base_query().where(CardDB.art_id == art_id).limit(1))
    return rows[0] if rows else None


# --- Pagination ---


async def count_cards(session: AsyncSession) -> int:
    """Count every card in the catalog."""
    try:
        result = await session.execute(select(func.count()).select_from(CardDB))
    except (SQLAlchemyError, OSError) as e:
        logger.error("Card count failed: %s", e)
        raise StorageUnavailableError(str(e)) from e
    return int(result.scalar_one())


async def get_cards_paginated(session: AsyncSession, page: int, limit: int) -> list[CardRow]:
    """
    Get one page of cards, ordered like get_all_cards.

    Args:
        page: 1-based page number
        limit: Page size
    """
    offset = (page - 1) * limit
    return await _fetch_rows(session, _by_name(_base_query()).limit(limit).offset(offset))
