from ragnarok_cards.db.database import dispose_engine, get_session
from ragnarok_cards.db.operations import (
    count_cards,
    get_all_cards,
    get_card_by_id,
    get_cards_by_element,
    get_cards_by_faction,
    get_cards_by_rarity,
    get_cards_paginated,
    search_cards,
)

__all__ = [
    "count_cards",
    "dispose_engine",
    "get_all_cards",
    "get_card_by_id",
    "get_cards_by_element",
    "get_cards_by_faction",
    "get_cards_by_rarity",
    "get_cards_paginated",
    "get_session",
    "search_cards",
]
