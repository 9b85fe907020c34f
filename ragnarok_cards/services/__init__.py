"""
Ragnarok Cards services.

Catalog query selection and response shaping.
"""

from ragnarok_cards.services.catalog import (
    CardFilter,
    clamp_limit,
    clamp_page,
    fetch_cards,
    get_card,
    list_all_cards,
    list_cards,
    list_cards_with_stats,
    parse_int_param,
)
from ragnarok_cards.services.views import (
    build_image_url,
    to_public_card,
    to_simple_card,
    to_table_card,
)

__all__ = [
    "CardFilter",
    "build_image_url",
    "clamp_limit",
    "clamp_page",
    "fetch_cards",
    "get_card",
    "list_all_cards",
    "list_cards",
    "list_cards_with_stats",
    "parse_int_param",
    "to_public_card",
    "to_simple_card",
    "to_table_card",
]
