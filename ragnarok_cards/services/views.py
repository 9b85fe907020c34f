"""
Row to response shape transformers.

Pure functions: no I/O, same input always gives the same output.
"""

from ragnarok_cards.config import settings
from ragnarok_cards.models.card import CardRow
from ragnarok_cards.models.views import CardStats, PublicCard, SimpleCard, TableCard


def build_image_url(art_id: str, cdn_base: str | None = None) -> str:
    """
    Build the CDN URL of a card's artwork.

    Args:
        art_id: Card identifier
        cdn_base: CDN root. Defaults to the configured CDN_BASE.

    Returns:
        "<cdn_base>/<art_id>.webp"
    """
    base = settings.cdn_base if cdn_base is None else cdn_base
    return f"{base}/{art_id}.webp"


def to_simple_card(row: CardRow) -> SimpleCard:
    return SimpleCard(
        id=row.art_id,
        name=row.full_name,
        image=build_image_url(row.art_id),
    )


def to_public_card(row: CardRow) -> PublicCard:
    return PublicCard(
        id=row.art_id,
        character=row.name_slug,
        name=row.full_name,
        category=row.category,
        description=row.short_description,
        lore=row.lore,
        element=row.element_type,
        piece=row.chess_piece,
        faction=row.faction,
        rarity=row.rarity,
        main_art=row.is_main,
        stats=CardStats(
            health=row.health,
            stamina=row.stamina,
            attack=row.attack,
            speed=row.speed,
            mana=row.mana,
            weight=row.weight,
        ),
        image=build_image_url(row.art_id),
        wiki=row.link,
    )


def to_table_card(row: CardRow) -> TableCard:
    return TableCard(
        id=row.art_id,
        character=row.name_slug,
        name=row.full_name,
        element=row.element_type,
        faction=row.faction,
        rarity=row.rarity,
        health=row.health,
        attack=row.attack,
        main_art=row.is_main,
        image=build_image_url(row.art_id),
    )
