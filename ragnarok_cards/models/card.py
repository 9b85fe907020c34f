from dataclasses import dataclass

# Closed vocabularies of the catalog. The read path passes unknown values
# through unchanged; these only document what the seeded data uses.
FACTIONS = ("aesir", "vanir", "jotnar", "mystical beings", "pets")
ELEMENTS = ("fire", "water", "wind", "earth")
RARITIES = ("common", "rare", "epic", "legendary")
CHESS_PIECES = ("king", "queen", "rook", "bishop", "knight", "pawn")


@dataclass(frozen=True, slots=True)
class CardRow:
    """
    One row of the card/character/stats join.

    Attributes:
        art_id: Unique card identifier, used in URLs and image names
        character_id: Identifier of the depicted character
        name_slug: URL-friendly character name
        is_main: True if this is the character's canonical art
        full_name: Display name
        category .. link: Character attributes, all nullable
        health .. weight: Battle stats, None when the character has no stats row
    """

    art_id: str
    character_id: str
    name_slug: str
    is_main: bool
    full_name: str
    category: str | None = None
    short_description: str | None = None
    lore: str | None = None
    element_type: str | None = None
    chess_piece: str | None = None
    faction: str | None = None
    rarity: str | None = None
    link: str | None = None
    health: int | None = None
    stamina: int | None = None
    attack: int | None = None
    speed: int | None = None
    mana: int | None = None
    weight: int | None = None
