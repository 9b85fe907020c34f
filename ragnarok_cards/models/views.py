"""
Public response shapes.

Field names are snake_case in Python and camelCase on the wire.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class ViewModel(BaseModel):
    """Base for all response models."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CardStats(ViewModel):
    health: int | None = None
    stamina: int | None = None
    attack: int | None = None
    speed: int | None = None
    mana: int | None = None
    weight: int | None = None


class SimpleCard(ViewModel):
    """Minimal card view for galleries and autocomplete."""

    id: str = Field(..., examples=["odin-001"])
    name: str = Field(..., examples=["Odin, Allfather"])
    image: str = Field(..., examples=["https://cdn.d.v1.ragnaroknft.quest/odin-001.webp"])


class PublicCard(ViewModel):
    """Full card view with character attributes and stats."""

    id: str
    character: str
    name: str
    category: str | None = None
    description: str | None = None
    lore: str | None = None
    element: str | None = None
    piece: str | None = None
    faction: str | None = None
    rarity: str | None = None
    main_art: bool
    stats: CardStats
    image: str
    wiki: str | None = None


class TableCard(ViewModel):
    """Reduced card view for tabular display. Omits long text fields."""

    id: str
    character: str
    name: str
    element: str | None = None
    faction: str | None = None
    rarity: str | None = None
    health: int | None = None
    attack: int | None = None
    main_art: bool
    image: str


class Pagination(ViewModel):
    page: int
    limit: int
    total: int
    total_pages: int


class PaginatedResult(ViewModel, Generic[T]):
    data: list[T] = Field(default_factory=list)
    pagination: Pagination
