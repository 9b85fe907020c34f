"""
SQLAlchemy ORM models for the card catalog.

The catalog is normalized into three tables: characters, the card art
variants that depict them, and per-character battle stats. Column names
follow the seeded schema, attribute names are snake_case.
"""

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    """Base class for all ORM models."""

    pass


class CharacterDB(Base):
    """
    A catalog character.

    Holds the descriptive and lore attributes shared by all art variants.
    """

    __tablename__ = "characters"

    character_id: Mapped[str] = mapped_column("CharacterID", String(64), primary_key=True)
    name_slug: Mapped[str] = mapped_column("NameSlug", String(255))
    full_name: Mapped[str] = mapped_column("FullName", String(255), index=True)
    category: Mapped[str | None] = mapped_column("Category", String(100), nullable=True)
    short_description: Mapped[str | None] = mapped_column("ShortDescription", Text, nullable=True)
    lore: Mapped[str | None] = mapped_column("Lore", Text, nullable=True)
    element_type: Mapped[str | None] = mapped_column("ElementType", String(50), nullable=True)
    chess_piece: Mapped[str | None] = mapped_column("ChessPiece", String(50), nullable=True)
    faction: Mapped[str | None] = mapped_column("Faction", String(100), nullable=True)
    rarity: Mapped[str | None] = mapped_column("Rarity", String(50), nullable=True)
    link: Mapped[str | None] = mapped_column("Link", Text, nullable=True)

    def __repr__(self) -> str:
        return f"<CharacterDB(id={self.character_id}, name={self.full_name})>"


class CardDB(Base):
    """
    A single artwork of a character.

    is_main marks the canonical art among a character's variants.
    """

    __tablename__ = "cards"

    art_id: Mapped[str] = mapped_column(String(64), primary_key=True)
    character_id: Mapped[str] = mapped_column(
        "CharacterID", String(64), ForeignKey("characters.CharacterID"), index=True
    )
    is_main: Mapped[bool] = mapped_column(Boolean, default=False)

    def __repr__(self) -> str:
        return f"<CardDB(art_id={self.art_id}, character={self.character_id})>"


class StatsDB(Base):
    """Battle stats of a character. Every stat is nullable."""

    __tablename__ = "stats"

    character_id: Mapped[str] = mapped_column(
        "CharacterID", String(64), ForeignKey("characters.CharacterID"), primary_key=True
    )
    name_slug: Mapped[str] = mapped_column("NameSlug", String(255))
    health: Mapped[int | None] = mapped_column("Health", Integer, nullable=True)
    stamina: Mapped[int | None] = mapped_column("Stamina", Integer, nullable=True)
    attack: Mapped[int | None] = mapped_column("Attack", Integer, nullable=True)
    speed: Mapped[int | None] = mapped_column("Speed", Integer, nullable=True)
    mana: Mapped[int | None] = mapped_column("Mana", Integer, nullable=True)
    weight: Mapped[int | None] = mapped_column("Weight", Integer, nullable=True)

    def __repr__(self) -> str:
        return f"<StatsDB(character={self.character_id})>"
