"""Tests for row to response shape transformers."""

import pytest

from ragnarok_cards.config import settings
from ragnarok_cards.models.card import CardRow
from ragnarok_cards.services.views import (
    build_image_url,
    to_public_card,
    to_simple_card,
    to_table_card,
)


@pytest.fixture
def odin_row() -> CardRow:
    return CardRow(
        art_id="odin-001",
        character_id="odin",
        name_slug="odin",
        is_main=True,
        full_name="Odin, Allfather",
        category="god",
        short_description="The king of Asgard",
        lore="Traded an eye for wisdom.",
        element_type="wind",
        chess_piece="king",
        faction="aesir",
        rarity="legendary",
        link="https://en.wikipedia.org/wiki/Odin",
        health=10,
        stamina=7,
        attack=8,
        speed=5,
        mana=9,
        weight=6,
    )


@pytest.fixture
def bare_row() -> CardRow:
    """A card with only required fields."""
    return CardRow(
        art_id="ymir-001",
        character_id="ymir",
        name_slug="ymir",
        is_main=False,
        full_name="Ymir",
    )


class TestBuildImageUrl:
    def test_uses_configured_cdn(self) -> None:
        assert build_image_url("odin-001") == f"{settings.cdn_base}/odin-001.webp"

    def test_explicit_cdn_base(self) -> None:
        url = build_image_url("odin-001", cdn_base="https://cdn.example.com")

        assert url == "https://cdn.example.com/odin-001.webp"

    def test_follows_settings_changes(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(settings, "cdn_base", "https://images.test")

        assert build_image_url("loki-001") == "https://images.test/loki-001.webp"

    def test_deterministic(self, odin_row: CardRow) -> None:
        """Transforming the same row twice yields identical URLs."""
        first = to_public_card(odin_row).image
        second = to_public_card(odin_row).image

        assert first == second
        assert to_simple_card(odin_row).image == first
        assert to_table_card(odin_row).image == first


class TestSimpleCard:
    def test_fields(self, odin_row: CardRow) -> None:
        card = to_simple_card(odin_row)

        assert card.model_dump(by_alias=True) == {
            "id": "odin-001",
            "name": "Odin, Allfather",
            "image": build_image_url("odin-001"),
        }


class TestPublicCard:
    def test_fields(self, odin_row: CardRow) -> None:
        card = to_public_card(odin_row).model_dump(by_alias=True)

        assert card == {
            "id": "odin-001",
            "character": "odin",
            "name": "Odin, Allfather",
            "category": "god",
            "description": "The king of Asgard",
            "lore": "Traded an eye for wisdom.",
            "element": "wind",
            "piece": "king",
            "faction": "aesir",
            "rarity": "legendary",
            "mainArt": True,
            "stats": {
                "health": 10,
                "stamina": 7,
                "attack": 8,
                "speed": 5,
                "mana": 9,
                "weight": 6,
            },
            "image": build_image_url("odin-001"),
            "wiki": "https://en.wikipedia.org/wiki/Odin",
        }

    def test_nullable_fields(self, bare_row: CardRow) -> None:
        """Missing attributes and stats serialize as null, not omitted."""
        card = to_public_card(bare_row).model_dump(by_alias=True)

        assert card["description"] is None
        assert card["wiki"] is None
        assert card["mainArt"] is False
        assert card["stats"] == {
            "health": None,
            "stamina": None,
            "attack": None,
            "speed": None,
            "mana": None,
            "weight": None,
        }


class TestTableCard:
    def test_fields(self, odin_row: CardRow) -> None:
        card = to_table_card(odin_row).model_dump(by_alias=True)

        assert card == {
            "id": "odin-001",
            "character": "odin",
            "name": "Odin, Allfather",
            "element": "wind",
            "faction": "aesir",
            "rarity": "legendary",
            "health": 10,
            "attack": 8,
            "mainArt": True,
            "image": build_image_url("odin-001"),
        }

    def test_omits_long_text(self, odin_row: CardRow) -> None:
        card = to_table_card(odin_row).model_dump(by_alias=True)

        assert "description" not in card
        assert "lore" not in card
