import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from ragnarok_cards.db.database import get_session
from ragnarok_cards.main import app
from ragnarok_cards.models.db import Base, CardDB, CharacterDB, StatsDB


def make_character(character_id: str, full_name: str, **attrs) -> CharacterDB:
    return CharacterDB(
        character_id=character_id, name_slug=character_id, full_name=full_name, **attrs
    )


def make_card(art_id: str, character_id: str, is_main: bool = True) -> CardDB:
    return CardDB(art_id=art_id, character_id=character_id, is_main=is_main)


def make_stats(character_id: str, **stats) -> StatsDB:
    return StatsDB(character_id=character_id, name_slug=character_id, **stats)


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def session(async_engine) -> AsyncSession:
    """Provide a database session for tests."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)
    async with async_session() as session:
        yield session


@pytest.fixture
def seed(async_engine):
    """Provide a coroutine that inserts ORM objects and commits."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def _seed(*objects) -> None:
        async with async_session() as session:
            session.add_all(objects)
            await session.commit()

    return _seed


@pytest.fixture
async def catalog(seed) -> None:
    """
    Seed a small catalog.

    Ordered by name: freya-001, freya-002, loki-001, odin-001, thor-001.
    Thor has no stats row; freya-002 is an alternate art.
    """
    await seed(
        make_character(
            "odin",
            "Odin, Allfather",
            category="god",
            short_description="The king of Asgard",
            lore="Traded an eye for wisdom at Mimir's well.",
            element_type="wind",
            chess_piece="king",
            faction="aesir",
            rarity="legendary",
            link="https://en.wikipedia.org/wiki/Odin",
        ),
        make_character(
            "freya",
            "Freya, Lady of the Vanir",
            category="goddess",
            element_type="water",
            chess_piece="queen",
            faction="vanir",
            rarity="epic",
        ),
        make_character(
            "loki",
            "Loki, the Trickster",
            element_type="fire",
            chess_piece="knight",
            faction="jotnar",
            rarity="rare",
        ),
        make_character(
            "thor",
            "Thor, God of Thunder",
            element_type="earth",
            chess_piece="rook",
            faction="aesir",
            rarity="legendary",
        ),
        make_card("odin-001", "odin"),
        make_card("freya-001", "freya"),
        make_card("freya-002", "freya", is_main=False),
        make_card("loki-001", "loki"),
        make_card("thor-001", "thor"),
        make_stats("odin", health=10, stamina=7, attack=8, speed=5, mana=9, weight=6),
        make_stats("freya", health=8, stamina=6, attack=5, speed=7, mana=8, weight=4),
        make_stats("loki", health=6, stamina=5, attack=7, speed=9, mana=7, weight=3),
    )


@pytest.fixture
async def client(async_engine):
    """Provide an async test client with overridden database session."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()
