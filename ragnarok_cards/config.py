from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    model_config = SettingsConfigDict(env_file=".env")

    app_name: str = "Ragnarok Cards API"
    debug: bool = False

    database_url: str = "postgresql+asyncpg://localhost:5432/ragnarok"

    # Card art is served as <cdn_base>/<art_id>.webp
    cdn_base: str = "https://cdn.d.v1.ragnaroknft.quest"

    cors_origin: str = "*"

    host: str = "0.0.0.0"
    port: int = 4005
    log_level: str = "INFO"


settings = Settings()


# =============================================================================
# PAGINATION LIMITS
# =============================================================================

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
