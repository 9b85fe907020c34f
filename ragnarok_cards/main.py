import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager
from importlib.metadata import version as pkg_version

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from ragnarok_cards.api import cards_router, health_router
from ragnarok_cards.api.errors import register_exception_handlers
from ragnarok_cards.api.middleware import UTF8JSONResponse, add_response_headers
from ragnarok_cards.config import settings
from ragnarok_cards.db.database import dispose_engine

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown."""
    logger.info("%s starting", settings.app_name)
    yield
    await dispose_engine()
    logger.info("%s stopped", settings.app_name)


app = FastAPI(
    title=settings.app_name,
    description="Read-only API for the Ragnarok card catalog. Images are served from the CDN.",
    version=pkg_version("ragnarok-cards"),
    lifespan=lifespan,
    default_response_class=UTF8JSONResponse,
    redirect_slashes=False,
)

app.include_router(cards_router)
app.include_router(health_router)

register_exception_handlers(app)

app.middleware("http")(add_response_headers)


@app.get("/", include_in_schema=False)
async def root() -> RedirectResponse:
    """Redirect to the interactive docs."""
    return RedirectResponse(url="/docs", status_code=302)
