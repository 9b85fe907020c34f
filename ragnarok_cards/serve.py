"""
Process entry point.

Runs the API with uvicorn on the configured host and port.
"""

import logging

import uvicorn

from ragnarok_cards.config import settings


def main() -> None:
    """CLI entry point for running the API server."""
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    uvicorn.run(
        "ragnarok_cards.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
