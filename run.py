"""Entry point for the Record Store API.

Starts the FastAPI application under Uvicorn, bound to the address
from ``record_store_api.app.core.config`` (``127.0.0.1:8000`` unless
``HOST``/``PORT`` are set).  A single worker is used because the
collection lives in the memory of the serving process.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from record_store_api.app.core.config import settings
from record_store_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # logging is already configured by create_app()
        log_config=None,
    )
    server = Server(config)
    logging.getLogger(__name__).info("Serving %s on %s:%s", settings.project_name, settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
