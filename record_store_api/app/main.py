"""
Main entrypoint for the Record Store API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn record_store_api.app.main:app

or through ``run.py`` at the project root, which binds to the address
configured in ``core.config``.
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI

from .api.error_handlers import register_error_handlers
from .api.router import router
from .core.config import settings
from .core.logging_config import setup_logging
from .schemas.record import Record
from .services.record_service import RecordStore


def create_app(records: Optional[Iterable[Record]] = None) -> FastAPI:
    """Create and configure a FastAPI application.

    Each call builds its own ``RecordStore``, seeded with ``records``
    or, when omitted, with the default seed records.  The store is kept
    on ``app.state.store`` and handed to the routes by the
    ``get_store`` dependency.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.store = RecordStore(records)

    register_error_handlers(app)
    app.include_router(router)

    logging.getLogger(__name__).debug("Application created with %d seed records", len(app.state.store))
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
