"""
Main entrypoint for the Octopets listings API.

This module assembles the FastAPI application, sets up logging,
wires the listing repository and registers the error handlers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn
or another ASGI server, e.g.::

    uvicorn octopets_api.app.main:app --reload
"""

import logging
from typing import Optional

from fastapi import FastAPI

from .api.router import router as api_router
from .core.config import Settings, settings as default_settings
from .core.error_handlers import register_error_handlers
from .core.logging_config import setup_logging
from .repositories import ListingRepository, build_repository

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[ListingRepository] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Process settings.  Defaults to the module level ``settings``
        read from the environment.
    repository : Optional[ListingRepository]
        Listing store to serve.  When omitted, one is built from
        ``settings.repository_backend``.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings
    # Logging first so repository construction can log.
    setup_logging(settings.log_level, settings.log_file or None)

    app = FastAPI(title=settings.project_name, version=settings.api_version)
    app.state.settings = settings
    app.state.listing_repository = repository if repository is not None else build_repository(settings)
    logger.info(
        "Serving listings from %s",
        type(app.state.listing_repository).__name__,
    )

    register_error_handlers(app)
    app.include_router(api_router, prefix="/api")
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
