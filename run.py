"""Entry point for the Octopets listings API.

This script launches the FastAPI application with Uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Host and port are read from the environment variables ``API_HOST``
and ``API_PORT`` (defaults ``0.0.0.0`` and ``8000``).  See
``octopets_api/app/core/config.py`` for the remaining variables.

Usage:
    python run.py
"""
import asyncio
import logging
import os

from uvicorn import Config, Server

from octopets_api.app.core.config import settings
from octopets_api.app.main import app


async def run_api() -> None:
    """Serve the API until the server is stopped."""
    host = os.getenv("API_HOST", "0.0.0.0")
    port = int(os.getenv("API_PORT", "8000"))
    # log_config=None keeps the handlers installed by setup_logging.
    config = Config(
        app=app,
        host=host,
        port=port,
        reload=False,
        log_config=None,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info("Starting Octopets API on %s:%s", host, port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_api())
    except (KeyboardInterrupt, SystemExit):
        pass
