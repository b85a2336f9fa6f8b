"""Entry point for the SkyBook Pro API server.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration (admin credentials, email provider, log level, host and
port) is read from environment variables; see
``skybook_api/app/core/config.py`` for the full list.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from skybook_api.app.core.config import settings
from skybook_api.app.main import app


async def run_api() -> None:
    """Start the API using Uvicorn.

    Host and port are read from ``API_HOST`` and ``API_PORT``.
    Defaults are ``0.0.0.0`` and ``5000``.
    """
    config = Config(
        app=app,
        host=settings.api_host,
        port=settings.api_port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    await server.serve()


async def main() -> None:
    try:
        await run_api()
    except Exception:
        logging.exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
