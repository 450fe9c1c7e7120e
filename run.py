"""Entry point for serving the Customer API.

Starts the FastAPI application with Uvicorn.  Host and port are read
from the ``HOST`` and ``PORT`` environment variables (defaults
``0.0.0.0`` and ``8000``); other options are described in
``customer_api/app/core/config.py``.

Usage:
    python run.py
"""
import asyncio

from uvicorn import Config, Server

from customer_api.app.core.config import settings
from customer_api.app.core.logging_config import normalize_level
from customer_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=normalize_level(settings.log_level).lower(),
    )
    server = Server(config)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
