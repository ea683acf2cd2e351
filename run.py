"""Entry point for the Tuzla Guide API server.

Launches the FastAPI application under Uvicorn.  It is intended to be
executed from the project root, for example in Docker, where you only
specify a single Python file to run.

Configuration (database path, secret key, log level, host and port) is
read from environment variables; see ``tuzla_guide_api/app/core/config.py``.
The persistence lifecycle is driven by the application's startup and
shutdown events, so stopping the server with Ctrl+C writes a final
snapshot.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from tuzla_guide_api.app.core.config import settings
from tuzla_guide_api.app.main import app


async def run_api() -> None:
    """Serve the API on ``API_HOST``:``API_PORT`` (defaults ``0.0.0.0:8000``)."""
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
