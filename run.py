"""Entry point for the ToDo List API.

Serves the FastAPI application with Uvicorn.  Host, port and the
database location come from environment variables (``HOST``,
``PORT``, ``DATABASE_URL``; see ``todolist_api.app.core.config``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from todolist_api.app.core.config import settings
from todolist_api.app.main import app


async def main() -> None:
    """Serve the API until interrupted."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
        # Keep the handlers installed by setup_logging.
        log_config=None,
    )
    server = Server(config)
    try:
        await server.serve()
    except Exception:
        logging.getLogger(__name__).exception("API server stopped with an error")
        raise


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
