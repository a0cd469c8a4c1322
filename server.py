"""
REST API server entry point.

Run with:
    python server.py

Or directly with uvicorn:
    uvicorn server:app --host 0.0.0.0 --port 3000 --reload
"""
from __future__ import annotations

import logging
import sys

import uvicorn

from api.app import create_app
from config.settings import settings

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
    stream=sys.stdout,
)

# Module-level `app` so uvicorn can reference it as "server:app"
app = create_app(settings)


def main() -> None:
    logging.getLogger(__name__).info(
        "DocChat server running on port %d — health check: http://localhost:%d/health",
        settings.PORT, settings.PORT,
    )
    uvicorn.run(
        "server:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=False,   # set True during development
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
