"""
FastAPI application factory.

Creates and configures the FastAPI app with:
- CORS middleware
- Lifespan startup/shutdown for component initialization
- Chat and document routes
"""
from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies import initialize_components
from api.routes.chat import router as chat_router
from api.routes.documents import router as documents_router
from config.settings import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def create_app(cfg: Optional[Settings] = None) -> FastAPI:
    """Create and return the configured FastAPI application."""
    cfg = cfg or default_settings

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        """Initialize components on startup; clean up on shutdown."""
        logger.info("Starting up — initializing DocChat components...")
        initialize_components(cfg)
        logger.info("Startup complete. API is ready.")
        yield
        logger.info("Shutting down.")

    app = FastAPI(
        title="DocChat API",
        description=(
            "Upload PDF, Word, Excel and text documents and ask questions "
            "about their content."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )
    app.state.settings = cfg

    # ------------------------------------------------------------------
    # CORS
    # ------------------------------------------------------------------
    allow_all = "*" in cfg.CORS_ORIGINS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=cfg.CORS_ORIGINS,
        # Credentials cannot be combined with a wildcard origin
        allow_credentials=not allow_all,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # ------------------------------------------------------------------
    # Routers
    # ------------------------------------------------------------------
    app.include_router(chat_router)
    app.include_router(documents_router)

    # ------------------------------------------------------------------
    # Health check (root)
    # ------------------------------------------------------------------
    @app.get("/health", tags=["health"], summary="Health check")
    def health() -> dict:
        return {"status": "OK", "message": "DocChat backend is running"}

    return app
