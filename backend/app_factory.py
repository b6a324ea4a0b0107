"""Application factory and context for the Mr. Smartyplants API.

This module provides a factory for creating the FastAPI app without
import-time side effects. Runtime state lives in an AppContext dataclass
instead of module-level globals, so each test can build a fresh app.

Usage:
------
    # For production (uses default settings from environment)
    app = create_app()

    # For testing (custom context)
    app = create_app(context=AppContext(game_registry=GameRegistry()))
"""

import logging
import os
import time
from dataclasses import dataclass, field
from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from backend import __version__
from backend.game_registry import GameRegistry
from backend.logging_config import configure_logging
from backend.routers import games


@dataclass
class AppContext:
    """Runtime context holding all application state."""

    game_registry: GameRegistry = field(default_factory=GameRegistry)

    # Configuration
    server_version: str = __version__
    production_mode: bool = field(
        default_factory=lambda: os.getenv("PRODUCTION", "false").lower() == "true"
    )
    allowed_origins: list = field(
        default_factory=lambda: os.getenv("SMARTYPLANTS_ALLOWED_ORIGINS", "*").split(",")
    )

    # Timing
    server_start_time: float = field(default_factory=time.time)

    # Logging
    logger: logging.Logger = field(default_factory=lambda: logging.getLogger("smartyplants.backend"))

    def get_health(self) -> dict:
        return {
            "status": "ok",
            "version": self.server_version,
            "games": self.game_registry.game_count,
            "uptime_seconds": time.time() - self.server_start_time,
        }


def create_app(
    *,
    production_mode: Optional[bool] = None,
    log_level: Optional[str] = None,
    context: Optional[AppContext] = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        production_mode: Override production mode (default: from PRODUCTION env var)
        log_level: Override log level (default: from SMARTYPLANTS_LOG_LEVEL env var)
        context: Pre-configured AppContext (for testing). If None, creates a new one.

    Returns:
        Configured FastAPI application with context attached as app.state.context
    """
    # Configure logging (idempotent)
    logger = configure_logging(level=log_level)

    if context is None:
        context = AppContext()
    if production_mode is not None:
        context.production_mode = production_mode
    context.logger = logger

    app = FastAPI(
        title="Mr. Smartyplants API",
        version=context.server_version,
        docs_url=None if context.production_mode else "/docs",
        redoc_url=None if context.production_mode else "/redoc",
    )
    app.state.context = context

    app.add_middleware(
        CORSMiddleware,
        allow_origins=context.allowed_origins if context.production_mode else ["*"],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=["*"],
    )

    _setup_routers(app, context)
    return app


def _setup_routers(app: FastAPI, ctx: AppContext) -> None:
    """Setup and include all API routers."""

    @app.get("/health")
    async def health():
        return JSONResponse(ctx.get_health())

    app.include_router(games.setup_router(ctx.game_registry))
    ctx.logger.info("API routers configured successfully")
