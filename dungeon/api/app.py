"""FastAPI application factory with lifespan management."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from dungeon.api.dependencies import install_session_manager
from dungeon.api.routes import api_router
from dungeon.config import DungeonConfig
from dungeon.engine.persistence import PersistenceError
from dungeon.engine.session_manager import SessionManager
from dungeon.utils.logging import setup_logging

logger = logging.getLogger(__name__)


def create_app(config: DungeonConfig | None = None, manager: SessionManager | None = None) -> FastAPI:
    """Build and return the fully-configured FastAPI application."""
    if config is None:
        config = manager.config if manager is not None else DungeonConfig()

    _config = config

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        setup_logging(_config.log_level)
        logger.info("API server started — state dir %s.", _config.state_dir)
        yield
        logger.info("API server shutting down.")

    app = FastAPI(
        title="Dungeon Crawl Engine",
        description=(
            "Turn-based dungeon crawl driven by chat commands.\n\n"
            "## API Groups\n\n"
            "- **Sessions** — Send commands, read the rendered map, state and narrative feed\n"
            "- **Config** — Read-only engine configuration\n"
        ),
        version="0.1.0",
        lifespan=lifespan,
        openapi_tags=[
            {"name": "Sessions", "description": "One independent dungeon per session id. Each command advances it by at most one turn."},
            {"name": "Config", "description": "Read-only engine configuration (map size, monster counts, AI radii)."},
        ],
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.exception_handler(PersistenceError)
    async def persistence_error_handler(request: Request, exc: PersistenceError) -> JSONResponse:
        return JSONResponse(status_code=500, content={"detail": str(exc), "session_id": exc.session_id})

    # Installed eagerly so the app also works without running the lifespan
    install_session_manager(app, manager or SessionManager(_config))
    app.include_router(api_router)

    return app
