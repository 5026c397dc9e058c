"""Versioned API route modules."""

from fastapi import APIRouter

from dungeon.api.routes.config import router as config_router
from dungeon.api.routes.sessions import router as sessions_router

api_router = APIRouter(prefix="/api/v1")
api_router.include_router(sessions_router, tags=["Sessions"])
api_router.include_router(config_router, tags=["Config"])

__all__ = ["api_router"]
