"""FastAPI dependency injection — each app carries its own SessionManager on ``app.state``."""

from __future__ import annotations

from fastapi import FastAPI, Request

from dungeon.engine.session_manager import SessionManager


def install_session_manager(app: FastAPI, manager: SessionManager) -> None:
    app.state.session_manager = manager


def get_session_manager(request: Request) -> SessionManager:
    manager = getattr(request.app.state, "session_manager", None)
    if manager is None:
        raise RuntimeError("No SessionManager installed on this app; build it with create_app().")
    return manager
