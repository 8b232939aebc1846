"""Aggregate app for the scoreboard broadcaster."""
from __future__ import annotations

from typing import Optional

from fastapi import FastAPI

from scorecast.common.health import router as health_router
from scorecast.config import runtime_config
from scorecast.scoreboard.models import MatchState
from scorecast.scoreboard.routes import router as scoreboard_router
from scorecast.scoreboard.service import CommandProcessor
from scorecast.scoreboard.state_store import StateStore
from scorecast.scoreboard.ws_transport import ConnectionManager, router as ws_router


def create_app(initial_state: Optional[MatchState] = None) -> FastAPI:
    app = FastAPI(title="Scorecast")

    manager = ConnectionManager(send_timeout=runtime_config.get_send_timeout())
    processor = CommandProcessor(store=StateStore(initial_state), gateway=manager)
    app.state.scoreboard_connections = manager
    app.state.scoreboard_processor = processor

    app.include_router(health_router)
    app.include_router(scoreboard_router)
    app.include_router(ws_router)
    return app


app = create_app()
