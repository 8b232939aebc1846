"""WebSocket transport: scoreboard viewers and the operator command stream."""
from __future__ import annotations

import asyncio
import json
import logging
from typing import List, Optional, Union

from fastapi import APIRouter, WebSocket, WebSocketDisconnect, status

from scorecast.config import runtime_config
from scorecast.scoreboard.contracts import ScoreboardMessage
from scorecast.scoreboard.models import MatchState
from scorecast.scoreboard.service import CommandProcessor

router = APIRouter()
logger = logging.getLogger(__name__)


class ConnectionManager:
    """Registry of connected viewers; implements BroadcastGateway."""

    def __init__(self, send_timeout: float = runtime_config.DEFAULT_SEND_TIMEOUT_SEC) -> None:
        self.active: List[WebSocket] = []
        self.send_timeout = send_timeout

    async def connect(self, websocket: WebSocket, state: MatchState) -> None:
        self.active.append(websocket)
        logger.info(f"WS Connect: viewers={len(self.active)}")
        message = ScoreboardMessage(type="init", data=state)
        await self._deliver(websocket, message.to_json())

    def disconnect(self, websocket: WebSocket) -> None:
        remaining = [ws for ws in self.active if ws is not websocket]
        if len(remaining) != len(self.active):
            self.active = remaining
            logger.info(f"WS Disconnect: viewers={len(self.active)}")

    async def broadcast_state(self, state: MatchState) -> None:
        connections = self.active[:]
        if not connections:
            return
        payload = ScoreboardMessage(type="update", data=state).to_json()
        await asyncio.gather(*(self._deliver(ws, payload) for ws in connections))

    async def send_personal(self, websocket: WebSocket, payload: dict) -> None:
        await self._deliver(websocket, json.dumps(payload))

    async def _deliver(self, websocket: WebSocket, payload: str) -> None:
        try:
            await asyncio.wait_for(websocket.send_text(payload), timeout=self.send_timeout)
        except Exception as exc:
            # One bad viewer never holds up or fails the others.
            logger.warning(f"Dropping scoreboard viewer after failed send: {exc!r}")
            self.disconnect(websocket)
            await self._close(websocket)

    async def _close(self, websocket: WebSocket) -> None:
        # The client sees the close instead of a scoreboard that silently stops.
        try:
            await asyncio.wait_for(
                websocket.close(code=status.WS_1011_INTERNAL_ERROR), timeout=self.send_timeout
            )
        except Exception as exc:
            logger.debug(f"Close of dropped viewer failed: {exc!r}")


async def heartbeat(websocket: WebSocket, interval: float):
    try:
        while True:
            await asyncio.sleep(interval)
            await websocket.send_text(json.dumps({"type": "ping"}))
    except Exception:
        pass


def _frame_payload(message: dict) -> Optional[Union[str, bytes]]:
    if message.get("text") is not None:
        return message["text"]
    return message.get("bytes")


@router.websocket("/ws/scoreboard")
@router.websocket("/")
async def scoreboard_endpoint(websocket: WebSocket):
    processor: CommandProcessor = websocket.app.state.scoreboard_processor
    manager: ConnectionManager = websocket.app.state.scoreboard_connections

    await websocket.accept()

    # Register under the processor lock so no update can overtake the init message.
    async with processor.lock:
        await manager.connect(websocket, processor.current())

    interval = runtime_config.get_heartbeat_interval()
    hb_task = asyncio.create_task(heartbeat(websocket, interval)) if interval > 0 else None

    try:
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                raise WebSocketDisconnect(message.get("code", status.WS_1000_NORMAL_CLOSURE))

            raw = _frame_payload(message)
            if raw is None:
                continue
            logger.debug(f"received: {raw!r}")

            try:
                frame = json.loads(raw)
            except ValueError:
                frame = None
            if isinstance(frame, dict) and frame.get("type") == "ping":
                await manager.send_personal(websocket, {"type": "pong"})
                continue

            try:
                await processor.handle_message(raw)
            except Exception:
                logger.exception("Scoreboard command failed; connection kept open")

    except WebSocketDisconnect:
        pass
    finally:
        manager.disconnect(websocket)
        if hb_task is not None:
            hb_task.cancel()
