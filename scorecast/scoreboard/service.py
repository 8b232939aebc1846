"""Service for applying scoreboard commands in arrival order."""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Literal, Mapping, Optional, Union

from pydantic import BaseModel

from scorecast.scoreboard.commands import Command, MalformedCommand, UndoCommand, parse_command
from scorecast.scoreboard.contracts import BroadcastGateway
from scorecast.scoreboard.history import EmptyHistory, HistoryStack
from scorecast.scoreboard.models import MatchState
from scorecast.scoreboard.reducer import ScoreboardReducer
from scorecast.scoreboard.state_store import StateStore

logger = logging.getLogger(__name__)


class CommandResult(BaseModel):
    """Outcome of a single command."""
    status: Literal["applied", "noop"]
    state: MatchState
    history_depth: int = 0


class CommandProcessor:
    """
    Owns the live scoreboard and its undo history.

    Every command except undo snapshots the current state, applies the
    mutation and then broadcasts the result. The whole sequence runs under one
    lock so commands from any number of senders are applied strictly in order.
    """

    def __init__(
        self,
        store: Optional[StateStore] = None,
        history: Optional[HistoryStack] = None,
        gateway: Optional[BroadcastGateway] = None,
    ) -> None:
        self.store = store or StateStore()
        self.history = history or HistoryStack()
        self.gateway = gateway
        self.lock = asyncio.Lock()

    def current(self) -> MatchState:
        return self.store.current()

    async def handle_message(
        self, payload: Union[str, bytes, Mapping[str, Any]]
    ) -> Optional[CommandResult]:
        """Parse and apply a raw wire message; malformed messages are dropped."""
        try:
            command = parse_command(payload)
        except MalformedCommand as exc:
            logger.warning(f"Ignoring malformed scoreboard command: {exc}")
            return None
        return await self.apply(command)

    async def apply(self, command: Command) -> CommandResult:
        async with self.lock:
            if isinstance(command, UndoCommand):
                return await self._undo()

            current = self.store.current()
            self.history.snapshot(current)
            working = current.model_copy(deep=True)
            try:
                ScoreboardReducer.apply(working, command)
            except Exception:
                # Leave no trace of a command that did not apply.
                self.history.pop()
                raise
            self.store.replace(working)
            logger.info(f"Applied scoreboard command: {command.type}")

            await self._broadcast(working)
            return self._result("applied", working)

    async def _undo(self) -> CommandResult:
        try:
            previous = self.history.pop()
        except EmptyHistory:
            logger.debug("Undo requested with empty history")
            return self._result("noop", self.store.current())

        self.store.replace(previous)
        logger.info(f"Undo restored previous scoreboard (history depth {len(self.history)})")
        await self._broadcast(previous)
        return self._result("applied", previous)

    async def _broadcast(self, state: MatchState) -> None:
        if self.gateway is None:
            return
        try:
            await self.gateway.broadcast_state(state)
        except Exception:
            logger.exception("Scoreboard broadcast failed")

    def _result(self, status: Literal["applied", "noop"], state: MatchState) -> CommandResult:
        return CommandResult(status=status, state=state, history_depth=len(self.history))
