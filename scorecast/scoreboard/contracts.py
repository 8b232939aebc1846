"""Outbound scoreboard messages and the broadcast seam."""
from __future__ import annotations

from typing import Literal, Protocol

from pydantic import BaseModel

from scorecast.scoreboard.models import MatchState


class ScoreboardMessage(BaseModel):
    """
    Envelope sent to viewers.
    ``init`` goes to a viewer once on connect, ``update`` to everyone after a change.
    """
    type: Literal["init", "update"]
    data: MatchState

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)


class BroadcastGateway(Protocol):
    async def broadcast_state(self, state: MatchState) -> None:
        """Deliver state to every viewer. Must not raise for a single bad receiver."""
        ...
