from __future__ import annotations

from typing import Optional

from scorecast.config import runtime_config
from scorecast.scoreboard.models import MatchState


def initial_match_state() -> MatchState:
    """Fresh scoreboard using the configured match descriptors."""
    return MatchState(
        match_name=runtime_config.get_default_match_name(),
        match_venue=runtime_config.get_default_match_venue(),
        match_type=runtime_config.get_default_match_type(),
    )


class StateStore:
    """Holds exactly one MatchState.

    The held instance is treated as immutable: writers build a new state and
    swap it in with replace(), so current() can be handed out without copying.
    """

    def __init__(self, initial: Optional[MatchState] = None):
        self._state = initial if initial is not None else initial_match_state()

    def current(self) -> MatchState:
        return self._state

    def replace(self, new_state: MatchState) -> None:
        self._state = new_state
