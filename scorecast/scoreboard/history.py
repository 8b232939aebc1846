"""Scoreboard History (Undo)."""
from __future__ import annotations

from typing import List

from scorecast.scoreboard.models import MatchState

MAX_HISTORY = 20


class EmptyHistory(LookupError):
    """Raised by HistoryStack.pop() when there is nothing to undo."""


class HistoryStack:
    """Bounded stack of independent MatchState copies, newest last."""

    def __init__(self, max_depth: int = MAX_HISTORY):
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self._snapshots: List[MatchState] = []

    def __len__(self) -> int:
        return len(self._snapshots)

    def snapshot(self, state: MatchState) -> None:
        """Stores a deep copy of state, evicting the oldest entry past max_depth."""
        self._snapshots.append(state.model_copy(deep=True))
        if len(self._snapshots) > self.max_depth:
            self._snapshots.pop(0)  # Remove oldest

    def pop(self) -> MatchState:
        if not self._snapshots:
            raise EmptyHistory("no snapshot to restore")
        return self._snapshots.pop()

    def clear(self) -> None:
        self._snapshots.clear()
