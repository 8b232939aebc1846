"""Tests for the undo history stack."""
import pytest

from scorecast.scoreboard.history import MAX_HISTORY, EmptyHistory, HistoryStack
from scorecast.scoreboard.models import MatchState, WicketBall


def _state_with_runs(runs: int) -> MatchState:
    state = MatchState()
    state.batting_team.runs = runs
    return state


def test_pop_returns_latest_snapshot_first():
    history = HistoryStack()
    history.snapshot(_state_with_runs(1))
    history.snapshot(_state_with_runs(2))

    assert history.pop().batting_team.runs == 2
    assert history.pop().batting_team.runs == 1
    assert len(history) == 0


def test_pop_on_empty_history_signals_empty():
    with pytest.raises(EmptyHistory):
        HistoryStack().pop()


def test_history_is_bounded_and_evicts_oldest():
    history = HistoryStack()
    for runs in range(MAX_HISTORY + 5):
        history.snapshot(_state_with_runs(runs))
        assert len(history) <= MAX_HISTORY

    assert MAX_HISTORY == 20
    assert len(history) == MAX_HISTORY
    restored = [history.pop().batting_team.runs for _ in range(MAX_HISTORY)]
    # Oldest five were evicted
    assert restored == list(range(MAX_HISTORY + 4, 4, -1))


def test_snapshot_is_independent_of_live_state():
    live = MatchState()
    history = HistoryStack()
    history.snapshot(live)

    live.batting_team.runs = 99
    live.batsmen[0].on_strike = False
    live.batsmen[1].on_strike = True
    live.current_over.append(WicketBall())

    restored = history.pop()
    assert restored.batting_team.runs == 0
    assert restored.striker_index() == 0
    assert restored.current_over == []
    assert restored is not live


def test_custom_depth_and_clear():
    history = HistoryStack(max_depth=2)
    for runs in range(5):
        history.snapshot(_state_with_runs(runs))
    assert len(history) == 2

    history.clear()
    assert len(history) == 0

    with pytest.raises(ValueError):
        HistoryStack(max_depth=0)
