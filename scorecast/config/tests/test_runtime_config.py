import pytest

from scorecast.config import runtime_config
from scorecast.scoreboard.state_store import StateStore, initial_match_state


def test_match_defaults(monkeypatch):
    for name in ("SCOREBOARD_MATCH_NAME", "SCOREBOARD_MATCH_VENUE", "SCOREBOARD_MATCH_TYPE"):
        monkeypatch.delenv(name, raising=False)

    state = initial_match_state()
    assert state.match_name == "Cricket World Cup 2025"
    assert state.match_venue == "Melbourne Cricket Ground"
    assert state.match_type == "T20"


def test_match_descriptors_from_env(monkeypatch):
    monkeypatch.setenv("SCOREBOARD_MATCH_NAME", "Ashes")
    monkeypatch.setenv("SCOREBOARD_MATCH_VENUE", "Lord's")
    monkeypatch.setenv("SCOREBOARD_MATCH_TYPE", "Test")

    state = StateStore().current()
    assert (state.match_name, state.match_venue, state.match_type) == ("Ashes", "Lord's", "Test")


def test_heartbeat_interval(monkeypatch):
    monkeypatch.delenv("SCOREBOARD_HEARTBEAT_SEC", raising=False)
    assert runtime_config.get_heartbeat_interval() == 30.0

    monkeypatch.setenv("SCOREBOARD_HEARTBEAT_SEC", "0")
    assert runtime_config.get_heartbeat_interval() == 0.0


def test_invalid_numbers_raise(monkeypatch):
    monkeypatch.setenv("SCOREBOARD_HEARTBEAT_SEC", "soon")
    with pytest.raises(RuntimeError, match="SCOREBOARD_HEARTBEAT_SEC"):
        runtime_config.get_heartbeat_interval()

    monkeypatch.setenv("SCOREBOARD_SEND_TIMEOUT_SEC", "-1")
    with pytest.raises(RuntimeError, match="SCOREBOARD_SEND_TIMEOUT_SEC"):
        runtime_config.get_send_timeout()


def test_env_label(monkeypatch):
    monkeypatch.delenv("ENV", raising=False)
    monkeypatch.delenv("APP_ENV", raising=False)
    assert runtime_config.get_env() == "dev"

    monkeypatch.setenv("APP_ENV", "prod")
    assert runtime_config.get_env() == "prod"
