"""Runtime configuration helpers for the scoreboard."""
from __future__ import annotations

import os
from typing import Optional

DEFAULT_MATCH_NAME = "Cricket World Cup 2025"
DEFAULT_MATCH_VENUE = "Melbourne Cricket Ground"
DEFAULT_MATCH_TYPE = "T20"
DEFAULT_HEARTBEAT_SEC = 30.0
DEFAULT_SEND_TIMEOUT_SEC = 5.0


def _get_env(name: str, default: Optional[str] = None) -> Optional[str]:
    return os.getenv(name, default)


def _get_float(name: str, default: float) -> float:
    raw = _get_env(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return float(raw)
    except ValueError as exc:
        raise RuntimeError(f"{name} must be a number. Got: '{raw}'") from exc


def get_env() -> str:
    return _get_env("ENV") or _get_env("APP_ENV") or "dev"


def get_default_match_name() -> str:
    return _get_env("SCOREBOARD_MATCH_NAME") or DEFAULT_MATCH_NAME


def get_default_match_venue() -> str:
    return _get_env("SCOREBOARD_MATCH_VENUE") or DEFAULT_MATCH_VENUE


def get_default_match_type() -> str:
    return _get_env("SCOREBOARD_MATCH_TYPE") or DEFAULT_MATCH_TYPE


def get_heartbeat_interval() -> float:
    """Seconds between WebSocket heartbeat pings; 0 or less disables them."""
    return _get_float("SCOREBOARD_HEARTBEAT_SEC", DEFAULT_HEARTBEAT_SEC)


def get_send_timeout() -> float:
    """Upper bound for a single viewer send during a broadcast."""
    value = _get_float("SCOREBOARD_SEND_TIMEOUT_SEC", DEFAULT_SEND_TIMEOUT_SEC)
    if value <= 0:
        raise RuntimeError(f"SCOREBOARD_SEND_TIMEOUT_SEC must be positive. Got: '{value}'")
    return value
