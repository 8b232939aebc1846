"""Scoreboard HTTP Router.

Exposes /scoreboard endpoints next to the WebSocket stream.
"""
from __future__ import annotations

import logging
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, Request

from scorecast.common.error_envelope import malformed_command_error
from scorecast.scoreboard.commands import MalformedCommand, parse_command
from scorecast.scoreboard.models import MatchState
from scorecast.scoreboard.service import CommandProcessor, CommandResult

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/scoreboard", tags=["scoreboard"])


def get_processor(request: Request) -> CommandProcessor:
    return request.app.state.scoreboard_processor


@router.get("", response_model=MatchState)
def get_scoreboard(processor: CommandProcessor = Depends(get_processor)):
    return processor.current()


@router.post("/commands", response_model=CommandResult)
async def post_command(
    payload: Dict[str, Any] = Body(...),
    processor: CommandProcessor = Depends(get_processor),
):
    """Apply one wire command; viewers get the same update as for WebSocket commands."""
    try:
        command = parse_command(payload)
    except MalformedCommand as exc:
        logger.warning(f"Rejected malformed scoreboard command: {exc}")
        raise malformed_command_error(str(exc), payload.get("type")) from exc

    return await processor.apply(command)
