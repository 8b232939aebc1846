"""HTTP error bodies for the scoreboard API.

Rejected requests answer with ``{"detail": {"error": {...}}}`` so clients can
branch on ``error.code`` instead of parsing the message.
"""
from __future__ import annotations

from typing import Any, Optional

from fastapi import HTTPException, status
from pydantic import BaseModel

MALFORMED_COMMAND = "scoreboard.malformed_command"


class ErrorDetail(BaseModel):
    code: str
    message: str
    command_type: Optional[str] = None


def malformed_command_error(message: str, command_type: Any = None) -> HTTPException:
    """Build the 400 for a command that failed validation; the caller raises it."""
    detail = ErrorDetail(
        code=MALFORMED_COMMAND,
        message=message,
        command_type=str(command_type) if command_type else None,
    )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail={"error": detail.model_dump()})
