"""Inbound scoreboard commands.

Operators send one JSON object per message, tagged by ``type``. Payloads are
validated into one of the command models below before they reach the
processor; anything that does not fit becomes a MalformedCommand.
"""
from __future__ import annotations

from typing import Annotated, Any, Literal, Mapping, Optional, Union

from pydantic import Field, TypeAdapter, ValidationError, field_validator

from scorecast.scoreboard.models import ExtrasKind, Number, ScoreboardModel


class MalformedCommand(ValueError):
    """Payload could not be parsed into a known command."""


class RunsCommand(ScoreboardModel):
    type: Literal["runs"] = "runs"
    value: Number


class WicketCommand(ScoreboardModel):
    type: Literal["wicket"] = "wicket"


class ExtrasCommand(ScoreboardModel):
    type: Literal["extras"] = "extras"
    kind: ExtrasKind = Field(alias="value")


class RotateCommand(ScoreboardModel):
    type: Literal["rotate"] = "rotate"


class CompleteOverCommand(ScoreboardModel):
    type: Literal["over"] = "over"


class TeamDetails(ScoreboardModel):
    name: str
    logo: str = ""

    @field_validator("logo", mode="before")
    @classmethod
    def _blank_logo(cls, value: Any) -> Any:
        return value or ""


class UpdateTeamsCommand(ScoreboardModel):
    type: Literal["updateTeams"] = "updateTeams"
    batting_team: TeamDetails
    bowling_team: TeamDetails
    match_name: str
    match_venue: str
    match_type: str


class UpdatePlayersCommand(ScoreboardModel):
    type: Literal["updatePlayers"] = "updatePlayers"
    batsman1: str
    batsman2: str
    bowler: str
    # Anything other than batsman1 (including nothing) puts slot 1 on strike.
    striker: Optional[str] = None


class SetTargetCommand(ScoreboardModel):
    type: Literal["setTarget"] = "setTarget"
    value: Optional[int] = None

    @field_validator("value", mode="before")
    @classmethod
    def _falsy_clears(cls, value: Any) -> Any:
        return value or None


class UndoCommand(ScoreboardModel):
    type: Literal["undo"] = "undo"


Command = Annotated[
    Union[
        RunsCommand,
        WicketCommand,
        ExtrasCommand,
        RotateCommand,
        CompleteOverCommand,
        UpdateTeamsCommand,
        UpdatePlayersCommand,
        SetTargetCommand,
        UndoCommand,
    ],
    Field(discriminator="type"),
]

_command_adapter: TypeAdapter[Command] = TypeAdapter(Command)


def parse_command(payload: Union[str, bytes, Mapping[str, Any]]) -> Command:
    """Validate a raw wire message into a typed command.

    Raises MalformedCommand for invalid JSON, non-object payloads, unknown
    ``type`` values and missing or mistyped fields.
    """
    try:
        if isinstance(payload, (str, bytes)):
            return _command_adapter.validate_json(payload)
        return _command_adapter.validate_python(payload)
    except ValidationError as exc:
        raise MalformedCommand(_summarize(exc)) from exc


def _summarize(exc: ValidationError) -> str:
    parts = []
    for error in exc.errors():
        loc = ".".join(str(item) for item in error.get("loc", ()))
        parts.append(f"{loc}: {error.get('msg')}" if loc else str(error.get("msg")))
    return "; ".join(parts) or "invalid command"
