"""Scoreboard state models.

Python attributes are snake_case; the wire format (what viewers receive) is
camelCase, e.g. ``battingTeam``, ``onStrike``, ``requiredRunRate``.
"""
from __future__ import annotations

from enum import Enum
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator
from pydantic.alias_generators import to_camel

# Run values are not range checked, so fractional input survives as a float.
Number = Union[int, float]


class ScoreboardModel(BaseModel):
    """Base for every scoreboard model: camelCase on the wire, snake_case in code."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ExtrasKind(str, Enum):
    WIDE = "wide"
    NO_BALL = "no-ball"
    BYE = "bye"
    LEG_BYE = "leg-bye"


# --- Ball events (current over) ---

class RunsBall(ScoreboardModel):
    type: Literal["runs"] = "runs"
    value: Number


class WicketBall(ScoreboardModel):
    type: Literal["wicket"] = "wicket"


class ExtraBall(ScoreboardModel):
    type: Literal["extras"] = "extras"
    kind: ExtrasKind = Field(alias="value")


BallEvent = Annotated[Union[RunsBall, WicketBall, ExtraBall], Field(discriminator="type")]


# --- Teams & players ---

class BattingTeam(ScoreboardModel):
    name: str = "Team 1"
    logo: str = ""
    runs: Number = 0
    wickets: int = 0
    overs: int = 0
    balls: int = 0  # legal deliveries only
    target: Optional[int] = None


class BowlingTeam(ScoreboardModel):
    name: str = "Team 2"
    logo: str = ""


class Batsman(ScoreboardModel):
    name: str
    runs: Number = 0
    balls: int = 0
    fours: int = 0
    sixes: int = 0
    on_strike: bool = False


class Bowler(ScoreboardModel):
    name: str = "Bowler"
    overs: int = 0
    balls: int = 0
    runs: Number = 0
    wickets: int = 0


def _opening_pair() -> List[Batsman]:
    return [
        Batsman(name="Batsman 1", on_strike=True),
        Batsman(name="Batsman 2", on_strike=False),
    ]


class MatchState(ScoreboardModel):
    """The full scoreboard pushed to viewers on connect and after every change."""

    match_name: str = "Cricket World Cup 2025"
    match_venue: str = "Melbourne Cricket Ground"
    match_type: str = "T20"
    batting_team: BattingTeam = Field(default_factory=BattingTeam)
    bowling_team: BowlingTeam = Field(default_factory=BowlingTeam)
    batsmen: List[Batsman] = Field(default_factory=_opening_pair, min_length=2, max_length=2)
    bowler: Bowler = Field(default_factory=Bowler)
    current_over: List[BallEvent] = Field(default_factory=list)
    required_run_rate: Optional[float] = None

    @model_validator(mode="after")
    def _single_striker(self) -> "MatchState":
        on_strike = sum(1 for batsman in self.batsmen if batsman.on_strike)
        if on_strike != 1:
            raise ValueError(f"exactly one batsman must be on strike, found {on_strike}")
        return self

    def striker_index(self) -> int:
        return 0 if self.batsmen[0].on_strike else 1

    def striker(self) -> Batsman:
        return self.batsmen[self.striker_index()]

    def to_wire(self) -> dict:
        """JSON-compatible dict with camelCase keys."""
        return self.model_dump(mode="json", by_alias=True)
