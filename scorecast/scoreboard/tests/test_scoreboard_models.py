"""Tests for scoreboard state models."""
import pytest
from pydantic import ValidationError

from scorecast.scoreboard.models import (
    Batsman,
    ExtraBall,
    ExtrasKind,
    MatchState,
    RunsBall,
    WicketBall,
)


def test_default_state_matches_fresh_scoreboard():
    state = MatchState()

    assert state.batting_team.name == "Team 1"
    assert state.bowling_team.name == "Team 2"
    assert state.batting_team.target is None
    assert state.required_run_rate is None
    assert [b.name for b in state.batsmen] == ["Batsman 1", "Batsman 2"]
    assert state.striker_index() == 0
    assert state.current_over == []


def test_wire_format_is_camel_case():
    wire = MatchState().to_wire()

    assert set(wire) == {
        "matchName",
        "matchVenue",
        "matchType",
        "battingTeam",
        "bowlingTeam",
        "batsmen",
        "bowler",
        "currentOver",
        "requiredRunRate",
    }
    assert wire["batsmen"][0]["onStrike"] is True
    assert wire["battingTeam"]["target"] is None
    assert wire["requiredRunRate"] is None


def test_ball_events_serialize_with_type_tag():
    state = MatchState()
    state.current_over = [RunsBall(value=4), WicketBall(), ExtraBall(kind=ExtrasKind.NO_BALL)]

    assert state.to_wire()["currentOver"] == [
        {"type": "runs", "value": 4},
        {"type": "wicket"},
        {"type": "extras", "value": "no-ball"},
    ]


def test_state_parses_from_wire_payload():
    wire = MatchState().to_wire()
    wire["battingTeam"]["runs"] = 42
    wire["currentOver"] = [{"type": "extras", "value": "leg-bye"}]

    state = MatchState.model_validate(wire)

    assert state.batting_team.runs == 42
    assert state.current_over[0].kind == ExtrasKind.LEG_BYE


@pytest.mark.parametrize("flags", [(True, True), (False, False)])
def test_exactly_one_striker_required(flags):
    with pytest.raises(ValidationError, match="exactly one batsman"):
        MatchState(
            batsmen=[
                Batsman(name="A", on_strike=flags[0]),
                Batsman(name="B", on_strike=flags[1]),
            ]
        )


def test_batsmen_must_be_a_pair():
    with pytest.raises(ValidationError):
        MatchState(batsmen=[Batsman(name="Solo", on_strike=True)])
