"""Scoreboard Reducer - Deterministic State Application.

Responsible for applying commands to a MatchState.
Pure logic, no side effects (except logging). History and broadcasting are
the processor's job; undo never reaches the reducer.
"""
from __future__ import annotations

import logging
from typing import Dict, Optional

from scorecast.scoreboard.commands import (
    Command,
    CompleteOverCommand,
    ExtrasCommand,
    RotateCommand,
    RunsCommand,
    SetTargetCommand,
    UpdatePlayersCommand,
    UpdateTeamsCommand,
    WicketCommand,
)
from scorecast.scoreboard.models import ExtraBall, MatchState, RunsBall, WicketBall

logger = logging.getLogger(__name__)

# Fixed T20 innings length; not derived from match_type.
INNINGS_BALLS = 120
# Every extras kind is worth one run in this scoreboard.
EXTRAS_RUNS = 1
BALLS_PER_OVER = 6

_HANDLERS: Dict[str, str] = {
    "runs": "_apply_runs",
    "wicket": "_apply_wicket",
    "extras": "_apply_extras",
    "rotate": "_apply_rotate",
    "over": "_apply_complete_over",
    "updateTeams": "_apply_update_teams",
    "updatePlayers": "_apply_update_players",
    "setTarget": "_apply_set_target",
}


def rotate_strike(state: MatchState) -> None:
    for batsman in state.batsmen:
        batsman.on_strike = not batsman.on_strike


def required_run_rate(target: int, runs: float, balls: int) -> Optional[float]:
    """Runs per over needed from the remaining deliveries, or None if the chase is over.

    A chase too large to express as a float has no displayable rate either.
    """
    balls_remaining = INNINGS_BALLS - balls
    runs_needed = target - runs
    if balls_remaining <= 0 or runs_needed <= 0:
        return None
    try:
        return runs_needed * BALLS_PER_OVER / balls_remaining
    except OverflowError:
        logger.warning("Required run rate out of float range; leaving it unset")
        return None


class ScoreboardReducer:
    """Applies commands to MatchState in place."""

    @staticmethod
    def apply(state: MatchState, command: Command) -> MatchState:
        handler_name = _HANDLERS.get(command.type)
        if handler_name is None:
            logger.warning(f"No reducer for command type: {command.type}")
            return state
        getattr(ScoreboardReducer, handler_name)(state, command)
        return state

    @staticmethod
    def _apply_runs(state: MatchState, command: RunsCommand) -> None:
        runs = command.value
        state.batting_team.runs += runs

        striker = state.striker()
        striker.runs += runs
        striker.balls += 1
        if runs == 4:
            striker.fours += 1
        if runs == 6:
            striker.sixes += 1

        state.bowler.runs += runs
        state.bowler.balls += 1
        state.batting_team.balls += 1

        state.current_over.append(RunsBall(value=runs))

        if runs % 2 == 1:
            rotate_strike(state)

    @staticmethod
    def _apply_wicket(state: MatchState, command: WicketCommand) -> None:
        state.batting_team.wickets += 1
        state.striker().balls += 1
        state.bowler.wickets += 1
        state.bowler.balls += 1
        state.batting_team.balls += 1
        state.current_over.append(WicketBall())

    @staticmethod
    def _apply_extras(state: MatchState, command: ExtrasCommand) -> None:
        # Extras never count as a ball for the team, batsman or bowler.
        state.batting_team.runs += EXTRAS_RUNS
        state.bowler.runs += EXTRAS_RUNS
        state.current_over.append(ExtraBall(kind=command.kind))

    @staticmethod
    def _apply_rotate(state: MatchState, command: RotateCommand) -> None:
        rotate_strike(state)

    @staticmethod
    def _apply_complete_over(state: MatchState, command: CompleteOverCommand) -> None:
        # An over of nothing but extras keeps the same striker.
        if any(isinstance(ball, (RunsBall, WicketBall)) for ball in state.current_over):
            rotate_strike(state)
        state.current_over = []
        state.bowler.overs = state.bowler.balls // BALLS_PER_OVER
        state.batting_team.overs = state.batting_team.balls // BALLS_PER_OVER

    @staticmethod
    def _apply_update_teams(state: MatchState, command: UpdateTeamsCommand) -> None:
        state.batting_team.name = command.batting_team.name
        state.batting_team.logo = command.batting_team.logo
        state.bowling_team.name = command.bowling_team.name
        state.bowling_team.logo = command.bowling_team.logo
        state.match_name = command.match_name
        state.match_venue = command.match_venue
        state.match_type = command.match_type

    @staticmethod
    def _apply_update_players(state: MatchState, command: UpdatePlayersCommand) -> None:
        first, second = state.batsmen
        first.name = command.batsman1
        second.name = command.batsman2
        state.bowler.name = command.bowler

        first_on_strike = command.striker == command.batsman1
        first.on_strike = first_on_strike
        second.on_strike = not first_on_strike

    @staticmethod
    def _apply_set_target(state: MatchState, command: SetTargetCommand) -> None:
        target = command.value
        state.batting_team.target = target
        if target:
            state.required_run_rate = required_run_rate(
                target, state.batting_team.runs, state.batting_team.balls
            )
        else:
            state.required_run_rate = None
