from __future__ import annotations
from typing import Optional, Union

from tictactoe.config import MAX_TURNS
from tictactoe.core.board import Grid
from tictactoe.core.player import Participant
from tictactoe.core.rules import Line, has_won, winning_line
from tictactoe.game.state import Draw, GameState, Won, is_terminal


def evaluate_turn(grid: Grid, participant: Participant, turn: int) -> Optional[Union[Won, Draw]]:
    """
    Verdict after `participant` has moved on `turn`.
    A win on the last turn still counts as a win, not a draw.
    """
    if has_won(grid.cells_occupied_by(participant)):
        return Won(participant)
    if turn >= MAX_TURNS:
        return Draw()
    return None


def winning_line_for(grid: Grid, participant: Participant) -> Optional[Line]:
    return winning_line(grid.cells_occupied_by(participant))


def exit_code(state: GameState) -> int:
    if not is_terminal(state):
        raise ValueError(f"Game has not finished: {state!r}")
    # Win, draw and quit are all normal endings.
    return 0
