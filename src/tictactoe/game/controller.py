from __future__ import annotations

import logging
from typing import Optional, Tuple

from tictactoe.config import MAX_TURNS
from tictactoe.core.board import Cell, Grid
from tictactoe.core.player import Participant
from tictactoe.game.results import evaluate_turn, winning_line_for
from tictactoe.game.state import AwaitingMove, Draw, GameState, Intro, Quit, Won, is_terminal
from tictactoe.ui.presenter import Presenter

logger = logging.getLogger(__name__)


class Game:
    """
    Drives one game from the intro to a win, a draw or a quit.

    The loop is an explicit state machine: `step` performs one transition and
    `play` iterates until a terminal state is reached.
    """

    def __init__(
        self,
        presenter: Presenter,
        player1: Participant,
        player2: Participant,
        grid: Optional[Grid] = None,
        names: Tuple[Optional[str], Optional[str]] = (None, None),
    ) -> None:
        if player1 is player2 or player1.symbol == player2.symbol:
            raise ValueError("The two participants need distinct symbols.")
        self.presenter = presenter
        self.player1 = player1
        self.player2 = player2
        self.grid = grid if grid is not None else Grid()
        # Names given up front skip the matching intro prompt.
        self._preset_names = names

    def participant_for_turn(self, turn: int) -> Participant:
        if turn < 1 or turn > MAX_TURNS:
            raise ValueError(f"Turn must be between 1 and {MAX_TURNS}, got {turn}.")
        return self.player1 if turn % 2 == 1 else self.player2

    def play(self) -> GameState:
        state: GameState = Intro()
        while not is_terminal(state):
            state = self.step(state)
        return state

    def step(self, state: GameState) -> GameState:
        if isinstance(state, Intro):
            nxt = self._run_intro()
        elif isinstance(state, AwaitingMove):
            nxt = self._run_turn(state)
        else:
            raise ValueError(f"{type(state).__name__} is a terminal state.")
        logger.debug("Transition %s -> %s", state, nxt)
        return nxt

    def _run_intro(self) -> GameState:
        p = self.presenter
        p.select_language()
        p.intro()

        for slot, participant, preset in ((1, self.player1, self._preset_names[0]),
                                          (2, self.player2, self._preset_names[1])):
            if preset is not None:
                participant.name = preset
                continue
            raw = p.prompt_name(slot)
            if p.is_quit_command(raw):
                logger.info("Quit during intro")
                p.announce_quit()
                return Quit()
            participant.name = raw

        p.show_keybindings()
        return AwaitingMove(1, self.participant_for_turn(1))

    def _run_turn(self, state: AwaitingMove) -> GameState:
        p = self.presenter
        p.render_board(self.grid)

        cell = self.request_move(state.participant)
        if cell is None:
            logger.info("%s quit on turn %d", state.participant.name, state.turn)
            p.announce_quit()
            return Quit()

        outcome = evaluate_turn(self.grid, state.participant, state.turn)
        if isinstance(outcome, Won):
            p.render_board(self.grid, highlight=winning_line_for(self.grid, state.participant))
            p.announce_win(state.participant.name)
            return outcome
        if isinstance(outcome, Draw):
            p.render_board(self.grid)
            p.announce_draw()
            return outcome

        turn = state.turn + 1
        return AwaitingMove(turn, self.participant_for_turn(turn))

    def request_move(self, participant: Participant) -> Optional[Cell]:
        """
        Prompt until `participant` names a free cell, then occupy it.
        Returns None when the quit command is entered instead.
        """
        p = self.presenter
        raw = p.prompt_move(participant)

        while True:
            if p.is_quit_command(raw):
                return None

            if p.is_language_switch_command(raw):
                p.apply_language_switch(raw)
                raw = p.prompt_move(participant)
                continue

            cell = self.grid.cell_at(raw)
            if cell is None:
                logger.debug("Rejected unknown coordinate %r", raw)
                raw = p.report_invalid_coordinate()
                continue

            if cell.is_occupied:
                logger.debug("Rejected occupied cell %s", cell.position)
                raw = p.report_already_occupied()
                continue

            cell.occupy(participant)
            logger.debug("%s took %s", participant.name, cell.position)
            return cell
