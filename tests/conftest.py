from __future__ import annotations
from typing import Iterable, List, Optional, Tuple

import pytest

from tictactoe.core.board import Grid
from tictactoe.core.player import Participant
from tictactoe.core.position import Position


class ScriptedPresenter:
    """Feeds canned input lines and records every call made by the game."""

    def __init__(self, lines: Iterable[str]) -> None:
        self.lines: List[str] = list(lines)
        self.calls: List[Tuple] = []
        self.locale = "de"

    def _next(self) -> str:
        if not self.lines:
            raise AssertionError("Game asked for more input than scripted.")
        return self.lines.pop(0)

    def select_language(self) -> None:
        self.calls.append(("select_language",))

    def intro(self) -> None:
        self.calls.append(("intro",))

    def show_keybindings(self) -> None:
        self.calls.append(("show_keybindings",))

    def next_input(self) -> str:
        self.calls.append(("next_input",))
        return self._next()

    def prompt_name(self, slot) -> str:
        self.calls.append(("prompt_name", slot))
        return self._next()

    def prompt_move(self, participant: Participant) -> str:
        self.calls.append(("prompt_move", participant.symbol))
        return self._next()

    def report_invalid_coordinate(self) -> str:
        self.calls.append(("report_invalid_coordinate",))
        return self._next()

    def report_already_occupied(self) -> str:
        self.calls.append(("report_already_occupied",))
        return self._next()

    def render_board(self, grid: Grid, highlight: Optional[Iterable[Position]] = None) -> None:
        line = tuple(p.label for p in highlight) if highlight else None
        self.calls.append(("render_board", line))

    def announce_win(self, name: str) -> None:
        self.calls.append(("announce_win", name))

    def announce_draw(self) -> None:
        self.calls.append(("announce_draw",))

    def announce_quit(self) -> None:
        self.calls.append(("announce_quit",))

    def is_quit_command(self, text: str) -> bool:
        return text.lower() == "q"

    def is_language_switch_command(self, text: str) -> bool:
        return text.lower() in {"e", "d"}

    def apply_language_switch(self, text: str) -> None:
        self.locale = "en" if text.lower() == "e" else "de"
        self.calls.append(("apply_language_switch", self.locale))

    def names(self) -> List[str]:
        return [call[0] for call in self.calls]


@pytest.fixture
def x() -> Participant:
    return Participant("X")


@pytest.fixture
def o() -> Participant:
    return Participant("O")


@pytest.fixture
def grid() -> Grid:
    return Grid()


@pytest.fixture
def occupy():
    def _occupy(grid: Grid, participant: Participant, *labels: str) -> None:
        for label in labels:
            grid.cell_at(Position.from_label(label)).occupy(participant)
    return _occupy


@pytest.fixture
def script():
    return ScriptedPresenter
