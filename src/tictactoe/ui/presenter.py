from __future__ import annotations
from typing import Iterable, Optional, Protocol

from tictactoe.core.board import Grid
from tictactoe.core.player import Participant
from tictactoe.core.position import Position
from tictactoe.types import Slot


class Presenter(Protocol):
    """Everything the game needs from the text console."""

    def select_language(self) -> None:
        ...

    def intro(self) -> None:
        ...

    def show_keybindings(self) -> None:
        ...

    def next_input(self) -> str:
        ...

    def prompt_name(self, slot: Slot) -> str:
        ...

    def prompt_move(self, participant: Participant) -> str:
        ...

    def report_invalid_coordinate(self) -> str:
        ...

    def report_already_occupied(self) -> str:
        ...

    def render_board(self, grid: Grid, highlight: Optional[Iterable[Position]] = None) -> None:
        ...

    def announce_win(self, name: str) -> None:
        ...

    def announce_draw(self) -> None:
        ...

    def announce_quit(self) -> None:
        ...

    def is_quit_command(self, text: str) -> bool:
        ...

    def is_language_switch_command(self, text: str) -> bool:
        ...

    def apply_language_switch(self, text: str) -> None:
        ...
