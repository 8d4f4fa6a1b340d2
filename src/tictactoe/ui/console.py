from __future__ import annotations

import logging
import sys
from typing import Iterable, Optional, TextIO

from tictactoe.config import (
    CLEAR_SCREEN,
    DEFAULT_LOCALE,
    LANGUAGE_SWITCH_ENGLISH_KEY,
    LANGUAGE_SWITCH_GERMAN_KEY,
    QUIT_KEY,
    USE_COLOR,
)
from tictactoe.core.board import Grid
from tictactoe.core.player import Participant
from tictactoe.core.position import Position
from tictactoe.types import Slot
from tictactoe.ui.i18n import LANGUAGE_SELECTION, Locale, message
from tictactoe.ui.prompts import is_language_switch, is_quit, parse_locale, requested_locale
from tictactoe.ui.render import CLEAR, format_board

logger = logging.getLogger(__name__)


class LineReader:
    """Owns the input stream. Returns None once the stream is exhausted."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self.stream = stream if stream is not None else sys.stdin

    def read_line(self) -> Optional[str]:
        line = self.stream.readline()
        if line == "":
            return None
        return line.rstrip("\r\n")


class ConsolePresenter:
    """
    Presenter for a plain text terminal. All text goes through the message
    catalog of the active locale.
    """

    def __init__(
        self,
        reader: LineReader,
        out: Optional[TextIO] = None,
        locale: Optional[Locale] = None,
        use_color: bool = USE_COLOR,
        clear_screen: bool = CLEAR_SCREEN,
    ) -> None:
        self.reader = reader
        self.out = out if out is not None else sys.stdout
        # An explicit locale means the start-up question is skipped.
        self._ask_language = locale is None
        self.locale = locale if locale is not None else Locale(DEFAULT_LOCALE)
        self.use_color = use_color
        self.clear_screen = clear_screen

    def _say(self, text: str) -> None:
        print(text, file=self.out)
        self.out.flush()

    def _msg(self, key: str, **kwargs: object) -> str:
        return message(self.locale, key, **kwargs)

    def next_input(self) -> str:
        line = self.reader.read_line()
        if line is None:
            logger.info("End of input, treating it as quit")
            return QUIT_KEY
        return line.strip()

    def select_language(self) -> None:
        if not self._ask_language:
            return
        self._say(LANGUAGE_SELECTION.format(
            english=LANGUAGE_SWITCH_ENGLISH_KEY, german=LANGUAGE_SWITCH_GERMAN_KEY,
        ))
        self._set_locale(parse_locale(self.next_input()))

    def intro(self) -> None:
        self._say(self._msg("intro"))

    def show_keybindings(self) -> None:
        self._say(self._msg(
            "keybindings",
            quit=QUIT_KEY,
            english=LANGUAGE_SWITCH_ENGLISH_KEY,
            german=LANGUAGE_SWITCH_GERMAN_KEY,
        ))

    def prompt_name(self, slot: Slot) -> str:
        self._say(self._msg("name_prompt", slot=slot))
        return self.next_input()

    def prompt_move(self, participant: Participant) -> str:
        self._say(self._msg("move_prompt", name=participant.name, symbol=participant.symbol))
        return self.next_input()

    def report_invalid_coordinate(self) -> str:
        self._say(self._msg("invalid_coordinate"))
        return self.next_input()

    def report_already_occupied(self) -> str:
        self._say(self._msg("already_occupied"))
        return self.next_input()

    def render_board(self, grid: Grid, highlight: Optional[Iterable[Position]] = None) -> None:
        if self.clear_screen:
            print(CLEAR, end="", file=self.out)
        self._say(format_board(grid, highlight=highlight, use_color=self.use_color))

    def announce_win(self, name: str) -> None:
        self._say(self._msg("win", name=name))

    def announce_draw(self) -> None:
        self._say(self._msg("draw"))

    def announce_quit(self) -> None:
        self._say(self._msg("quit"))

    def is_quit_command(self, text: str) -> bool:
        return is_quit(text)

    def is_language_switch_command(self, text: str) -> bool:
        return is_language_switch(text)

    def apply_language_switch(self, text: str) -> None:
        locale = requested_locale(text)
        if locale is None:
            raise ValueError(f"Not a language switch command: {text!r}")
        self._set_locale(locale)

    def _set_locale(self, locale: Locale) -> None:
        logger.debug("Locale %s -> %s", self.locale.value, locale.value)
        self.locale = locale
        self._say(self._msg("switched"))
