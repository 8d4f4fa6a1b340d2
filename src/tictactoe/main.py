from __future__ import annotations

import argparse
import logging
import sys

from tictactoe.config import CLEAR_SCREEN, PLAYER_ONE_SYMBOL, PLAYER_TWO_SYMBOL, USE_COLOR
from tictactoe.core.player import Participant
from tictactoe.game.controller import Game
from tictactoe.game.results import exit_code
from tictactoe.ui.console import ConsolePresenter, LineReader
from tictactoe.ui.i18n import Locale

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="tictactoe", description="Two-player Tic-Tac-Toe in the terminal.")
    ap.add_argument("--lang", choices=[loc.value for loc in Locale], default=None,
                    help="Start in this language instead of asking")
    ap.add_argument("--player1", type=str, default=None, help=f"Name for player {PLAYER_ONE_SYMBOL} (skips the prompt)")
    ap.add_argument("--player2", type=str, default=None, help=f"Name for player {PLAYER_TWO_SYMBOL} (skips the prompt)")
    ap.add_argument("--no-color", action="store_true", help="Disable ANSI colors")
    ap.add_argument("--clear", action="store_true", help="Clear the screen before drawing the board")
    ap.add_argument("--log-level", type=str.upper, default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log level for messages on stderr")
    return ap


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    # Logs go to stderr so they never mix with the board on stdout.
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    presenter = ConsolePresenter(
        LineReader(sys.stdin),
        out=sys.stdout,
        locale=Locale(args.lang) if args.lang else None,
        use_color=USE_COLOR and not args.no_color,
        clear_screen=CLEAR_SCREEN or args.clear,
    )
    game = Game(
        presenter,
        Participant(PLAYER_ONE_SYMBOL),
        Participant(PLAYER_TWO_SYMBOL),
        names=(args.player1, args.player2),
    )

    try:
        final = game.play()
    except KeyboardInterrupt:
        print(file=sys.stdout)
        logger.info("Interrupted")
        return 130

    logger.info("Game over: %s", final)
    return exit_code(final)


if __name__ == "__main__":
    raise SystemExit(main())
