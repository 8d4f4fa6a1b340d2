# src/tictactoe/config.py

from __future__ import annotations

ROW_LABELS = ("A", "B", "C")
COL_LABELS = ("1", "2", "3")

MIN_WINNING_THRESHOLD = 3
MAX_TURNS = 9

PLAYER_ONE_SYMBOL = "X"
PLAYER_TWO_SYMBOL = "O"

# Keybindings, matched case-insensitively
LANGUAGE_SWITCH_ENGLISH_KEY = "E"
LANGUAGE_SWITCH_GERMAN_KEY = "D"
QUIT_KEY = "Q"

DEFAULT_LOCALE = "de"

# UI toggles
USE_COLOR = True
CLEAR_SCREEN = False
