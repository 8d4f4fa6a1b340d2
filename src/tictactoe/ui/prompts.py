from __future__ import annotations
from typing import Dict, Optional

from tictactoe.config import LANGUAGE_SWITCH_ENGLISH_KEY, LANGUAGE_SWITCH_GERMAN_KEY, QUIT_KEY
from tictactoe.ui.i18n import Locale

LANGUAGE_KEYS: Dict[str, Locale] = {
    LANGUAGE_SWITCH_ENGLISH_KEY.lower(): Locale.EN,
    LANGUAGE_SWITCH_GERMAN_KEY.lower(): Locale.DE,
}


def is_quit(raw: str) -> bool:
    return raw.strip().lower() == QUIT_KEY.lower()


def requested_locale(raw: str) -> Optional[Locale]:
    return LANGUAGE_KEYS.get(raw.strip().lower())


def is_language_switch(raw: str) -> bool:
    return requested_locale(raw) is not None


def parse_locale(raw: str) -> Locale:
    """
    Answer to the start-up language question: the German key picks German,
    anything else falls back to English.
    """
    return Locale.DE if requested_locale(raw) is Locale.DE else Locale.EN
