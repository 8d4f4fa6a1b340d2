from __future__ import annotations
from enum import Enum
from typing import Dict


class Locale(Enum):
    EN = "en"
    DE = "de"


MESSAGES: Dict[Locale, Dict[str, str]] = {
    Locale.EN: {
        "intro": "Welcome to Tic-Tac-Toe.",
        "keybindings": (
            "You can press [{quit}] at any time during the game to quit the game, "
            "press [{english}] to change the language to English "
            "or press [{german}] to change the language to German."
        ),
        "name_prompt": "Player {slot}, please choose a name:",
        "move_prompt": "{name}, it's your turn to set your '{symbol}'. Choose a free field and enter the coordinate:",
        "invalid_coordinate": "Please choose a valid coordinate:",
        "already_occupied": "Please choose an unoccupied field:",
        "win": "Congratulations! {name}, you've won!",
        "draw": "The board is full! No one has won.",
        "quit": "Game quit.\nSee you next game!",
        "switched": "Language switched to English.",
    },
    Locale.DE: {
        "intro": "Willkommen zu Tic-Tac-Toe.",
        "keybindings": (
            "Du kannst jederzeit während des Spiels [{quit}] drücken, um das Spiel zu beenden, "
            "[{english}] drücken, um die Sprache auf Englisch zu ändern "
            "oder [{german}] drücken, um die Sprache auf Deutsch zu ändern."
        ),
        "name_prompt": "Spieler {slot}, bitte wähle einen Namen:",
        "move_prompt": "{name}, du bist dran mit dem Setzen deines '{symbol}'. Wähle ein freies Feld und gebe die Koordinate ein:",
        "invalid_coordinate": "Bitte wähle eine valide Koordinate aus:",
        "already_occupied": "Bitte wähle ein freies Feld aus:",
        "win": "Glückwunsch! {name}, du hast gewonnen!",
        "draw": "Das Brett ist voll! Keiner hat gewonnen.",
        "quit": "Das Spiel wurde beendet.\nBis zum nächsten Spiel!",
        "switched": "Die Sprache wurde auf Deutsch gewechselt.",
    },
}

# Shown before a language is known, so it mixes both.
LANGUAGE_SELECTION = "Press [{english}] for English oder [{german}] für Deutsch."


def message(locale: Locale, key: str, **kwargs: object) -> str:
    return MESSAGES[locale][key].format(**kwargs)
