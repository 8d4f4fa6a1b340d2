from __future__ import annotations

import pytest

from tictactoe.core.player import Participant
from tictactoe.game.controller import Game
from tictactoe.game.results import evaluate_turn, exit_code
from tictactoe.game.state import AwaitingMove, Draw, Intro, Quit, Won, is_terminal

EMPTY = {label: " " for label in ("A1", "A2", "A3", "B1", "B2", "B3", "C1", "C2", "C3")}


def _game(script, lines, x, o, **kwargs):
    presenter = script(lines)
    return Game(presenter, x, o, **kwargs), presenter


def test_row_win_for_player_one(script, x, o):
    game, p = _game(script, ["Ada", "Bob", "A1", "B1", "A2", "B2", "A3"], x, o)
    final = game.play()

    assert final == Won(x)
    assert exit_code(final) == 0
    assert (x.name, o.name) == ("Ada", "Bob")
    assert p.calls[:5] == [
        ("select_language",),
        ("intro",),
        ("prompt_name", 1),
        ("prompt_name", 2),
        ("show_keybindings",),
    ]
    assert p.calls[-2:] == [("render_board", ("A1", "A2", "A3")), ("announce_win", "Ada")]
    assert ("announce_draw",) not in p.calls


def test_full_board_without_line_is_a_draw(script, x, o):
    moves = ["A1", "A2", "A3", "B2", "B1", "B3", "C2", "C1", "C3"]
    game, p = _game(script, ["", "  ", *moves], x, o)
    final = game.play()

    assert final == Draw()
    assert game.grid.is_full()
    assert (x.name, o.name) == ("X", "O")
    assert p.calls[-2:] == [("render_board", None), ("announce_draw",)]
    assert not any(call[0] == "announce_win" for call in p.calls)


def test_completing_a_line_on_the_last_turn_wins(script, x, o):
    moves = ["A1", "A2", "A3", "B1", "B2", "B3", "C2", "C1", "C3"]
    game, p = _game(script, ["Ada", "Bob", *moves], x, o)

    assert game.play() == Won(x)
    assert ("announce_draw",) not in p.calls
    assert ("render_board", ("A1", "B2", "C3")) in p.calls


def test_player_two_can_win(script, x, o):
    game, p = _game(script, ["Ada", "Bob", "A1", "B1", "A2", "B2", "C3", "B3"], x, o)
    assert game.play() == Won(o)
    assert p.calls[-1] == ("announce_win", "Bob")


def test_invalid_and_occupied_inputs_are_reprompted(script, x, o):
    lines = ["Ada", "Bob", "Z9", "a1", "A1", "b1", "q"]
    game, p = _game(script, lines, x, o)
    final = game.play()

    assert final == Quit()
    assert game.grid.cell_at("A1").occupant is x
    assert game.grid.cell_at("B1").occupant is o
    assert len(game.grid.cells_occupied_by(x)) == 1
    names = p.names()
    assert names.count("report_invalid_coordinate") == 1
    assert names.count("report_already_occupied") == 1
    assert names[-1] == "announce_quit"


def test_quit_halts_without_touching_the_grid(script, x, o):
    game, p = _game(script, ["Ada", "Bob", "A1", "Q"], x, o)

    state = game.step(Intro())
    state = game.step(state)
    assert state == AwaitingMove(2, o)
    before = game.grid.snapshot()

    final = game.step(state)
    assert final == Quit()
    assert game.grid.snapshot() == before
    assert p.calls[-1] == ("announce_quit",)
    assert not p.lines


def test_language_switch_keeps_the_turn(script, x, o):
    game, p = _game(script, ["Ada", "Bob", "e", "D", "b2", "q"], x, o)
    final = game.play()

    assert final == Quit()
    assert game.grid.cell_at("B2").occupant is x
    prompts = [call for call in p.calls if call[0] in {"prompt_move", "apply_language_switch"}]
    assert prompts == [
        ("prompt_move", "X"),
        ("apply_language_switch", "en"),
        ("prompt_move", "X"),
        ("apply_language_switch", "de"),
        ("prompt_move", "X"),
        ("prompt_move", "O"),
    ]


def test_quit_at_name_prompt(script, x, o):
    game, p = _game(script, ["q"], x, o)
    assert game.play() == Quit()
    assert ("prompt_name", 2) not in p.calls
    assert ("show_keybindings",) not in p.calls
    assert game.grid.snapshot() == EMPTY


def test_preset_names_skip_prompts(script, x, o):
    game, p = _game(script, ["Bob", "q"], x, o, names=("Ada", None))
    assert game.play() == Quit()
    assert x.name == "Ada" and o.name == "Bob"
    assert ("prompt_name", 1) not in p.calls
    assert ("prompt_name", 2) in p.calls


@pytest.mark.parametrize("turn", range(1, 10))
def test_turn_parity(script, x, o, turn):
    game, _ = _game(script, [], x, o)
    expected = x if turn % 2 == 1 else o
    assert game.participant_for_turn(turn) is expected


@pytest.mark.parametrize("turn", [0, 10, -1])
def test_turn_out_of_range(script, x, o, turn):
    game, _ = _game(script, [], x, o)
    with pytest.raises(ValueError):
        game.participant_for_turn(turn)


@pytest.mark.parametrize("state", [Won(Participant("X")), Draw(), Quit()])
def test_terminal_states_do_not_step(script, x, o, state):
    game, _ = _game(script, [], x, o)
    assert is_terminal(state)
    with pytest.raises(ValueError):
        game.step(state)


def test_participants_need_distinct_symbols(script, x):
    with pytest.raises(ValueError):
        Game(script([]), x, Participant("X"))


def test_unfinished_game_has_no_exit_code(x):
    with pytest.raises(ValueError):
        exit_code(AwaitingMove(1, x))


def test_evaluate_turn(grid, x, o, occupy):
    occupy(grid, x, "A1", "B2")
    assert evaluate_turn(grid, x, 3) is None
    occupy(grid, x, "C3")
    assert evaluate_turn(grid, x, 5) == Won(x)
    assert evaluate_turn(grid, o, 9) == Draw()
