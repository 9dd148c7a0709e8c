from __future__ import annotations

import pytest

from gomoku.ai.dumb_agent import DumbAgent
from gomoku.ai.smart_agent import smart_agent
from gomoku.core.errors import CellOccupied, NotYourTurn
from gomoku.game.controller import run_game
from gomoku.game.state import GameState
from gomoku.types import Location
from gomoku.ui.render import render


def test_submit_passes_the_turn():
    g = GameState()
    g.submit("X", Location(4, 4))
    assert g.current == "O"
    assert g.board.get(4, 4) == "X"


def test_submit_out_of_turn_is_rejected():
    g = GameState()
    with pytest.raises(NotYourTurn):
        g.submit("O", Location(4, 4))
    assert g.board.is_empty()


def test_rejected_move_keeps_the_turn():
    g = GameState()
    g.submit("X", Location(4, 4))
    with pytest.raises(CellOccupied):
        g.submit("O", Location(4, 4))
    assert g.current == "O"


def test_dumb_agent_takes_first_empty_cell():
    g = GameState()
    g.submit("X", Location(0, 0))
    assert DumbAgent("O").choose_move(g) == Location(0, 1)


def test_dumb_agent_has_no_move_on_full_board(drawn_board):
    assert DumbAgent("X").choose_move(GameState(board=drawn_board)) is None


def test_smart_agent_blocks_in_a_game():
    g = GameState()
    for x, o in [((7, 5), (0, 0)), ((2, 4), (0, 1)), ((5, 6), (0, 2)), ((8, 8), (0, 3))]:
        g.submit("X", Location(*x))
        g.submit("O", Location(*o))
    assert smart_agent("X").choose_move(g) == Location(0, 4)


def test_dumb_vs_dumb_ends_on_the_anti_diagonal():
    rec = run_game(DumbAgent("X"), DumbAgent("O"))
    # Row-major filling on an odd width puts X on every even (row + col)
    assert rec.result == "X"
    assert rec.winner == "X"
    assert len(rec.moves) == 37
    assert set(rec.winning_line) == {(4, 0), (3, 1), (2, 2), (1, 3), (0, 4)}


def test_run_game_from_a_drawn_board(drawn_board):
    rec = run_game(DumbAgent("X"), DumbAgent("O"), board=drawn_board)
    assert rec.result == "draw"
    assert rec.winner is None
    assert rec.moves == []


def test_smart_game_finishes():
    rec = run_game(smart_agent("X", depth=1), DumbAgent("O"))
    assert rec.result in ("X", "O", "draw")
    assert rec.board.is_over()
    assert rec.nodes["X"] > 0


def test_render_plain(empty_board):
    b = empty_board.update("X", Location(0, 0)).update("O", Location(8, 8))
    out = render(b, color=False)
    lines = out.splitlines()
    assert lines[0] == "FIVE IN A ROW"
    assert len(lines) == 2 + 9
    assert lines[2].endswith("X · · · · · · · ·")
    assert lines[-1].endswith("· · · · · · · · O")


def test_render_marks_highlight(empty_board):
    b = empty_board.update("X", Location(0, 0))
    out = render(b, status="done", highlight=[(0, 0)], color=False)
    assert "done" in out
    assert "x ·" in out


def test_render_colour_wraps_each_piece(empty_board):
    out = render(empty_board.update("O", Location(1, 1)), color=True)
    assert "\033[33mO\033[0m" in out
    assert "\033[90m·\033[0m" in out
