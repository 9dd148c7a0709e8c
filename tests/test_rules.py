from __future__ import annotations

import pytest

from gomoku.core.board import Board
from gomoku.core.rules import check_winner_with_line, is_winnable, runs
from gomoku.types import PLAYERS, opponent


@pytest.mark.parametrize("p", PLAYERS)
def test_opponent_is_an_involution(p):
    assert opponent(p) != p
    assert opponent(opponent(p)) == p


def test_run_count_on_nine_by_nine():
    # 45 horizontal + 45 vertical + 25 per diagonal direction
    all_runs = runs(9)
    assert len(all_runs) == 140
    assert all(len(run) == 5 for run in all_runs)
    assert len(set(all_runs)) == 140


def test_small_board_has_no_runs():
    assert runs(4) == ()


def test_winnable_ignores_own_marks_and_empties():
    assert is_winnable([None] * 5, "X")
    assert is_winnable(["X", None, "X", None, None], "X")
    assert not is_winnable(["X", "O", None, None, None], "X")
    assert is_winnable(["O", "O", None, None, None], "O")


def test_winner_line_is_reported():
    b = Board.from_rows(["........."] * 3 + ["..OOOOO.."] + ["........."] * 5)
    player, line = check_winner_with_line(b.grid)
    assert player == "O"
    assert line == [(3, c) for c in range(2, 7)]
