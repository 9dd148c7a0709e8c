from __future__ import annotations

from gomoku.ai.candidates import all_empty_cells, first_empty_cell, neighbourhood_cells
from gomoku.types import Location


def test_neighbourhood_of_empty_board_is_the_centre(empty_board):
    assert neighbourhood_cells(empty_board) == [Location(4, 4)]


def test_neighbourhood_around_one_mark(empty_board):
    b = empty_board.update("X", Location(4, 4))
    got = neighbourhood_cells(b)
    assert len(got) == 8
    assert Location(4, 4) not in got
    assert got == sorted(got, key=lambda l: (l.row, l.col))


def test_neighbourhood_is_clipped_at_the_edge(empty_board):
    b = empty_board.update("O", Location(0, 0))
    assert neighbourhood_cells(b) == [Location(0, 1), Location(1, 0), Location(1, 1)]
    assert len(neighbourhood_cells(b, radius=2)) == 8


def test_full_board_offers_nothing(drawn_board):
    assert neighbourhood_cells(drawn_board) == []
    assert all_empty_cells(drawn_board) == []
    assert first_empty_cell(drawn_board) == []


def test_first_empty_cell_scans_rows(empty_board):
    b = empty_board.update("X", Location(0, 0)).update("O", Location(0, 1))
    assert first_empty_cell(b) == [Location(0, 2)]
    assert len(all_empty_cells(b)) == 79
