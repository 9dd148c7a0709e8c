from __future__ import annotations

import pytest

from gomoku.core.board import Board
from gomoku.types import Location


def drawn_rows(size: int = 9) -> list[str]:
    # Pairs alternate along rows and shift by one pair per row, so no line
    # in any direction holds more than two equal marks in a row.
    return [
        "".join("X" if ((c + 2 * r) // 2) % 2 == 0 else "O" for c in range(size))
        for r in range(size)
    ]


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def drawn_board() -> Board:
    return Board.from_rows(drawn_rows())


@pytest.fixture
def blocking_board() -> Board:
    # O has four in a row at the top left, X is scattered elsewhere
    b = Board()
    for x, o in [((7, 5), (0, 0)), ((2, 4), (0, 1)), ((5, 6), (0, 2)), ((8, 8), (0, 3))]:
        b = b.update("X", Location(*x))
        b = b.update("O", Location(*o))
    return b
