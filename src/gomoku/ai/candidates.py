from __future__ import annotations
from typing import List

from gomoku.config import NEIGHBOUR_RADIUS
from gomoku.core.board import Board
from gomoku.types import Location


def all_empty_cells(board: Board) -> List[Location]:
    """Every empty cell, row by row."""
    return board.empty_cells()


def first_empty_cell(board: Board) -> List[Location]:
    """The first empty cell in row-major order, or nothing on a full board."""
    for r in range(board.size):
        for c in range(board.size):
            if board.grid[r][c] is None:
                return [Location(r, c)]
    return []


def neighbourhood_cells(board: Board, radius: int = NEIGHBOUR_RADIUS) -> List[Location]:
    """
    Empty cells within `radius` (Chebyshev distance) of any mark, in row-major
    order. Far corners of the board are rarely worth searching, so they are
    left out. An empty board offers only its centre.
    """
    if board.is_empty():
        mid = board.size // 2
        return [Location(mid, mid)]

    near = set()
    for loc, _ in board.occupied_cells():
        for dr in range(-radius, radius + 1):
            for dc in range(-radius, radius + 1):
                r, c = loc.row + dr, loc.col + dc
                if board.in_range(r, c) and board.grid[r][c] is None:
                    near.add((r, c))

    return [Location(r, c) for (r, c) in sorted(near)]
