from __future__ import annotations
from functools import lru_cache
from typing import Iterable, Optional, List, Sequence, Tuple

from gomoku.config import SIZE, WIN_LENGTH
from gomoku.types import Cell, Player, opponent

Coord = Tuple[int, int]  # (row, col)
Run = Tuple[Coord, ...]

# Horizontal, vertical, diagonal down-right, diagonal up-right
DIRECTIONS: Tuple[Coord, ...] = ((0, 1), (1, 0), (1, 1), (-1, 1))


@lru_cache(maxsize=None)
def runs(size: int = SIZE, length: int = WIN_LENGTH) -> Tuple[Run, ...]:
    """
    Every straight run of `length` cells on a size x size grid, in all four
    directions. Overlapping runs are listed separately.
    """
    out: List[Run] = []
    for dr, dc in DIRECTIONS:
        for r in range(size):
            for c in range(size):
                end_r = r + dr * (length - 1)
                end_c = c + dc * (length - 1)
                if not (0 <= end_r < size and 0 <= end_c < size):
                    continue
                out.append(tuple((r + dr * i, c + dc * i) for i in range(length)))
    return tuple(out)


def run_cells(grid: Sequence[Sequence[Cell]], run: Run) -> List[Cell]:
    return [grid[r][c] for (r, c) in run]


def is_winnable(cells: Iterable[Cell], player: Player) -> bool:
    """A run is winnable for `player` if it holds none of the opponent's marks."""
    opp = opponent(player)
    return all(cell != opp for cell in cells)


def check_winner_with_line(grid: Sequence[Sequence[Cell]]) -> Optional[Tuple[Player, List[Coord]]]:
    size = len(grid)
    for run in runs(size):
        r0, c0 = run[0]
        p = grid[r0][c0]
        if p is None:
            continue
        if all(grid[r][c] == p for (r, c) in run[1:]):
            return p, list(run)
    return None


def check_winner(grid: Sequence[Sequence[Cell]]) -> Optional[Player]:
    res = check_winner_with_line(grid)
    return res[0] if res else None


def is_full(grid: Sequence[Sequence[Cell]]) -> bool:
    return all(cell is not None for row in grid for cell in row)
