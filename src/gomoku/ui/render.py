from __future__ import annotations
from typing import Iterable, Optional, Set, Tuple

from gomoku.config import USE_COLOR
from gomoku.core.board import Board
from gomoku.types import Cell
from gomoku.ui.colors import paint

Coord = Tuple[int, int]


def _piece(cell: Cell, color: bool) -> str:
    if cell is None:
        return paint("·", "empty", color)
    return paint(cell, cell, color)


def render(
    board: Board,
    status: str = "",
    highlight: Optional[Iterable[Coord]] = None,
    color: bool = USE_COLOR,
) -> str:
    """
    Text picture of the board with row and column indices. Cells listed in
    `highlight` (e.g. the winning line) are shown in reverse video.
    """
    hl: Set[Coord] = set(highlight) if highlight else set()
    lines = [paint("FIVE IN A ROW", "title", color)]
    if status:
        lines.append(paint(status, "status", color))

    lines.append(paint("   " + " ".join(str(i) for i in range(board.size)), "index", color))
    for r in range(board.size):
        parts = []
        for col in range(board.size):
            p = _piece(board.grid[r][col], color)
            if (r, col) in hl:
                p = paint(p, "highlight", color) if color else p.lower()
            parts.append(p)
        lines.append(paint(f"{r:>2}", "index", color) + " " + " ".join(parts))
    return "\n".join(lines)
