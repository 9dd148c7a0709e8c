# src/gomoku/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, List, Optional, Sequence, Tuple, Union

from gomoku.config import SIZE
from gomoku.core.errors import BoardFull, CellOccupied, GameAlreadyDecided, GameError, OutOfRange
from gomoku.core.rules import check_winner, is_full
from gomoku.types import Cell, Location, Player

Grid = Tuple[Tuple[Cell, ...], ...]


@dataclass(frozen=True, slots=True)
class Ongoing:
    def __str__(self) -> str:
        return "ongoing"


@dataclass(frozen=True, slots=True)
class Won:
    winner: Player

    def __str__(self) -> str:
        return f"won by {self.winner}"


@dataclass(frozen=True, slots=True)
class Drawn:
    def __str__(self) -> str:
        return "drawn"


State = Union[Ongoing, Won, Drawn]

ONGOING = Ongoing()
DRAWN = Drawn()


class MoveStatus(Enum):
    APPLIED = "applied"
    ALREADY_DECIDED = "already decided"
    BOARD_FULL = "board full"
    CELL_OCCUPIED = "cell occupied"
    OUT_OF_RANGE = "out of range"


_ERRORS: dict[MoveStatus, type[GameError]] = {
    MoveStatus.ALREADY_DECIDED: GameAlreadyDecided,
    MoveStatus.BOARD_FULL: BoardFull,
    MoveStatus.CELL_OCCUPIED: CellOccupied,
    MoveStatus.OUT_OF_RANGE: OutOfRange,
}


@dataclass(frozen=True, slots=True)
class MoveResult:
    """
    Outcome of applying a move. Exactly one of two shapes:
      - status APPLIED with the new board
      - any other status with board None and a human readable message
    """
    status: MoveStatus
    board: Optional["Board"] = None
    message: str = ""

    @property
    def applied(self) -> bool:
        return self.status is MoveStatus.APPLIED

    def unwrap(self) -> "Board":
        if self.applied and self.board is not None:
            return self.board
        raise _ERRORS[self.status](self.message or self.status.value)


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable size x size grid. Every move returns a new Board; untouched rows
    are shared between the old and the new value.
    """
    size: int = SIZE
    grid: Grid = field(default=())

    def __post_init__(self) -> None:
        if not self.grid:
            object.__setattr__(self, "grid", tuple((None,) * self.size for _ in range(self.size)))
        elif len(self.grid) != self.size or any(len(row) != self.size for row in self.grid):
            raise ValueError(f"Grid must be {self.size}x{self.size}.")

    @classmethod
    def empty(cls, size: int = SIZE) -> "Board":
        return cls(size=size)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, one character per cell:
        'X' or 'O' for a mark, '.' (or any other character) for empty.
        """
        grid = tuple(
            tuple(ch if ch in ("X", "O") else None for ch in row)
            for row in rows
        )
        return cls(size=len(grid), grid=grid)  # type: ignore[arg-type]

    # -----------------------------
    # Cells
    # -----------------------------
    def in_range(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, row: int, col: int) -> Cell:
        if not self.in_range(row, col):
            raise OutOfRange(f"({row}, {col}) is outside the {self.size}x{self.size} board.")
        return self.grid[row][col]

    def __getitem__(self, location: Location) -> Cell:
        return self.get(location.row, location.col)

    def empty_cells(self) -> List[Location]:
        return [
            Location(r, c)
            for r in range(self.size)
            for c in range(self.size)
            if self.grid[r][c] is None
        ]

    def occupied_cells(self) -> Iterable[Tuple[Location, Player]]:
        for r, row in enumerate(self.grid):
            for c, p in enumerate(row):
                if p is not None:
                    yield Location(r, c), p

    def is_empty(self) -> bool:
        return all(cell is None for row in self.grid for cell in row)

    def is_full(self) -> bool:
        return is_full(self.grid)

    # -----------------------------
    # State
    # -----------------------------
    @property
    def state(self) -> State:
        w = check_winner(self.grid)
        if w is not None:
            return Won(w)
        if self.is_full():
            return DRAWN
        return ONGOING

    @property
    def winner(self) -> Optional[Player]:
        return check_winner(self.grid)

    def is_over(self) -> bool:
        return not isinstance(self.state, Ongoing)

    # -----------------------------
    # Moves
    # -----------------------------
    def try_update(self, player: Player, location: Location) -> MoveResult:
        r, c = location.row, location.col
        if not self.in_range(r, c):
            return MoveResult(MoveStatus.OUT_OF_RANGE, message=f"{location} is outside the board.")

        state = self.state
        # A full board without a winner reports the draw trigger, not "decided"
        if isinstance(state, Drawn):
            return MoveResult(MoveStatus.BOARD_FULL, message="No empty cell remains.")
        if isinstance(state, Won):
            return MoveResult(MoveStatus.ALREADY_DECIDED, message=f"Game already {state}.")

        if self.grid[r][c] is not None:
            return MoveResult(MoveStatus.CELL_OCCUPIED, message=f"{location} is already taken.")

        row = self.grid[r]
        new_row = row[:c] + (player,) + row[c + 1:]
        grid = self.grid[:r] + (new_row,) + self.grid[r + 1:]
        return MoveResult(MoveStatus.APPLIED, board=Board(self.size, grid))

    def update(self, player: Player, location: Location) -> "Board":
        return self.try_update(player, location).unwrap()

    def __str__(self) -> str:
        return "\n".join("".join(p or "." for p in row) for row in self.grid)
