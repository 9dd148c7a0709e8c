from __future__ import annotations


class GameError(ValueError):
    """Base class for every rule violation raised by the board or game state."""


class OutOfRange(GameError):
    pass


class CellOccupied(GameError):
    pass


class GameAlreadyDecided(GameError):
    pass


class BoardFull(GameError):
    pass


class NotYourTurn(GameError):
    pass
