"""
Exceptions raised by the Othello core.
"""


class OthelloError(Exception):
    """Base class for Othello errors."""


class OutOfRangeError(OthelloError, IndexError):
    """Raised when a coordinate falls outside the 8x8 board."""

    def __init__(self, row, col, size=8):
        super().__init__(f"Cell ({row}, {col}) is outside the {size}x{size} board")
        self.row = row
        self.col = col


class MoveRejected(OthelloError, ValueError):
    """
    Raised when a submitted move is not legal for the submitting player.

    The game state is left untouched, so the caller can simply ask again.
    """

    def __init__(self, row, col, player):
        super().__init__(f"Illegal move ({row}, {col}) for player {player}")
        self.row = row
        self.col = col
        self.player = player
