"""
Board implementation for Othello.
"""
import numpy as np

from .errors import OutOfRangeError

EMPTY = 0
BLACK = 1
WHITE = -1

BOARD_SIZE = 8

CELL_STATES = (EMPTY, BLACK, WHITE)


class Board:
    """
    Represents an 8x8 Othello board.

    Board state representation:
    - 0: empty cell
    - 1: black disc
    - -1: white disc
    """

    def __init__(self):
        """Initialize an empty 8x8 board."""
        self.size = BOARD_SIZE
        self.state = np.zeros((self.size, self.size), dtype=np.int8)

    @classmethod
    def initial(cls):
        """
        Create the standard Othello starting position.

        Returns:
            Board: Board with white discs on (3, 3) and (4, 4) and black
                discs on (3, 4) and (4, 3)
        """
        board = cls()
        board.state[3, 3] = WHITE
        board.state[4, 4] = WHITE
        board.state[3, 4] = BLACK
        board.state[4, 3] = BLACK
        return board

    def in_bounds(self, row, col):
        """Return True if (row, col) lies on the board."""
        return 0 <= row < self.size and 0 <= col < self.size

    def _check_bounds(self, row, col):
        if not self.in_bounds(row, col):
            raise OutOfRangeError(row, col, self.size)

    def get(self, row, col):
        """
        Get the state of a cell.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)

        Returns:
            int: EMPTY, BLACK or WHITE

        Raises:
            OutOfRangeError: If the coordinates are off the board
        """
        self._check_bounds(row, col)
        return int(self.state[row, col])

    def set(self, row, col, state):
        """
        Write a cell state without any rule checking.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)
            state (int): EMPTY, BLACK or WHITE

        Raises:
            OutOfRangeError: If the coordinates are off the board
            ValueError: If state is not a valid cell state
        """
        self._check_bounds(row, col)
        if state not in CELL_STATES:
            raise ValueError(f"Invalid cell state: {state}")
        self.state[row, col] = state

    def clone(self):
        """Return an independent copy of this board."""
        board = Board()
        board.state = self.state.copy()
        return board

    def count(self, state):
        """Count the cells holding the given state."""
        return int(np.count_nonzero(self.state == state))

    def disc_counts(self):
        """
        Count the discs of each player.

        Returns:
            dict: {BLACK: black disc count, WHITE: white disc count}
        """
        return {BLACK: self.count(BLACK), WHITE: self.count(WHITE)}

    def cells(self):
        """
        Snapshot of all 64 cell states for rendering.

        Returns:
            np.ndarray: Read-only (8, 8) copy of the board state
        """
        snapshot = self.state.copy()
        snapshot.flags.writeable = False
        return snapshot

    # Boards are mutable and compare by value, so they are not hashable
    __hash__ = None

    def __eq__(self, other):
        if not isinstance(other, Board):
            return NotImplemented
        return bool(np.array_equal(self.state, other.state))

    def __repr__(self):
        counts = self.disc_counts()
        return f"Board(black={counts[BLACK]}, white={counts[WHITE]})"
