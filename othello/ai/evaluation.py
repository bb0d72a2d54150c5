"""
Static board evaluation for Othello search.
"""
import numpy as np

from ..core.board import BOARD_SIZE

DISC_WEIGHT = 1
CORNER_WEIGHT = 5

CORNERS = [(0, 0), (0, BOARD_SIZE - 1), (BOARD_SIZE - 1, 0), (BOARD_SIZE - 1, BOARD_SIZE - 1)]

WEIGHTS = np.full((BOARD_SIZE, BOARD_SIZE), DISC_WEIGHT, dtype=np.int32)
WEIGHTS[tuple(zip(*CORNERS))] = CORNER_WEIGHT


def evaluate(board):
    """
    Score a board from Black's point of view.

    Each black disc counts +1 (+5 on a corner), each white disc the
    negative of the same. The score does not depend on whose turn it is.

    Args:
        board: Board instance

    Returns:
        int: Positive when Black is ahead, negative when White is ahead
    """
    return int(np.sum(WEIGHTS * board.state))
