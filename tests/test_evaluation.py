"""
Tests for static board evaluation.
"""
import numpy as np
from othello.core.board import Board, BLACK, WHITE
from othello.ai.evaluation import CORNERS, CORNER_WEIGHT, WEIGHTS, evaluate


def test_empty_board_scores_zero():
    """Test that an empty board is balanced."""
    assert evaluate(Board()) == 0


def test_initial_board_scores_zero():
    """Test that the starting position is balanced."""
    assert evaluate(Board.initial()) == 0


def test_weights_matrix():
    """Test corner weighting in the weight matrix."""
    assert WEIGHTS.shape == (8, 8)
    for row, col in CORNERS:
        assert WEIGHTS[row, col] == CORNER_WEIGHT
    assert np.sum(WEIGHTS) == 60 + 4 * CORNER_WEIGHT


def test_corner_and_edge_values():
    """Test that corners count 5 and other cells count 1."""
    board = Board()
    board.set(0, 0, BLACK)
    assert evaluate(board) == 5

    board.set(0, 1, BLACK)
    assert evaluate(board) == 6

    board.set(7, 7, WHITE)
    board.set(3, 3, WHITE)
    assert evaluate(board) == 0


def test_all_corners_counted():
    """Test every corner for both players."""
    for row, col in CORNERS:
        board = Board()
        board.set(row, col, BLACK)
        assert evaluate(board) == 5
        board.set(row, col, WHITE)
        assert evaluate(board) == -5


def test_evaluation_antisymmetric():
    """Test that swapping colors negates the score."""
    rng = np.random.default_rng(7)
    for _ in range(20):
        board = Board()
        board.state = rng.integers(-1, 2, size=(8, 8)).astype(np.int8)
        swapped = Board()
        swapped.state = -board.state

        assert evaluate(swapped) == -evaluate(board)


def test_evaluation_returns_int():
    """Test that the score is a plain Python int."""
    board = Board.initial()
    board.set(0, 0, BLACK)
    score = evaluate(board)
    assert isinstance(score, int)
    assert score == 5


def test_evaluation_is_pure():
    """Test that evaluating leaves the board untouched."""
    board = Board.initial()
    before = board.state.copy()
    evaluate(board)
    assert np.array_equal(board.state, before)
