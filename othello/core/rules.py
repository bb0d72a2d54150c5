"""
Othello move legality and capture rules.
"""
from .board import BLACK, EMPTY, WHITE

# Row-major neighbour order
DIRECTIONS = [
    (-1, -1), (-1, 0), (-1, 1),
    (0, -1),           (0, 1),
    (1, -1),  (1, 0),  (1, 1),
]


def opponent(player):
    """
    Get the opponent of a player.

    Args:
        player (int): BLACK (1) or WHITE (-1)

    Returns:
        int: The other player
    """
    if player not in (BLACK, WHITE):
        raise ValueError(f"Invalid player: {player}")
    return -player


def is_direction_capturing(board, row, col, dr, dc, player):
    """
    Check whether placing at (row, col) brackets opponent discs along one ray.

    The ray starts at the neighbour (row + dr, col + dc). It captures when one
    or more consecutive opponent discs are closed off by a disc of the player
    before an empty cell or the board edge is reached.

    Args:
        board: Board instance
        row (int): Row of the placed disc
        col (int): Column of the placed disc
        dr (int): Row direction (-1, 0, 1)
        dc (int): Column direction (-1, 0, 1)
        player (int): Player placing the disc

    Returns:
        bool: True if the ray captures at least one disc
    """
    other = opponent(player)
    r, c = row + dr, col + dc
    crossed = 0
    while board.in_bounds(r, c):
        cell = board.state[r, c]
        if cell == other:
            crossed += 1
        elif cell == player:
            return crossed > 0
        else:
            return False
        r, c = r + dr, c + dc
    return False


def is_legal_move(board, row, col, player):
    """
    Check if a move is legal for a player.

    Never raises for bad coordinates: off-board or occupied cells are
    simply not legal.

    Args:
        board: Board instance
        row (int): Row position
        col (int): Column position
        player (int): BLACK or WHITE

    Returns:
        bool: True if the move captures in at least one direction
    """
    if not board.in_bounds(row, col):
        return False
    if board.state[row, col] != EMPTY:
        return False
    return any(is_direction_capturing(board, row, col, dr, dc, player)
               for dr, dc in DIRECTIONS)


def legal_moves(board, player):
    """
    Get all legal moves for a player.

    Args:
        board: Board instance
        player (int): BLACK or WHITE

    Returns:
        list: (row, col) tuples in row-major order
    """
    moves = []
    for row in range(board.size):
        for col in range(board.size):
            if is_legal_move(board, row, col, player):
                moves.append((row, col))
    return moves


def has_legal_move(board, player):
    """Return True if the player has at least one legal move."""
    return any(is_legal_move(board, row, col, player)
               for row in range(board.size)
               for col in range(board.size))


def apply_move(board, row, col, player):
    """
    Place a disc and flip every bracketed opponent disc.

    The move is assumed legal; callers check with is_legal_move first.
    Capturing rays are all decided against the board before the disc is
    placed, so flips along one ray never affect another.

    Args:
        board: Board instance to mutate
        row (int): Row position
        col (int): Column position
        player (int): BLACK or WHITE

    Returns:
        list: (row, col) tuples of the flipped discs
    """
    capturing = [(dr, dc) for dr, dc in DIRECTIONS
                 if is_direction_capturing(board, row, col, dr, dc, player)]

    other = opponent(player)
    flipped = []
    for dr, dc in capturing:
        r, c = row + dr, col + dc
        while board.state[r, c] == other:
            flipped.append((r, c))
            r, c = r + dr, c + dc

    board.state[row, col] = player
    for r, c in flipped:
        board.state[r, c] = player
    return flipped


def undo_move(board, row, col, flipped, player):
    """
    Retract a move made with apply_move.

    Args:
        board: Board instance the move was applied to
        row (int): Row of the placed disc
        col (int): Column of the placed disc
        flipped (list): Cells returned by apply_move
        player (int): Player who made the move
    """
    other = opponent(player)
    for r, c in flipped:
        board.state[r, c] = other
    board.state[row, col] = EMPTY
