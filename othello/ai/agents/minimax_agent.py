"""
Minimax agent for Othello.
"""
from ...core.board import BLACK
from ...core.rules import apply_move, legal_moves, opponent, undo_move
from ..evaluation import evaluate


class MinimaxAgent:
    """
    An agent that picks moves with plain fixed-depth minimax.

    Leaves are scored with the static evaluation, negated when searching
    for White so the searching player always maximizes. The search runs on a
    private copy of the board: every node applies one move, recurses, and
    retracts that move before trying the next, so the copy is back in its
    starting position once the search returns. No pruning is done.

    nodes_searched holds the number of minimax calls made by the last
    select_best_move call. Direct minimax calls keep adding to it.
    """

    def __init__(self, depth=3, verbose=False):
        """
        Initialize the minimax agent.

        Args:
            depth (int): Search depth in plies (at least 1)
            verbose (bool): Whether to print search results
        """
        validate_depth(depth)
        self.depth = depth
        self.verbose = verbose
        self.nodes_searched = 0

    def select_action(self, game):
        """
        Select a move for the player to move in a game.

        Args:
            game: Game instance with current board state

        Returns:
            tuple: (row, col) of the chosen move, or None if no legal moves
        """
        return self.select_best_move(game.board, game.current_player)

    def select_best_move(self, board, player, depth=None):
        """
        Find the best move for a player.

        Candidates are tried in row-major order and a later move only
        replaces the current best when its score is strictly higher.

        Args:
            board: Board instance (left unchanged)
            player (int): BLACK or WHITE
            depth (int, optional): Overrides the agent's search depth

        Returns:
            tuple: (row, col) of the best move, or None if no legal moves
        """
        if depth is None:
            depth = self.depth
        validate_depth(depth)

        self.nodes_searched = 0
        moves = legal_moves(board, player)
        if not moves:
            if self.verbose:
                print(f"No legal moves for {_player_name(player)}")
            return None

        work = board.clone()
        best_move = None
        best_score = None

        for row, col in moves:
            flipped = apply_move(work, row, col, player)
            score = self.minimax(work, depth - 1, False, player)
            undo_move(work, row, col, flipped, player)

            if best_score is None or score > best_score:
                best_score = score
                best_move = (row, col)

        if self.verbose:
            print(f"{_player_name(player)} plays {best_move} "
                  f"(score {best_score}, {self.nodes_searched} nodes)")
        return best_move

    def minimax(self, board, depth, maximizing, player):
        """
        Score a position with plain minimax.

        The search stops once depth reaches 0 or when the side to move has
        no legal move; both cases return the static evaluation. Each call
        adds to nodes_searched, which only select_best_move resets.

        Args:
            board: Board instance, mutated and restored during the search
            depth (int): Remaining plies
            maximizing (bool): True if player is to move
            player (int): Player the search is run for

        Returns:
            int: Minimax score of the position
        """
        self.nodes_searched += 1
        if depth <= 0:
            return _score(board, player)

        mover = player if maximizing else opponent(player)
        moves = legal_moves(board, mover)
        if not moves:
            return _score(board, player)

        scores = []
        for row, col in moves:
            flipped = apply_move(board, row, col, mover)
            scores.append(self.minimax(board, depth - 1, not maximizing, player))
            undo_move(board, row, col, flipped, mover)

        return max(scores) if maximizing else min(scores)


def validate_depth(depth):
    """
    Check that a search depth is a whole number of plies, at least 1.

    Raises:
        ValueError: If depth is not an int or is below 1
    """
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValueError(f"Search depth must be an integer, got {depth!r}")
    if depth < 1:
        raise ValueError(f"Search depth must be at least 1, got {depth}")


def _score(board, player):
    # evaluate() scores for Black
    score = evaluate(board)
    return score if player == BLACK else -score


def _player_name(player):
    return "Black" if player == BLACK else "White"
