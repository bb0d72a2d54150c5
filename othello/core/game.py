"""
Game implementation for Othello.
"""
from .board import Board
from .config import GameConfig
from .errors import MoveRejected
from .rules import apply_move, is_legal_move
from ..ai.agents.minimax_agent import MinimaxAgent


class Game:
    """
    Manages a human vs. computer Othello game session.

    The human moves first. Each accepted human move is immediately answered
    by the computer, so control only returns to the caller once the board
    is ready to be drawn again.

    There is no pass handling and no game-over detection: a side without a
    legal move simply does nothing on its turn.
    """

    def __init__(self, config=None):
        """
        Initialize a new Othello game.

        Args:
            config (GameConfig, optional): Side binding and search depth
        """
        self.config = config or GameConfig()
        self.board = Board.initial()
        self.current_player = self.config.human_player
        self.agent = MinimaxAgent(depth=self.config.search_depth,
                                  verbose=self.config.verbose)
        self.last_computer_move = None

    @property
    def human_player(self):
        return self.config.human_player

    @property
    def computer_player(self):
        return self.config.computer_player

    def submit_human_move(self, row, col):
        """
        Play a human move and let the computer reply.

        Args:
            row (int): Row position (0-7)
            col (int): Column position (0-7)

        Returns:
            tuple or None: The computer's reply, or None if it had no move

        Raises:
            MoveRejected: If the move is illegal; nothing is changed
        """
        if not is_legal_move(self.board, row, col, self.human_player):
            if self.config.verbose:
                print(f"Rejected move ({row}, {col})")
            raise MoveRejected(row, col, self.human_player)

        apply_move(self.board, row, col, self.human_player)
        self.current_player = self.computer_player

        reply = self.computer_turn()
        self.current_player = self.human_player
        return reply

    def computer_turn(self):
        """
        Let the computer search for and play its move.

        Returns:
            tuple or None: The move played, or None if there was none
        """
        move = self.agent.select_best_move(self.board, self.computer_player)
        self.last_computer_move = move
        if move is not None:
            apply_move(self.board, move[0], move[1], self.computer_player)
        return move

    def snapshot(self):
        """Read-only copy of the board cells for rendering."""
        return self.board.cells()

    def disc_counts(self):
        """Disc count per player."""
        return self.board.disc_counts()
