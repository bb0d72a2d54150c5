"""
Game configuration for Othello.
"""
from typing import Dict

from .board import BLACK, WHITE
from ..ai.agents.minimax_agent import validate_depth


class GameConfig:
    """Configuration for a human vs. computer Othello game."""

    def __init__(self,
                 computer_player: int = BLACK,
                 human_player: int = WHITE,
                 search_depth: int = 3,
                 verbose: bool = False):
        if computer_player not in (BLACK, WHITE) or human_player not in (BLACK, WHITE):
            raise ValueError("Players must be BLACK (1) or WHITE (-1)")
        if computer_player == human_player:
            raise ValueError("Computer and human must play different colors")
        validate_depth(search_depth)

        self.computer_player = computer_player
        self.human_player = human_player
        self.search_depth = search_depth
        self.verbose = verbose

    def to_dict(self) -> Dict:
        """Convert config to dictionary."""
        return {k: v for k, v in self.__dict__.items()}

    @classmethod
    def from_dict(cls, config_dict: Dict) -> 'GameConfig':
        """Create config from dictionary."""
        return cls(**config_dict)
