"""Ataxx move-search engine.

Modules:
- board: Ataxx position, pieces and moves
- movegen: Enumeration of the moves available to a colour
- evaluator: Static evaluation of positions
- ai: Minimax with alpha-beta pruning
- config: Search configuration from TOML and the environment
"""

from .board import Board, IllegalMoveError, Move, PieceColor
from .ai import AIPlayer, NoLegalMoveError, SearchResult, Side
from .evaluator import Evaluator
from .movegen import list_moves
from .config import Config, SearchConfig, load_config

__all__ = [
    "AIPlayer",
    "Board",
    "Config",
    "Evaluator",
    "IllegalMoveError",
    "Move",
    "NoLegalMoveError",
    "PieceColor",
    "SearchConfig",
    "SearchResult",
    "Side",
    "list_moves",
    "load_config",
]
