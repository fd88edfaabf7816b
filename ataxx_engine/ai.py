from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

from .board import Board, Move, PieceColor
from .config import INFTY, WINNING_VALUE, SearchConfig
from .evaluator import Evaluator
from .movegen import list_moves

__all__ = [
    "AIPlayer",
    "INFTY",
    "NoLegalMoveError",
    "SearchResult",
    "Side",
    "WINNING_VALUE",
]

logger = logging.getLogger(__name__)


class Side(Enum):
    """Which way a search level optimizes. Red maximizes, Blue minimizes."""

    MAXIMIZING = 1
    MINIMIZING = -1

    @property
    def color(self) -> PieceColor:
        return PieceColor.RED if self is Side.MAXIMIZING else PieceColor.BLUE

    def opposite(self) -> Side:
        return Side.MINIMIZING if self is Side.MAXIMIZING else Side.MAXIMIZING

    @classmethod
    def for_color(cls, color: PieceColor) -> Side:
        if color is PieceColor.RED:
            return cls.MAXIMIZING
        if color is PieceColor.BLUE:
            return cls.MINIMIZING
        raise ValueError(f"{color.name} is not a player colour")


@dataclass
class SearchResult:
    best_move: Optional[Move]
    score: int
    nodes: int


class NoLegalMoveError(ValueError):
    """Raised when asked to search for a side that has no move to make."""


class AIPlayer:
    """Minimax with alpha-beta pruning over a material evaluator.

    Scores are from Red's point of view. A decided game is worth
    ``winning_value + depth`` at the depth where it is found, so quicker wins
    and slower losses are preferred.
    """

    def __init__(
        self,
        color: PieceColor,
        config: Optional[SearchConfig] = None,
        seed: Optional[int] = None,
        pruning: bool = True,
    ) -> None:
        self.side = Side.for_color(color)
        self.color = color
        self.config = config or SearchConfig()
        self.seed = self.config.seed if seed is None else seed
        # Exhaustive search when False; used to check that pruning never
        # changes the result.
        self.pruning = pruning
        self.last_result: Optional[SearchResult] = None

    def choose_move(self, board: Board) -> Move:
        """Return a move for this player, passing when it cannot move."""
        if not board.can_move(self.color):
            logger.info("%s has no move; passing", self.color.name)
            return Move.pass_move()

        start = time.perf_counter()
        move = self.compute_move(board)
        elapsed = time.perf_counter() - start
        result = self.last_result
        logger.info(
            "%s plays %s (score %d, %d nodes, depth %d, %.3fs)",
            self.color.name,
            move,
            result.score,
            result.nodes,
            self.config.max_depth,
            elapsed,
        )
        return move

    def compute_move(self, board: Board, color: Optional[PieceColor] = None) -> Move:
        """Search board to the configured depth and return the chosen move.

        The caller must only ask for a move when color has one; a pass is the
        caller's decision (see choose_move).
        """
        if color is None:
            color, side = self.color, self.side
        else:
            side = Side.for_color(color)
        self.last_result = None
        if not list_moves(board, color):
            raise NoLegalMoveError(f"{color.name} has no legal move")

        result = self.search(board, self.config.max_depth, side)
        if result.best_move is None:
            raise NoLegalMoveError(f"No move found for {color.name}: the game is over")
        self.last_result = result
        return result.best_move

    def search(
        self,
        board: Board,
        depth: int,
        side: Side,
        alpha: int = -INFTY,
        beta: int = INFTY,
        record: bool = True,
    ) -> SearchResult:
        """Search board for side to depth and report the score.

        best_move is only filled in when record is set and the position is
        neither decided nor searched at depth 0. board is never modified.
        """
        if depth < 0 or self.config.winning_value + depth >= INFTY:
            raise ValueError(f"Search depth {depth} is out of range")
        score, move, nodes = self._min_max(board, depth, record, side, alpha, beta)
        logger.debug(
            "search depth=%d side=%s score=%d move=%s nodes=%d",
            depth, side.name, score, move, nodes,
        )
        return SearchResult(best_move=move, score=score, nodes=nodes)

    def _min_max(
        self,
        board: Board,
        depth: int,
        record: bool,
        side: Side,
        alpha: int,
        beta: int,
    ) -> Tuple[int, Optional[Move], int]:
        if depth == 0 or board.winner is not None:
            return Evaluator.static_score(board, self.config.winning_value + depth), None, 1

        moves = list_moves(board, side.color)
        if not moves:
            # Forced pass: the same position, one level down, other side to move.
            score, _, nodes = self._min_max(
                board, depth - 1, False, side.opposite(), alpha, beta
            )
            return score, None, nodes + 1

        maximizing = side is Side.MAXIMIZING
        best: Optional[Move] = None
        best_score = -INFTY if maximizing else INFTY
        nodes = 1
        for move in moves:
            child = board.copy()
            child.make_move(move)
            score, _, child_nodes = self._min_max(
                child, depth - 1, False, side.opposite(), alpha, beta
            )
            nodes += child_nodes
            if maximizing:
                alpha = max(alpha, score)
                if best is None or score > best_score:
                    best_score = score
                    best = move
            else:
                beta = min(beta, score)
                if best is None or score < best_score:
                    best_score = score
                    best = move
            if self.pruning and beta <= alpha:
                break

        return best_score, (best if record else None), nodes
