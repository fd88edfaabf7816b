from __future__ import annotations

from .board import Board, PieceColor


class Evaluator:
    """Static evaluation for Ataxx positions.

    Positive scores favor Red, negative scores favor Blue. Decided games score
    as plus or minus the caller's winning value (0 for a draw); live positions
    score as the difference in piece counts.
    """

    @classmethod
    def static_score(cls, board: Board, winning_value: int) -> int:
        winner = board.winner
        if winner is not None:
            if winner is PieceColor.RED:
                return winning_value
            if winner is PieceColor.BLUE:
                return -winning_value
            return 0
        return board.red_pieces - board.blue_pieces
