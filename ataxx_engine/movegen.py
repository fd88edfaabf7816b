from __future__ import annotations

from typing import List, Tuple

from .board import Board, Move, PieceColor

# Row-major over the 5x5 neighbourhood. The zero offset is the source square,
# which is never empty, so it never yields a move.
NEIGHBOURHOOD: Tuple[Tuple[int, int], ...] = tuple(
    (dr, dc) for dr in range(-2, 3) for dc in range(-2, 3)
)


def list_moves(board: Board, color: PieceColor) -> List[Move]:
    """Return every move for color whose destination is on the board and empty.

    Squares are visited row by row, then column by column, and each square's
    neighbourhood in NEIGHBOURHOOD order. Search relies on this order to break
    ties, so it must stay fixed.
    """
    moves: List[Move] = []
    size = board.size
    for row in range(size):
        for col in range(size):
            if board.get(col, row) is not color:
                continue
            for dr, dc in NEIGHBOURHOOD:
                if board.get(col + dc, row + dr) is PieceColor.EMPTY:
                    moves.append(Move(col, row, col + dc, row + dr))
    return moves
