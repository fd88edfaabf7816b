from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional

import numpy as np

SIDE = 7
COLS = "abcdefg"
ROWS = "1234567"

# Consecutive jumps (moves that do not add a piece) before the game is drawn
# on piece count.
JUMP_LIMIT = 25


class PieceColor(Enum):
    EMPTY = 0
    RED = 1
    BLUE = 2
    BLOCKED = 3

    def opposite(self) -> PieceColor:
        if self is PieceColor.RED:
            return PieceColor.BLUE
        if self is PieceColor.BLUE:
            return PieceColor.RED
        return self

    def is_piece(self) -> bool:
        return self is PieceColor.RED or self is PieceColor.BLUE


_BY_VALUE: Dict[int, PieceColor] = {color.value: color for color in PieceColor}


class IllegalMoveError(ValueError):
    pass


@dataclass(frozen=True)
class Move:
    """A move from (col0, row0) to (col1, row1), or a pass.

    Coordinates are zero-based: column 0 is ``a``, row 0 is ``1``.
    """

    col0: int = -1
    row0: int = -1
    col1: int = -1
    row1: int = -1

    @classmethod
    def pass_move(cls) -> Move:
        return PASS

    @property
    def is_pass(self) -> bool:
        return (self.col0, self.row0, self.col1, self.row1) == (-1, -1, -1, -1)

    @property
    def distance(self) -> int:
        return max(abs(self.col1 - self.col0), abs(self.row1 - self.row0))

    @property
    def is_extend(self) -> bool:
        return not self.is_pass and self.distance == 1

    @property
    def is_jump(self) -> bool:
        return not self.is_pass and self.distance == 2

    def __str__(self) -> str:
        if self.is_pass:
            return "-"
        return (
            f"{_square_name(self.col0, self.row0)}-"
            f"{_square_name(self.col1, self.row1)}"
        )


PASS = Move()


def _square_name(col: int, row: int) -> str:
    if 0 <= col < SIDE and 0 <= row < SIDE:
        return COLS[col] + ROWS[row]
    return f"({col},{row})"


def on_board(col: int, row: int) -> bool:
    return 0 <= col < SIDE and 0 <= row < SIDE


class Board:
    """Mutable Ataxx position on a 7x7 grid.

    Cells are stored row-major in a numpy int8 array holding PieceColor
    values. The colour that moves is taken from the source cell of each
    move, so a search may apply moves for either side regardless of whose
    turn the board records.
    """

    def __init__(self) -> None:
        self._grid = np.zeros((SIDE, SIDE), dtype=np.int8)
        self._whose_move = PieceColor.RED
        self._jumps = 0
        self.set(0, SIDE - 1, PieceColor.RED)
        self.set(SIDE - 1, 0, PieceColor.RED)
        self.set(0, 0, PieceColor.BLUE)
        self.set(SIDE - 1, SIDE - 1, PieceColor.BLUE)

    @classmethod
    def empty(cls, whose_move: PieceColor = PieceColor.RED) -> Board:
        board = cls()
        board._grid.fill(PieceColor.EMPTY.value)
        board._whose_move = whose_move
        return board

    def copy(self) -> Board:
        other = Board.__new__(Board)
        other._grid = self._grid.copy()
        other._whose_move = self._whose_move
        other._jumps = self._jumps
        return other

    @property
    def size(self) -> int:
        return SIDE

    @property
    def whose_move(self) -> PieceColor:
        return self._whose_move

    @property
    def jumps(self) -> int:
        return self._jumps

    def get(self, col: int, row: int) -> PieceColor:
        """Return the contents of (col, row); BLOCKED when off the board."""
        if not on_board(col, row):
            return PieceColor.BLOCKED
        return _BY_VALUE[int(self._grid[row, col])]

    def set(self, col: int, row: int, color: PieceColor) -> None:
        if not on_board(col, row):
            raise IndexError(f"Square {_square_name(col, row)} is off the board")
        self._grid[row, col] = color.value

    def set_block(self, col: int, row: int) -> None:
        """Block (col, row) and its reflections about both board axes."""
        far = SIDE - 1
        squares = {(col, row), (far - col, row), (col, far - row), (far - col, far - row)}
        for c, r in squares:
            if self.get(c, r).is_piece():
                raise ValueError(f"Cannot block occupied square {_square_name(c, r)}")
        for c, r in squares:
            self.set(c, r, PieceColor.BLOCKED)

    def num_pieces(self, color: PieceColor) -> int:
        return int(np.count_nonzero(self._grid == color.value))

    @property
    def red_pieces(self) -> int:
        return self.num_pieces(PieceColor.RED)

    @property
    def blue_pieces(self) -> int:
        return self.num_pieces(PieceColor.BLUE)

    def can_move(self, color: PieceColor) -> bool:
        empty = PieceColor.EMPTY.value
        for row, col in np.argwhere(self._grid == color.value):
            window = self._grid[max(row - 2, 0):row + 3, max(col - 2, 0):col + 3]
            if (window == empty).any():
                return True
        return False

    @property
    def winner(self) -> Optional[PieceColor]:
        """None while play continues; RED or BLUE for a win; EMPTY for a draw."""
        red, blue = self.red_pieces, self.blue_pieces
        if red and blue and self._jumps < JUMP_LIMIT:
            # The side to move is checked first; it usually has a move.
            if self.can_move(self._whose_move) or self.can_move(self._whose_move.opposite()):
                return None
        if red > blue:
            return PieceColor.RED
        if blue > red:
            return PieceColor.BLUE
        return PieceColor.EMPTY

    def legal_move(self, move: Move) -> bool:
        if move.is_pass:
            return True
        if not (on_board(move.col0, move.row0) and on_board(move.col1, move.row1)):
            return False
        if not self.get(move.col0, move.row0).is_piece():
            return False
        if self.get(move.col1, move.row1) is not PieceColor.EMPTY:
            return False
        return 1 <= move.distance <= 2

    def make_move(self, move: Move) -> None:
        """Apply move, flipping opposing pieces next to its destination."""
        if not self.legal_move(move):
            raise IllegalMoveError(f"Illegal move: {move}")
        if move.is_pass:
            self._whose_move = self._whose_move.opposite()
            return

        mover = self.get(move.col0, move.row0)
        opponent = mover.opposite()
        self._grid[move.row1, move.col1] = mover.value
        if move.is_jump:
            self._grid[move.row0, move.col0] = PieceColor.EMPTY.value
            self._jumps += 1
        else:
            self._jumps = 0

        neighbours = self._grid[
            max(move.row1 - 1, 0):move.row1 + 2,
            max(move.col1 - 1, 0):move.col1 + 2,
        ]
        neighbours[neighbours == opponent.value] = mover.value
        self._whose_move = opponent

    def __str__(self) -> str:
        symbols = {
            PieceColor.EMPTY: "-",
            PieceColor.RED: "r",
            PieceColor.BLUE: "b",
            PieceColor.BLOCKED: "X",
        }
        lines = []
        for row in range(SIDE - 1, -1, -1):
            lines.append(" ".join(symbols[self.get(col, row)] for col in range(SIDE)))
        return "\n".join(lines)
