from __future__ import annotations

import time

from ataxx_engine import AIPlayer, Board, PieceColor, SearchConfig


def test_engine_depths_respond_quickly():
    board = Board()
    opening = AIPlayer(PieceColor.RED, SearchConfig(max_depth=1)).choose_move(board)
    assert opening.is_extend
    board.make_move(opening)
    for depth in (1, 2, 3):
        ai = AIPlayer(PieceColor.BLUE, SearchConfig(max_depth=depth))
        start = time.time()
        move = ai.choose_move(board)
        assert board.legal_move(move)
        assert board.get(move.col0, move.row0) is PieceColor.BLUE
        assert time.time() - start < 10.0


def test_self_play_alternates_and_stays_legal():
    board = Board()
    players = {
        PieceColor.RED: AIPlayer(PieceColor.RED, SearchConfig(max_depth=1)),
        PieceColor.BLUE: AIPlayer(PieceColor.BLUE, SearchConfig(max_depth=2)),
    }
    for _ in range(10):
        if board.winner is not None:
            break
        mover = board.whose_move
        move = players[mover].choose_move(board)
        assert move.is_pass or board.get(move.col0, move.row0) is mover
        board.make_move(move)
    assert board.red_pieces + board.blue_pieces > 4
