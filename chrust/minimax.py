"""Alpha-beta minimax search; black maximises, white minimises."""

from __future__ import annotations

import time

from chrust.board import Board, PieceMove
from chrust.evaluate import evaluate
from chrust.pieces import Color

_INFINITY = 1_000_000


class NoMoveError(Exception):
    """Raised when the searching side has no move at all."""


def _max_value(board: Board, depth: int, alpha: int, beta: int) -> int:
    if depth == 0:
        return evaluate(board)
    best = -_INFINITY
    for action in board.all_possible_moves(Color.BLACK):
        best = max(best, _min_value(board.apply_action(action), depth - 1, alpha, beta))
        alpha = max(alpha, best)
        if beta <= alpha:
            break
    return best


def _min_value(board: Board, depth: int, alpha: int, beta: int) -> int:
    if depth == 0:
        return evaluate(board)
    best = _INFINITY
    for action in board.all_possible_moves(Color.WHITE):
        best = min(best, _max_value(board.apply_action(action), depth - 1, alpha, beta))
        beta = min(beta, best)
        if beta <= alpha:
            break
    return best


def max_decision(board: Board, color: Color, max_depth: int) -> PieceMove:
    """The best move for ``color`` searched ``max_depth`` plies past the reply.

    Among equally scored moves the last one generated wins.
    """
    start = time.perf_counter()
    best_action: PieceMove | None = None
    best_score = 0
    for action in board.all_possible_moves(color):
        score = _min_value(board.apply_action(action), max_depth, -_INFINITY, _INFINITY)
        if best_action is None or score >= best_score:
            best_action, best_score = action, score
    if best_action is None:
        raise NoMoveError("Minimax was unable to find a max decision!")
    print(f"Time to determine move: {time.perf_counter() - start:.6f}s")
    return best_action