import random
from typing import Optional

from chess import Board, Move

from gambit.psqt import capture_value

CAPTURE_BONUS = 100
CHECK_BONUS = 50
ROOT_CAPTURE_BONUS = 10


def move_score(board: Board, move: Move) -> int:
    """
    Ordering score of a move inside the search: captures (en passant
    included) first, then checks, then everything else.
    """
    score = 0
    if board.is_capture(move):
        score += CAPTURE_BONUS
    if board.gives_check(move):
        score += CHECK_BONUS
    return score


def organize_moves(board: Board) -> list[Move]:
    """
    This function receives a board and it returns a list of all the
    possible moves for the current player, sorted by importance.
    It sends capturing and checking moves at the starting positions in
    the array (to try to increase pruning and do so earlier).

    The sort is stable, moves with the same score keep the rules engine's
    generation order.

    Arguments:
            - board: chess board state

    Returns:
            - legal_moves: list of all the possible moves for the current player.
    """
    return sorted(
        board.legal_moves,
        key=lambda move: move_score(board, move),
        reverse=True,
    )


def organize_moves_quiescence(board: Board) -> list[Move]:
    """
    This function receives a board and it returns the capturing moves
    for the current player (en passant included), best MVV-LVA first.

    Arguments:
            - board: chess board state

    Returns:
            - moves: list of capturing moves sorted based on importance.
    """
    captures = [move for move in board.legal_moves if board.is_capture(move)]
    return sorted(
        captures,
        key=lambda move: capture_value(board, move),
        reverse=True,
    )


def organize_root_moves(
    board: Board, rng: Optional[random.Random] = None
) -> list[Move]:
    """
    Orders the moves searched by the root driver. Captures get a small
    bonus and, when a random generator is given, every move gets its own
    jitter in [0, 1) so that moves of equal value come out in a different
    order on every call. Never use this ordering below the root.

    Arguments:
            - board: chess board state
            - rng: random generator, None for a deterministic order.

    Returns:
            - moves: all legal moves for the current player.
    """

    def root_score(move: Move) -> float:
        score: float = ROOT_CAPTURE_BONUS if board.is_capture(move) else 0
        if rng is not None:
            score += rng.random()
        return score

    return sorted(board.legal_moves, key=root_score, reverse=True)
