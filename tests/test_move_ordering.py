import random

import chess

from gambit.move_ordering import (
    move_score,
    organize_moves,
    organize_moves_quiescence,
    organize_root_moves,
)
from gambit.psqt import capture_value

from .conftest import OPEN_GAME

TACTICAL = "r3k2r/p1ppqpb1/bn2pnp1/3PN3/1p2P3/2N2Q1p/PPPBBPPP/R3K2R w KQkq - 0 10"


def test_organize_moves_keeps_every_legal_move() -> None:
    board = chess.Board(TACTICAL)
    moves = organize_moves(board)
    assert len(moves) == board.legal_moves.count()
    assert set(moves) == set(board.legal_moves)


def test_organize_moves_captures_then_checks() -> None:
    board = chess.Board(TACTICAL)
    scores = [move_score(board, move) for move in organize_moves(board)]
    assert scores == sorted(scores, reverse=True)
    assert scores[0] >= 100


def test_move_score_values() -> None:
    # Qxf7+ is a capture that gives check
    board = chess.Board("rnbqkbnr/pppp1ppp/8/4p3/2B1P3/5Q2/PPPP1PPP/RNB1K1NR w KQkq - 0 3")
    assert move_score(board, chess.Move.from_uci("f3f7")) == 150
    assert move_score(board, chess.Move.from_uci("c4f7")) == 150
    assert move_score(board, chess.Move.from_uci("a2a3")) == 0


def test_organize_moves_is_stable_among_equal_scores() -> None:
    board = chess.Board(OPEN_GAME)
    quiet = [m for m in board.legal_moves if move_score(board, m) == 0]
    ordered_quiet = [m for m in organize_moves(board) if move_score(board, m) == 0]
    assert ordered_quiet == quiet


def test_quiescence_moves_are_captures_by_mvv_lva() -> None:
    board = chess.Board(TACTICAL)
    moves = organize_moves_quiescence(board)
    captures = [m for m in board.legal_moves if board.is_capture(m)]
    assert set(moves) == set(captures)
    values = [capture_value(board, move) for move in moves]
    assert values == sorted(values, reverse=True)


def test_quiescence_moves_include_en_passant() -> None:
    board = chess.Board("4k3/8/8/3pP3/8/8/8/4K3 w - d6 0 1")
    assert organize_moves_quiescence(board) == [chess.Move.from_uci("e5d6")]


def test_quiescence_moves_empty_without_captures(start_board: chess.Board) -> None:
    assert organize_moves_quiescence(start_board) == []


def test_root_moves_without_rng_are_deterministic(start_board: chess.Board) -> None:
    assert organize_root_moves(start_board) == list(start_board.legal_moves)


def test_root_moves_put_captures_first() -> None:
    board = chess.Board(TACTICAL)
    moves = organize_root_moves(board, random.Random(3))
    flags = [board.is_capture(move) for move in moves]
    capture_count = sum(flags)
    assert flags == [True] * capture_count + [False] * (len(flags) - capture_count)
    assert set(moves) == set(board.legal_moves)


def test_root_moves_jitter_follows_seed(start_board: chess.Board) -> None:
    first = organize_root_moves(start_board, random.Random(42))
    again = organize_root_moves(start_board, random.Random(42))
    assert first == again

    orders = {
        tuple(organize_root_moves(start_board, random.Random(seed)))
        for seed in range(10)
    }
    assert len(orders) > 1
