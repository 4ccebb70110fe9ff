import chess
import pytest

from gambit.difficulty import (
    configure,
    Difficulty,
    is_endgame,
    parse_difficulty,
    SearchConfig,
)
from gambit.errors import InvalidDifficulty

from .conftest import BACK_RANK_MATE_WHITE

# two rooks and a knight: 1320 centipawns, still a middlegame
ROOKS_AND_KNIGHT = "r5k1/5ppp/8/8/8/8/5PPP/R1N3K1 w - - 0 1"
# two rooks: 1000 centipawns, endgame
ROOKS_ONLY = "r5k1/5ppp/8/8/8/8/5PPP/R5K1 w - - 0 1"


def test_easy_config(start_board: chess.Board) -> None:
    assert configure(Difficulty.easy, start_board) == SearchConfig(
        depth=1, use_quiescence=False, randomize=True
    )


def test_medium_config(start_board: chess.Board) -> None:
    assert configure(Difficulty.medium, start_board) == SearchConfig(
        depth=2, use_quiescence=True, randomize=False
    )


def test_hard_config_middlegame(start_board: chess.Board) -> None:
    search_config = configure(Difficulty.hard, start_board)
    assert search_config.depth == 3
    assert search_config.use_quiescence


@pytest.mark.parametrize(
    "fen, depth",
    [
        (ROOKS_AND_KNIGHT, 3),
        (ROOKS_ONLY, 4),
        (BACK_RANK_MATE_WHITE, 4),
    ],
)
def test_hard_searches_deeper_in_endgames(fen: str, depth: int) -> None:
    assert configure(Difficulty.hard, chess.Board(fen)).depth == depth


def test_endgame_threshold_is_configurable() -> None:
    board = chess.Board(ROOKS_AND_KNIGHT)
    assert not is_endgame(board)
    assert is_endgame(board, threshold=1500)
    assert configure(Difficulty.hard, board, endgame_threshold=1500).depth == 4


def test_levels_never_get_weaker(start_board: chess.Board) -> None:
    assert Difficulty.easy < Difficulty.medium < Difficulty.hard
    depths = [configure(level, start_board).depth for level in sorted(Difficulty)]
    assert depths == sorted(depths)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("easy", Difficulty.easy),
        ("HARD", Difficulty.hard),
        (" Medium ", Difficulty.medium),
        ("2", Difficulty.medium),
        (3, Difficulty.hard),
        (Difficulty.easy, Difficulty.easy),
    ],
)
def test_parse_difficulty(value, expected) -> None:
    assert parse_difficulty(value) is expected


@pytest.mark.parametrize("value", ["impossible", "", 0, 4, "7"])
def test_parse_difficulty_rejects_unknown_levels(value) -> None:
    with pytest.raises(InvalidDifficulty):
        parse_difficulty(value)
    with pytest.raises(ValueError):
        parse_difficulty(value)
