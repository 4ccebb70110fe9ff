from dataclasses import dataclass
from enum import IntEnum
from typing import Union

from chess import Board

from gambit.errors import InvalidDifficulty
from gambit.psqt import count_material

ENDGAME_MATERIAL_THRESHOLD = 1200


class Difficulty(IntEnum):
    """Playing strength, a higher level never searches less."""

    easy = 1
    medium = 2
    hard = 3


@dataclass(frozen=True)
class SearchConfig:
    """
    Search parameters for a single move request.

    Attributes:
        - depth: plies searched from the root.
        - use_quiescence: extend the horizon with a capture-only search.
        - randomize: shuffle moves of equal value at the root.
    """

    depth: int
    use_quiescence: bool
    randomize: bool


def parse_difficulty(value: Union[str, int, Difficulty]) -> Difficulty:
    """
    Accepts a Difficulty, its name ("easy", "Medium", ...) or its level (1-3).
    """
    if isinstance(value, Difficulty):
        return value
    try:
        if isinstance(value, str):
            if value.isdigit():
                return Difficulty(int(value))
            return Difficulty[value.strip().lower()]
        return Difficulty(value)
    except (KeyError, ValueError):
        raise InvalidDifficulty(f"unknown difficulty: {value!r}") from None


def is_endgame(board: Board, threshold: int = ENDGAME_MATERIAL_THRESHOLD) -> bool:
    """
    The game is in its endgame phase once the knights, bishops, rooks and
    queens left on the board are worth less than `threshold` centipawns
    (roughly two rooks and a knight).
    """
    return count_material(board) < threshold


def configure(
    difficulty: Difficulty,
    board: Board,
    endgame_threshold: int = ENDGAME_MATERIAL_THRESHOLD,
) -> SearchConfig:
    """
    Maps a difficulty to the search parameters used for `board`.

    The easy level's random move is not part of the search configuration,
    the root driver decides it before searching (see helper.find_best_move).

    Arguments:
        - difficulty: requested playing strength.
        - board: position about to be searched, only hard depends on it.
        - endgame_threshold: material under which hard searches deeper.

    Returns:
        - search_config: depth, quiescence and randomization for the search.
    """
    difficulty = parse_difficulty(difficulty)
    if difficulty is Difficulty.easy:
        return SearchConfig(depth=1, use_quiescence=False, randomize=True)
    if difficulty is Difficulty.medium:
        return SearchConfig(depth=2, use_quiescence=True, randomize=False)
    depth = 4 if is_endgame(board, endgame_threshold) else 3
    return SearchConfig(depth=depth, use_quiescence=True, randomize=True)
