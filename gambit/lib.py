from typing import Optional, Union

from chess import Board, Move

from gambit.config import Config
from gambit.difficulty import Difficulty
from gambit.helper import find_best_move, get_engine


def select_move(
    board: Board,
    difficulty: Union[Difficulty, str, int] = Difficulty.medium,
    config: Optional[Config] = None,
) -> Optional[Move]:
    """
    Picks the computer's next move for `board` at the given difficulty.

    Returns None when the side to move has no legal move, in which case
    the game is already over (checkmate or stalemate).
    """
    engine = get_engine(config or Config())
    return find_best_move(board, engine, difficulty)
