import logging
from enum import Enum
from typing import Optional, Union

from chess import Board, Move

from gambit.config import Config
from gambit.difficulty import configure, Difficulty, parse_difficulty
from gambit.engines.alpha_beta import AlphaBeta
from gambit.engines.base_engine import ChessEngine
from gambit.engines.random import RandomEngine

logger = logging.getLogger(__name__)


class Algorithm(Enum):
    """Enumeration of all possible algorithms."""

    alpha_beta = "alpha_beta"
    random = "random"


def get_engine(config: Config) -> ChessEngine:
    """
    Returns the engine

    Arguments:
        - config: engine configuration, `config.algorithm` picks the engine.

    Returns:
        - engine: the engine we want to use.
    """
    try:
        algorithm = Algorithm[config.algorithm]
    except KeyError:
        raise ValueError(f"algorithm not supported: {config.algorithm}") from None

    if algorithm is Algorithm.alpha_beta:
        return AlphaBeta(config)
    return RandomEngine(config)


def find_best_move(
    board: Board,
    engine: ChessEngine,
    difficulty: Union[Difficulty, str, int, None] = None,
    time_limit: Optional[float] = None,
) -> Optional[Move]:
    """
    Finds the move to play for the given board at the given difficulty.

    The search runs on a copy rebuilt from the board's FEN, the caller's
    board is never touched. On easy, the engine first rolls whether it
    plays a random move without searching at all.

    Arguments:
        - board: the chess board state.
        - engine: the engine to use for finding the best move.
        - difficulty: playing strength, defaults to the engine's config.
        - time_limit: seconds, None to run the search to completion.

    Returns:
        - best_move: the move to play, None when there is no legal move.
    """
    if difficulty is None:
        difficulty = engine.config.difficulty
    difficulty = parse_difficulty(difficulty)

    search_board = Board(board.fen())
    if not any(search_board.legal_moves):
        return None

    if (
        difficulty is Difficulty.easy
        and engine.rng.random() < engine.config.easy_random_move_rate
    ):
        move = engine.random_move(search_board)
        logger.debug("easy: playing random move %s without searching", move)
        return move

    search_config = configure(
        difficulty, search_board, engine.config.endgame_material_threshold
    )
    return engine.search_move(search_board, search_config, time_limit=time_limit)
