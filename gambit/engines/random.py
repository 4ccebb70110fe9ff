import random
from typing import Optional, Sequence, TypeVar

from chess import Board, Move

from gambit.config import Config
from gambit.difficulty import SearchConfig

T = TypeVar("T")


def choice(items: Sequence[T], rng: Optional[random.Random] = None) -> T:
    """Uniform pick, drawn from `rng` when given so seeded engines repeat."""
    return (rng or random).choice(items)


class RandomEngine:
    """
    Plays a uniformly random legal move, ignoring any search parameters.
    """

    def __init__(self, config: Config):
        self.config = config
        self.rng = random.Random(config.seed)

    def random_move(self, board: Board) -> Move:
        return choice(list(board.legal_moves), self.rng)

    def search_move(
        self,
        board: Board,
        search_config: Optional[SearchConfig] = None,
        time_limit: Optional[float] = None,
    ) -> Optional[Move]:
        if not any(board.legal_moves):
            return None
        return self.random_move(board)
