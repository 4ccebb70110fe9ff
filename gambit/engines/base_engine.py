import random
from typing import Optional, Protocol

from chess import Board, Move

from gambit.config import Config
from gambit.difficulty import SearchConfig


class ChessEngine(Protocol):
    """
    Interface shared by every engine returned by helper.get_engine.
    """

    config: Config
    rng: random.Random

    def random_move(self, board: Board) -> Move:
        ...

    def search_move(
        self,
        board: Board,
        search_config: Optional[SearchConfig] = None,
        time_limit: Optional[float] = None,
    ) -> Optional[Move]:
        ...
