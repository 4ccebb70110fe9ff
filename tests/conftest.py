import chess
import pytest

from gambit.config import Config
from gambit.engines.alpha_beta import AlphaBeta

# white mates with Ra8
BACK_RANK_MATE_WHITE = "6k1/5ppp/8/8/8/8/8/R5K1 w - - 0 1"
# black mates with Ra1
BACK_RANK_MATE_BLACK = "r5k1/8/8/8/8/8/6PP/7K b - - 0 1"
# black to move, no legal move, not in check
STALEMATE = "7k/5Q2/6K1/8/8/8/8/8 b - - 0 1"
# black to move and checkmated
CHECKMATED = "R5k1/5ppp/8/8/8/8/8/6K1 b - - 0 1"
OPEN_GAME = "r1bqkbnr/pppp1ppp/2n5/4p3/3PP3/5N2/PPP2PPP/RNBQKB1R b KQkq d3 0 3"


@pytest.fixture
def config() -> Config:
    return Config(seed=0)


@pytest.fixture
def engine(config: Config) -> AlphaBeta:
    return AlphaBeta(config)


@pytest.fixture
def start_board() -> chess.Board:
    return chess.Board()
