import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Config:
    """
    Engine configuration shared by every engine, the UCI loop and the HTTP API.

    Attributes:
        - algorithm: name of the engine to use (see helper.Algorithm).
        - difficulty: default difficulty name ("easy", "medium", "hard").
        - seed: seed for the engine's random generator, None for OS entropy.
        - mobility_weight: centipawns per legal move of the side to move.
        - checkmate_score: base of the mate sentinel, biased by remaining depth.
        - easy_random_move_rate: chance that easy skips the search entirely.
        - endgame_material_threshold: non-pawn material under which hard
            searches one ply deeper.
        - time_limit: seconds per search, None runs every search to completion.
        - log_level: logging level name used by the command line entry point.
    """

    algorithm: str = "alpha_beta"
    difficulty: str = "medium"
    seed: Optional[int] = None
    mobility_weight: int = 5
    checkmate_score: int = 100000
    easy_random_move_rate: float = 0.6
    endgame_material_threshold: int = 1200
    time_limit: Optional[float] = None
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Config":
        """
        Build a config from GAMBIT_* environment variables, falling back
        to the defaults above for anything unset.
        """
        config = cls()
        if os.getenv("GAMBIT_ALGORITHM"):
            config.algorithm = os.environ["GAMBIT_ALGORITHM"]
        if os.getenv("GAMBIT_DIFFICULTY"):
            config.difficulty = os.environ["GAMBIT_DIFFICULTY"]
        if os.getenv("GAMBIT_SEED"):
            config.seed = int(os.environ["GAMBIT_SEED"])
        if os.getenv("GAMBIT_TIME_LIMIT"):
            config.time_limit = float(os.environ["GAMBIT_TIME_LIMIT"])
        if os.getenv("GAMBIT_LOG_LEVEL"):
            config.log_level = os.environ["GAMBIT_LOG_LEVEL"].upper()
        return config
