"""
Base evaluator protocol.

Any evaluation function should implement this protocol to be usable with
the alpha-beta search engine.
"""

from typing import Protocol, runtime_checkable

from chess import Board


@runtime_checkable
class Evaluator(Protocol):
    """
    Protocol for board evaluation functions.

    The engine calls `evaluate()` at the leaves of the search tree when
    quiescence is disabled, and `stand_pat()` as the baseline of every
    quiescence node.

    Scores are absolute, not relative to the side to move:
    - Positive = good for white
    - Negative = good for black
    - 0 = roughly equal

    Scores are in centipawns (100 = 1 pawn advantage). Implementations must
    not cache results across moves, the board is mutated in place during
    search.
    """

    def evaluate(self, board: Board) -> int:
        """
        Full static evaluation of the given board position.

        Args:
            board: The chess position to evaluate.

        Returns:
            Score in centipawns, positive favours white.
        """
        ...

    def stand_pat(self, board: Board) -> int:
        """
        Cheaper evaluation used inside quiescence search.

        Args:
            board: The chess position to evaluate.

        Returns:
            Score in centipawns, positive favours white.
        """
        ...
