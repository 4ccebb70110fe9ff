"""
Classical evaluator wrapping the piece-square table evaluation.

This is the default evaluator used by the engine: material, positional
bonuses and mobility of the side to move.
"""

from chess import Board

from gambit.psqt import MOBILITY_WEIGHT, board_evaluation, material_evaluation


class ClassicalEvaluator:
    """
    Material plus piece-square tables, with a mobility term for the full
    evaluation and without it for the stand-pat score.
    """

    def __init__(self, mobility_weight: int = MOBILITY_WEIGHT):
        self.mobility_weight = mobility_weight

    def evaluate(self, board: Board) -> int:
        """Evaluate using piece-square tables and mobility."""
        return board_evaluation(board, self.mobility_weight)

    def stand_pat(self, board: Board) -> int:
        return material_evaluation(board)
