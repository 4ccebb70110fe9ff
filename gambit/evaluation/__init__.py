from gambit.evaluation.base import Evaluator
from gambit.evaluation.classical import ClassicalEvaluator

__all__ = ["Evaluator", "ClassicalEvaluator"]
