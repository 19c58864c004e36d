from tinylisp.evaluation.evaluator import evaluate
from tinylisp.evaluation.apply import apply

__all__ = ["apply", "evaluate"]
