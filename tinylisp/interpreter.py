from __future__ import annotations

import logging
from typing import Optional

from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import parse
from tinylisp.reader.printer import render
from tinylisp.types.environment import Environment
from tinylisp.types.expression import Expression

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One tinylisp session: parses and evaluates a line at a time against an
    Environment that persists across calls.
    """

    def __init__(self, env: Optional[Environment] = None, *, max_depth: Optional[int] = None):
        self.env: Environment = env if env is not None else Environment(max_depth=max_depth)

    def eval(self, code: str) -> Optional[Expression]:
        """Parse and evaluate one expression.

        A blank line evaluates to None. Syntax and evaluation errors propagate
        to the caller; bindings made before the failure are kept.
        """
        if not code.strip():
            return None
        expr = parse(code)
        logger.debug("parsed %r", expr)
        return evaluate(expr, self.env)

    def eval_to_string(self, code: str) -> Optional[str]:
        result = self.eval(code)
        return None if result is None else render(result)

    def reset(self) -> None:
        self.env.reset()
