from __future__ import annotations

import logging

from minilisp import LispValue
from minilisp.config import resolve_strict
from minilisp.errors import MiniLispError
from minilisp.evaluation.evaluator import evaluate
from minilisp.printer import to_source
from minilisp.reader.parser import read
from minilisp.types.environment import Environment

logger = logging.getLogger(__name__)


def eval_source(source: str, env: Environment, strict: bool | None = None) -> LispValue:
    """Lex, parse and evaluate one program against a caller-owned root environment.

    Bindings made by top-level defs stay in `env`. Errors propagate as
    MiniLispError subclasses.
    """
    program = read(source, strict)
    return evaluate(program, env)


class Interpreter:
    """
    A session: one root Environment that persists across eval() calls,
    so defs made by one input are visible to the next.
    """

    def __init__(self, env: Environment | None = None, strict: bool | None = None):
        self.env: Environment = env if env is not None else Environment()
        self.strict: bool = resolve_strict(strict)

    def eval(self, code: str) -> LispValue:
        logger.debug("eval: %s", code)
        try:
            return eval_source(code, self.env, self.strict)
        except MiniLispError as e:
            logger.debug("eval failed: %s: %s", type(e).__name__, e)
            raise

    def eval_to_string(self, code: str) -> str:
        """Evaluate `code` and render the result in surface syntax."""
        return to_source(self.eval(code))
