"""Closure application for minilisp.

A call `(f a1 ... an)` binds the lambda's parameters positionally in a new
frame whose parent is the call-site environment, then evaluates the body list
in that frame. Arguments are evaluated in the caller's environment, left to
right. Arguments beyond the lambda's parameter count are not evaluated.
"""

from __future__ import annotations

import logging

from minilisp import EvaluatorFn, LispValue, SExpression
from minilisp.errors import MiniLispArityError, MiniLispTypeError, MiniLispUnboundSymbol
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol

logger = logging.getLogger(__name__)


def apply_lambda(
    fn: Lambda,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Apply `fn` to the unevaluated `arg_exprs` from a call made in `env`.

    Raises MiniLispArityError when fewer arguments than parameters are given.
    """
    if len(arg_exprs) < fn.arity:
        raise MiniLispArityError(
            f"Lambda expects {fn.arity} argument(s), got {len(arg_exprs)}"
        )

    args = [evaluate_fn(arg, env) for arg in arg_exprs[:fn.arity]]
    frame = Environment.extend(env)
    for param, value in zip(fn.params, args):
        frame.set(param, value)
    return evaluate_fn(fn.body, frame)


def call(
    name: Symbol,
    arg_exprs: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """Resolve `name` to a Lambda and apply it."""
    head = env.get(name)
    if head is None:
        raise MiniLispUnboundSymbol(f"There is no function named {name} in this environment")
    if not isinstance(head, Lambda):
        raise MiniLispTypeError(f"Cannot apply non-function {name} = {head!r}")
    logger.debug("calling %s with %d argument(s)", name, len(arg_exprs))
    return apply_lambda(head, arg_exprs, env, evaluate_fn)
