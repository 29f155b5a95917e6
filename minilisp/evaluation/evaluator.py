"""Core tree-walking evaluator for minilisp.

Dispatches on the node type of the expression and, for lists, on the node
type of the head:

- Condition / Keyword heads go to the special-form table.
- Op heads evaluate their operands and apply the primitive operator.
- Symbol heads are function calls.
- Any other head means plain sequential evaluation: every element is
  evaluated in order and the non-Void results are returned as a new list.
"""

from __future__ import annotations

import logging

from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispTypeError, MiniLispUnboundName
from minilisp.evaluation.apply import call
from minilisp.evaluation.operators import apply_operator
from minilisp.evaluation.special_forms import SPECIAL_FORMS
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.markers import ConditionType, Keyword
from minilisp.types.operator import Op
from minilisp.types.symbol import Symbol
from minilisp.types.void import Void, VoidType

logger = logging.getLogger(__name__)


def evaluate(expr: SExpression, env: Environment) -> LispValue:
    """Evaluate `expr` in `env`. The first error raised aborts the evaluation."""
    match expr:
        case bool() | int() | float() | VoidType() | Lambda():
            return expr

        case Symbol():
            value = env.get(expr)
            if value is None:
                raise MiniLispUnboundName(f"There is no defined name {expr} in this environment")
            return value

        case []:
            return []

        case [ConditionType() | Keyword() as head, *tail]:
            form = SPECIAL_FORMS.get(head)
            if form is None:
                raise MiniLispTypeError(f"Invalid keyword {head}")
            logger.debug("special form %s", head)
            return form(tail, env, evaluate)

        case [Op() as op, *tail]:
            return apply_operator(op, evaluate_sequence(tail, env))

        case [Symbol() as name, *tail]:
            return call(name, tail, env, evaluate)

        case list():
            return evaluate_sequence(expr, env)

    raise MiniLispTypeError(f"{expr} cannot be evaluated outside the head of a list")


def evaluate_sequence(exprs: list[SExpression], env: Environment) -> list[LispValue]:
    """Evaluate each expression in order, keeping every non-Void result."""
    results = []
    for e in exprs:
        value = evaluate(e, env)
        if value is not Void:
            results.append(value)
    return results
