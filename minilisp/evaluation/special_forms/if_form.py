from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment


def if_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (if cond then else)
    Only the selected branch is evaluated.
    """
    if len(tail) != 3:
        raise MiniLispArityError("Invalid number of arguments for if: expected (if cond then else)")

    cond = evaluate_fn(tail[0], env)
    if not isinstance(cond, bool):
        raise MiniLispTypeError(f"Condition must be Bool, got {type(cond).__name__}")

    return evaluate_fn(tail[1] if cond else tail[2], env)
