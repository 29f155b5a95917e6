from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.symbol import Symbol
from minilisp.types.void import Void


def define_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (def name value)
    Binds in the current frame only, so a def inside a lambda body shadows
    rather than overwrites an outer binding.
    """
    if len(tail) != 2:
        raise MiniLispArityError("Invalid number of arguments for def: expected (def name value)")

    name, val_expr = tail
    if not isinstance(name, Symbol):
        raise MiniLispTypeError(f"def expects a name as its first argument, got {name!r}")

    env.set(name, evaluate_fn(val_expr, env))
    return Void
