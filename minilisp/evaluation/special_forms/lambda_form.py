from minilisp import EvaluatorFn
from minilisp import SExpression, LispValue
from minilisp.errors import MiniLispArityError, MiniLispTypeError
from minilisp.types.environment import Environment
from minilisp.types.lambda_fn import Lambda
from minilisp.types.symbol import Symbol


def lambda_form(
    tail: list[SExpression],
    env: Environment,
    evaluate_fn: EvaluatorFn,
) -> LispValue:
    """
    (lambda (params...) (body...))
    The body list is kept unevaluated and evaluated as a whole list when the
    lambda is applied.
    """
    if len(tail) != 2:
        raise MiniLispArityError("Invalid number of arguments for lambda: expected (lambda (params) (body))")

    params, body = tail
    if not isinstance(params, list):
        raise MiniLispTypeError("Lambda parameters is not a list")
    for p in params:
        if not isinstance(p, Symbol):
            raise MiniLispTypeError(f"Lambda parameter list must hold names only, got {p!r}")
    if not isinstance(body, list):
        raise MiniLispTypeError("Lambda body is not a list")

    return Lambda(params, body)
