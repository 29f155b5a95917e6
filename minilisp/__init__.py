# Core type aliases for minilisp's data model.
# Plain Python values (int, float, bool, list) stand in for the literal and
# list nodes of the expression tree; Symbol, Op, Keyword, Condition, Lambda
# and Void cover the remaining node kinds. The same values are used for parsed
# code and for evaluation results.
#
# Naming guidance:
# - SExpression: use in reader/parser code for syntactic forms.
# - LispValue:  use in evaluator code for evaluated values.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any
SExpression = LispValue

# Evaluator function type, passed to special forms so they can recurse
EvaluatorFn = Callable[..., LispValue]
