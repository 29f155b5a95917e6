from minilisp.types.symbol import Symbol
from minilisp.types.void import Void, VoidType
from minilisp.types.operator import Op
from minilisp.types.markers import Condition, ConditionType, Keyword
from minilisp.types.lambda_fn import Lambda
from minilisp.types.environment import Environment

__all__ = [
    "Symbol",
    "Void",
    "VoidType",
    "Op",
    "Condition",
    "ConditionType",
    "Keyword",
    "Lambda",
    "Environment",
]
