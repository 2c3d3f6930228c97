from lispy.types.value import Value
from lispy.types.number import Number
from lispy.types.symbol import Symbol
from lispy.types.error import Error, ErrorKind
from lispy.types.function import Function
from lispy.types.expression import Expression, SExpression, QExpression
from lispy.types.environment import Environment

__all__ = [
    "Value",
    "Number",
    "Symbol",
    "Error",
    "ErrorKind",
    "Function",
    "Expression",
    "SExpression",
    "QExpression",
    "Environment",
]
