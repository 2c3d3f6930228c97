"""Core evaluator for the Lispy interpreter.

Evaluation consumes its input value and returns a new, independently owned
value. Symbols are looked up in the environment, S-expressions are reduced by
applying their evaluated head to their evaluated tail, and every other value is
self-evaluating; this last rule is what makes `{...}` quoting work.
"""

from __future__ import annotations

from lispy import LispValue
from lispy.types.environment import Environment
from lispy.types.error import malformed_expression
from lispy.types.expression import SExpression
from lispy.types.function import Function
from lispy.types.symbol import Symbol


def evaluate(env: Environment, value: LispValue) -> LispValue:
    """Reduce `value` in `env`."""
    if isinstance(value, Symbol):
        return env.get(value)
    if isinstance(value, SExpression):
        return evaluate_sexpr(env, value)
    # Numbers, errors, functions and Q-expressions evaluate to themselves
    return value


def evaluate_sexpr(env: Environment, sexpr: SExpression) -> LispValue:
    # Every child is evaluated, left to right, even after an error
    cells = sexpr.cells
    for i in range(len(cells)):
        cells[i] = evaluate(env, cells[i])

    for i, cell in enumerate(cells):
        if cell.is_error():
            return sexpr.pop(i)

    if not cells:
        return sexpr
    if len(cells) == 1:
        return sexpr.pop(0)

    first = sexpr.pop(0)
    if not isinstance(first, Function):
        return malformed_expression()

    # The builtin consumes the remaining, already-evaluated arguments
    return first(env, sexpr.cells)
