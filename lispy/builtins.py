"""Built-in functions for the Lispy runtime environment.

Every builtin has the signature (env, args) -> value. It consumes `args`, the
already-evaluated argument list, and returns a freshly owned value; failures are
returned as Error values, never raised.
"""

from __future__ import annotations

from typing import Callable, Optional

from lispy import BuiltinFn, LispValue
from lispy.evaluation.evaluator import evaluate
from lispy.types.environment import Environment
from lispy.types.error import (
    Error,
    arity_error,
    division_by_zero,
    empty_container,
    type_mismatch,
)
from lispy.types.expression import QExpression, SExpression
from lispy.types.function import Function
from lispy.types.number import Number, trunc_div, wrap


# -------------------------------
# Arithmetic
# -------------------------------
def _check_numbers(name: str, verb: str, expr: list[LispValue]) -> Optional[Error]:
    if not expr:
        return arity_error(f"Function '{name}' passed no arguments")
    for arg in expr:
        if not isinstance(arg, Number):
            return type_mismatch(f"cannot {verb} a non-number")
    return None


def _fold(name: str, verb: str, expr: list[LispValue], step: Callable[[int, int], int]) -> LispValue:
    err = _check_numbers(name, verb, expr)
    if err is not None:
        return err
    acc = expr[0].num
    for arg in expr[1:]:
        acc = wrap(step(acc, arg.num))
    return Number(acc)


def add(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the sum of all arguments."""
    return _fold("+", "add", expr, lambda a, b: a + b)


def mul(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the product of all arguments."""
    return _fold("*", "multiply", expr, lambda a, b: a * b)


def sub(env: Environment, expr: list[LispValue]) -> LispValue:
    """Subtract all subsequent numbers from the first; unary negation for one arg."""
    if len(expr) == 1 and isinstance(expr[0], Number):
        return Number(-expr[0].num)
    return _fold("-", "subtract", expr, lambda a, b: a - b)


def div(env: Environment, expr: list[LispValue]) -> LispValue:
    """Divide the first number by each subsequent one, truncating toward zero.

    A zero divisor stops the fold with a division-by-zero Error.
    """
    err = _check_numbers("/", "divide by", expr)
    if err is not None:
        return err
    acc = expr[0].num
    for arg in expr[1:]:
        if arg.num == 0:
            return division_by_zero()
        acc = wrap(trunc_div(acc, arg.num))
    return Number(acc)


# -------------------------------
# List operations
# -------------------------------
def _check_single_qexpr(name: str, expr: list[LispValue], non_empty: bool) -> Optional[Error]:
    if not expr:
        return arity_error(f"Function '{name}' passed no arguments")
    if len(expr) != 1:
        return arity_error(f"Function '{name}' passed too many arguments")
    if not isinstance(expr[0], QExpression):
        return type_mismatch(f"Function '{name}' passed incorrect type")
    if non_empty and not expr[0].cells:
        return empty_container(f"Function '{name}' passed '{{}}'")
    return None


def list_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Quote the arguments: (list 1 2 3) -> {1 2 3}."""
    return QExpression(expr)


def head(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return a Q-expression holding only the first element."""
    err = _check_single_qexpr("head", expr, non_empty=True)
    if err is not None:
        return err
    return QExpression([expr[0].pop(0)])


def tail(env: Environment, expr: list[LispValue]) -> LispValue:
    """Return the Q-expression without its first element."""
    err = _check_single_qexpr("tail", expr, non_empty=True)
    if err is not None:
        return err
    result = expr[0]
    result.pop(0)
    return result


def eval_builtin(env: Environment, expr: list[LispValue]) -> LispValue:
    """Evaluate a Q-expression as code: (eval {+ 1 2}) -> 3."""
    err = _check_single_qexpr("eval", expr, non_empty=False)
    if err is not None:
        return err
    return evaluate(env, expr[0].retag(SExpression))


def join(env: Environment, expr: list[LispValue]) -> LispValue:
    """Concatenate Q-expressions in argument order."""
    if not expr:
        return arity_error("Function 'join' passed no arguments")
    for arg in expr:
        if not isinstance(arg, QExpression):
            return type_mismatch("Function 'join' passed incorrect type")
    result = expr[0]
    for other in expr[1:]:
        # move, don't share, the cells of each consumed argument
        result.cells.extend(other.cells)
        other.cells = []
    return result


# -------------------------------
# Registration
# -------------------------------
BUILTINS: dict[str, BuiltinFn] = {
    "list": list_builtin,
    "head": head,
    "tail": tail,
    "eval": eval_builtin,
    "join": join,
    "+": add,
    "*": mul,
    "-": sub,
    "/": div,
}

BUILTIN_SIGNATURES: dict[str, str] = {
    "list": "(list x ...) -> quote the arguments as a Q-expression",
    "head": "(head {x ...}) -> Q-expression of the first element",
    "tail": "(tail {x ...}) -> Q-expression without the first element",
    "eval": "(eval {expr ...}) -> evaluate a Q-expression as code",
    "join": "(join {x ...} ...) -> concatenate Q-expressions",
    "+": "(+ n ...) -> sum",
    "*": "(* n ...) -> product",
    "-": "(- n ...) -> difference; (- n) negates",
    "/": "(/ n ...) -> quotient, truncated toward zero",
}


def register(env: Environment) -> None:
    env.update({name: Function(name, fn) for name, fn in BUILTINS.items()})
