"""First-class error values.

An Error is an ordinary value returned in place of a normal result. The
evaluator propagates the first Error among an S-expression's children instead
of raising, so a failed evaluation never aborts the session.
"""

from __future__ import annotations

from enum import Enum

from lispy.types.value import Value


class ErrorKind(Enum):
    BAD_NUMBER = "bad-number"
    UNBOUND_SYMBOL = "unbound-symbol"
    TYPE_MISMATCH = "type-mismatch"
    ARITY = "arity"
    EMPTY_CONTAINER = "empty-container"
    DIVISION_BY_ZERO = "division-by-zero"
    MALFORMED_EXPRESSION = "malformed-expression"


class Error(Value):
    __slots__ = ("kind", "message")

    def __init__(self, kind: ErrorKind, message: str):
        self.kind = kind
        self.message = message

    def copy(self) -> Error:
        return Error(self.kind, self.message)

    def is_error(self) -> bool:
        return True

    def __eq__(self, other) -> bool:
        return (
            isinstance(other, Error)
            and self.kind is other.kind
            and self.message == other.message
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.message))

    def __repr__(self):
        return f"Error({self.kind.name}, {self.message!r})"


def bad_number() -> Error:
    return Error(ErrorKind.BAD_NUMBER, "invalid number")


def unbound_symbol(name: str) -> Error:
    return Error(ErrorKind.UNBOUND_SYMBOL, f"unbound symbol: {name}")


def type_mismatch(message: str) -> Error:
    return Error(ErrorKind.TYPE_MISMATCH, message)


def arity_error(message: str) -> Error:
    return Error(ErrorKind.ARITY, message)


def empty_container(message: str) -> Error:
    return Error(ErrorKind.EMPTY_CONTAINER, message)


def division_by_zero() -> Error:
    return Error(ErrorKind.DIVISION_BY_ZERO, "division by zero")


def malformed_expression() -> Error:
    return Error(ErrorKind.MALFORMED_EXPRESSION, "S-expression does not start with a function")
