"""Runtime environment for Lispy.

The Environment stores bindings of symbol names to owned Lisp values. Scoping is
flat: one Environment per session, created with the builtins registered and
passed explicitly through every evaluation call. Bindings are kept in insertion
order; rebinding a name replaces its value in place.
"""

from __future__ import annotations

from io import StringIO
from typing import Union

from lispy import LispValue
from lispy.errors import LispyError
from lispy.types.error import unbound_symbol
from lispy.types.symbol import Symbol
from lispy.types.value import Value

Name = Union[Symbol, str]


def _key(name: Name) -> str:
    if isinstance(name, Symbol):
        return name.name
    if isinstance(name, str):
        return name
    raise LispyError(f"Cannot use {name!r} as a symbol name")


class Environment:
    """Flat mapping from symbol names to Lisp values."""

    __slots__ = ("vars",)

    def __init__(self):
        self.vars: dict[str, Value] = {}

    def get(self, name: Name) -> LispValue:
        """Return a copy of the value bound to `name`.

        A missing name is not fatal: the result is an unbound-symbol Error value.
        """
        key = _key(name)
        val = self.vars.get(key)
        if val is None:
            return unbound_symbol(key)
        return val.copy()

    def put(self, name: Name, value: LispValue) -> None:
        """Bind `name` to an independent copy of `value`.

        An existing binding is overwritten; a new name is appended.
        """
        if not isinstance(value, Value):
            raise LispyError(f"Cannot bind non-value {value!r} to {name}")
        self.vars[_key(name)] = value.copy()

    def update(self, mapping: dict[Name, LispValue]) -> None:
        """Bulk-put a mapping of name -> value."""
        for k, v in mapping.items():
            self.put(k, v)

    def names(self) -> list[str]:
        return list(self.vars)

    def __contains__(self, name: Name) -> bool:
        return _key(name) in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def _write_vars(self, buffer: StringIO) -> None:
        """Write the bindings into the buffer in a compact form."""
        buffer.write("{")
        first = True
        for k, v in self.vars.items():
            if not first:
                buffer.write(", ")
            buffer.write(f"{k}: {v}")
            first = False
        buffer.write("}")

    def __str__(self) -> str:
        with StringIO() as buffer:
            self._write_vars(buffer)
            return buffer.getvalue()

    def __repr__(self) -> str:
        with StringIO() as buffer:
            buffer.write("<Environment ")
            self._write_vars(buffer)
            buffer.write(">")
            return buffer.getvalue()
