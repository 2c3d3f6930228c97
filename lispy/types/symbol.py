from __future__ import annotations
import sys

from lispy.types.value import Value


class Symbol(Value):
    __slots__ = ("_name",)

    def __init__(self, name: str):
        # Intern to ensure fast equality/hash and reduce memory
        self._name = sys.intern(name)

    @property
    def name(self) -> str:
        return self._name

    def copy(self) -> Symbol:
        return Symbol(self._name)

    def __eq__(self, other: Symbol) -> bool:
        return isinstance(other, Symbol) and self._name == other._name

    def __hash__(self) -> int:
        return hash(self._name)

    def __repr__(self):
        return f"Symbol({self._name!r})"
