from __future__ import annotations

from lispy import BuiltinFn
from lispy.types.value import Value


class Function(Value):
    """A reference to a native builtin. Copies share the underlying callable,
    which is stateless, but never any Value."""

    __slots__ = ("name", "fn")

    def __init__(self, name: str, fn: BuiltinFn):
        self.name = name
        self.fn = fn

    def copy(self) -> Function:
        return Function(self.name, self.fn)

    def __call__(self, env, args: list) -> Value:
        return self.fn(env, args)

    def __eq__(self, other) -> bool:
        return isinstance(other, Function) and self.fn is other.fn

    def __hash__(self) -> int:
        return hash(self.fn)

    def __repr__(self):
        return f"<Function {self.name}>"
