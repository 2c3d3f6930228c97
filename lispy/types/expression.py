"""Aggregate values: S-expressions (code) and Q-expressions (quoted data).

Both are ordered sequences that exclusively own their cells. The two differ
only in how the evaluator treats them: an SExpression is reduced, a
QExpression is self-evaluating. Retagging one as the other moves the cells
into a new container and leaves the source empty, so ownership is transferred
rather than shared.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional

from lispy.types.value import Value


class Expression(Value):
    __slots__ = ("cells",)

    open_char = ""
    close_char = ""

    def __init__(self, cells: Optional[Iterable[Value]] = None):
        self.cells: list[Value] = list(cells) if cells is not None else []

    def add(self, child: Value) -> Expression:
        self.cells.append(child)
        return self

    def pop(self, i: int = 0) -> Value:
        """Remove and return the ith cell; the caller now owns it."""
        return self.cells.pop(i)

    def copy(self) -> Expression:
        return type(self)(c.copy() for c in self.cells)

    def retag(self, cls: type[Expression]) -> Expression:
        """Move every cell into a fresh `cls` container, consuming `self`."""
        result = cls()
        result.cells, self.cells = self.cells, []
        return result

    def __len__(self) -> int:
        return len(self.cells)

    def __iter__(self) -> Iterator[Value]:
        return iter(self.cells)

    def __eq__(self, other) -> bool:
        return type(self) is type(other) and self.cells == other.cells

    __hash__ = None

    def __repr__(self):
        return f"{type(self).__name__}({self.cells!r})"


class SExpression(Expression):
    __slots__ = ()

    open_char = "("
    close_char = ")"


class QExpression(Expression):
    __slots__ = ()

    open_char = "{"
    close_char = "}"
