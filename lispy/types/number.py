from __future__ import annotations

from lispy.config import get_word_bits
from lispy.types.value import Value

WORD_BITS = get_word_bits()
MIN_INT = -(1 << (WORD_BITS - 1))
MAX_INT = (1 << (WORD_BITS - 1)) - 1
_MASK = (1 << WORD_BITS) - 1


def in_range(x: int) -> bool:
    return MIN_INT <= x <= MAX_INT


def wrap(x: int) -> int:
    """Reduce `x` to the signed word width using two's complement."""
    x &= _MASK
    return x - (1 << WORD_BITS) if x > MAX_INT else x


def trunc_div(a: int, b: int) -> int:
    """Integer division rounding toward zero; Python's // floors instead."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q


class Number(Value):
    __slots__ = ("num",)

    def __init__(self, num: int):
        self.num = wrap(int(num))

    def copy(self) -> Number:
        return Number(self.num)

    def __eq__(self, other) -> bool:
        return isinstance(other, Number) and self.num == other.num

    def __hash__(self) -> int:
        return hash(self.num)

    def __repr__(self):
        return f"Number({self.num})"
