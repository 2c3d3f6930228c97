"""Render Lispy values back to text."""

from __future__ import annotations

import sys
from io import StringIO
from typing import TextIO

from lispy.types.error import Error
from lispy.types.expression import Expression
from lispy.types.function import Function
from lispy.types.number import Number
from lispy.types.symbol import Symbol


def _write(value, buffer: StringIO) -> None:
    if isinstance(value, Number):
        buffer.write(str(value.num))
    elif isinstance(value, Symbol):
        buffer.write(value.name)
    elif isinstance(value, Error):
        buffer.write(f"Error: {value.message}")
    elif isinstance(value, Function):
        buffer.write("<function>")
    elif isinstance(value, Expression):
        buffer.write(value.open_char)
        for i, cell in enumerate(value.cells):
            if i:
                buffer.write(" ")
            _write(cell, buffer)
        buffer.write(value.close_char)
    else:
        raise TypeError(f"Cannot print non-value {value!r}")


def to_str(value) -> str:
    with StringIO() as buffer:
        _write(value, buffer)
        return buffer.getvalue()


def println(value, out: TextIO | None = None) -> None:
    out = out if out is not None else sys.stdout
    out.write(to_str(value))
    out.write("\n")
