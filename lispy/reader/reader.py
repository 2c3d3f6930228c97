"""Translate a generic parse tree into a Lispy value tree.

The tree may come from lispy.reader.grammar or from any engine producing nodes
with `tag`, `contents` and `children` attributes. Translation is structural
recursion only; nothing is evaluated here.
"""

from __future__ import annotations

import re

from lispy import LispValue
from lispy.errors import LispyReaderError
from lispy.reader.grammar import parse
from lispy.types.error import bad_number
from lispy.types.expression import Expression, QExpression, SExpression
from lispy.types.number import Number, in_range
from lispy.types.symbol import Symbol

DELIMITERS = frozenset("(){}")
NUMBER_RE = re.compile(r"-?[0-9]+")


def read_number(node) -> LispValue:
    # Out-of-range literals become an Error rather than wrapping
    if not NUMBER_RE.fullmatch(node.contents):
        return bad_number()
    x = int(node.contents, 10)
    return Number(x) if in_range(x) else bad_number()


def _skip(child) -> bool:
    return child.contents in DELIMITERS or child.tag == "regex"


def read(node) -> LispValue:
    tag = node.tag
    if "number" in tag:
        return read_number(node)
    if "symbol" in tag:
        return Symbol(node.contents)

    result: Expression
    if tag == ">" or "sexpr" in tag:
        result = SExpression()
    elif "qexpr" in tag:
        result = QExpression()
    else:
        raise LispyReaderError(f"Cannot read parse node tagged {tag!r}")

    for child in node.children:
        if _skip(child):
            continue
        result.add(read(child))
    return result


def read_source(source: str, filename: str = "<stdin>") -> SExpression:
    """Parse and read one input line; the whole line becomes an SExpression."""
    return read(parse(source, filename))
