"""
  Lispy grammar: lexer and generic parse-tree builder

    number : /-?[0-9]+/ ;
    symbol : /[a-zA-Z0-9_+\\-*\\/\\\\=<>!&]+/ ;
    sexpr  : '(' <expr>* ')' ;
    qexpr  : '{' <expr>* '}' ;
    expr   : <number> | <symbol> | <sexpr> | <qexpr> ;
    lispy  : /^/ <expr>* /$/ ;

- Emits a generic tree of ParseNode objects rather than values. Each node
  carries a tag, its literal contents (for leaves) and its ordered children;
  the reader decides what the tree means.

   tags:
    - whole input -> ">" with "regex" anchor children at both ends
    - number leaf -> "expr|number|regex"
    - symbol leaf -> "expr|symbol|regex"
    - ( ... )     -> "expr|sexpr|>" with "char" children for the delimiters
    - { ... }     -> "expr|qexpr|>" likewise

- At every position the number pattern is tried before the symbol pattern,
  so "-5" is a number, "-" a symbol and "foo-bar" a single symbol.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterator, Optional

from lispy.errors import LispySyntaxError


TOKEN_RE = re.compile(
    r"\s*("
    r"(?P<number>-?[0-9]+)"  # signed decimal
    r"|(?P<symbol>[a-zA-Z0-9_+\-*/\\=<>!&]+)"  # symbols
    r"|(?P<lparen>\()"  # (
    r"|(?P<rparen>\))"  # )
    r"|(?P<lbrace>\{)"  # {
    r"|(?P<rbrace>\})"  # }
    r")"
)

CLOSERS = {"lparen": "rparen", "lbrace": "rbrace"}
AGGREGATE_TAGS = {"lparen": "expr|sexpr|>", "lbrace": "expr|qexpr|>"}
LEAF_TAGS = {"number": "expr|number|regex", "symbol": "expr|symbol|regex"}

Token = tuple[str, str, int]


@dataclass
class ParseNode:
    tag: str
    contents: str = ""
    children: list[ParseNode] = field(default_factory=list)
    line: int = 0
    col: int = 0

    def __repr__(self):
        if self.children:
            return f"ParseNode({self.tag!r}, {self.children!r})"
        return f"ParseNode({self.tag!r}, {self.contents!r})"


def position(source: str, offset: int) -> tuple[int, int]:
    """Return the 0-based (line, col) of `offset` in `source`."""
    line = source.count("\n", 0, offset)
    col = offset - (source.rfind("\n", 0, offset) + 1)
    return line, col


def lex(source: str, filename: str = "<stdin>") -> Iterator[Token]:
    """Token generator: yields (token_type, token_text, offset) tuples."""
    pos = 0
    n = len(source)
    while pos < n:
        if source[pos].isspace():
            pos += 1
            continue
        m = TOKEN_RE.match(source, pos)
        if not m:
            line, col = position(source, pos)
            raise LispySyntaxError(
                f"unexpected character {source[pos]!r}", filename, line, col
            )
        for nm in TOKEN_RE.groupindex:
            if m.group(nm):
                yield nm, m.group(nm), m.start(nm)
                break
        pos = m.end()


class TokenStream:
    def __init__(self, token_iter: Iterator[Token], source: str = "", filename: str = "<stdin>"):
        self.tokens = iter(token_iter)
        self.buffer: list[Token] = []
        self.source = source
        self.filename = filename

    def peek(self) -> tuple[Optional[str], Optional[str], int]:
        if not self.buffer:
            try:
                self.buffer.append(next(self.tokens))
            except StopIteration:
                return None, None, len(self.source)
        return self.buffer[0]

    def advance(self) -> tuple[Optional[str], Optional[str], int]:
        if self.buffer:
            return self.buffer.pop(0)
        return next(self.tokens, (None, None, len(self.source)))

    def _error(self, message: str, offset: int) -> LispySyntaxError:
        line, col = position(self.source, offset)
        return LispySyntaxError(message, self.filename, line, col)

    def _node(self, tag: str, contents: str, offset: int) -> ParseNode:
        line, col = position(self.source, offset)
        return ParseNode(tag, contents, line=line, col=col)

    def parse_expr(self) -> ParseNode:
        tok_type, tok_val, offset = self.advance()
        if tok_type is None:
            raise self._error("unexpected end of input", offset)

        if tok_type in LEAF_TAGS:
            return self._node(LEAF_TAGS[tok_type], tok_val, offset)

        if tok_type in AGGREGATE_TAGS:
            node = self._node(AGGREGATE_TAGS[tok_type], "", offset)
            node.children.append(self._node("char", tok_val, offset))
            closer = CLOSERS[tok_type]
            while True:
                nxt_type, nxt_val, nxt_offset = self.peek()
                if nxt_type is None:
                    expected = ")" if closer == "rparen" else "}"
                    raise self._error(f"expected '{expected}' at end of input", nxt_offset)
                if nxt_type == closer:
                    self.advance()
                    node.children.append(self._node("char", nxt_val, nxt_offset))
                    return node
                node.children.append(self.parse_expr())

        raise self._error(f"unexpected '{tok_val}'", offset)

    def parse_all(self) -> Iterator[ParseNode]:
        while True:
            tok_type, _, _ = self.peek()
            if tok_type is None:
                break
            yield self.parse_expr()


def parse(source: str, filename: str = "<stdin>") -> ParseNode:
    """Parse a whole input into a root node tagged '>'.

    Raises LispySyntaxError with a filename:line:col diagnostic on failure.
    """
    stream = TokenStream(lex(source, filename), source, filename)
    root = ParseNode(">")
    root.children.append(ParseNode("regex"))
    root.children.extend(stream.parse_all())
    end_line, end_col = position(source, len(source))
    root.children.append(ParseNode("regex", line=end_line, col=end_col))
    return root
