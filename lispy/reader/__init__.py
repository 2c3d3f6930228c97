from lispy.reader.grammar import ParseNode, lex, parse
from lispy.reader.reader import read, read_source

__all__ = ["ParseNode", "lex", "parse", "read", "read_source"]
