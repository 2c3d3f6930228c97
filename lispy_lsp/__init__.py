"""Lispy Language Server package.

This package provides a pygls-based Language Server for the Lispy dialect:
syntax diagnostics from the grammar engine, unbound-symbol hints, and hover and
completion for the builtin set.

Note: The LSP does not evaluate user buffers; it only parses them.
"""

__all__ = [
    "server",
]
