"""Base class for every Lispy runtime value.

Values form an owned tree: an aggregate exclusively owns its children and a
copy never shares structure with its source. Subclasses implement `copy` with
those semantics so that binding a value into the environment, or retaining
part of a consumed argument, can never alias live data.
"""

from __future__ import annotations


class Value:
    __slots__ = ()

    def copy(self) -> Value:
        raise NotImplementedError

    def is_error(self) -> bool:
        return False

    def __str__(self):
        from lispy.printer import to_str
        return to_str(self)
