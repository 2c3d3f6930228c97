# Core type aliases for Lispy's data model.
# Every runtime datum is an instance of lispy.types.value.Value: Number, Error,
# Symbol, Function, SExpression or QExpression. Python ints, lists and strs
# never flow through the evaluator directly.
#
# Naming guidance:
# - LispValue: use in evaluator/builtin code to denote an owned runtime value.
# - BuiltinFn: the native signature shared by every builtin, (env, args) -> value.
# Both resolve to loose typing aliases to avoid import cycles with lispy.types.

from typing import Any, Callable

__version__ = "0.1.0"

# Runtime value alias
LispValue = Any

# Builtin function type: receives the session environment and the consumed,
# already-evaluated argument list.
BuiltinFn = Callable[[Any, list], LispValue]
