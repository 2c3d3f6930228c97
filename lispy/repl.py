"""Interactive read-print shell for Lispy.

Each input line is parsed, evaluated in the session environment and printed.
Syntax errors are reported and the loop continues; evaluation errors are
ordinary values and are simply printed.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Callable, Optional, TextIO

try:
    # enables line editing and in-memory history for input()
    import readline  # noqa: F401
except ImportError:
    readline = None

from lispy import __version__
from lispy.config import get_prompt
from lispy.errors import LispySyntaxError
from lispy.interpreter import Interpreter
from lispy.printer import println

logger = logging.getLogger(__name__)

BANNER = f"Lispy Version {__version__}\nPress Ctrl+c to Exit\n"


def eval_line(interp: Interpreter, line: str, out: TextIO):
    """Evaluate and print one line; returns the result, or None on a diagnostic."""
    try:
        result = interp.eval(line)
    except LispySyntaxError as e:
        logger.debug("syntax error: %s", e)
        out.write(f"{e}\n")
        return None
    except RecursionError:
        # no depth cap in the evaluator; the host stack is the limit
        out.write("Error: expression nested too deeply\n")
        return None
    println(result, out)
    return result


def repl(
    interp: Interpreter,
    input_fn: Callable[[str], str] = input,
    out: Optional[TextIO] = None,
) -> None:
    out = out if out is not None else sys.stdout
    prompt = get_prompt()
    out.write(BANNER + "\n")
    while True:
        try:
            line = input_fn(prompt)
        except (EOFError, KeyboardInterrupt):
            out.write("\n")
            break
        eval_line(interp, line, out)


def run_once(interp: Interpreter, code: str, out: Optional[TextIO] = None) -> int:
    out = out if out is not None else sys.stdout
    result = eval_line(interp, code, out)
    if result is None or result.is_error():
        return 1
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="lispy", description="Lispy expression evaluator")
    parser.add_argument("-e", "--eval", dest="expr", metavar="EXPR",
                        help="evaluate EXPR, print the result and exit")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="log each read and evaluated value")
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)

    interp = Interpreter()
    if args.expr is not None:
        return run_once(interp, args.expr)
    repl(interp)
    return 0
