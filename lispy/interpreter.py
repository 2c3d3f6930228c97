import logging

from lispy import LispValue
from lispy.builtins import register
from lispy.evaluation.evaluator import evaluate
from lispy.printer import to_str
from lispy.reader.reader import read_source
from lispy.types.environment import Environment

logger = logging.getLogger(__name__)


class Interpreter:
    """
    A line-at-a-time interpreter session for Lispy expressions.
    Keeps one environment, with the builtins registered, for its whole life.
    """
    def __init__(self, filename: str = "<stdin>"):
        self.env = Environment()
        register(self.env)
        self.filename = filename

    def define(self, name: str, value: LispValue) -> None:
        """Bind a value from the host side; the environment keeps its own copy."""
        self.env.put(name, value)

    def read(self, code: str) -> LispValue:
        """Parse one input line into a value tree. Raises LispySyntaxError."""
        return read_source(code, self.filename)

    def eval(self, code: str) -> LispValue:
        """Parse, read and evaluate one input line."""
        value = self.read(code)
        logger.debug("read %s", value)
        result = evaluate(self.env, value)
        logger.debug("=> %s", result)
        return result

    def eval_to_str(self, code: str) -> str:
        return to_str(self.eval(code))


#  Example use-age:
if __name__ == "__main__":
    interp = Interpreter()

    tests = [
        "(+ 1 2 3)",
        "(- 5)",
        "(/ 10 0)",
        "list 1 2 3 4",
        "(eval (head {(+ 1 2) (+ 10 20)}))",
        "join {1 2} {3 4}",
        "foo",
    ]

    for code in tests:
        print(code, "=>", interp.eval_to_str(code))
