class LispyError(Exception):
    """ Base class for all host-level Lispy errors"""
    pass

class LispySyntaxError(LispyError):
    """ Raised when source text does not match the grammar"""

    def __init__(self, message: str, filename: str = "<stdin>", line: int = 0, col: int = 0):
        super().__init__(f"{filename}:{line + 1}:{col + 1}: error: {message}")
        self.message = message
        self.filename = filename
        self.line = line
        self.col = col

class LispyReaderError(LispyError):
    """ Raised when a parse tree node cannot be translated into a value"""

# Evaluation failures are never raised: they are Error values
# (see lispy.types.error) that propagate through the evaluator.
