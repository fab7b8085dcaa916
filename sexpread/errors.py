from __future__ import annotations


class SexpError(Exception):
    """ Base class for all sexpread errors"""
    pass


class SexpParseError(SexpError):
    """ Raised when the input is lexically or grammatically malformed"""

    def __init__(self, consumed: str, remaining: str, reason: str | None = None):
        self.consumed = consumed
        self.remaining = remaining
        self.reason = reason
        message = f"parse error: {consumed}<here>{remaining}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class SexpArityError(SexpError):
    """ Raised when the number of arguments passed to a procedure is incorrect"""

    def __init__(self, procedure: str, expected: int, actual: int, at_least: bool = False):
        self.procedure = procedure
        self.expected = expected
        self.actual = actual
        self.at_least = at_least
        wanted = f"at least {expected}" if at_least else f"{expected}"
        super().__init__(
            f"{procedure} expects {wanted} argument{'' if expected == 1 else 's'}, got {actual}"
        )


class SexpTypeError(SexpError):
    """ Raised when a term's kind does not match what an operation requires"""

    def __init__(self, expected, actual, procedure: str | None = None):
        self.expected = expected
        self.actual = actual
        self.procedure = procedure
        where = f"{procedure}: " if procedure else ""
        super().__init__(f"{where}expected {expected}, got {actual}")


class SexpZeroDivisionError(SexpError):
    """ Raised when a builtin divides by exactly zero"""

    def __init__(self, procedure: str = "/"):
        self.procedure = procedure
        super().__init__(f"{procedure}: division by zero")


class SexpUnboundSymbol(SexpError):
    """ Raised when a symbol is looked up before it is bound"""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"unbound symbol {symbol}")


class SexpEvaluatorMissing(SexpError):
    """ Raised when eval is requested but no evaluator backend is attached"""
