"""Exception taxonomy for intcalc. Every failure is a CalcError."""

from typing import Optional


class CalcError(Exception):
    """Base class for parse and evaluation failures.

    Carries the bare message and, when known, the 0-based character offset
    of the offending input.
    """

    def __init__(self, message: str, position: Optional[int] = None):
        self.message = message
        self.position = position
        super().__init__(message)

    def __str__(self) -> str:
        if self.position is not None:
            return f"{self.message} at position {self.position}"
        return self.message


class ParseError(CalcError, SyntaxError):
    pass


class DivisionByZero(CalcError, ZeroDivisionError):
    pass


class IntegerOverflow(CalcError, OverflowError):
    pass


class DepthExceeded(CalcError, RuntimeError):
    pass


class GasExhausted(CalcError, RuntimeError):
    pass
