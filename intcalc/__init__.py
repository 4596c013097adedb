from .parser import parse
from .evaluator import evaluate
from .calculator import calculate, try_calculate
from .errors import CalcError, ParseError, DivisionByZero, IntegerOverflow, DepthExceeded, GasExhausted
from .types import Limits

__all__ = [
    "parse", "evaluate", "calculate", "try_calculate", "Limits",
    "CalcError", "ParseError", "DivisionByZero", "IntegerOverflow", "DepthExceeded", "GasExhausted",
]
