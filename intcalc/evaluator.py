"""Post-order evaluator for expression trees. 64-bit checked, gas metered."""

import logging
from typing import Any

from .errors import CalcError, DivisionByZero, GasExhausted, IntegerOverflow
from .nodes import BinaryOp, Expr, Number
from .types import in_int64, resolve_limits

logger = logging.getLogger(__name__)


class _EvalState:
    __slots__ = ("gas",)

    def __init__(self, max_gas: int):
        self.gas = max_gas

    def charge(self) -> None:
        self.gas -= 1
        if self.gas < 0:
            raise GasExhausted("gas budget exceeded")


def evaluate(node: Expr, limits: Any = None) -> int:
    """Evaluate an expression tree to a signed 64-bit integer.

    limits: a Limits instance or a dict with max_gas/maxGas.
    """
    state = _EvalState(resolve_limits(limits).max_gas)
    result = _eval(node, state)
    logger.debug("evaluated to %d", result)
    return result


def _eval(root: Expr, st: _EvalState) -> int:
    # Explicit stack: left-folded chains grow as deep as they are long.
    values: list[int] = []
    stack: list[tuple[Expr, bool]] = [(root, False)]
    while stack:
        node, children_done = stack.pop()
        if isinstance(node, Number):
            st.charge()
            if not in_int64(node.value):
                raise IntegerOverflow(f"integer {node.value} out of range")
            values.append(node.value)
        elif isinstance(node, BinaryOp):
            if children_done:
                right = values.pop()
                left = values.pop()
                values.append(_apply(node, left, right))
            else:
                st.charge()
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))
        else:
            raise TypeError(f"not an expression node: {node!r}")
    return values.pop()


def _apply(node: BinaryOp, a: int, b: int) -> int:
    op = node.op
    if op == "+":
        result = a + b
    elif op == "-":
        result = a - b
    elif op == "*":
        result = a * b
    elif op == "/":
        if b == 0:
            raise DivisionByZero("division by zero", node.position)
        result = _truncating_div(a, b)
    else:
        raise CalcError(f"unknown operator: {op}", node.position)

    if not in_int64(result):
        raise IntegerOverflow(f"result of {a} {op} {b} out of range", node.position)
    return result


def _truncating_div(a: int, b: int) -> int:
    """Integer division rounding toward zero: -7 / 2 == -3."""
    q = abs(a) // abs(b)
    return q if (a < 0) == (b < 0) else -q
