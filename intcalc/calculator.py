"""Top-level calculate API: parse then evaluate."""

from typing import Any

from .errors import CalcError
from .evaluator import evaluate
from .parser import parse
from .tokenizer import Source
from .types import resolve_limits


def calculate(source: Source, env: Any = None) -> int:
    """Parse and evaluate an expression.

    Args:
        source: Expression text, bytes, or a text stream
        env: Limits instance or dict with max_depth/maxDepth, max_gas/maxGas

    Returns:
        The signed 64-bit result

    Raises:
        CalcError subclasses: ParseError, DivisionByZero, IntegerOverflow,
        DepthExceeded, GasExhausted
    """
    limits = resolve_limits(env)
    return evaluate(parse(source, limits), limits)


def try_calculate(source: Source, env: Any = None) -> dict[str, Any]:
    """Like calculate(), but reports failures in the returned dict.

    Returns:
        {"ok": True, "value": int, "error": None} or
        {"ok": False, "value": None, "error": str, "kind": str, "position": int | None}
    """
    try:
        value = calculate(source, env)
    except CalcError as e:
        return {
            "ok": False,
            "value": None,
            "error": str(e),
            "kind": type(e).__name__,
            "position": e.position,
        }
    return {"ok": True, "value": value, "error": None}
