from dataclasses import dataclass
from typing import Any

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

MAX_DEPTH = 64
DEFAULT_MAX_GAS = 100_000


@dataclass
class Limits:
    max_depth: int = MAX_DEPTH
    max_gas: int = DEFAULT_MAX_GAS


def resolve_limits(env: Any = None) -> Limits:
    """Build Limits from None, a Limits instance, or a dict.

    Dict keys: max_depth/maxDepth, max_gas/maxGas. Missing or None values
    fall back to the defaults; 0 is a real limit.
    """
    if env is None:
        return Limits()
    if isinstance(env, Limits):
        return env
    if isinstance(env, dict):
        return Limits(
            max_depth=_first(env.get("maxDepth"), env.get("max_depth"), MAX_DEPTH),
            max_gas=_first(env.get("maxGas"), env.get("max_gas"), DEFAULT_MAX_GAS),
        )
    # Any object exposing the same attributes
    return Limits(
        max_depth=_first(getattr(env, "max_depth", None), MAX_DEPTH),
        max_gas=_first(getattr(env, "max_gas", None), DEFAULT_MAX_GAS),
    )


def _first(*values: Any) -> Any:
    return next(v for v in values if v is not None)


def in_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX
