from dataclasses import dataclass, field
from typing import Optional, Union

OPERATORS = ("+", "-", "*", "/")


@dataclass(frozen=True)
class Number:
    value: int


@dataclass(frozen=True)
class BinaryOp:
    op: str
    left: "Expr"
    right: "Expr"
    position: Optional[int] = field(default=None, compare=False)


Expr = Union[Number, BinaryOp]


def to_sexpr(node: Expr) -> str:
    """Render a tree in prefix form, e.g. (+ 2 (* 3 4))."""
    if isinstance(node, Number):
        return str(node.value)
    return f"({node.op} {to_sexpr(node.left)} {to_sexpr(node.right)})"
