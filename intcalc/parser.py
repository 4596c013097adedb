"""Recursive-descent parser for integer arithmetic expressions.

    expression := term (('+' | '-') term)*
    term       := unit (('*' | '/') unit)*
    unit       := ['-'] (NUMBER | '(' expression ')')

Precedence falls out of the grammar: term stops at '+' or '-' and hands the
operator back to expression. Both loops fold left.
"""

import logging
import sys
from typing import Any

from .errors import DepthExceeded, ParseError
from .nodes import BinaryOp, Expr, Number
from .tokenizer import Source, Token, TokenKind, Tokenizer
from .types import resolve_limits

logger = logging.getLogger(__name__)

ADDITIVE = ("+", "-")
MULTIPLICATIVE = ("*", "/")

# One nested group costs four interpreter frames; leave the rest for callers.
FRAMES_PER_GROUP = 8


class Parser:
    def __init__(self, source: Source, limits: Any = None):
        self._tokens = Tokenizer(source)
        self._limits = resolve_limits(limits)
        self._depth = 0
        self._max_depth = min(self._limits.max_depth, sys.getrecursionlimit() // FRAMES_PER_GROUP)
        self._lookahead: Token | None = None

    def _peek(self) -> Token:
        if self._lookahead is None:
            self._lookahead = self._tokens.consume()
        return self._lookahead

    def _advance(self) -> Token:
        tok = self._peek()
        self._lookahead = None
        return tok

    def parse(self) -> Expr:
        tree = self.parse_expression()
        tok = self._peek()
        if tok.kind is TokenKind.RPAREN:
            raise ParseError("unbalanced ')'", tok.position)
        if tok.kind is not TokenKind.END:
            raise ParseError(f"unexpected token {tok.describe()}", tok.position)
        logger.debug("parsed %d characters", self._tokens.position)
        return tree

    def parse_expression(self) -> Expr:
        node = self.parse_term()
        while self._peek().is_symbol(*ADDITIVE):
            op = self._advance()
            node = BinaryOp(op.symbol, node, self.parse_term(), op.position)
        return node

    def parse_term(self) -> Expr:
        node = self.parse_unit()
        while self._peek().is_symbol(*MULTIPLICATIVE):
            op = self._advance()
            node = BinaryOp(op.symbol, node, self.parse_unit(), op.position)
        return node

    def parse_unit(self) -> Expr:
        negate: Token | None = None
        if self._peek().is_symbol("-"):
            negate = self._advance()

        tok = self._peek()
        if tok.kind is TokenKind.NUMBER:
            self._advance()
            return Number(-tok.number if negate is not None else tok.number)

        if tok.is_symbol("("):
            inner = self._parse_group()
            if negate is not None:
                return BinaryOp("*", Number(-1), inner, negate.position)
            return inner

        if tok.kind is TokenKind.END:
            raise ParseError("unexpected end of input", tok.position)
        raise ParseError(f"expected number or '(' but found {tok.describe()}", tok.position)

    def _parse_group(self) -> Expr:
        open_tok = self._advance()
        self._depth += 1
        if self._depth > self._max_depth:
            raise DepthExceeded(f"max nesting depth {self._max_depth} exceeded", open_tok.position)
        try:
            inner = self.parse_expression()
        finally:
            self._depth -= 1

        tok = self._peek()
        if tok.kind is not TokenKind.RPAREN:
            raise ParseError(f"expected ')' but found {tok.describe()}", tok.position)
        self._advance()
        return inner


def parse(source: Source, limits: Any = None) -> Expr:
    """Parse an expression from a string or text stream into a tree."""
    return Parser(source, limits).parse()
