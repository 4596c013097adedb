"""Lazy tokenizer for integer arithmetic expressions.

Reads one character at a time from a string or text stream and produces one
classified token per consume() call. Spaces are the only whitespace.
"""

import io
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Optional, TextIO, Union

from .errors import IntegerOverflow, ParseError
from .types import INT64_MAX

SYMBOLS = frozenset("+-*/(")
DIGITS = frozenset("0123456789")

Source = Union[str, bytes, TextIO]


class TokenKind(Enum):
    NUMBER = auto()
    SYMBOL = auto()
    RPAREN = auto()
    END = auto()


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    value: Any = None
    position: int = 0

    @property
    def number(self) -> int:
        if self.kind is not TokenKind.NUMBER:
            raise ValueError(f"{self.kind.name} token has no number")
        return self.value

    @property
    def symbol(self) -> str:
        if self.kind not in (TokenKind.SYMBOL, TokenKind.RPAREN):
            raise ValueError(f"{self.kind.name} token has no symbol")
        return self.value

    def is_symbol(self, *chars: str) -> bool:
        return self.kind is TokenKind.SYMBOL and self.value in chars

    def describe(self) -> str:
        if self.kind is TokenKind.END:
            return "end of input"
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value}"
        return f"'{self.value}'"


class Tokenizer:
    def __init__(self, source: Source):
        if isinstance(source, bytes):
            try:
                source = source.decode("ascii")
            except UnicodeDecodeError as e:
                bad = source[e.start:e.start + 1]
                raise ParseError(f"unexpected byte {bad!r}", e.start) from None
        if isinstance(source, str):
            source = io.StringIO(source)
        self._stream = source
        self._pending: Optional[str] = None  # one character of pushback
        self._pos = 0
        self.current: Optional[Token] = None

    @property
    def position(self) -> int:
        """Offset of the next unread character."""
        return self._pos

    @property
    def kind(self) -> TokenKind:
        return self._require_current().kind

    @property
    def number(self) -> int:
        return self._require_current().number

    @property
    def symbol(self) -> str:
        return self._require_current().symbol

    def _require_current(self) -> Token:
        if self.current is None:
            raise ValueError("no token consumed yet")
        return self.current

    def _peek_char(self) -> str:
        if self._pending is None:
            self._pending = self._stream.read(1)
        return self._pending

    def _next_char(self) -> str:
        ch = self._peek_char()
        self._pending = None
        if ch:
            self._pos += 1
        return ch

    def consume(self) -> Token:
        """Advance to the next token and return it."""
        while self._peek_char() == " ":
            self._next_char()

        start = self._pos
        ch = self._peek_char()

        if ch == "":
            tok = Token(TokenKind.END, None, start)
        elif ch in SYMBOLS:
            tok = Token(TokenKind.SYMBOL, self._next_char(), start)
        elif ch == ")":
            tok = Token(TokenKind.RPAREN, self._next_char(), start)
        elif ch in DIGITS:
            value = 0
            while self._peek_char() in DIGITS:
                value = value * 10 + int(self._next_char())
                if value > INT64_MAX:
                    raise IntegerOverflow("integer literal out of range", start)
            tok = Token(TokenKind.NUMBER, value, start)
        else:
            raise ParseError(f"unexpected character {ch!r}", start)

        self.current = tok
        return tok


def tokenize(source: Source) -> list[Token]:
    """Drain a source into a token list, END included."""
    tokenizer = Tokenizer(source)
    tokens: list[Token] = []
    while True:
        tok = tokenizer.consume()
        tokens.append(tok)
        if tok.kind is TokenKind.END:
            return tokens
