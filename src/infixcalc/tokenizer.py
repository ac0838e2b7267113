"""
Tokenizer for infixcalc expressions.

Converts an expression string into a lazy stream of typed tokens.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum, StrEnum, auto

from infixcalc.errors import InvalidNumber

logger = logging.getLogger(__name__)


class TokenKind(StrEnum):
    """Token types for arithmetic expressions."""

    NUMBER = auto()

    # Operators
    PLUS = auto()
    MINUS = auto()
    STAR = auto()
    SLASH = auto()
    CARET = auto()

    # Punctuation
    LPAREN = auto()
    RPAREN = auto()

    # Any character the grammar does not know
    UNKNOWN = auto()

    # End of input
    EOF = auto()


class Precedence(IntEnum):
    """Binding strength of an operator token, weakest first."""

    DEFAULT = 0
    ADD_SUB = 1
    MUL_DIV = 2
    POWER = 3


_PRECEDENCE: dict[TokenKind, Precedence] = {
    TokenKind.PLUS: Precedence.ADD_SUB,
    TokenKind.MINUS: Precedence.ADD_SUB,
    TokenKind.STAR: Precedence.MUL_DIV,
    TokenKind.SLASH: Precedence.MUL_DIV,
    # "(" after an operand is implicit multiplication
    TokenKind.LPAREN: Precedence.MUL_DIV,
    TokenKind.CARET: Precedence.POWER,
}

_SINGLE_CHAR: dict[str, TokenKind] = {
    "+": TokenKind.PLUS,
    "-": TokenKind.MINUS,
    "*": TokenKind.STAR,
    "/": TokenKind.SLASH,
    "^": TokenKind.CARET,
    "(": TokenKind.LPAREN,
    ")": TokenKind.RPAREN,
}

_WHITESPACE = frozenset(" \t\n\r\f\v")


@dataclass(frozen=True, slots=True)
class Token:
    """A single token from the expression tokenizer."""

    kind: TokenKind
    value: float | str
    pos: int

    @property
    def precedence(self) -> Precedence:
        return _PRECEDENCE.get(self.kind, Precedence.DEFAULT)

    def describe(self) -> str:
        """Human-readable form used in error messages."""
        if self.kind == TokenKind.EOF:
            return "end of input"
        return f"{self.kind} ({self.value!r})"


def tokenize(source: str) -> Iterator[Token]:
    """Lazily tokenize an expression string.

    Yields exactly one EOF token at the end; the iterator is exhausted
    after that.

    Raises:
        InvalidNumber: When a numeric literal does not convert to a float.
    """
    i = 0
    n = len(source)

    while i < n:
        c = source[i]

        if c in _WHITESPACE:
            i += 1
            continue

        # Numbers: digits and decimal points, greedily
        if c.isdigit():
            start = i
            while i < n and (source[i].isdigit() or source[i] == "."):
                i += 1
            text = source[start:i]
            try:
                number = float(text)
            except ValueError:
                raise InvalidNumber(repr(text), start) from None
            logger.debug("token NUMBER %r at %d", number, start)
            yield Token(TokenKind.NUMBER, number, start)
            continue

        kind = _SINGLE_CHAR.get(c, TokenKind.UNKNOWN)
        logger.debug("token %s %r at %d", kind, c, i)
        yield Token(kind, c, i)
        i += 1

    yield Token(TokenKind.EOF, "", n)
