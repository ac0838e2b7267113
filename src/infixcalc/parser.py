"""
Precedence-climbing parser for infixcalc expressions.

Grammar (precedence low to high):
    expression  → primary (operator expression | "(" expression ")")*
    primary     → "+" primary | "-" primary | NUMBER | "(" expression ")"
    operator    → "+" | "-" | "*" | "/" | "^"

An operator only binds when its precedence is strictly above the
current floor, and its right operand is parsed with the operator's own
precedence as the new floor. Chains of equal precedence therefore
group to the left: ``10^20^30`` is ``(10^20)^30``. A ``(`` directly
after an operand is implicit multiplication.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

from infixcalc.errors import (
    InvalidNumber,
    InvalidOperator,
    ParenthesisNotBalanced,
    UnableToParse,
)
from infixcalc.expressions import (
    Add,
    Divide,
    Expr,
    Literal,
    Multiply,
    Negate,
    Power,
    Subtract,
    count_nodes,
)
from infixcalc.tokenizer import Precedence, Token, TokenKind, tokenize

logger = logging.getLogger(__name__)

_BINARY_NODES: dict[TokenKind, type[Add | Subtract | Multiply | Divide | Power]] = {
    TokenKind.PLUS: Add,
    TokenKind.MINUS: Subtract,
    TokenKind.STAR: Multiply,
    TokenKind.SLASH: Divide,
    TokenKind.CARET: Power,
}


class _Cursor:
    """Token stream with one token of lookahead. Never rewinds."""

    def __init__(self, tokens: Iterator[Token]) -> None:
        self._tokens = tokens
        self._lookahead: Token | None = None
        self._buffered = False

    def peek(self) -> Token | None:
        if not self._buffered:
            self._lookahead = next(self._tokens, None)
            self._buffered = True
        return self._lookahead

    def next(self) -> Token | None:
        tok = self.peek()
        self._buffered = False
        self._lookahead = None
        return tok


class Parser:
    """Parses and evaluates a single expression.

    Args:
        source: Expression text, e.g. ``"10*(20+30)"``.
        strict: Reject tokens left over after a complete expression.
    """

    def __init__(self, source: str, *, strict: bool = True) -> None:
        self.source = source
        self.strict = strict
        self._cursor = _Cursor(tokenize(source))

    def evaluate(self) -> float:
        """Parse the expression and reduce it to a number."""
        return self.parse().evaluate()

    def parse(self) -> Expr:
        """Parse the full expression into a tree.

        Raises:
            ParseError: If the expression is malformed.
        """
        try:
            expr = self.parse_expression(Precedence.DEFAULT)
        except RecursionError:
            raise UnableToParse("expression nested too deeply") from None

        if self.strict:
            tok = self._cursor.peek()
            if tok is not None and tok.kind != TokenKind.EOF:
                raise InvalidOperator(tok.describe(), tok.pos)

        logger.debug("parsed %r into %d nodes", self.source, count_nodes(expr))
        return expr

    # -- Grammar rules --

    def parse_expression(self, min_precedence: Precedence) -> Expr:
        """primary, then every operator that binds tighter than min_precedence."""
        left = self.parse_primary()

        while True:
            tok = self._cursor.peek()
            if tok is None:
                raise UnableToParse("unknown char")
            if tok.kind == TokenKind.EOF:
                break
            if min_precedence >= tok.precedence:
                break
            left = self.parse_operation(left)

        return left

    def parse_primary(self) -> Expr:
        """'+' primary | '-' primary | NUMBER | '(' expression ')'"""
        tok = self._cursor.next()
        if tok is None:
            raise UnableToParse("number parse")

        if tok.kind == TokenKind.PLUS:
            return self.parse_primary()
        if tok.kind == TokenKind.MINUS:
            return Negate(operand=self.parse_primary())
        if tok.kind == TokenKind.NUMBER:
            return Literal(value=tok.value)
        if tok.kind == TokenKind.LPAREN:
            return self._parse_group()

        raise InvalidNumber(tok.describe(), tok.pos)

    def parse_operation(self, left: Expr) -> Expr:
        """Consume one operator and its right operand, combining with left."""
        tok = self._cursor.next()
        if tok is None:
            raise UnableToParse("operator parse")

        node_type = _BINARY_NODES.get(tok.kind)
        if node_type is not None:
            right = self.parse_expression(tok.precedence)
            return node_type(left=left, right=right)

        # Implicit multiplication: (a)(b), 2(3)
        if tok.kind == TokenKind.LPAREN:
            return Multiply(left=left, right=self._parse_group())

        raise InvalidOperator(tok.describe(), tok.pos)

    def _parse_group(self) -> Expr:
        """expression ')' -- the '(' is already consumed."""
        inner = self.parse_expression(Precedence.DEFAULT)
        closing = self._cursor.next()
        if closing is None or closing.kind != TokenKind.RPAREN:
            raise ParenthesisNotBalanced(None if closing is None else closing.pos)
        return inner


def parse_expr(source: str, *, strict: bool = True) -> Expr:
    """Parse an expression string into a tree.

    Args:
        source: Expression string (e.g., "3^2*2")
        strict: Reject trailing tokens after the expression.

    Returns:
        Parsed expression tree.

    Raises:
        ParseError: If the expression is invalid.
    """
    return Parser(source, strict=strict).parse()


def evaluate(source: str, *, strict: bool = True) -> float:
    """Parse and evaluate an expression string."""
    return Parser(source, strict=strict).evaluate()
