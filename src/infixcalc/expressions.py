"""
Expression tree for infixcalc.

Nodes are frozen pydantic models built bottom-up by the parser. Each
composite node owns its children; a tree is evaluated with
``expr.evaluate()``.

Evaluation and rendering walk the tree with an explicit stack, so a
long flat chain such as ``1+1+...+1`` is bounded by input length and
not by the interpreter's recursion limit.

Supports:
- Literals: 1, 2.5
- Negation: -x
- Arithmetic: +, -, *, /, ^
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from infixcalc import arithmetic

T = TypeVar("T")

# ---------------------------------------------------------------------------
# Leaf and unary nodes
# ---------------------------------------------------------------------------


class Literal(BaseModel):
    """A numeric literal."""

    value: float = Field(description="The literal value")

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return repr(self.value)

    @property
    def label(self) -> str:
        return str(self)

    @property
    def children(self) -> tuple[Expr, ...]:
        return ()

    def evaluate(self) -> float:
        return self.value


class Negate(BaseModel):
    """Arithmetic negation: -operand."""

    operand: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)

    @property
    def label(self) -> str:
        return "neg"

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.operand,)

    def evaluate(self) -> float:
        return reduce_tree(self)


# ---------------------------------------------------------------------------
# Binary nodes
# ---------------------------------------------------------------------------


class BinaryExpr(BaseModel):
    """Binary operation: left op right. Subclasses supply the operator."""

    symbol: ClassVar[str] = "?"

    left: Expr
    right: Expr

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return render(self)

    @property
    def label(self) -> str:
        return self.symbol

    @property
    def children(self) -> tuple[Expr, ...]:
        return (self.left, self.right)

    def evaluate(self) -> float:
        return reduce_tree(self)

    def apply(self, left: float, right: float) -> float:
        raise NotImplementedError


class Add(BinaryExpr):
    symbol: ClassVar[str] = "+"

    def apply(self, left: float, right: float) -> float:
        return left + right


class Subtract(BinaryExpr):
    symbol: ClassVar[str] = "-"

    def apply(self, left: float, right: float) -> float:
        return left - right


class Multiply(BinaryExpr):
    symbol: ClassVar[str] = "*"

    def apply(self, left: float, right: float) -> float:
        return left * right


class Divide(BinaryExpr):
    """Division; a zero divisor gives inf or nan, never an exception."""

    symbol: ClassVar[str] = "/"

    def apply(self, left: float, right: float) -> float:
        return arithmetic.divide(left, right)


class Power(BinaryExpr):
    """Exponentiation with fractional and negative exponents."""

    symbol: ClassVar[str] = "^"

    def apply(self, left: float, right: float) -> float:
        return arithmetic.power(left, right)


# ---------------------------------------------------------------------------
# Union type
# ---------------------------------------------------------------------------

Expr = Literal | Negate | Add | Subtract | Multiply | Divide | Power

# Rebuild models for recursive forward references
Negate.model_rebuild()
BinaryExpr.model_rebuild()
Add.model_rebuild()
Subtract.model_rebuild()
Multiply.model_rebuild()
Divide.model_rebuild()
Power.model_rebuild()


# ---------------------------------------------------------------------------
# Tree walks
# ---------------------------------------------------------------------------


def fold(
    root: Expr,
    leaf: Callable[[Literal], T],
    unary: Callable[[Negate, T], T],
    binary: Callable[[BinaryExpr, T, T], T],
) -> T:
    """Post-order reduction of a tree using an explicit stack."""
    results: list[T] = []
    pending: list[tuple[Expr, bool]] = [(root, False)]

    while pending:
        node, expanded = pending.pop()
        if isinstance(node, Literal):
            results.append(leaf(node))
            continue
        if not expanded:
            pending.append((node, True))
            # reversed so the left child is reduced first
            pending.extend((child, False) for child in reversed(node.children))
            continue
        if isinstance(node, Negate):
            results.append(unary(node, results.pop()))
        else:
            right = results.pop()
            left = results.pop()
            results.append(binary(node, left, right))

    return results[0]


def reduce_tree(root: Expr) -> float:
    """Evaluate a tree to a float."""
    return fold(
        root,
        lambda node: node.value,
        lambda _node, value: -value,
        lambda node, left, right: node.apply(left, right),
    )


def render(root: Expr) -> str:
    """Fully parenthesized text form of a tree."""
    return fold(
        root,
        str,
        lambda _node, text: f"-{text}",
        lambda node, left, right: f"({left} {node.symbol} {right})",
    )


def count_nodes(root: Expr) -> int:
    return fold(
        root,
        lambda _node: 1,
        lambda _node, n: n + 1,
        lambda _node, left, right: left + right + 1,
    )
