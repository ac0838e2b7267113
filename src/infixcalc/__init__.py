"""
infixcalc - arithmetic expression evaluator.

Tokenizer, precedence-climbing parser, and tree evaluator for infix
arithmetic with + - * / ^, unary minus, and parentheses.

Usage:
    from infixcalc import evaluate, parse_expr

    expr = parse_expr("(10+20)(30+40)")
    result = expr.evaluate()
    # result == 2100.0
"""

from __future__ import annotations

from infixcalc._version import get_version
from infixcalc.calculator import Calculation, calculate
from infixcalc.errors import (
    CalcError,
    InvalidNumber,
    InvalidOperator,
    ParenthesisNotBalanced,
    ParseError,
    UnableToParse,
)
from infixcalc.parser import Parser, evaluate, parse_expr

__version__ = get_version()

__all__ = [
    "__version__",
    "Calculation",
    "CalcError",
    "InvalidNumber",
    "InvalidOperator",
    "ParenthesisNotBalanced",
    "ParseError",
    "Parser",
    "UnableToParse",
    "calculate",
    "evaluate",
    "parse_expr",
]
