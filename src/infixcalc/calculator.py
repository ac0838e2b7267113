"""
Boundary between the expression core and anything that prints results.

``calculate()`` never raises for malformed input; the outcome is a
``Calculation`` carrying either the value or the error kind and message.
"""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from infixcalc.errors import ParseError
from infixcalc.parser import Parser

logger = logging.getLogger(__name__)


class Calculation(BaseModel):
    """Outcome of evaluating one line of input."""

    source: str = Field(description="The raw input text")
    value: float | None = Field(default=None, description="Result when evaluation succeeded")
    error_kind: str | None = Field(default=None, description="Error class name on failure")
    message: str | None = Field(default=None, description="Error message on failure")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        return self.error_kind is None

    def __str__(self) -> str:
        if self.ok:
            return f"Result: {self.value}"
        return f"Parse error: {self.message}"


def calculate(source: str, *, strict: bool = True) -> Calculation:
    """Evaluate one expression, capturing parse failures."""
    try:
        value = Parser(source, strict=strict).evaluate()
    except ParseError as e:
        logger.info("Could not evaluate %r: %s", source, e.message)
        return Calculation(source=source, error_kind=e.kind, message=e.message)

    logger.debug("Evaluated %r -> %r", source, value)
    return Calculation(source=source, value=value)
