"""
Error types for infixcalc tokenizing, parsing, and configuration.
"""


class CalcError(Exception):
    """Base exception for all infixcalc errors."""

    def __init__(self, message: str, pos: int | None = None):
        self.message = message
        self.pos = pos
        super().__init__(message)


class ConfigError(CalcError):
    """Raised when an environment setting cannot be interpreted."""

    pass


class ParseError(CalcError):
    """
    Raised when an expression cannot be turned into a tree.

    Subclasses name the kind of failure; ``kind`` is what the
    shell reports alongside the message.
    """

    @property
    def kind(self) -> str:
        return type(self).__name__


class UnableToParse(ParseError):
    """
    Raised when a token was required but none was available.

    Examples:
    - Token source exhausted mid-expression
    - Expression nested deeper than the interpreter stack allows
    """

    def __init__(self, context: str, pos: int | None = None):
        self.context = context
        super().__init__(f"Error in evaluating {context}", pos)


class ParenthesisNotBalanced(ParseError):
    """Raised when a ``(`` is not closed by ``)`` where one is expected."""

    def __init__(self, pos: int | None = None):
        super().__init__("Balance parenthesis error", pos)


class InvalidOperator(ParseError):
    """Raised when an operator position holds an unsupported token."""

    def __init__(self, token: str, pos: int | None = None):
        self.token = token
        super().__init__(f"Invalid operator: {token}", pos)


class InvalidNumber(ParseError):
    """
    Raised when an operand position holds an unsupported token.

    Also raised by the tokenizer for numeric literals that do not
    convert to a float, e.g. ``1.2.3``.
    """

    def __init__(self, token: str, pos: int | None = None):
        self.token = token
        super().__init__(f"Invalid number: {token}", pos)
