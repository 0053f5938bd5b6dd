"""
Error types for block statement parsing and execution.

Parse errors are raised before any Statement exists, so a failed parse
never leaves a half-built block behind. Execution errors are raised
before the context is written.
"""

from typing import Optional


class BlockError(Exception):
    """Base exception for all blockline errors."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class BlockParseError(BlockError):
    """
    Raised when a statement line cannot be parsed.

    Examples:
    - Missing quoted operand
    - Unterminated literal
    - Bad output clause
    """

    def __init__(self, message: str, line: Optional[str] = None):
        self.line = line
        super().__init__(message)


class MissingLabel(BlockParseError):
    """A '#' label marker with no name after it."""

    def __init__(self, line: Optional[str] = None):
        super().__init__("Label marker '#' is not followed by a name", line)


class MissingOperand(BlockParseError):
    """A required quoted operand is absent."""

    def __init__(self, field_name: str, line: Optional[str] = None):
        self.field_name = field_name
        super().__init__(f"Missing operand: {field_name}", line)


class UnterminatedLiteral(BlockParseError):
    """An opening quote has no matching closing quote on the line."""

    def __init__(self, line: Optional[str] = None):
        super().__init__("Unterminated literal: no closing quote before end of line", line)


class MissingToken(BlockParseError):
    """A required token of the given kind is absent."""

    def __init__(self, kind: str, line: Optional[str] = None):
        self.kind = kind
        super().__init__(f"Missing {kind.lower()} token", line)


class InvalidOutputKind(BlockParseError):
    """The output clause does not name VAR or CAP."""

    def __init__(self, value: Optional[str] = None, line: Optional[str] = None):
        self.value = value
        super().__init__(f"Invalid or missing variable type: {value!r}", line)


class MissingOutputName(BlockParseError):
    """The output clause has a kind but no quoted variable name."""

    def __init__(self, line: Optional[str] = None):
        super().__init__("Variable name not specified", line)


class TrailingContent(BlockParseError):
    """Unconsumed text after a complete statement (strict mode only)."""

    def __init__(self, text: str, line: Optional[str] = None):
        self.text = text
        super().__init__(f"Unexpected trailing content: {text!r}", line)


class UnknownStatement(BlockParseError):
    """The statement name is not a registered block kind."""

    def __init__(self, name: str, line: Optional[str] = None):
        self.name = name
        super().__init__(f"Unknown statement: {name!r}", line)


class BlockExecutionError(BlockError):
    """Raised when a parsed statement fails while running."""

    pass


class OperandNotInteger(BlockExecutionError):
    """An operand did not resolve to a base-10 integer."""

    def __init__(self, which: str, raw_value: str):
        self.which = which
        self.raw_value = raw_value
        super().__init__(f"{which} operand is not an integer: {raw_value!r}")
