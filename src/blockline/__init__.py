"""
blockline Package

Parser, serializer and executor for single-line LoliScript-style block
statements, e.g.:

    #MYLABEL SUM "<X>" "6" -> VAR "Y"

ARCHITECTURAL GUARANTEE:
------------------------
This package contains ZERO knowledge of:
    - Host plugin discovery
    - Form rendering or any other UI concern
    - Whole-script files or execution drivers

Text becomes a Statement (parser), a Statement becomes text again
(serialization), and a Statement runs against a context (executor).
"""

from .errors import (
    BlockError,
    BlockParseError,
    BlockExecutionError,
    MissingLabel,
    MissingOperand,
    UnterminatedLiteral,
    MissingToken,
    InvalidOutputKind,
    MissingOutputName,
    TrailingContent,
    UnknownStatement,
    OperandNotInteger,
)
from .model import OutputKind, OutputClause, Statement, StatementKind, SUM, new_statement
from .parser import parse_statement, parse_line
from .serialization import serialize_statement
from .context import VariableContext
from .executor import execute_statement

__version__ = "0.1.0"

__all__ = [
    "BlockError",
    "BlockParseError",
    "BlockExecutionError",
    "MissingLabel",
    "MissingOperand",
    "UnterminatedLiteral",
    "MissingToken",
    "InvalidOutputKind",
    "MissingOutputName",
    "TrailingContent",
    "UnknownStatement",
    "OperandNotInteger",
    "OutputKind",
    "OutputClause",
    "Statement",
    "StatementKind",
    "SUM",
    "new_statement",
    "parse_statement",
    "parse_line",
    "serialize_statement",
    "VariableContext",
    "execute_statement",
]
