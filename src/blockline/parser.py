"""
Block Parser (text → Statement).

Grammar (square brackets mean optional):

    line          := ["!"] [label] NAME literal{arity} [arrow output_clause]
    label         := "#" IDENT
    output_clause := ("VAR" | "CAP") literal

Example:
    #MYLABEL SUM "<X>" "6" -> VAR "Y"

The VAR/CAP token is case-insensitive. A line without an arrow is a
complete statement with no output.
"""

import logging
from typing import Optional

from blockline.config import DEFAULT_CONFIG, ParserConfig
from blockline.cursor import LineCursor, TokenType
from blockline.errors import (
    BlockParseError,
    InvalidOutputKind,
    MissingOutputName,
    MissingToken,
    TrailingContent,
    UnknownStatement,
)
from blockline.model import SUM, OutputClause, OutputKind, Statement, StatementKind, get_kind

logger = logging.getLogger(__name__)


def _resolve_strict(strict: Optional[bool], config: Optional[ParserConfig]) -> bool:
    if strict is not None:
        return strict
    return (config or DEFAULT_CONFIG).strict


def _parse_output(cursor: LineCursor) -> Optional[OutputClause]:
    if cursor.take_token(TokenType.ARROW, required=False) == "":
        return None

    try:
        var_type = cursor.take_token(TokenType.PARAMETER, required=True).upper()
    except MissingToken:
        raise InvalidOutputKind(None, cursor.line)

    try:
        kind = OutputKind(var_type)
    except ValueError:
        raise InvalidOutputKind(var_type, cursor.line)

    try:
        name = cursor.take_token(TokenType.LITERAL, required=True)
    except MissingToken:
        raise MissingOutputName(cursor.line)

    if not name:
        raise MissingOutputName(cursor.line)

    return OutputClause(kind=kind, name=name)


def _parse_body(cursor: LineCursor, kind: StatementKind, disabled: bool,
                label: Optional[str], strict: bool) -> Statement:
    operands = [cursor.take_literal(name) for name in kind.operand_names]
    output = _parse_output(cursor)

    if strict and not cursor.at_end:
        raise TrailingContent(cursor.remaining.strip(), cursor.line)

    statement = Statement(
        kind=kind,
        operands=operands,
        label=label,
        output=output,
        disabled=disabled,
    )
    logger.debug("Parsed %s statement %r", kind.name, cursor.line)
    return statement


def parse_statement(
    line: str,
    kind: StatementKind = SUM,
    strict: Optional[bool] = None,
    config: Optional[ParserConfig] = None,
) -> Statement:
    """
    Parse one line into a Statement of a known kind.

    Args:
        line: Statement text
        kind: Expected statement kind
        strict: Reject trailing text; overrides config when given
        config: Parser settings (defaults to DEFAULT_CONFIG)

    Returns:
        Statement

    Raises:
        BlockParseError: If the line is malformed or names another kind
    """
    cursor = LineCursor(line.strip())
    disabled = cursor.take_disabled()
    label = cursor.peek_label()

    name = cursor.take_token(TokenType.PARAMETER, required=False)
    if name != kind.name:
        raise BlockParseError(f"Expected {kind.name} statement, got {name!r}", cursor.line)

    return _parse_body(cursor, kind, disabled, label, _resolve_strict(strict, config))


def parse_line(
    line: str,
    strict: Optional[bool] = None,
    config: Optional[ParserConfig] = None,
) -> Statement:
    """
    Parse one line, picking the statement kind from its name token.

    Raises:
        UnknownStatement: If the name is not a registered kind
        BlockParseError: If the line is malformed
    """
    cursor = LineCursor(line.strip())
    disabled = cursor.take_disabled()
    label = cursor.peek_label()

    name = cursor.take_token(TokenType.PARAMETER, required=False)
    kind = get_kind(name)
    if kind is None:
        raise UnknownStatement(name, cursor.line)

    return _parse_body(cursor, kind, disabled, label, _resolve_strict(strict, config))
