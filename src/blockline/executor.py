"""
Statement executor.

Runs a parsed Statement against a RuntimeContext:
    1. Substitute variable references in every operand
    2. Parse each result as a base-10 signed integer
    3. Evaluate the statement kind (SUM adds)
    4. Write the result to the output variable, if there is one
    5. Log the resolved operands and the result

The write happens only after every operand has parsed, so a failing
statement leaves the context untouched. A statement without output still
computes and logs its result.

Operands are 32-bit signed integers; values outside that range are
rejected like any other non-integer text. The result itself is not
bounded.
"""

import logging
import re
from typing import List

from blockline.context import RuntimeContext
from blockline.errors import OperandNotInteger
from blockline.model import Statement

logger = logging.getLogger(__name__)

_INTEGER_RE = re.compile(r"[+-]?[0-9]+")

INT_MIN = -2 ** 31
INT_MAX = 2 ** 31 - 1


def parse_integer(which: str, raw_value: str) -> int:
    """
    Parse a substituted operand.

    Surrounding whitespace is allowed; anything else that is not an
    optional sign followed by ASCII digits is rejected, as is a value
    outside INT_MIN..INT_MAX.

    Raises:
        OperandNotInteger: If raw_value is not an integer
    """
    text = raw_value.strip()
    if not _INTEGER_RE.fullmatch(text):
        raise OperandNotInteger(which, raw_value)

    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise OperandNotInteger(which, raw_value)
    return value


def _format_log(values: List[int], result: int) -> str:
    return "Added " + " and ".join(str(v) for v in values) + f" with result {result}"


def execute_statement(statement: Statement, context: RuntimeContext) -> str:
    """
    Execute one statement.

    Args:
        statement: Parsed statement (not modified)
        context: Runtime context to substitute from and write into

    Returns:
        The result as a string

    Raises:
        OperandNotInteger: If an operand does not resolve to an integer
        ValueError: If the operand count does not match the kind
    """
    kind = statement.kind
    if len(statement.operands) != kind.arity:
        raise ValueError(f"{kind.name} takes {kind.arity} operands, got {len(statement.operands)}")

    values = []
    for which, raw in zip(kind.operand_names, statement.operands):
        resolved = context.substitute(raw)
        logger.debug("%s operand %r resolved to %r", which, raw, resolved)
        values.append(parse_integer(which, resolved))

    result = kind.evaluate(values)
    text = str(result)

    if statement.output is not None:
        context.set(statement.output.name, text, statement.output.is_capture)

    context.log(_format_log(values, result))
    return text
