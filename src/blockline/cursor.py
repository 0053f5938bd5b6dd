"""
Line cursor: the tokenizer shared by the block parser.

A LineCursor wraps one statement line and a read position. Every take_*
call skips leading whitespace, consumes what it recognises and advances
the position. Nothing is ever pushed back.

Token shapes:
    #LABEL      label (only at the start of the line)
    !           disable marker (only at the very start)
    WORD        parameter, delimited by whitespace or a quote
    "text"      literal, no escape mechanism
    ->          arrow
"""

from enum import Enum
from typing import Optional

from blockline.errors import MissingLabel, MissingOperand, MissingToken, UnterminatedLiteral


LABEL_MARKER = "#"
DISABLE_MARKER = "!"
QUOTE = '"'
ARROW = "->"


class TokenType(Enum):
    """Kinds of token the parser can ask for."""
    ARROW = "Arrow"
    PARAMETER = "Parameter"
    LITERAL = "Literal"


class LineCursor:
    """Forward-only scanner over a single statement line."""

    def __init__(self, line: str):
        self.line = line
        self.pos = 0

    @property
    def remaining(self) -> str:
        return self.line[self.pos:]

    @property
    def at_end(self) -> bool:
        return not self.remaining.strip()

    def _skip_whitespace(self) -> None:
        while self.pos < len(self.line) and self.line[self.pos].isspace():
            self.pos += 1

    def take_disabled(self) -> bool:
        """Consume a leading '!' disable marker if present."""
        self._skip_whitespace()
        if self.line.startswith(DISABLE_MARKER, self.pos):
            self.pos += len(DISABLE_MARKER)
            return True
        return False

    def peek_label(self) -> Optional[str]:
        """
        Consume a '#LABEL' prefix and return LABEL.

        Returns None, consuming nothing, when the remaining text does not
        start with the label marker.

        Raises:
            MissingLabel: If the marker is not followed by a name
        """
        self._skip_whitespace()
        if not self.line.startswith(LABEL_MARKER, self.pos):
            return None

        end = self.pos
        while end < len(self.line) and not self.line[end].isspace():
            end += 1

        label = self.line[self.pos + len(LABEL_MARKER):end]
        if not label:
            raise MissingLabel(self.line)

        self.pos = end
        return label

    def _read_literal(self) -> Optional[str]:
        # None when there is no opening quote; pos is left untouched then.
        self._skip_whitespace()
        if not self.line.startswith(QUOTE, self.pos):
            return None

        close = self.line.find(QUOTE, self.pos + 1)
        if close == -1:
            raise UnterminatedLiteral(self.line)

        value = self.line[self.pos + 1:close]
        self.pos = close + 1
        return value

    def _read_word(self) -> str:
        self._skip_whitespace()
        start = self.pos
        while (self.pos < len(self.line)
               and not self.line[self.pos].isspace()
               and self.line[self.pos] != QUOTE):
            self.pos += 1
        return self.line[start:self.pos]

    def take_literal(self, field_name: str) -> str:
        """
        Consume a quoted literal and return its inner text.

        Raises:
            MissingOperand: If no opening quote is found
            UnterminatedLiteral: If the closing quote is missing
        """
        value = self._read_literal()
        if value is None:
            raise MissingOperand(field_name, self.line)
        return value

    def take_token(self, kind: TokenType, required: bool = True) -> str:
        """
        Consume a token of the given kind.

        With required=False an absent token yields "" and consumes nothing,
        which lets the parser probe for optional clauses.

        Raises:
            MissingToken: If required and the token is absent
        """
        if kind is TokenType.ARROW:
            self._skip_whitespace()
            if self.line.startswith(ARROW, self.pos):
                self.pos += len(ARROW)
                return ARROW
            value = ""
        elif kind is TokenType.PARAMETER:
            value = self._read_word()
        elif kind is TokenType.LITERAL:
            literal = self._read_literal()
            if literal is not None:
                return literal
            value = ""
        else:
            raise ValueError(f"Unsupported token type: {kind}")

        if not value and required:
            raise MissingToken(kind.value, self.line)
        return value
