"""
Tests for the line cursor (tokenizer shared by the parser).

These tests verify:
    - Label detection and consumption
    - Quoted literal extraction and its failure modes
    - Optional and required token probes
"""

import pytest
from blockline.cursor import LineCursor, TokenType
from blockline.errors import MissingLabel, MissingOperand, MissingToken, UnterminatedLiteral


class TestLabel:
    """Test '#LABEL' handling."""

    def test_label_is_consumed(self):
        """Label text is returned without the marker."""
        cursor = LineCursor('#ADD SUM "1" "2"')
        assert cursor.peek_label() == "ADD"
        assert cursor.remaining == ' SUM "1" "2"'

    def test_no_label_consumes_nothing(self):
        """Without a marker the position does not move."""
        cursor = LineCursor('SUM "1" "2"')
        assert cursor.peek_label() is None
        assert cursor.pos == 0

    def test_marker_without_name(self):
        """A bare '#' is malformed."""
        cursor = LineCursor('# SUM "1" "2"')
        with pytest.raises(MissingLabel):
            cursor.peek_label()


class TestLiteral:
    """Test quoted literal extraction."""

    def test_literal_inner_text(self):
        cursor = LineCursor('   "hello world" rest')
        assert cursor.take_literal("First") == "hello world"
        assert cursor.remaining == " rest"

    def test_adjacent_literals(self):
        """A quote may follow the previous closing quote directly."""
        cursor = LineCursor('"1""2"')
        assert cursor.take_literal("First") == "1"
        assert cursor.take_literal("Second") == "2"
        assert cursor.at_end

    def test_empty_literal(self):
        cursor = LineCursor('""')
        assert cursor.take_literal("First") == ""

    def test_missing_opening_quote(self):
        cursor = LineCursor("1 2")
        with pytest.raises(MissingOperand) as exc:
            cursor.take_literal("First")
        assert exc.value.field_name == "First"

    def test_missing_closing_quote(self):
        cursor = LineCursor('"1')
        with pytest.raises(UnterminatedLiteral):
            cursor.take_literal("First")


class TestTokens:
    """Test take_token for each token type."""

    def test_arrow_present(self):
        cursor = LineCursor('  -> VAR "X"')
        assert cursor.take_token(TokenType.ARROW, required=False) == "->"

    def test_optional_arrow_absent(self):
        """Optional probe returns empty string instead of failing."""
        cursor = LineCursor("")
        assert cursor.take_token(TokenType.ARROW, required=False) == ""

    def test_required_arrow_absent(self):
        cursor = LineCursor('VAR "X"')
        with pytest.raises(MissingToken):
            cursor.take_token(TokenType.ARROW, required=True)

    def test_parameter_word(self):
        cursor = LineCursor('  CAP "X"')
        assert cursor.take_token(TokenType.PARAMETER) == "CAP"

    def test_parameter_stops_at_quote(self):
        cursor = LineCursor('VAR"X"')
        assert cursor.take_token(TokenType.PARAMETER) == "VAR"
        assert cursor.take_token(TokenType.LITERAL) == "X"

    def test_required_parameter_absent(self):
        cursor = LineCursor("   ")
        with pytest.raises(MissingToken) as exc:
            cursor.take_token(TokenType.PARAMETER, required=True)
        assert exc.value.kind == "Parameter"

    def test_required_literal_absent(self):
        cursor = LineCursor("VAR")
        with pytest.raises(MissingToken) as exc:
            cursor.take_token(TokenType.LITERAL, required=True)
        assert exc.value.kind == "Literal"

    def test_optional_literal_absent(self):
        cursor = LineCursor("")
        assert cursor.take_token(TokenType.LITERAL, required=False) == ""

    def test_disable_marker(self):
        cursor = LineCursor('!SUM "1" "2"')
        assert cursor.take_disabled() is True
        assert cursor.take_token(TokenType.PARAMETER) == "SUM"
