"""
Tests for the block model objects.

These tests verify:
    - Statement defaults (label, output)
    - OutputClause invariants
    - The SUM kind's metadata and form table
"""

import pytest
from blockline.model import (
    KINDS,
    SUM,
    FieldControl,
    OutputClause,
    OutputKind,
    Statement,
    get_kind,
    new_statement,
)


class TestStatement:
    """Test Statement objects."""

    def test_default_label_is_kind_name(self):
        stmt = Statement(kind=SUM, operands=["1", "2"])
        assert stmt.label == "SUM"
        assert stmt.has_default_label

    def test_custom_label(self):
        stmt = Statement(kind=SUM, operands=["1", "2"], label="ADD")
        assert stmt.label == "ADD"
        assert not stmt.has_default_label

    def test_no_output_by_default(self):
        stmt = Statement(kind=SUM, operands=["1", "2"])
        assert stmt.output is None
        assert stmt.disabled is False


class TestOutputClause:
    """Test OutputClause objects."""

    def test_capture_flag(self):
        assert OutputClause(OutputKind.CAPTURE, "X").is_capture
        assert not OutputClause(OutputKind.VARIABLE, "X").is_capture

    def test_empty_name_rejected(self):
        with pytest.raises(ValueError):
            OutputClause(OutputKind.VARIABLE, "")

    def test_immutable(self):
        clause = OutputClause(OutputKind.VARIABLE, "X")
        with pytest.raises(AttributeError):
            clause.name = "Y"


class TestSumKind:
    """Test the SUM statement kind."""

    def test_metadata(self):
        assert SUM.name == "SUM"
        assert SUM.color == "Cyan"
        assert SUM.light_foreground is False

    def test_arity(self):
        assert SUM.arity == 2
        assert SUM.operand_names == ("First", "Second")

    def test_evaluate_adds(self):
        assert SUM.evaluate([4, 6]) == 10
        assert SUM.evaluate([-3, 1]) == -2

    def test_registered(self):
        assert get_kind("SUM") is SUM
        assert "SUM" in KINDS
        assert get_kind("NOPE") is None

    def test_form_table(self):
        first = SUM.get_field("First")
        assert first.label == "First Number"
        assert first.control == FieldControl.TEXT
        assert SUM.get_field("IsCapture").control == FieldControl.CHECKBOX
        assert SUM.get_field("Missing") is None

    def test_new_statement_defaults(self):
        """Fresh blocks take operand defaults from the form table."""
        stmt = new_statement(SUM)
        assert stmt.operands == ["1", "2"]
        assert stmt.label == "SUM"
        assert stmt.output is None
