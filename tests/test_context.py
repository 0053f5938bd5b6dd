"""
Tests for the in-memory runtime context.
"""

import logging

from blockline.context import RuntimeContext, VariableContext


class TestSubstitute:
    """Test <NAME> and <NAME[i]> substitution."""

    def test_plain_variable(self):
        context = VariableContext(variables={"X": "4"})
        assert context.substitute("<X>") == "4"
        assert context.substitute("a<X>b<X>") == "a4b4"

    def test_capture_is_visible(self):
        context = VariableContext(captures={"C": "9"})
        assert context.substitute("<C>") == "9"

    def test_unknown_left_as_is(self):
        assert VariableContext().substitute("<NOPE>") == "<NOPE>"

    def test_text_without_references(self):
        assert VariableContext().substitute("plain 5") == "plain 5"

    def test_list_index(self):
        context = VariableContext(variables={"L": ["a", "b", "c"]})
        assert context.substitute("<L[1]>") == "b"
        assert context.substitute("<L[-1]>") == "c"

    def test_list_index_out_of_range(self):
        context = VariableContext(variables={"L": ["a"]})
        assert context.substitute("<L[5]>") == "<L[5]>"

    def test_whole_list(self):
        context = VariableContext(variables={"L": ["a", "b"]})
        assert context.substitute("<L>") == "[a, b]"

    def test_index_on_string_left_as_is(self):
        context = VariableContext(variables={"S": "abc"})
        assert context.substitute("<S[0]>") == "<S[0]>"


class TestSet:
    """Test writing values."""

    def test_set_variable(self):
        context = VariableContext()
        context.set("Y", "1", False)
        assert context.variables == {"Y": "1"}

    def test_set_capture_moves_name(self):
        """A name lives in one partition only."""
        context = VariableContext(variables={"Y": "1"})
        context.set("Y", "2", True)
        assert context.variables == {}
        assert context.captures == {"Y": "2"}
        assert context.get("Y") == "2"


class TestLog:
    """Test log buffering."""

    def test_log_buffer_and_logger(self, caplog):
        context = VariableContext()
        with caplog.at_level(logging.INFO, logger="blockline.context"):
            context.log("hello")
        assert context.log_buffer == ["hello"]
        assert "hello" in caplog.text

    def test_logging_disabled(self):
        context = VariableContext(logging_enabled=False)
        context.log("hello")
        assert context.log_buffer == []

    def test_is_runtime_context(self):
        assert isinstance(VariableContext(), RuntimeContext)
