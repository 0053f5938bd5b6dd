"""
Serialization helpers for Statement objects.

Two directions out of a Statement:
    - Block line text (the inverse of blockline.parser), via BlockWriter
    - Structured dict/JSON/YAML, for editing tools that store blocks

Block lines are canonical, not character-identical to what was parsed:
whitespace is normalised and a default label is omitted. Re-parsing
the canonical text gives back the same operands, output and label.
"""
from __future__ import annotations

import json
import warnings
from typing import Any, Dict, List

import yaml

from blockline.cursor import ARROW, DISABLE_MARKER, LABEL_MARKER, QUOTE
from blockline.model import OutputClause, OutputKind, Statement, StatementKind, SUM, get_kind


INDENT = "    "


class BlockWriter:
    """
    Fluent writer for one block line.

    Example:
        str(BlockWriter(SUM).label("ADD").token("SUM").literal("1").literal("2"))
        == '#ADD SUM "1" "2"'
    """

    def __init__(self, kind: StatementKind, indent: bool = False, disabled: bool = False):
        self.kind = kind
        self.indent = indent
        self.disabled = disabled
        self.parts: List[str] = []

    def label(self, label: str) -> BlockWriter:
        if not label or any(c.isspace() for c in label):
            raise ValueError(f"Label must be a non-empty word: {label!r}")
        if label != self.kind.name:
            self.parts.append(f"{LABEL_MARKER}{label}")
        return self

    def token(self, token: str) -> BlockWriter:
        self.parts.append(token)
        return self

    def literal(self, value: str) -> BlockWriter:
        if QUOTE in value:
            raise ValueError(f"Literal cannot contain {QUOTE}: {value!r}")
        self.parts.append(f"{QUOTE}{value}{QUOTE}")
        return self

    def arrow(self) -> BlockWriter:
        self.parts.append(ARROW)
        return self

    def __str__(self) -> str:
        prefix = INDENT if self.indent else ""
        if self.disabled:
            prefix += DISABLE_MARKER
        return prefix + " ".join(self.parts)


def serialize_statement(statement: Statement, indent: bool = False, disabled: bool | None = None) -> str:
    """
    Write a Statement as a canonical block line.

    Args:
        statement: Statement to write (not modified)
        indent: Prefix the line with INDENT for nested composition
        disabled: Override statement.disabled when given

    Raises:
        ValueError: If the operand count does not match the kind's arity,
            a value contains a quote, or the label is empty or contains
            whitespace
    """
    kind = statement.kind
    if len(statement.operands) != kind.arity:
        raise ValueError(
            f"{kind.name} takes {kind.arity} operands, got {len(statement.operands)}"
        )

    if disabled is None:
        disabled = statement.disabled

    writer = BlockWriter(kind, indent, disabled).label(statement.label).token(kind.name)
    for operand in statement.operands:
        writer.literal(operand)

    if statement.output is not None:
        writer.arrow().token(statement.output.kind.value).literal(statement.output.name)

    return str(writer)


_DICT_KEYS = {"kind", "label", "operands", "output", "disabled"}


def output_to_dict(o: OutputClause | None) -> Dict[str, Any] | None:
    if o is None:
        return None
    return {"kind": o.kind.value, "name": o.name}


def output_from_dict(d: Dict[str, Any] | None) -> OutputClause | None:
    if d is None:
        return None
    return OutputClause(kind=OutputKind(d["kind"].upper()), name=d["name"])


def statement_to_dict(s: Statement) -> Dict[str, Any]:
    return {
        "kind": s.kind.name,
        "label": s.label,
        "operands": list(s.operands),
        "output": output_to_dict(s.output),
        "disabled": s.disabled,
    }


def statement_from_dict(d: Dict[str, Any]) -> Statement:
    unknown = set(d) - _DICT_KEYS
    if unknown:
        warnings.warn(f"Ignoring unknown statement keys: {sorted(unknown)}", UserWarning)

    kind_name = d.get("kind", SUM.name)
    kind = get_kind(kind_name)
    if kind is None:
        raise ValueError(f"Unknown statement kind: {kind_name!r}")

    operands = list(d.get("operands", []))
    if len(operands) != kind.arity:
        raise ValueError(f"{kind.name} takes {kind.arity} operands, got {len(operands)}")

    return Statement(
        kind=kind,
        operands=operands,
        label=d.get("label"),
        output=output_from_dict(d.get("output")),
        disabled=bool(d.get("disabled", False)),
    )


def statement_to_json(s: Statement) -> str:
    return json.dumps(statement_to_dict(s), sort_keys=True)


def statement_from_json(s: str) -> Statement:
    d = json.loads(s)
    return statement_from_dict(d)


def statement_to_yaml(s: Statement) -> str:
    return yaml.safe_dump(statement_to_dict(s))


def statement_from_yaml(s: str) -> Statement:
    d = yaml.safe_load(s)
    return statement_from_dict(d)
