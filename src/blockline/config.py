"""
Parser configuration.

Settings can be built directly or loaded from YAML:

    parser:
      strict: true

strict:
    When True, text left over after a complete statement is an error
    (TrailingContent). When False it is ignored, which is how block
    lines have always been read. Must be a YAML boolean; a missing or
    empty value means False.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict

import yaml


@dataclass(frozen=True)
class ParserConfig:
    strict: bool = False

    @classmethod
    def from_dict(cls, d: Dict[str, Any] | None) -> ParserConfig:
        if not d:
            return cls()
        section = (d.get("parser") or {}) if "parser" in d else d
        strict = section.get("strict", False)
        if strict is None:
            strict = False
        if not isinstance(strict, bool):
            raise ValueError(f"parser.strict must be true or false, got {strict!r}")
        return cls(strict=strict)


DEFAULT_CONFIG = ParserConfig()


def load_config_string(s: str) -> ParserConfig:
    return ParserConfig.from_dict(yaml.safe_load(s))


def load_config(filepath: str) -> ParserConfig:
    """
    Load parser settings from a YAML file.

    Raises:
        FileNotFoundError: If the file doesn't exist
    """
    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            content = f.read()
    except FileNotFoundError:
        raise FileNotFoundError(f"Config file not found: {filepath}")

    return load_config_string(content)
