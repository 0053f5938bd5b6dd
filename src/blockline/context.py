"""
Runtime context that statements substitute from and write into.

The executor depends only on the RuntimeContext interface:
    substitute(raw) -> str
    set(name, value, is_capture)
    log(message)

VariableContext is the in-memory implementation. Values are strings or
lists of strings, kept in two partitions: ordinary variables and
captures.

Substitution syntax:
    <NAME>       value of NAME (a list renders as "[a, b]")
    <NAME[i]>    i-th element of list NAME, negative i counts from the end

References to unknown names or out-of-range indices are left as written.
"""

import logging
import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional, Union

logger = logging.getLogger(__name__)

Value = Union[str, List[str]]

_REFERENCE_RE = re.compile(r"<([^<>\[\]\s]+)(?:\[(-?\d+)\])?>")


class RuntimeContext(ABC):
    """Interface the executor runs statements against."""

    @abstractmethod
    def substitute(self, raw: str) -> str:
        ...

    @abstractmethod
    def set(self, name: str, value: Value, is_capture: bool) -> None:
        ...

    @abstractmethod
    def log(self, message: str) -> None:
        ...


class VariableContext(RuntimeContext):
    """
    Dictionary-backed runtime context.

    Properties:
        variables: Ordinary variables
        captures: Variables flagged as captures
        log_buffer: Messages passed to log(), in order
        logging_enabled: When False, log() records nothing
    """

    def __init__(self, variables: Optional[Dict[str, Value]] = None,
                 captures: Optional[Dict[str, Value]] = None,
                 logging_enabled: bool = True):
        self.variables: Dict[str, Value] = dict(variables or {})
        self.captures: Dict[str, Value] = dict(captures or {})
        self.log_buffer: List[str] = []
        self.logging_enabled = logging_enabled

    def get(self, name: str) -> Optional[Value]:
        if name in self.variables:
            return self.variables[name]
        return self.captures.get(name)

    def _replace(self, match: "re.Match") -> str:
        value = self.get(match.group(1))
        if value is None:
            return match.group(0)

        index = match.group(2)
        if index is None:
            if isinstance(value, list):
                return "[" + ", ".join(value) + "]"
            return value

        if not isinstance(value, list):
            return match.group(0)
        try:
            return value[int(index)]
        except IndexError:
            return match.group(0)

    def substitute(self, raw: str) -> str:
        return _REFERENCE_RE.sub(self._replace, raw)

    def set(self, name: str, value: Value, is_capture: bool = False) -> None:
        """Store value under name, replacing it in either partition."""
        target, other = (self.captures, self.variables) if is_capture else (self.variables, self.captures)
        other.pop(name, None)
        target[name] = value

    def log(self, message: str) -> None:
        if not self.logging_enabled:
            return
        self.log_buffer.append(message)
        logger.info(message)
