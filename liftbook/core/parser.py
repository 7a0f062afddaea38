"""
Tokenizer for Liftbook command lines.

A line looks like ``program /log benchpress /weight 60 70 /sets 2 /reps 5 8``:
the first word is the command, the first flag is the action, the text after the
action is the primary parameter and every later flag carries a list of values.
The parser never rejects input; the grammar in `liftbook.core.grammar` does.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Tuple

FLAG_SENTINEL = "/"

_TOKEN_RE = re.compile(r"\S+")


@dataclass(frozen=True)
class ParsedCommand:
    command: str
    action: str = ""
    primary_param: str = ""
    flags: Mapping[str, Tuple[str, ...]] = field(default_factory=lambda: MappingProxyType({}))
    preamble: str = ""

    def has_flag(self, name: str) -> bool:
        return name in self.flags

    def values(self, name: str) -> Tuple[str, ...]:
        return self.flags.get(name, ())

    def text(self, name: str) -> str:
        """Values of a flag joined back into free text (for multi-word names)."""
        return " ".join(self.values(name))


def _normalise(text: str) -> str:
    return " ".join(text.split())


def parse(raw_line: str) -> ParsedCommand:
    """Split a raw input line into command, action, primary parameter and flags.

    A repeated flag keeps its first position and takes its last values.
    """
    parts = raw_line.strip().split(maxsplit=1)
    if not parts:
        return ParsedCommand(command="")

    command = parts[0].lower()
    remainder = parts[1] if len(parts) > 1 else ""

    # (flag name or None for the preamble, raw text following it)
    segments: list[tuple[str | None, str]] = []
    current: str | None = None
    start = 0
    for match in _TOKEN_RE.finditer(remainder):
        token = match.group()
        if not token.startswith(FLAG_SENTINEL):
            continue
        segments.append((current, remainder[start:match.start()]))
        current = token[len(FLAG_SENTINEL):].lower()
        start = match.end()
    segments.append((current, remainder[start:]))

    preamble = _normalise(segments[0][1])
    action = ""
    primary_param = ""
    flags: dict[str, Tuple[str, ...]] = {}
    for index, (name, text) in enumerate(segments[1:]):
        if index == 0:
            action = name
            primary_param = _normalise(text)
            continue
        flags[name] = tuple(text.split())

    return ParsedCommand(
        command=command,
        action=action,
        primary_param=primary_param,
        flags=MappingProxyType(flags),
        preamble=preamble,
    )
