"""Text command grammar for the interactive shell.

Each line parses to one frozen command dataclass. Coordinates and counts are
non-negative decimal integers; anything that does not match a command
exactly becomes :class:`UnknownCommand`.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GetCommand:
    x: int
    y: int


@dataclass(frozen=True)
class SetCommand:
    x: int
    y: int
    alive: bool


@dataclass(frozen=True)
class NextCommand:
    pass


@dataclass(frozen=True)
class RunCommand:
    n: int


@dataclass(frozen=True)
class PrintCommand:
    pass


@dataclass(frozen=True)
class StatsCommand:
    pass


@dataclass(frozen=True)
class RenderCommand:
    path: Path


@dataclass(frozen=True)
class HelpCommand:
    pass


@dataclass(frozen=True)
class ExitCommand:
    pass


@dataclass(frozen=True)
class UnknownCommand:
    text: str


Command = (
    GetCommand
    | SetCommand
    | NextCommand
    | RunCommand
    | PrintCommand
    | StatsCommand
    | RenderCommand
    | HelpCommand
    | ExitCommand
    | UnknownCommand
)

_GET_RE = re.compile(r"get ([0-9]+) ([0-9]+)")
_SET_RE = re.compile(r"set ([0-9]+) ([0-9]+) (true|false)")
_RUN_RE = re.compile(r"run ([0-9]+)")
_RENDER_RE = re.compile(r"render (\S.*)")

_KEYWORDS: dict[str, Command] = {
    "next": NextCommand(),
    "print": PrintCommand(),
    "stats": StatsCommand(),
    "help": HelpCommand(),
    "exit": ExitCommand(),
}


def parse_command(line: str) -> Command:
    """Parse one input line into a command."""
    text = line.strip()
    if text in _KEYWORDS:
        return _KEYWORDS[text]
    match = _GET_RE.fullmatch(text)
    if match is not None:
        return GetCommand(x=int(match[1]), y=int(match[2]))
    match = _SET_RE.fullmatch(text)
    if match is not None:
        return SetCommand(x=int(match[1]), y=int(match[2]), alive=match[3] == "true")
    match = _RUN_RE.fullmatch(text)
    if match is not None:
        return RunCommand(n=int(match[1]))
    match = _RENDER_RE.fullmatch(text)
    if match is not None:
        return RenderCommand(path=Path(match[1].strip()))
    return UnknownCommand(text=text)
