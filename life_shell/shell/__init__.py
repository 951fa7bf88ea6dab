"""Interactive text shell: command grammar, console output and the REPL."""

from life_shell.shell.commands import Command, parse_command
from life_shell.shell.console import HELP_TEXT, render_board
from life_shell.shell.repl import Shell

__all__ = [
    "Command",
    "HELP_TEXT",
    "Shell",
    "parse_command",
    "render_board",
]
