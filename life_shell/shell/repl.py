"""Read-eval-print loop that owns the current board."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TextIO

from life_shell.config.types import ShellConfig
from life_shell.domain.board import Board
from life_shell.io.paths import resolve_within_base
from life_shell.shell.commands import (
    Command,
    ExitCommand,
    GetCommand,
    HelpCommand,
    NextCommand,
    PrintCommand,
    RenderCommand,
    RunCommand,
    SetCommand,
    StatsCommand,
    UnknownCommand,
    parse_command,
)
from life_shell.shell.console import (
    HELP_TEXT,
    format_bool,
    format_stats,
    format_unknown,
    render_board,
)
from life_shell.simulation.engine import (
    GenerationRecord,
    iter_generations,
    record_generation,
    run,
)
from life_shell.simulation.persistence import write_generation_log
from life_shell.viz.render import render_board_image

logger = logging.getLogger(__name__)

FAREWELL = "Bye!"


class Shell:
    """Interactive session: applies parsed commands to the board it owns.

    When ``config.generation_log`` is set, every generation reached through
    ``next`` or ``run`` is recorded, together with the state each advance
    started from, and written to Parquet by :meth:`close`.
    """

    def __init__(self, config: ShellConfig | None = None, board: Board | None = None) -> None:
        self.config = config if config is not None else ShellConfig()
        if board is None:
            board = Board.create(self.config.board.width, self.config.board.height)
        self.board = board
        self.generation = 0
        self.finished = False
        self.records: list[GenerationRecord] = []

    @property
    def logging_generations(self) -> bool:
        return self.config.generation_log is not None

    def execute(self, command: Command) -> str | None:
        """Apply *command* and return the text to show, if any."""
        if isinstance(command, SetCommand):
            self.board = self.board.set(command.x, command.y, command.alive)
            return render_board(self.board)
        if isinstance(command, GetCommand):
            return format_bool(self.board.get(command.x, command.y))
        if isinstance(command, NextCommand):
            self._advance(1)
            return render_board(self.board)
        if isinstance(command, RunCommand):
            self._advance(command.n)
            return render_board(self.board)
        if isinstance(command, PrintCommand):
            return render_board(self.board)
        if isinstance(command, StatsCommand):
            return format_stats(record_generation(self.board, self.generation))
        if isinstance(command, RenderCommand):
            path = render_board_image(
                self.board,
                command.path,
                title=f"Generation {self.generation}",
                base_dir=self.config.base_dir,
                theme=self.config.theme,
            )
            return f"Saved {path}"
        if isinstance(command, HelpCommand):
            return HELP_TEXT
        if isinstance(command, ExitCommand):
            self.finished = True
            return None
        if isinstance(command, UnknownCommand):
            logger.debug("Unknown command: %r", command.text)
            return format_unknown(command.text)
        raise TypeError(f"Unsupported command: {command!r}")

    def _advance(self, n: int) -> None:
        if not self.logging_generations:
            self.board = run(self.board, n, self.config.update_mode)
            self.generation += n
            return
        start = record_generation(self.board, self.generation)
        if self.records and self.records[-1].generation == self.generation:
            self.records[-1] = start
        else:
            self.records.append(start)
        for board in iter_generations(self.board, n, self.config.update_mode):
            self.board = board
            self.generation += 1
            self.records.append(record_generation(board, self.generation))

    def close(self) -> Path | None:
        """Write the generation log, if one is configured and anything was recorded."""
        if self.config.generation_log is None or not self.records:
            return None
        path = resolve_within_base(self.config.generation_log, self.config.base_dir)
        return write_generation_log(self.records, path)

    def loop(self, stdin: TextIO, stdout: TextIO) -> Board:
        """Prompt, read and execute commands until ``exit`` or end of input."""
        try:
            while not self.finished:
                stdout.write(self.config.prompt)
                stdout.flush()
                line = stdin.readline()
                if not line:
                    break
                try:
                    output = self.execute(parse_command(line))
                except (ValueError, OSError) as exc:
                    logger.warning("Command %r failed: %s", line.strip(), exc)
                    output = f"error: {exc}"
                if output is not None:
                    print(output, file=stdout)
        finally:
            self.close()
        print(FAREWELL, file=stdout)
        return self.board
