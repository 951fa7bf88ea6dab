from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from life_shell.config.constants import BOARD_HEIGHT, BOARD_WIDTH
from life_shell.config.types import BoardConfig, RunConfig, ShellConfig, UpdateMode
from life_shell.domain.board import Board, Cell
from life_shell.io.paths import generation_log_path, resolve_within_base
from life_shell.shell.console import format_stats, render_board
from life_shell.shell.repl import Shell
from life_shell.simulation.engine import iter_generations, simulate
from life_shell.simulation.persistence import write_generation_log
from life_shell.viz.render import render_board_image, render_filmstrip
from life_shell.viz.theme import get_theme

logger = logging.getLogger(__name__)


def _add_board_arguments(p: argparse.ArgumentParser) -> None:
    p.add_argument("--width", type=int, default=BOARD_WIDTH)
    p.add_argument("--height", type=int, default=BOARD_HEIGHT)
    p.add_argument(
        "--update-mode",
        choices=[mode.value for mode in UpdateMode],
        default=UpdateMode.SYNCHRONOUS.value,
    )
    p.add_argument("--base-dir", type=Path, default=Path("."))
    p.add_argument(
        "--generation-log",
        type=Path,
        nargs="?",
        const=generation_log_path(Path(".")),
        default=None,
        help="Parquet statistics log inside --base-dir (default: logs/generation_log.parquet)",
    )


def _build_shell_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("shell", help="Start the interactive command loop")
    p.set_defaults(func=_handle_shell)
    _add_board_arguments(p)


def _build_simulate_parser(sub: argparse._SubParsersAction) -> None:
    p = sub.add_parser("simulate", help="Run a seeded board for a number of generations")
    p.set_defaults(func=_handle_simulate)
    _add_board_arguments(p)
    p.add_argument("--steps", type=int, required=True)
    p.add_argument(
        "--cell",
        action="append",
        default=[],
        metavar="X,Y",
        help="Living cell at X,Y (can repeat)",
    )
    p.add_argument("--stop-when-stable", action="store_true")
    p.add_argument("--image", type=Path, default=None)
    p.add_argument("--filmstrip", type=Path, default=None)
    p.add_argument("--n-frames", type=int, default=6)


def _parse_cells(raw: list[str]) -> list[Cell]:
    result = []
    for item in raw:
        parts = item.split(",")
        if len(parts) != 2 or not all(part.strip().isdigit() for part in parts):
            raise ValueError(f"Expected X,Y format with non-negative integers, got: {item}")
        result.append((int(parts[0]), int(parts[1])))
    return result


def _handle_shell(args: argparse.Namespace) -> None:
    config = ShellConfig(
        board=BoardConfig(width=args.width, height=args.height),
        update_mode=UpdateMode(args.update_mode),
        base_dir=Path(args.base_dir).resolve(),
        generation_log=args.generation_log,
        theme=get_theme(args.theme),
    )
    Shell(config).loop(sys.stdin, sys.stdout)


def _handle_simulate(args: argparse.Namespace) -> None:
    base_dir = Path(args.base_dir).resolve()
    board_config = BoardConfig(width=args.width, height=args.height)
    board = Board.from_cells(board_config.width, board_config.height, _parse_cells(args.cell))
    run_config = RunConfig(
        steps=args.steps,
        update_mode=UpdateMode(args.update_mode),
        stop_when_stable=args.stop_when_stable,
    )
    result = simulate(board, run_config)
    logger.info(
        "Simulated %d generations from %d living cells", result.generations_run, board.population
    )

    print(render_board(result.board))
    print(format_stats(result.records[-1]))
    if result.termination_reason is not None:
        print(f"stable: {result.termination_reason.value} at generation {result.terminated_at}")

    theme = get_theme(args.theme)
    if args.generation_log is not None:
        write_generation_log(
            result.records, resolve_within_base(args.generation_log, base_dir)
        )
    if args.image is not None:
        render_board_image(
            result.board,
            args.image,
            title=f"Generation {result.generations_run}",
            base_dir=base_dir,
            theme=theme,
        )
    if args.filmstrip is not None:
        boards = [board, *iter_generations(board, result.generations_run, run_config.update_mode)]
        render_filmstrip(
            boards, args.filmstrip, n_frames=args.n_frames, base_dir=base_dir, theme=theme
        )


def main() -> None:
    """CLI entrypoint with subcommands."""
    parser = argparse.ArgumentParser(description="Conway's Game of Life on a bounded board")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    parser.add_argument(
        "--theme",
        type=str,
        default="default",
        help="Theme preset name for image output (default, dark)",
    )
    sub = parser.add_subparsers(dest="command", required=True)
    _build_shell_parser(sub)
    _build_simulate_parser(sub)
    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
