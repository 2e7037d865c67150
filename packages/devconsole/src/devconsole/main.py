"""
Main Entry Point

Runs a console in the terminal: loads cvars, registers the built-in
commands, then either executes the -c commands or reads lines from stdin
until EOF or 'quit'.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional

from cvars import CVarRegistry, load_definitions, load_values, save_values

from .config import ConsoleConfig, configure_logging
from .console import Console, create_console
from .events import ConsoleTopic

logger = logging.getLogger(__name__)


QUIT_COMMANDS = ("quit", "exit")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="devconsole", description="Developer console")
    parser.add_argument("--cvars", metavar="FILE", help="YAML file of cvar definitions and values")
    parser.add_argument("--log-level", metavar="LEVEL", help="Python logging level")
    parser.add_argument(
        "-c",
        "--command",
        action="append",
        default=[],
        metavar="LINE",
        help="Execute a console line and exit (repeatable)",
    )
    parser.add_argument("--save", action="store_true", help="Save cvar values on exit")
    return parser


def load_cvars(path: Optional[str]) -> CVarRegistry:
    """Create the cvar registry, populated from path if it exists."""
    registry = CVarRegistry()
    if path and Path(path).exists():
        load_definitions(path, registry)
        load_values(path, registry)
    elif path:
        logger.warning(f"CVar file not found: {path}")
    return registry


def run_repl(console: Console, prompt: str) -> None:
    """Read and execute lines from stdin until EOF or a quit command."""
    while True:
        try:
            line = input(prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            return

        if line.strip() in QUIT_COMMANDS:
            return
        console.execute(line)


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    config = ConsoleConfig.from_env()
    if args.cvars:
        config.cvar_file = args.cvars
    if args.log_level:
        config.log_level = args.log_level.upper()
    if args.save:
        config.save_on_exit = True
    configure_logging(config)

    registry = load_cvars(config.cvar_file)
    console = create_console(registry)

    # Print each log line as it is appended
    console.bus.subscribe(
        lambda event: print(console.last_log_line(), end=""),
        topics=[ConsoleTopic.LOG_MESSAGE],
    )

    if args.command:
        for line in args.command:
            console.execute(line)
    else:
        run_repl(console, config.prompt)

    if config.save_on_exit and config.cvar_file:
        save_values(config.cvar_file, registry)

    return 0


if __name__ == "__main__":
    sys.exit(main())
