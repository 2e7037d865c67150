"""
Command Registry

Holds every console command, kept sorted by name so listings read nicely.
Commands can be registered directly or with the registry's decorator.
"""

import bisect
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Iterator, List, Optional

from .errors import DuplicateCommandError


logger = logging.getLogger(__name__)


CommandHandler = Callable[[List[str]], None]


@dataclass(frozen=True)
class ConsoleCommand:
    """Definition of a console command."""

    name: str
    handler: CommandHandler
    min_args: int = 0
    help_text: str = ""
    usage: str = ""

    def __post_init__(self):
        if not self.name:
            raise ValueError("ConsoleCommand requires a name")
        if self.min_args < 0:
            raise ValueError(f"min_args must be >= 0, got {self.min_args}")


class CommandRegistry:
    """
    Registry of console commands.

    Lookup is by exact, case-sensitive name. Enumeration (at/iteration)
    is in name order.
    """

    def __init__(self):
        self._commands: List[ConsoleCommand] = []
        self._by_name = {}
        self._lock = threading.RLock()

    def register(self, definition: ConsoleCommand) -> ConsoleCommand:
        """Register a command. Duplicate names are rejected."""
        with self._lock:
            if definition.name in self._by_name:
                raise DuplicateCommandError(
                    f"Command already registered: {definition.name}"
                )
            self._by_name[definition.name] = definition
            names = [cmd.name for cmd in self._commands]
            self._commands.insert(bisect.bisect(names, definition.name), definition)

        logger.debug(f"Registered command: {definition.name}")
        return definition

    def command(
        self,
        name: str,
        min_args: int = 0,
        help_text: str = "",
        usage: str = "",
    ):
        """
        Decorator to register a command handler.

        Usage:
            @registry.command("echo", min_args=1)
            def cmd_echo(args: List[str]) -> None:
                console.log_message(args[0])
        """

        def decorator(func: CommandHandler) -> CommandHandler:
            self.register(
                ConsoleCommand(
                    name=name,
                    handler=func,
                    min_args=min_args,
                    help_text=help_text or func.__doc__ or "",
                    usage=usage or name,
                )
            )
            return func

        return decorator

    def get(self, name: str) -> Optional[ConsoleCommand]:
        """Get a command by exact name."""
        with self._lock:
            return self._by_name.get(name)

    def count(self) -> int:
        with self._lock:
            return len(self._commands)

    def at(self, index: int) -> ConsoleCommand:
        """
        Get the command at a position in name order.

        Raises IndexError for any index outside 0..count()-1.
        """
        with self._lock:
            if index < 0 or index >= len(self._commands):
                raise IndexError(
                    f"Command index {index} out of range (0..{len(self._commands) - 1})"
                )
            return self._commands[index]

    def names(self) -> List[str]:
        """All command names, sorted."""
        with self._lock:
            return [cmd.name for cmd in self._commands]

    def __len__(self) -> int:
        return self.count()

    def __contains__(self, name: object) -> bool:
        with self._lock:
            return name in self._by_name

    def __iter__(self) -> Iterator[ConsoleCommand]:
        with self._lock:
            return iter(list(self._commands))
