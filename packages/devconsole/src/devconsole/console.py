"""
Console

The developer console instance. One is built at startup with
create_console() and passed to every subsystem that registers commands
or writes to the log.
"""

import logging
from typing import List, Optional

from cvars import CVarRegistry

from .bridge import CVarBridge, RegistryCVarBridge
from .engine import ExecutionEngine
from .events import EventBus
from .log import LogBuffer
from .registry import CommandHandler, CommandRegistry, ConsoleCommand
from .tokenizer import Tokenizer, tokenize


logger = logging.getLogger(__name__)


class Console:
    """
    Embedded developer console.

    Composes the command registry, log buffer, cvar bridge and execution
    engine. All methods run synchronously on the caller's thread.
    """

    def __init__(
        self,
        bridge: Optional[CVarBridge] = None,
        bus: Optional[EventBus] = None,
        tokenizer: Tokenizer = tokenize,
    ):
        self.bus = bus or EventBus()
        self.bridge = bridge
        self.commands = CommandRegistry()
        self.log = LogBuffer(self.bus)
        self._engine = ExecutionEngine(
            self.commands,
            self.log,
            bridge=bridge,
            bus=self.bus,
            tokenizer=tokenizer,
        )

    # Commands

    def add_command(
        self,
        name: str,
        handler: CommandHandler,
        min_args: int = 0,
        help_text: str = "",
        usage: str = "",
    ) -> ConsoleCommand:
        """Register a command handler under name."""
        return self.commands.register(
            ConsoleCommand(
                name=name,
                handler=handler,
                min_args=min_args,
                help_text=help_text or handler.__doc__ or "",
                usage=usage or name,
            )
        )

    def command(self, name: str, min_args: int = 0, help_text: str = "", usage: str = ""):
        """Decorator form of add_command()."""
        return self.commands.command(name, min_args=min_args, help_text=help_text, usage=usage)

    def num_commands(self) -> int:
        return self.commands.count()

    def command_at(self, index: int) -> ConsoleCommand:
        return self.commands.at(index)

    # Execution

    def execute(self, line: str) -> None:
        self._engine.execute(line)

    # Log

    def log_message(self, message: str) -> None:
        self.log.append(message)

    def last_log_line(self) -> str:
        return self.log.last_line()

    def last_command(self) -> str:
        return self.log.last_command()

    def prev_command(self, index: int) -> str:
        return self.log.history_at(index)

    def dump_log(self) -> str:
        return self.log.dump_all()

    def cvar_names(self) -> List[str]:
        if self.bridge is None:
            return []
        return self.bridge.names()


def create_console(
    cvar_registry: Optional[CVarRegistry] = None,
    bus: Optional[EventBus] = None,
    register_builtins: bool = True,
) -> Console:
    """
    Build a console bound to a cvar registry.

    Built-in commands are registered unless register_builtins is False.
    """
    from .builtins import register_builtin_commands

    bridge = RegistryCVarBridge(cvar_registry) if cvar_registry is not None else None
    console = Console(bridge=bridge, bus=bus)

    if register_builtins:
        count = register_builtin_commands(console)
        logger.debug(f"Registered {count} built-in commands")

    return console
