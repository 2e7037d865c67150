"""
Execution Engine

Resolves a raw console line against the command registry, then the cvar
bridge, and reports the outcome to the console log.

Nothing raised while handling a line escapes execute(): every failure is
turned into a log line.
"""

import logging
from typing import List, Optional

from .bridge import CVarBridge
from .events import ConsoleTopic, EventBus
from .log import LogBuffer
from .registry import CommandRegistry, ConsoleCommand
from .tokenizer import Tokenizer, tokenize


logger = logging.getLogger(__name__)


MISSING_ARGUMENTS = "Missing command arguments"


class ExecutionEngine:
    """Executes console lines."""

    def __init__(
        self,
        registry: CommandRegistry,
        log: LogBuffer,
        bridge: Optional[CVarBridge] = None,
        bus: Optional[EventBus] = None,
        tokenizer: Tokenizer = tokenize,
    ):
        self._registry = registry
        self._log = log
        self._bridge = bridge
        self._bus = bus
        self._tokenizer = tokenizer

    def execute(self, raw_line: str) -> None:
        """Execute one console line."""
        logger.info(f"> {raw_line}")

        if len(raw_line) == 0:
            return

        self._log.add_command(raw_line)

        if self._bus is not None:
            self._bus.publish(ConsoleTopic.EXECUTE)

        try:
            tokens = self._tokenizer(raw_line)
        except Exception as e:
            logger.error(f"Error tokenizing {raw_line!r}: {e}")
            self._log.append(f"Error parsing command: {e}")
            return

        name = tokens[0] if tokens else ""
        args = tokens[1:]

        cmd = self._registry.get(name)
        if cmd is not None:
            self.invoke(cmd, args)
            return

        if self._resolve_cvar(name, args):
            return

        self._log.append(f'Unknown command: "{name}"')

    def invoke(self, cmd: ConsoleCommand, args: List[str]) -> None:
        """Run a command if enough arguments were given."""
        if len(args) < cmd.min_args:
            self._log.append(MISSING_ARGUMENTS)
            return

        try:
            cmd.handler(args)
        except Exception as e:
            logger.error(f"Error executing command {cmd.name}: {e}")
            self._log.append(f"Error executing command: {e}")

    def _resolve_cvar(self, name: str, args: List[str]) -> bool:
        """
        Treat name as a cvar: set it from args[0] if given, then print it.

        Returns False if no such cvar exists.
        """
        if self._bridge is None:
            return False

        cvar = self._bridge.lookup(name)
        if cvar is None:
            return False

        if args:
            try:
                self._bridge.set_from_string(cvar, args[0])
            except Exception as e:
                logger.error(f"Error setting cvar {name}: {e}")
                self._log.append(f'Error setting "{name}": {e}')

        self._log.append(f'"{name}" = "{self._bridge.format(cvar)}"')
        return True
