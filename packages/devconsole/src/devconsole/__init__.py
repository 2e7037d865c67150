"""
Developer Console

An embedded console that accepts short text commands, dispatches them to
registered handlers, and reads or writes cvars.

Key concepts:
- CommandRegistry: named commands with a minimum argument count
- LogBuffer: console output and newest-first command history
- ExecutionEngine: resolves a line to a command, then a cvar
- CVarBridge: typed conversion between console tokens and cvar values

Usage:
    from cvars import CVarRegistry, CVarType
    from devconsole import create_console

    cvars = CVarRegistry()
    cvars.define("r_vsync", CVarType.BOOLEAN, True)

    console = create_console(cvars)
    console.execute("r_vsync 0")
    console.last_log_line()  # '"r_vsync" = "false"\\n'
"""

from .errors import ConsoleError, DuplicateCommandError
from .events import ConsoleEvent, ConsoleTopic, EventBus, Subscription
from .tokenizer import Tokenizer, tokenize
from .registry import CommandHandler, CommandRegistry, ConsoleCommand
from .log import LogBuffer
from .bridge import (
    CVarBridge,
    RegistryCVarBridge,
    convert_value,
    format_value,
    parse_bool,
    parse_float,
    parse_int,
)
from .engine import MISSING_ARGUMENTS, ExecutionEngine
from .console import Console, create_console
from .builtins import register_builtin_commands
from .config import ConsoleConfig, configure_logging

__all__ = [
    "ConsoleError",
    "DuplicateCommandError",
    "ConsoleEvent",
    "ConsoleTopic",
    "EventBus",
    "Subscription",
    "Tokenizer",
    "tokenize",
    "CommandHandler",
    "CommandRegistry",
    "ConsoleCommand",
    "LogBuffer",
    "CVarBridge",
    "RegistryCVarBridge",
    "convert_value",
    "format_value",
    "parse_bool",
    "parse_float",
    "parse_int",
    "MISSING_ARGUMENTS",
    "ExecutionEngine",
    "Console",
    "create_console",
    "register_builtin_commands",
    "ConsoleConfig",
    "configure_logging",
]
