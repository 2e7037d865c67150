"""Built-in console commands."""

from typing import List

from .console import Console


def register_builtin_commands(console: Console) -> int:
    """
    Register echo, cmdlist, cvarlist and help on a console.

    Returns the number of commands registered.
    """
    before = console.num_commands()

    @console.command(
        "echo",
        min_args=1,
        help_text="Print the first argument to the console. Other arguments are ignored.",
        usage="echo <text>",
    )
    def cmd_echo(args: List[str]) -> None:
        console.log_message(args[0])

    @console.command("cmdlist", help_text="List all valid console commands.")
    def cmd_cmdlist(args: List[str]) -> None:
        console.log_message(f"{console.num_commands()} Valid Commands:")
        for cmd in console.commands:
            console.log_message(f'"{cmd.name}"')

    @console.command("cvarlist", help_text="List all cvars.")
    def cmd_cvarlist(args: List[str]) -> None:
        names = sorted(console.cvar_names())
        console.log_message(f"{len(names)} CVars:")
        for name in names:
            console.log_message(name)

    @console.command(
        "help",
        help_text="Show usage for a command.",
        usage="help [command]",
    )
    def cmd_help(args: List[str]) -> None:
        if not args:
            console.log_message("Type 'cmdlist' for commands, 'cvarlist' for cvars.")
            console.log_message("Type 'help <command>' for details on a specific command.")
            return

        cmd = console.commands.get(args[0])
        if cmd is None:
            console.log_message(f"No help available for: {args[0]}")
            return

        console.log_message(f"Usage: {cmd.usage}")
        if cmd.help_text:
            console.log_message(cmd.help_text)

    return console.num_commands() - before
