"""
Execution engine tests.

Tests line resolution: commands first, then cvars, then unknown.
"""

import logging

import pytest

from cvars import CVarRegistry
from devconsole import (
    MISSING_ARGUMENTS,
    CommandRegistry,
    ConsoleCommand,
    ConsoleTopic,
    ExecutionEngine,
    LogBuffer,
    RegistryCVarBridge,
    create_console,
)


class TestEmptyInput:
    """Test that empty lines are ignored."""

    def test_empty_line_changes_nothing(self, console, recorder):
        """Executing "" leaves log, history and notifications untouched."""
        console.execute("")

        assert console.dump_log() == ""
        assert console.log.history_count() == 0
        assert recorder.events == []
        assert console.bus.event_count(ConsoleTopic.EXECUTE) == 0

    def test_whitespace_line_is_not_empty(self, console, recorder):
        """A line of spaces is recorded and reported as an unknown command."""
        console.execute("   ")

        assert console.last_command() == "   "
        assert console.last_log_line() == 'Unknown command: ""\n'
        assert recorder.count(ConsoleTopic.EXECUTE) == 1


class TestCommandExecution:
    """Test dispatch to registered commands."""

    def test_echo(self, console):
        """echo appends exactly its first argument."""
        console.execute("echo hello")

        assert console.log.lines() == ["hello\n"]

    def test_echo_quoted(self, console):
        """Quoted arguments arrive as one token."""
        console.execute('echo "hello world" ignored')

        assert console.last_log_line() == "hello world\n"

    def test_missing_arguments(self, console):
        """Handler is not called when too few arguments are given."""
        calls = []
        console.add_command("needsone", lambda args: calls.append(args), min_args=1)

        console.execute("needsone")

        assert calls == []
        assert console.dump_log() == MISSING_ARGUMENTS + "\n"

    def test_handler_receives_all_arguments(self, console):
        """Extra arguments are passed through to the handler."""
        calls = []
        console.add_command("grab", lambda args: calls.append(args), min_args=1)

        console.execute("grab a b c")

        assert calls == [["a", "b", "c"]]

    def test_lookup_is_case_sensitive(self, console):
        """ECHO is not echo."""
        console.execute("ECHO hi")

        assert console.last_log_line() == 'Unknown command: "ECHO"\n'

    def test_command_shadows_cvar(self, console):
        """A command whose name is also a cvar runs as the command only."""
        calls = []
        console.add_command("n", lambda args: calls.append(args))

        console.execute("n 42")

        assert calls == [["42"]]
        assert console.bridge.lookup("n").get() == 0
        assert console.dump_log() == ""

    def test_handler_exception_is_reported(self, console, caplog):
        """A failing handler becomes a log line, not an exception."""

        def boom(args):
            raise RuntimeError("kaboom")

        console.add_command("boom", boom)

        with caplog.at_level(logging.ERROR):
            console.execute("boom")

        assert console.last_log_line() == "Error executing command: kaboom\n"
        assert "kaboom" in caplog.text


class TestCVarResolution:
    """Test implicit get/set of cvars."""

    def test_boolean_set_true(self, console):
        console.execute("v 1")

        assert console.bridge.lookup("v").get() is True
        assert console.last_log_line() == '"v" = "true"\n'

    def test_boolean_set_false(self, console):
        console.execute("v 1")
        console.execute("v false")

        assert console.bridge.lookup("v").get() is False
        assert console.last_log_line() == '"v" = "false"\n'

    @pytest.mark.parametrize(
        "token,expected",
        [("0", False), ("false", False), ("False", True), ("no", True), ("yes", True)],
    )
    def test_boolean_tokens(self, console, token, expected):
        """Only "0" and "false" are false."""
        console.execute(f"v {token}")

        assert console.bridge.lookup("v").get() is expected

    def test_integer_set(self, console):
        console.execute("n 42")

        assert console.bridge.lookup("n").get() == 42
        assert console.last_log_line() == '"n" = "42"\n'

    def test_integer_unparsable_is_zero(self, console):
        console.execute("n 7")
        console.execute("n abc")

        assert console.bridge.lookup("n").get() == 0
        assert console.last_log_line() == '"n" = "0"\n'

    def test_float_formatting(self, console):
        console.execute("f 2.5")

        assert console.last_log_line() == '"f" = "2.5000"\n'

    def test_string_set_verbatim(self, console):
        console.execute('s "two words"')

        assert console.last_log_line() == '"s" = "two words"\n'

    def test_get_without_arguments(self, console):
        """A bare cvar name prints the value without changing it."""
        console.execute("f")

        assert console.bridge.lookup("f").get() == 1.5
        assert console.last_log_line() == '"f" = "1.5000"\n'

    def test_only_first_argument_used(self, console):
        console.execute("n 1 2 3")

        assert console.bridge.lookup("n").get() == 1
        assert console.log.line_count() == 1


class TestUnknownCommand:
    """Test names that are neither commands nor cvars."""

    def test_unknown_command(self, console):
        console.execute("madeupcmd")

        assert console.dump_log() == 'Unknown command: "madeupcmd"\n'

    def test_no_bridge(self):
        """Without a cvar bridge every unmatched name is unknown."""
        engine = ExecutionEngine(CommandRegistry(), LogBuffer())

        engine.execute("n 1")

        assert engine._log.last_line() == 'Unknown command: "n"\n'


class TestHistoryAndNotifications:
    """Test history recording and announcements."""

    def test_history_most_recent_first(self, console):
        console.execute("a")
        console.execute("b")

        assert console.last_command() == "b"
        assert console.prev_command(1) == "a"

    def test_execute_announced_before_resolution(self, console):
        """console_execute fires before the command's own output."""
        order = []
        console.bus.subscribe(lambda e: order.append(e.topic))

        console.execute("echo hi")

        assert order == [ConsoleTopic.EXECUTE, ConsoleTopic.LOG_MESSAGE]

    def test_one_log_notification_per_line(self, console, recorder):
        console.execute("cmdlist")

        assert recorder.count(ConsoleTopic.LOG_MESSAGE) == console.log.line_count()
        assert recorder.count(ConsoleTopic.EXECUTE) == 1

    def test_audit_log(self, console, caplog):
        """Raw input is echoed to Python logging, not the console log."""
        with caplog.at_level(logging.INFO, logger="devconsole.engine"):
            console.execute("madeupcmd")

        assert "> madeupcmd" in caplog.text
        assert "> madeupcmd" not in console.dump_log()


class TestCustomTokenizer:
    """Test that the tokenizer is pluggable."""

    def test_comma_tokenizer(self):
        registry = CVarRegistry()
        engine_log = LogBuffer()
        commands = CommandRegistry()
        seen = []
        commands.register(ConsoleCommand("cmd", lambda args: seen.append(args)))
        engine = ExecutionEngine(
            commands,
            engine_log,
            bridge=RegistryCVarBridge(registry),
            tokenizer=lambda line: line.split(","),
        )

        engine.execute("cmd,a b,c")

        assert seen == [["a b", "c"]]

    def test_create_console_without_cvars(self):
        console = create_console()

        console.execute("cvarlist")

        assert console.dump_log() == "0 CVars:\n"
