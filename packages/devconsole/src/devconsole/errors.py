"""Console error types."""


class ConsoleError(Exception):
    """Base error for the console core."""

    pass


class DuplicateCommandError(ConsoleError, ValueError):
    """A command with the same name is already registered."""

    pass
