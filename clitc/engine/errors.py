from __future__ import annotations


class ClitcError(Exception):
    """Base class for every failure raised by the parameter engine."""


class SchemaError(ClitcError, ValueError):
    """Raised when a parameter schema cannot be built."""


class MissingInformationError(SchemaError):
    """Raised when a required schema field is absent."""

    def __init__(self, message: str = "Necessary information for Param missing!") -> None:
        super().__init__(message)


class WrongFormatError(SchemaError):
    """Raised when a schema field is present but malformed."""

    def __init__(self, message: str = "Wrong format for params!") -> None:
        super().__init__(message)


class DispatchError(ClitcError, RuntimeError):
    """Raised when a command line cannot be routed to a handler."""


class UnknownCommandError(DispatchError):
    def __init__(self, message: str = "Could not find a known command in the statement.") -> None:
        super().__init__(message)


class CommandModeError(DispatchError):
    def __init__(self, commands: list[str] | None = None) -> None:
        self.commands = list(commands or [])
        message = "Multiple commands entered, but single command mode configured!"
        if self.commands:
            message = f"{message} ({', '.join(self.commands)})"
        super().__init__(message)


class NoEventError(DispatchError):
    def __init__(self, command: str) -> None:
        self.command = command
        super().__init__(f"No event attached to command '{command}'.")
