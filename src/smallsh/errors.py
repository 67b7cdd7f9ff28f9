"""Application-level exception types for smallsh."""

from __future__ import annotations


class ShellError(Exception):
    """Base exception for errors reported to the user without leaving the shell."""


class TooManyWordsError(ShellError):
    """Raised when a line holds more words than the configured limit."""

    def __init__(self, limit: int) -> None:
        super().__init__(f"too many words (limit {limit})")
        self.limit = limit


class ParseError(ShellError):
    """Raised when a command line cannot be turned into a command request."""


class BuiltinError(ShellError):
    """Raised when a builtin is used incorrectly."""

    def __init__(self, builtin: str, message: str) -> None:
        super().__init__(f"{builtin}: {message}")
        self.builtin = builtin


class SpawnError(ShellError):
    """Raised when a child process cannot be created."""


class PromptInterrupted(Exception):
    """Raised by the interrupt handler while the shell is waiting for input."""
