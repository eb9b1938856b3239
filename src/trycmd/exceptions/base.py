"""
Base exception classes for supervised runs.

A child process exiting with a failure status is never an exception;
only conditions that end the run are raised.
"""

from typing import Sequence


class TryError(Exception):
    """Base exception for all trycmd errors."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class UsageError(TryError):
    """Raised when the command line cannot be resolved."""

    def __init__(self, message: str = "Invalid usage"):
        super().__init__(message)


class ProcessStartError(TryError):
    """Raised when the child process cannot be started at all."""

    def __init__(self, command: Sequence[str], cause: OSError):
        program = command[0] if command else ""
        super().__init__(f"Failed to start {program}: {cause.strerror or cause}")
        self.command = tuple(command)
        self.cause = cause


class UnsupportedStrategyError(TryError):
    """Raised for a backoff strategy outside the known set. Internal defect."""

    def __init__(self, strategy: object):
        super().__init__(f"Unsupported backoff strategy: {strategy!r}")
        self.strategy = strategy
