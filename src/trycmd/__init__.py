"""
trycmd - Run a command until it succeeds.

Re-executes a child command, pausing between failed attempts according
to a constant, linear or quadratic ("exponential") backoff.
"""

from .exceptions import (
    TryError,
    UsageError,
    ProcessStartError,
    UnsupportedStrategyError,
)
from .retry import (
    RetryConfig,
    BackoffStrategy,
    ScheduleRow,
    calculate_backoff,
    example_schedule,
)
from .runner import CommandRunner, RunResult

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Runner
    "CommandRunner",
    "RunResult",
    # Exceptions
    "TryError",
    "UsageError",
    "ProcessStartError",
    "UnsupportedStrategyError",
    # Retry
    "RetryConfig",
    "BackoffStrategy",
    "ScheduleRow",
    "calculate_backoff",
    "example_schedule",
]
