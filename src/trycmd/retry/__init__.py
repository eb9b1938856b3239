"""
trycmd - Backoff policy.

Fixed backoff strategies selectable from the command line.
"""

from .config import RetryConfig, BackoffStrategy
from .backoff import ScheduleRow, calculate_backoff, example_schedule

__all__ = [
    "RetryConfig",
    "BackoffStrategy",
    "ScheduleRow",
    "calculate_backoff",
    "example_schedule",
]
