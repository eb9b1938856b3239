"""
trycmd - Exception Hierarchy.
"""

from .base import (
    TryError,
    UsageError,
    ProcessStartError,
    UnsupportedStrategyError,
)

__all__ = [
    "TryError",
    "UsageError",
    "ProcessStartError",
    "UnsupportedStrategyError",
]
