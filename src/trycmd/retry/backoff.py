"""
Backoff calculation and example schedules.
"""

from dataclasses import dataclass
from typing import Iterator

from .config import BackoffStrategy
from ..exceptions import UnsupportedStrategyError

BASE_DELAY = 2.0


@dataclass(frozen=True)
class ScheduleRow:
    """One attempt of an example schedule, in seconds."""

    attempt: int
    waited: float
    pause: float


def calculate_backoff(strategy: BackoffStrategy, attempt: int) -> float:
    """
    Calculate the pause after a failed attempt.

    Args:
        strategy: Backoff strategy
        attempt: One-based number of the attempt that just failed

    Returns:
        Delay in seconds

    Raises:
        ValueError: If attempt is lower than 1
        UnsupportedStrategyError: If strategy is not a BackoffStrategy
    """
    if attempt < 1:
        raise ValueError(f"attempt must be >= 1, got {attempt}")

    if strategy == BackoffStrategy.CONSTANT:
        return BASE_DELAY
    elif strategy == BackoffStrategy.LINEAR:
        return BASE_DELAY * attempt
    elif strategy == BackoffStrategy.EXPONENTIAL:
        return BASE_DELAY * attempt * attempt

    raise UnsupportedStrategyError(strategy)


def example_schedule(strategy: BackoffStrategy, retries: int = 20) -> Iterator[ScheduleRow]:
    """
    Yield the first `retries` attempts of a run that never succeeds.

    `waited` is the total pause before the attempt starts, `pause` the
    delay that follows it.
    """
    waited = 0.0
    for attempt in range(1, retries + 1):
        pause = calculate_backoff(strategy, attempt)
        yield ScheduleRow(attempt=attempt, waited=waited, pause=pause)
        waited += pause
