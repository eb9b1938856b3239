"""
Retry loop for a supervised child command.

Runs the command with inherited standard streams, waits for it, and
starts it again after a backoff pause until it exits successfully.
"""

import logging
import subprocess
import time
from dataclasses import dataclass
from datetime import timedelta
from typing import Callable, Sequence

import humanize

from .exceptions import ProcessStartError
from .retry import RetryConfig, calculate_backoff

logger = logging.getLogger(__name__)


def format_duration(seconds: float) -> str:
    """Human phrasing of a duration, e.g. '1 minute and 4 seconds'."""
    return humanize.precisedelta(timedelta(seconds=seconds), minimum_unit="seconds", format="%0.1f")


def plural_attempts(count: int) -> str:
    return f"{count} attempt" if count == 1 else f"{count} attempts"


@dataclass(frozen=True)
class RunResult:
    """Outcome of a run that ended in success."""

    attempts: int
    elapsed: float
    last_duration: float


class CommandRunner:
    """
    Re-executes a command until it succeeds.

    Features:
    - One child at a time, standard streams inherited
    - Fixed backoff strategy between failures
    - No attempt limit; only external termination stops a failing run
    """

    def __init__(
        self,
        config: RetryConfig,
        launcher: Callable[[list[str]], subprocess.Popen] | None = None,
        sleep: Callable[[float], None] | None = None,
        clock: Callable[[], float] | None = None,
    ):
        """
        Initialize the runner.

        Args:
            config: Strategy and command to run
            launcher: Starts the child from an argument list (default: subprocess.Popen)
            sleep: Blocking pause in seconds (default: time.sleep)
            clock: Monotonic clock in seconds (default: time.monotonic)
        """
        if not config.command:
            raise ValueError("command must not be empty")
        self.config = config
        self._launch = launcher or subprocess.Popen
        self._sleep = sleep or time.sleep
        self._clock = clock or time.monotonic

    def _execute(self, command: Sequence[str]) -> int:
        """Start the child and block until it exits. Returns its exit status."""
        try:
            process = self._launch(list(command))
        except OSError as e:
            raise ProcessStartError(command, e) from e
        return process.wait()

    def run(self) -> RunResult:
        """
        Run the command until it exits with status 0.

        Returns:
            Summary of the successful run

        Raises:
            ProcessStartError: If the child could not be started
        """
        attempts = 0
        first_start = self._clock()

        while True:
            attempts += 1
            last_start = self._clock()

            exit_code = self._execute(self.config.command)
            if exit_code == 0:
                break

            pause = calculate_backoff(self.config.strategy, attempts)
            logger.info(
                f"[try] Command failed after {plural_attempts(attempts)} "
                f"(exit status {exit_code}, started trying "
                f"{format_duration(self._clock() - first_start)} ago), "
                f"trying again in {format_duration(pause)}..."
            )
            self._sleep(pause)

        now = self._clock()
        result = RunResult(
            attempts=attempts,
            elapsed=now - first_start,
            last_duration=now - last_start,
        )
        logger.info(
            f"[try] Command succeeded after {plural_attempts(attempts)} "
            f"(took {format_duration(result.last_duration)}, started trying "
            f"{format_duration(result.elapsed)} ago)"
        )
        return result
