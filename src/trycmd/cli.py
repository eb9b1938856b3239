"""
Command line entry point.

    try [strategy] [command] [arg]...
"""

import logging
import sys
from typing import Sequence

import humanize

from .exceptions import ProcessStartError, UsageError
from .retry import BackoffStrategy, RetryConfig, example_schedule
from .runner import CommandRunner, format_duration

logger = logging.getLogger(__name__)

EXAMPLE_RETRIES = 20


def print_usage() -> None:
    strategies = ", ".join(
        f"{s.value} (default)" if s is BackoffStrategy.CONSTANT else s.value
        for s in BackoffStrategy
    )
    print("usage: try [strategy] [command] [arg]...")
    print(f"strategies: {strategies}")


def show_example(strategy: BackoffStrategy, retries: int = EXAMPLE_RETRIES) -> None:
    """Print the schedule of a run whose command never succeeds."""
    print(f"Example for the first {retries} retries:")
    for row in example_schedule(strategy, retries):
        print(
            f"{humanize.ordinal(row.attempt)} attempt after {format_duration(row.waited)}, "
            f"next pause {format_duration(row.pause)}"
        )
    print("...")


def configure_logging() -> None:
    # Progress goes to stderr, the child keeps its own stdout and stderr.
    logging.basicConfig(
        stream=sys.stderr,
        level=logging.INFO,
        format="%(asctime)s %(message)s",
        datefmt="%Y/%m/%d %H:%M:%S",
    )


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the tool.

    Returns:
        0 once the command succeeds, 1 on usage error, example mode or
        start failure, 130 when interrupted
    """
    if argv is None:
        argv = sys.argv[1:]

    try:
        config = RetryConfig.from_argv(argv)
    except UsageError:
        print_usage()
        return 1

    if config.example_only:
        show_example(config.strategy)
        return 1

    configure_logging()
    try:
        CommandRunner(config).run()
    except KeyboardInterrupt:
        return 130
    except ProcessStartError as e:
        logger.error(f"[try] {e}")
        return 1
    return 0


def run() -> None:
    """Console script wrapper."""
    sys.exit(main())
