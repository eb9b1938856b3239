"""
Backoff strategy and run configuration definitions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from ..exceptions import UsageError


class BackoffStrategy(str, Enum):
    """Available backoff strategies."""

    CONSTANT = "constant"  # delay = 2s
    LINEAR = "linear"  # delay = 2s * attempt
    # Quadratic, not 2 ** attempt. The name is kept for command-line compatibility.
    EXPONENTIAL = "exponential"  # delay = 2s * attempt ** 2

    @classmethod
    def from_token(cls, token: str) -> "BackoffStrategy | None":
        """Return the strategy named exactly by `token`, or None."""
        for strategy in cls:
            if strategy.value == token:
                return strategy
        return None


@dataclass(frozen=True)
class RetryConfig:
    """
    Configuration for a single supervised run.

    Attributes:
        strategy: Backoff strategy applied between failed attempts (default: constant)
        command: Program name followed by its arguments. Empty when only a
            strategy keyword was given, which selects example mode.
    """

    strategy: BackoffStrategy = BackoffStrategy.CONSTANT
    command: tuple[str, ...] = ()

    @property
    def example_only(self) -> bool:
        """True when there is no command to run."""
        return not self.command

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> "RetryConfig":
        """
        Resolve command-line arguments into a configuration.

        The first token is consumed as a strategy only when it matches a
        strategy name exactly; otherwise it is the program to run.

        Args:
            argv: Arguments without the program name

        Returns:
            Resolved configuration

        Raises:
            UsageError: If no arguments were given
        """
        if not argv:
            raise UsageError("no arguments given")

        strategy = BackoffStrategy.from_token(argv[0])
        if strategy is None:
            return cls(command=tuple(argv))
        return cls(strategy=strategy, command=tuple(argv[1:]))
