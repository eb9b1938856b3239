"""Tests for retry module - behavior focused."""

import pytest
from trycmd.exceptions import UnsupportedStrategyError, UsageError
from trycmd.retry import (
    BackoffStrategy,
    RetryConfig,
    calculate_backoff,
    example_schedule,
)


class TestCalculateBackoff:
    """Test backoff calculation behavior."""

    def test_constant_strategy_stays_constant(self):
        """Constant strategy: delay = 2s always."""
        delays = [calculate_backoff(BackoffStrategy.CONSTANT, n) for n in (1, 5, 10, 100)]

        assert delays == [2.0, 2.0, 2.0, 2.0]

    def test_linear_strategy_grows_linearly(self):
        """Linear strategy: delay = 2s * attempt."""
        delays = [calculate_backoff(BackoffStrategy.LINEAR, n) for n in (1, 2, 3, 10)]

        assert delays == [2.0, 4.0, 6.0, 20.0]

    def test_exponential_strategy_is_quadratic(self):
        """Exponential strategy: delay = 2s * attempt ** 2, not 2 ** attempt."""
        delays = [calculate_backoff(BackoffStrategy.EXPONENTIAL, n) for n in (1, 2, 3, 10)]

        assert delays == [2.0, 8.0, 18.0, 200.0]

    @pytest.mark.parametrize("strategy", [BackoffStrategy.LINEAR, BackoffStrategy.EXPONENTIAL])
    def test_growing_strategies_strictly_increase(self, strategy):
        """Given increasing attempts, delay should grow."""
        delays = [calculate_backoff(strategy, n) for n in range(1, 50)]

        assert all(a < b for a, b in zip(delays, delays[1:]))

    def test_backoff_is_deterministic(self):
        """Same inputs give the same delay."""
        for strategy in BackoffStrategy:
            assert calculate_backoff(strategy, 7) == calculate_backoff(strategy, 7)

    def test_plain_string_value_is_accepted(self):
        """str-valued enum compares equal to its value."""
        assert calculate_backoff("linear", 3) == 6.0

    def test_unknown_strategy_is_fatal(self):
        """Unknown strategy values raise instead of defaulting."""
        with pytest.raises(UnsupportedStrategyError) as exc_info:
            calculate_backoff("fibonacci", 1)

        assert "fibonacci" in str(exc_info.value)

    def test_attempt_below_one_rejected(self):
        """Attempts are one-based."""
        with pytest.raises(ValueError):
            calculate_backoff(BackoffStrategy.CONSTANT, 0)


class TestExampleSchedule:
    """Test example schedule generation."""

    def test_default_has_twenty_rows(self):
        """Example mode lists 20 attempts."""
        rows = list(example_schedule(BackoffStrategy.CONSTANT))

        assert [row.attempt for row in rows] == list(range(1, 21))

    def test_first_attempt_has_not_waited(self):
        """Nothing is waited before the first attempt."""
        row = next(example_schedule(BackoffStrategy.EXPONENTIAL))

        assert row.waited == 0.0
        assert row.pause == 2.0

    def test_waited_is_sum_of_previous_pauses(self):
        """Cumulative delay follows the calculator."""
        rows = list(example_schedule(BackoffStrategy.LINEAR, retries=4))

        assert [row.pause for row in rows] == [2.0, 4.0, 6.0, 8.0]
        assert [row.waited for row in rows] == [0.0, 2.0, 6.0, 12.0]

    def test_exponential_last_row(self):
        """Row 20 of the quadratic schedule."""
        rows = list(example_schedule(BackoffStrategy.EXPONENTIAL))

        assert rows[-1].pause == 2.0 * 20 * 20
        assert rows[-1].waited == sum(2.0 * n * n for n in range(1, 20))


class TestBackoffStrategy:
    """Test strategy keyword lookup."""

    @pytest.mark.parametrize("token", ["constant", "linear", "exponential"])
    def test_known_tokens(self, token):
        assert BackoffStrategy.from_token(token).value == token

    @pytest.mark.parametrize("token", ["Linear", "exp", "", "ls", "--linear"])
    def test_other_tokens_are_not_strategies(self, token):
        """Only exact names match."""
        assert BackoffStrategy.from_token(token) is None


class TestRetryConfig:
    """Test RetryConfig resolution from argv."""

    def test_default_strategy_is_constant(self):
        config = RetryConfig()
        assert config.strategy is BackoffStrategy.CONSTANT

    def test_strategy_keyword_is_consumed(self):
        """A leading strategy name selects the strategy."""
        config = RetryConfig.from_argv(["linear", "make", "test"])

        assert config.strategy is BackoffStrategy.LINEAR
        assert config.command == ("make", "test")

    def test_command_without_strategy_keeps_first_token(self):
        """Anything else is part of the command."""
        config = RetryConfig.from_argv(["ping", "-c", "1", "host"])

        assert config.strategy is BackoffStrategy.CONSTANT
        assert config.command == ("ping", "-c", "1", "host")

    def test_strategy_name_later_in_command_is_not_consumed(self):
        config = RetryConfig.from_argv(["echo", "linear"])

        assert config.strategy is BackoffStrategy.CONSTANT
        assert config.command == ("echo", "linear")

    def test_strategy_only_selects_example_mode(self):
        """A lone strategy keyword leaves no command."""
        config = RetryConfig.from_argv(["exponential"])

        assert config.strategy is BackoffStrategy.EXPONENTIAL
        assert config.example_only is True

    def test_empty_argv_is_usage_error(self):
        with pytest.raises(UsageError):
            RetryConfig.from_argv([])
