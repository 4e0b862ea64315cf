"""Unit tests for the timeout-bounded retry mode."""

from unittest.mock import MagicMock

import pytest

from stabilizer.resilience.retry import (
    TaskTimeoutError,
    TimeoutPolicy,
    WaitTimeoutError,
    wait_until,
)


class FatalDriverError(Exception):
    """Stands in for an error that should never be retried."""


def failing_task(failures: int):
    """Build a task that raises ``failures`` times, then succeeds."""
    calls = {"count": 0, "executed": False}

    def task(_context):
        calls["count"] += 1
        if calls["count"] <= failures:
            raise RuntimeError(f"attempt {calls['count']} failed")
        calls["executed"] = True

    return task, calls


@pytest.mark.unit
class TestPerformTaskUntilNoException:
    """Tests for RetryEngine.perform_task_until_no_exception."""

    def test_succeeds_after_failures(self, retry_engine, fake_clock):
        """Task fails 3 times, then succeeds well within the timeout."""
        task, calls = failing_task(3)

        retry_engine.perform_task_until_no_exception(None, task, 1, 10)

        assert calls["executed"] is True
        assert calls["count"] == 4
        assert fake_clock.sleeps == [1, 1, 1]

    def test_raises_when_task_never_succeeds(self, retry_engine, fake_clock):
        """Task always fails: 1s polling, 3s timeout."""
        task = MagicMock(side_effect=RuntimeError("element not interactable"))

        with pytest.raises(WaitTimeoutError) as exc_info:
            retry_engine.perform_task_until_no_exception(None, task, 1, 3)

        # floor(timeout / interval) + 1 attempts
        assert task.call_count == 4
        assert fake_clock.now == 3
        assert exc_info.value.timeout == 3
        assert exc_info.value.poll_interval == 1

    @pytest.mark.parametrize("failures", [0, 1, 2, 5, 9])
    def test_invocations_are_failures_plus_one(self, retry_engine, failures):
        task, calls = failing_task(failures)

        retry_engine.perform_task_until_no_exception(None, task, 1, 10)

        assert calls["count"] == failures + 1

    def test_first_success_returns_without_sleeping(self, retry_engine, fake_clock):
        task = MagicMock()

        retry_engine.perform_task_until_no_exception(None, task, 1, 10)

        task.assert_called_once_with(None)
        assert fake_clock.sleeps == []

    def test_zero_timeout_makes_single_attempt(self, retry_engine):
        task = MagicMock(side_effect=RuntimeError())

        with pytest.raises(WaitTimeoutError):
            retry_engine.perform_task_until_no_exception(None, task, 1, 0)

        assert task.call_count == 1

    def test_polling_interval_longer_than_timeout(self, retry_engine, fake_clock):
        """The task runs at the start and once more after the first interval."""
        task = MagicMock(side_effect=RuntimeError())

        with pytest.raises(WaitTimeoutError):
            retry_engine.perform_task_until_no_exception(None, task, 5, 1)

        assert task.call_count == 2
        assert fake_clock.sleeps == [5]

    def test_timeout_chains_last_task_error(self, retry_engine):
        task, _ = failing_task(100)

        with pytest.raises(WaitTimeoutError) as exc_info:
            retry_engine.perform_task_until_no_exception(None, task, 1, 2)

        assert isinstance(exc_info.value.__cause__, RuntimeError)
        assert str(exc_info.value.__cause__) == "attempt 3 failed"
        assert exc_info.value.last_error is exc_info.value.__cause__

    def test_timeout_error_is_task_timeout(self, retry_engine):
        with pytest.raises(TaskTimeoutError):
            retry_engine.perform_task_until_no_exception(
                None, MagicMock(side_effect=RuntimeError()), 1, 1
            )

    def test_timeout_message(self, retry_engine):
        with pytest.raises(WaitTimeoutError, match="Task did not complete without an exception"):
            retry_engine.perform_task_until_no_exception(
                None, MagicMock(side_effect=RuntimeError()), 1, 2
            )

    def test_error_not_in_retry_on_propagates(self, retry_engine):
        task = MagicMock(side_effect=FatalDriverError("session deleted"))

        with pytest.raises(FatalDriverError):
            retry_engine.perform_task_until_no_exception(
                None, task, 1, 10, retry_on=(RuntimeError,)
            )

        assert task.call_count == 1

    def test_task_wait_timeout_outside_retry_on_propagates(self, retry_engine):
        task = MagicMock(
            side_effect=lambda _: wait_until(lambda: False, timeout=0, poll_interval=0)
        )

        with pytest.raises(WaitTimeoutError, match="Condition not met"):
            retry_engine.perform_task_until_no_exception(
                None, task, 1, 10, retry_on=(KeyError,)
            )

        assert task.call_count == 1

    def test_context_passed_through_unchanged(self, retry_engine):
        driver = object()
        task = MagicMock()

        retry_engine.perform_task_until_no_exception(driver, task, 1, 10)

        task.assert_called_once_with(driver)

    def test_rejects_negative_timeout(self, retry_engine):
        with pytest.raises(ValueError, match="timeout_seconds must be >= 0"):
            retry_engine.perform_task_until_no_exception(None, MagicMock(), 1, -1)


@pytest.mark.unit
class TestRunWithTimeout:
    """Tests for the policy-driven timeout-bounded entry point."""

    def test_uses_given_policy(self, retry_engine, fake_clock):
        task = MagicMock(side_effect=RuntimeError())

        with pytest.raises(WaitTimeoutError):
            retry_engine.run_with_timeout(
                None,
                task,
                TimeoutPolicy(polling_interval_seconds=2, timeout_seconds=4),
            )

        assert task.call_count == 3
        assert fake_clock.sleeps == [2, 2]

    def test_defaults_to_settings_policy(self, engine_factory, fake_clock):
        engine = engine_factory(polling_interval_seconds=0.5, timeout_seconds=1)
        task = MagicMock(side_effect=RuntimeError())

        with pytest.raises(WaitTimeoutError):
            engine.run_with_timeout(None, task)

        assert task.call_count == 3


@pytest.mark.unit
class TestTimeoutLogging:
    """Tests for diagnostics emitted by the timeout-bounded mode."""

    def test_logs_each_failure_at_debug(self, retry_engine, mock_logger):
        task, _ = failing_task(2)

        retry_engine.perform_task_until_no_exception(None, task, 1, 10)

        bound = mock_logger.bind.return_value
        debug_calls = bound.debug.call_args_list
        assert [c.args[0] for c in debug_calls] == ["task_attempt_failed"] * 2
        assert [c.kwargs["attempt"] for c in debug_calls] == [1, 2]
        assert debug_calls[1].kwargs["error"] == "attempt 2 failed"
        bound.info.assert_called_once_with("task_completed", attempts=3)

    def test_logs_timeout_at_warning(self, retry_engine, mock_logger):
        with pytest.raises(WaitTimeoutError):
            retry_engine.perform_task_until_no_exception(
                None, MagicMock(side_effect=RuntimeError()), 1, 3
            )

        mock_logger.bind.return_value.warning.assert_called_once_with(
            "task_timed_out", attempts=4, timeout_seconds=3
        )

    def test_task_wait_timeout_is_not_logged_as_timeout(self, retry_engine, mock_logger):
        """Only the engine's own deadline is reported as task_timed_out."""
        task = MagicMock(
            side_effect=lambda _: wait_until(lambda: False, timeout=0, poll_interval=0)
        )

        with pytest.raises(WaitTimeoutError):
            retry_engine.perform_task_until_no_exception(
                None, task, 1, 10, retry_on=(KeyError,)
            )

        bound = mock_logger.bind.return_value
        bound.warning.assert_not_called()
        bound.info.assert_not_called()
