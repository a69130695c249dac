"""Tests for oranpy.core.tries module."""

import pytest

from oranpy.core.errors import ErrorCategory, WrappedError
from oranpy.core.tries import do_or_fail, do_or_recover, run_or_fail, run_or_recover


def fails():
    raise ValueError("primary failed")


def also_fails(ex):
    raise KeyError("recovery failed")


class TestRunOrRecover:
    """Test run_or_recover."""

    def test_returns_primary_result(self):
        assert run_or_recover(lambda: 42, lambda ex: -1) == 42

    def test_recovery_not_called_on_success(self):
        calls = []
        run_or_recover(lambda: 1, lambda ex: calls.append(ex))
        assert calls == []

    def test_returns_fallback_on_failure(self):
        divisor = 0
        assert run_or_recover(lambda: 1 // divisor, lambda ex: -1) == -1

    def test_recovery_receives_the_failure(self):
        received = []

        def recovery(ex):
            received.append(ex)
            return "fallback"

        assert run_or_recover(fails, recovery) == "fallback"
        assert len(received) == 1
        assert isinstance(received[0], ValueError)
        assert str(received[0]) == "primary failed"

    def test_none_is_a_valid_primary_result(self):
        assert run_or_recover(lambda: None, lambda ex: "fallback") is None

    def test_failed_recovery_raises_wrapped_error(self):
        with pytest.raises(WrappedError) as exc_info:
            run_or_recover(fails, also_fails)

        error = exc_info.value
        assert isinstance(error.cause, KeyError)
        assert error.__cause__ is error.cause
        assert error.category == ErrorCategory.RECOVERY
        assert error.context.stage == "recovery"
        assert error.context.operation == "also_fails"

    def test_failed_recovery_discards_primary_failure(self):
        with pytest.raises(WrappedError) as exc_info:
            run_or_recover(fails, also_fails)

        recovery_error = exc_info.value.cause
        assert recovery_error.__cause__ is None
        assert recovery_error.__context__ is None

    def test_recovery_may_reraise_the_primary_failure(self):
        def reraise(ex):
            raise ex

        with pytest.raises(WrappedError) as exc_info:
            run_or_recover(fails, reraise)
        assert isinstance(exc_info.value.cause, ValueError)

    def test_base_exceptions_propagate(self):
        def interrupt():
            raise KeyboardInterrupt

        with pytest.raises(KeyboardInterrupt):
            run_or_recover(interrupt, lambda ex: -1)

    def test_each_computation_called_at_most_once(self):
        counts = {"primary": 0, "recovery": 0}

        def primary():
            counts["primary"] += 1
            raise RuntimeError("boom")

        def recovery(ex):
            counts["recovery"] += 1
            return 0

        run_or_recover(primary, recovery)
        assert counts == {"primary": 1, "recovery": 1}


class TestDoOrRecover:
    """Test do_or_recover."""

    def test_runs_primary_only_on_success(self):
        events = []
        result = do_or_recover(lambda: events.append("primary"), lambda ex: events.append("recovery"))
        assert result is None
        assert events == ["primary"]

    def test_runs_recovery_on_failure(self):
        messages = []
        divisor = 0
        do_or_recover(lambda: print(1 // divisor), lambda ex: messages.append(str(ex)))
        assert messages == ["integer division or modulo by zero"]

    def test_discards_values(self):
        assert do_or_recover(lambda: 42, lambda ex: -1) is None
        assert do_or_recover(fails, lambda ex: -1) is None

    def test_failed_recovery_raises_wrapped_error(self):
        with pytest.raises(WrappedError) as exc_info:
            do_or_recover(fails, also_fails)
        assert isinstance(exc_info.value.cause, KeyError)


class TestRunOrFail:
    """Test run_or_fail."""

    def test_returns_value(self):
        assert run_or_fail(lambda: "value") == "value"

    def test_division_by_zero_is_wrapped(self):
        with pytest.raises(WrappedError) as exc_info:
            run_or_fail(lambda: 1 // 0)

        error = exc_info.value
        assert isinstance(error.cause, ZeroDivisionError)
        assert error.__cause__ is error.cause
        assert error.category == ErrorCategory.COMPUTATION
        assert error.context.stage == "primary"
        assert error.message.startswith("ZeroDivisionError")

    def test_wrapped_error_names_the_operation(self):
        with pytest.raises(WrappedError) as exc_info:
            run_or_fail(fails)
        assert exc_info.value.context.operation == "fails"

    def test_wraps_wrapped_errors_again(self):
        with pytest.raises(WrappedError) as exc_info:
            run_or_fail(lambda: run_or_fail(fails))
        assert isinstance(exc_info.value.cause, WrappedError)
        assert isinstance(exc_info.value.cause.cause, ValueError)


class TestDoOrFail:
    """Test do_or_fail."""

    def test_runs_side_effect(self):
        events = []
        assert do_or_fail(lambda: events.append(1)) is None
        assert events == [1]

    def test_failure_is_wrapped(self):
        with pytest.raises(WrappedError) as exc_info:
            do_or_fail(fails)
        assert isinstance(exc_info.value.cause, ValueError)
