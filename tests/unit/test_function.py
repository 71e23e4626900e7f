"""Unit tests for function combinators."""

import asyncio
import logging

import pytest

from fpkit.function import ComposableFunction, Fn, compose, constant, flip, identity, pipe, tap
from fpkit.pipe import Pipe


class UnprintableError(Exception):
    def __str__(self) -> str:
        raise RuntimeError("cannot render")


class TestCompose:
    """Tests for compose."""

    def test_compose_wraps_function(self) -> None:
        """Test the wrapper calls the original function."""
        inc = compose(lambda x: x + 1)
        assert isinstance(inc, ComposableFunction)
        assert inc(1) == 2

    def test_compose_left_to_right(self) -> None:
        """Test composed functions run in declaration order."""
        func = compose(lambda x: x + 1).compose(lambda x: x * 2).compose(str)
        assert func(3) == "8"

    def test_compose_returns_fresh_function(self) -> None:
        """Test composing does not alter the original."""
        base = compose(lambda x: x + 1)
        doubled = base.compose(lambda x: x * 2)
        negated = base.compose(lambda x: -x)
        assert base(1) == 2
        assert doubled(1) == 4
        assert negated(1) == -2


class TestSimpleCombinators:
    """Tests for constant, identity and flip."""

    def test_constant_ignores_arguments(self) -> None:
        """Test constant returns its value for any arguments."""
        always_five = constant(5)
        assert always_five() == 5
        assert always_five(10, 20) == 5
        assert always_five(key="value") == 5

    def test_constant_returns_same_object(self) -> None:
        """Test constant does not copy its value."""
        payload: list[int] = []
        assert constant(payload)() is payload

    def test_identity(self) -> None:
        """Test identity returns its argument."""
        payload = object()
        assert identity(payload) is payload

    def test_flip(self) -> None:
        """Test flip swaps binary arguments."""

        def divide(numerator: float, denominator: float) -> float:
            return numerator / denominator

        assert divide(10, 2) == 5
        assert flip(divide)(2, 10) == 5


class TestTap:
    """Tests for tap fire-and-forget side effects."""

    def test_tap_returns_value(self) -> None:
        """Test tap runs the side effect and returns the value."""
        seen: list[int] = []
        assert tap(seen.append, 42) == 42
        assert seen == [42]

    def test_tap_swallows_sync_exception(self) -> None:
        """Test a raising side effect does not reach the caller."""

        def explode(value: int) -> None:
            raise Exception()

        assert tap(explode, 42) == 42

    def test_tap_logs_discarded_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test discarded failures are logged at DEBUG."""
        caplog.set_level(logging.DEBUG, logger="fpkit")

        def explode(value: int) -> None:
            raise RuntimeError("side effect failed")

        tap(explode, 1)
        assert any("side effect failed" in r.getMessage() for r in caplog.records)

    def test_tap_logging_can_be_disabled(
        self, caplog: pytest.LogCaptureFixture, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test FPKIT_TAP_LOG_FAILURES=false silences the log record."""
        monkeypatch.setenv("FPKIT_TAP_LOG_FAILURES", "false")
        caplog.set_level(logging.DEBUG, logger="fpkit")

        def explode(value: int) -> None:
            raise RuntimeError("quiet")

        assert tap(explode, 1) == 1
        assert not any("quiet" in r.getMessage() for r in caplog.records)

    def test_tap_with_invalid_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test a misconfigured environment does not break tap."""
        monkeypatch.setenv("FPKIT_LOG_LEVEL", "LOUD")

        def explode(value: int) -> None:
            raise Exception()

        assert tap(explode, 42) == 42

    def test_tap_swallows_unprintable_exception(self) -> None:
        """Test an exception whose __str__ fails is still discarded."""

        def explode(value: int) -> None:
            raise UnprintableError()

        assert tap(explode, 42) == 42

    @pytest.mark.asyncio
    async def test_tap_async_failure_with_invalid_settings(
        self, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test a failing async side effect raises nothing on the event loop."""
        monkeypatch.setenv("FPKIT_LOG_LEVEL", "LOUD")
        loop_errors: list[dict] = []
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(lambda _, context: loop_errors.append(context))

        async def explode(value: int) -> None:
            raise ValueError("async failure")

        try:
            assert tap(explode, 5) == 5
            await asyncio.sleep(0.01)
        finally:
            loop.set_exception_handler(None)

        assert loop_errors == []

    @pytest.mark.asyncio
    async def test_tap_schedules_coroutine(self) -> None:
        """Test an async side effect runs in the background."""
        seen: list[int] = []

        async def record(value: int) -> None:
            seen.append(value)

        assert tap(record, 7) == 7
        assert seen == []
        await asyncio.sleep(0.01)
        assert seen == [7]

    @pytest.mark.asyncio
    async def test_tap_does_not_wait_for_coroutine(self) -> None:
        """Test tap returns before a slow side effect finishes."""
        started = asyncio.Event()
        release = asyncio.Event()

        async def slow(value: int) -> None:
            started.set()
            await release.wait()

        assert tap(slow, 3) == 3
        await asyncio.wait_for(started.wait(), timeout=1)
        release.set()
        await asyncio.sleep(0.01)

    @pytest.mark.asyncio
    async def test_tap_swallows_async_exception(self, caplog: pytest.LogCaptureFixture) -> None:
        """Test a failing async side effect is consumed and logged."""
        caplog.set_level(logging.DEBUG, logger="fpkit")

        async def explode(value: int) -> None:
            raise ValueError("async failure")

        assert tap(explode, 5) == 5
        await asyncio.sleep(0.01)
        assert any("async failure" in r.getMessage() for r in caplog.records)

    @pytest.mark.asyncio
    async def test_tap_consumes_failed_future(self) -> None:
        """Test an already scheduled future is observed, not awaited."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future[None] = loop.create_future()

        assert tap(lambda value: future, "v") == "v"
        future.set_exception(RuntimeError("late"))
        await asyncio.sleep(0)
        assert future.done()

    def test_tap_without_event_loop_closes_coroutine(self) -> None:
        """Test a coroutine is closed when no loop is running."""
        ran = False

        async def record(value: int) -> None:
            nonlocal ran
            ran = True

        assert tap(record, 9) == 9
        assert ran is False


class TestPipe:
    """Tests for pipe and Pipe."""

    def test_pipe_chain(self) -> None:
        """Test values flow through each step."""
        result = pipe(5).to(lambda x: x * 2).to(lambda x: x + 3).exec()
        assert result == 13

    def test_pipe_returns_pipe(self) -> None:
        """Test pipe builds a Pipe."""
        assert isinstance(pipe(1), Pipe)

    def test_pipe_exec_without_steps(self) -> None:
        """Test exec on a bare pipe returns the seed."""
        assert pipe("seed").exec() == "seed"

    def test_pipe_extra_arguments(self) -> None:
        """Test to forwards extra arguments after the value."""
        assert pipe(2).to(pow, 3).to(round, ndigits=0).exec() == 8

    def test_pipe_is_lazy(self) -> None:
        """Test steps run only on exec."""
        calls: list[int] = []
        built = pipe(1).to(lambda x: calls.append(x) or x)
        assert calls == []
        built.exec()
        assert calls == [1]

    def test_pipe_prefix_reuse(self) -> None:
        """Test a partial pipeline can be extended in several ways."""
        base = pipe(10).to(lambda x: x - 1)
        assert base.to(lambda x: x * 2).exec() == 18
        assert base.to(str).exec() == "9"
        assert base.exec() == 9

    def test_pipe_tap(self) -> None:
        """Test tap steps observe without changing the value."""
        seen: list[int] = []

        def explode(value: int) -> None:
            raise RuntimeError("ignored")

        result = pipe(3).tap(seen.append).to(lambda x: x + 1).tap(explode).exec()
        assert result == 4
        assert seen == [3]


class TestFnNamespace:
    """Tests for the Fn namespace."""

    def test_fn_exposes_combinators(self) -> None:
        """Test Fn groups the module-level combinators."""
        assert Fn.identity(1) == 1
        assert Fn.constant("c")(None) == "c"
        assert Fn.flip(lambda a, b: a - b)(1, 3) == 2
        assert Fn.compose(lambda x: x + 1).compose(lambda x: x * 3)(1) == 6
        assert Fn.tap(lambda v: None, "v") == "v"
        assert Fn.pipe(2).to(lambda x: x**2).exec() == 4
