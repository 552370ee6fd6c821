"""Tests for statewalker.context."""

from __future__ import annotations

import pytest

from statewalker.context import ExecutionContext
from statewalker.errors import StateExecuteError
from statewalker.executable import Executable


class FakeTarget:
    pass


class TrackingExe(Executable[FakeTarget]):
    def __init__(self, order: int, fail: bool = False) -> None:
        super().__init__(order)
        self.fail = fail
        self.released: list[bool] = []

    def execute(self, params) -> None:
        if self.fail:
            raise RuntimeError("nope")

    def release(self, succeeded: bool) -> None:
        self.released.append(succeeded)


class TestExecutionContext:
    def test_create_with_target(self):
        target = FakeTarget()
        ctx = ExecutionContext(target, [])
        assert ctx.target is target
        assert ctx.executables == []
        assert ctx.depth == -1

    def test_run_records_depth(self):
        ctx = ExecutionContext(FakeTarget(), [TrackingExe(1), TrackingExe(2)])
        assert ctx.run() == 1
        assert ctx.depth == 1
        assert ctx.has_error is False

    def test_run_twice_raises(self):
        ctx = ExecutionContext(FakeTarget(), [TrackingExe(1)])
        ctx.run()
        with pytest.raises(RuntimeError):
            ctx.run()

    def test_finalize_success(self):
        exes = [TrackingExe(1), TrackingExe(2)]
        ctx = ExecutionContext(FakeTarget(), exes)
        ctx.run()
        ctx.finalize()
        assert [e.released for e in exes] == [[True], [True]]

    def test_finalize_failure(self):
        exes = [TrackingExe(1), TrackingExe(2, fail=True)]
        ctx = ExecutionContext(FakeTarget(), exes)
        ctx.run()
        assert ctx.has_error is True
        with pytest.raises(StateExecuteError):
            ctx.finalize()
        assert exes[0].released == [False]
        assert exes[1].released == []
