"""Shared test fixtures."""

import logging

import pytest

from snowid.core.constants import EPOCH


class FakeClock:
    """Millisecond clock that only moves when told to.

    advance_after(n, ms) makes the clock jump forward by ms once it has been
    sampled n times in total.
    """

    def __init__(self, now_ms: int) -> None:
        self.now = now_ms
        self.calls = 0
        self._jumps: dict[int, int] = {}

    def advance(self, ms: int = 1) -> None:
        self.now += ms

    def advance_after(self, calls: int, ms: int = 1) -> None:
        self._jumps[calls] = ms

    def __call__(self) -> int:
        self.calls += 1
        if self.calls in self._jumps:
            self.now += self._jumps.pop(self.calls)
        return self.now


@pytest.fixture
def fake_clock() -> FakeClock:
    # An arbitrary instant well after EPOCH
    return FakeClock(EPOCH + 1_000_000)


@pytest.fixture
def snowid_caplog(caplog):
    """caplog wired straight to the package logger, which does not propagate."""
    snowid_logger = logging.getLogger("snowid")
    snowid_logger.addHandler(caplog.handler)
    yield caplog
    snowid_logger.removeHandler(caplog.handler)
