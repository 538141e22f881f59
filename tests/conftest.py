from __future__ import annotations

import pytest

from termedit.runtime import telemetry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start: float = 100.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(autouse=True, scope="session")
def _quiet_telemetry() -> None:
    telemetry.configure(preset="testing")


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()
