import typing as tp

import pytest

from tui_stopwatch.clock import ClockInterface
from tui_stopwatch.engine import TimerEngine
from tui_stopwatch.scheduler import RefreshHandle, SchedulerInterface

class FakeClock(ClockInterface):
    def __init__(self, start_ms: float = 1_000.0) -> None:
        self.t = start_ms

    def now(self) -> float:
        return self.t

    def advance(self, ms: float) -> None:
        self.t += ms

    @property
    def is_monotonic(self) -> bool:
        return True

class ManualHandle(RefreshHandle):
    def __init__(self, callback: tp.Callable[[], None]) -> None:
        self.callback = callback
        self.cancel_calls = 0
        self.cancelled = False

    def cancel(self) -> None:
        self.cancel_calls += 1
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not self.cancelled

class ManualScheduler(SchedulerInterface):
    '''
    Ticks only fire when a test calls `tick()`.
    '''
    def __init__(self) -> None:
        self.handles: list[ManualHandle] = []

    def startRepeating(self, interval_ms, callback) -> RefreshHandle:
        h = ManualHandle(callback)
        self.handles.append(h)
        return h

    def live(self) -> list[ManualHandle]:
        return [h for h in self.handles if h.active]

    def tick(self, n: int = 1) -> None:
        for _ in range(n):
            for h in self.live():
                h.callback()

@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()

@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()

@pytest.fixture
def published() -> list[str]:
    return []

@pytest.fixture
def engine(clock, scheduler, published) -> TimerEngine:
    return TimerEngine(clock, scheduler, onDisplay=published.append)
