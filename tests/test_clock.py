import pytest

from tui_stopwatch import clock as clock_mod
from tui_stopwatch.clock import (
    ClockInterface, FallbackClock, MonotonicClock, WallClock, selectClock,
)

from conftest import FakeClock

class FlakyClock(ClockInterface):
    def __init__(self, readings: list[float]) -> None:
        self.readings = readings

    def now(self) -> float:
        if not self.readings:
            raise OSError('clock gone')
        return self.readings.pop(0)

    @property
    def is_monotonic(self) -> bool:
        return True

def test_monotonic_clock_never_decreases():
    c = MonotonicClock()
    readings = [c.now() for _ in range(1000)]
    assert readings == sorted(readings)
    assert c.is_monotonic

def test_wall_clock_is_flagged_degraded():
    assert not WallClock().is_monotonic

def test_fallback_switches_once_and_stays_continuous():
    fallback = FakeClock(start_ms=50.0)
    c = FallbackClock(FlakyClock([100.0, 110.0]), fallback)
    assert c.now() == 100.0
    assert c.now() == 110.0
    assert c.now() == 110.0
    assert c.degraded
    fallback.advance(25)
    assert c.now() == 135.0

def test_fallback_reports_fallback_monotonicity():
    c = FallbackClock(FlakyClock([]), WallClock())
    assert c.is_monotonic
    c.now()
    assert not c.is_monotonic

@pytest.mark.parametrize('preference, expected', [
    ('monotonic', FallbackClock),
    ('auto', FallbackClock),
    ('wall', WallClock),
])
def test_select_clock(preference, expected):
    assert isinstance(selectClock(preference), expected)

def test_select_clock_without_monotonic_source(monkeypatch):
    monkeypatch.setattr(clock_mod, 'hasMonotonicSource', lambda: False)
    assert isinstance(selectClock('auto'), WallClock)

def test_select_clock_unknown():
    with pytest.raises(ValueError):
        selectClock('sundial')  # type: ignore[arg-type]
