import time
import typing as tp
from abc import ABC, abstractmethod

from textual import log

ClockPreference = tp.Literal['auto', 'monotonic', 'wall']

class ClockInterface(ABC):
    @abstractmethod
    def now(self) -> float:
        '''
        Returns a timestamp in milliseconds.
        Only differences between two readings are meaningful.
        '''
        raise NotImplementedError

    @property
    @abstractmethod
    def is_monotonic(self) -> bool:
        raise NotImplementedError

class MonotonicClock(ClockInterface):
    def now(self) -> float:
        return time.perf_counter_ns() / 1_000_000

    @property
    def is_monotonic(self) -> bool:
        return True

class WallClock(ClockInterface):
    '''
    Degraded source. Follows system time adjustments,
    so two readings may go backwards.
    '''
    def now(self) -> float:
        return time.time_ns() / 1_000_000

    @property
    def is_monotonic(self) -> bool:
        return False

class FallbackClock(ClockInterface):
    '''
    Reads `primary` until it fails once, then `fallback` for good.
    The switch is re-anchored so readings stay continuous.
    '''
    def __init__(
        self, primary: ClockInterface, fallback: ClockInterface,
    ) -> None:
        self.primary = primary
        self.fallback = fallback
        self.degraded = False
        self.last_reading = 0.0
        self.offset = 0.0

    def now(self) -> float:
        if not self.degraded:
            try:
                self.last_reading = self.primary.now()
                return self.last_reading
            except OSError as e:
                log.warning(f'Clock {self.primary!r} failed ({e}). Falling back to {self.fallback!r}.')
                self.degraded = True
                self.offset = self.last_reading - self.fallback.now()
        return self.fallback.now() + self.offset

    @property
    def is_monotonic(self) -> bool:
        if self.degraded:
            return self.fallback.is_monotonic
        return self.primary.is_monotonic

def hasMonotonicSource() -> bool:
    try:
        return time.get_clock_info('perf_counter').monotonic
    except (ValueError, OSError):
        return False

def selectClock(preference: ClockPreference = 'auto') -> ClockInterface:
    match preference:
        case 'wall':
            return WallClock()
        case 'monotonic':
            return FallbackClock(MonotonicClock(), WallClock())
        case 'auto':
            if hasMonotonicSource():
                return FallbackClock(MonotonicClock(), WallClock())
            log.warning('No monotonic clock available. Using wall clock.')
            return WallClock()
        case _:
            raise ValueError(f'Unknown clock preference: {preference}')
