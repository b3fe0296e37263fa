'''
Repeating refresh callbacks on top of Textual timers.

`FrameScheduler` arms a one-shot timer and re-arms it after every tick,
so a slow tick delays the next one instead of queueing up behind it.
`IntervalScheduler` is the fixed-period substitute.
'''

import typing as tp
from abc import ABC, abstractmethod

from textual import log
from textual.message_pump import MessagePump
from textual.timer import Timer

SchedulerPreference = tp.Literal['frame', 'interval']

FRAME_INTERVAL_MS = 16.0

Tick = tp.Callable[[], None]

class RefreshHandle(ABC):
    @abstractmethod
    def cancel(self) -> None:
        '''
        Idempotent. Cancelling twice, or after the host went away, is a no-op.
        '''
        raise NotImplementedError

    @property
    @abstractmethod
    def active(self) -> bool:
        raise NotImplementedError

class SchedulerInterface(ABC):
    @abstractmethod
    def startRepeating(
        self, interval_ms: float, callback: Tick,
    ) -> RefreshHandle:
        raise NotImplementedError

class FrameHandle(RefreshHandle):
    def __init__(
        self, host: MessagePump, interval_ms: float, callback: Tick,
    ) -> None:
        self.host = host
        self.interval_ms = interval_ms
        self.callback = callback
        self.timer: Timer | None = None
        self.cancelled = False
        self.arm()

    def arm(self) -> None:
        self.timer = self.host.set_timer(
            self.interval_ms / 1000, self.fire, name='stopwatch-frame',
        )

    def fire(self) -> None:
        self.timer = None
        if self.cancelled:
            return
        self.callback()
        if not self.cancelled:
            self.arm()

    def cancel(self) -> None:
        self.cancelled = True
        if self.timer is not None:
            self.timer.stop()
            self.timer = None

    @property
    def active(self) -> bool:
        return not self.cancelled

class IntervalHandle(RefreshHandle):
    def __init__(
        self, host: MessagePump, interval_ms: float, callback: Tick,
    ) -> None:
        self.callback = callback
        self.cancelled = False
        self.timer: Timer | None = host.set_interval(
            interval_ms / 1000, self.fire, name='stopwatch-interval',
        )

    def fire(self) -> None:
        if self.cancelled:
            return
        self.callback()

    def cancel(self) -> None:
        self.cancelled = True
        if self.timer is not None:
            self.timer.stop()
            self.timer = None

    @property
    def active(self) -> bool:
        return not self.cancelled

class FrameScheduler(SchedulerInterface):
    def __init__(self, host: MessagePump) -> None:
        self.host = host

    def startRepeating(
        self, interval_ms: float, callback: Tick,
    ) -> RefreshHandle:
        return FrameHandle(self.host, interval_ms, callback)

class IntervalScheduler(SchedulerInterface):
    def __init__(self, host: MessagePump) -> None:
        self.host = host

    def startRepeating(
        self, interval_ms: float, callback: Tick,
    ) -> RefreshHandle:
        return IntervalHandle(self.host, interval_ms, callback)

def selectScheduler(
    host: MessagePump, preference: SchedulerPreference = 'frame',
) -> SchedulerInterface:
    '''
    The `frame` -> `interval` fallback is a capability check for hosts
    that are not Textual message pumps. Every `MessagePump` has
    `set_timer`, so a Textual host always gets the frame scheduler.
    '''
    match preference:
        case 'frame':
            if callable(getattr(host, 'set_timer', None)):
                return FrameScheduler(host)
            log.warning(f'{host!r} cannot arm one-shot timers. Using a fixed interval.')
            return IntervalScheduler(host)
        case 'interval':
            return IntervalScheduler(host)
        case _:
            raise ValueError(f'Unknown scheduler preference: {preference}')
