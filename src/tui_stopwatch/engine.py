from __future__ import annotations

import typing as tp
from dataclasses import dataclass
from enum import Enum

from pydantic import BaseModel, ConfigDict
from textual import log

from .clock import ClockInterface
from .formatting import formatSeconds, RoundingRule, ZERO_DISPLAY
from .scheduler import FRAME_INTERVAL_MS, RefreshHandle, SchedulerInterface

class EngineState(Enum):
    IDLE = 'Idle'
    RUNNING = 'Running'

class ControlStates(BaseModel):
    start_enabled: bool
    stop_enabled: bool
    reset_enabled: bool

    model_config = ConfigDict(
        frozen=True,
    )

    @classmethod
    def fromState(cls, state: EngineState) -> ControlStates:
        return cls(
            start_enabled=state is EngineState.IDLE,
            stop_enabled=state is EngineState.RUNNING,
            reset_enabled=True,
        )

@dataclass
class TimerState:
    running: bool = False
    accumulated_ms: float = 0.0
    session_start_ms: float = 0.0   # only meaningful while running

def _noop(*_) -> None:
    pass

class TimerEngine:
    '''
    Two states, Idle and Running. Every command is defined on both.
    `elapsed()` is computed from raw state only, so it stays correct
    no matter how often (or whether) the refresh loop ticked.
    '''

    def __init__(
        self,
        clock: ClockInterface,
        scheduler: SchedulerInterface,
        onDisplay: tp.Callable[[str], None] = _noop,
        onStateChanged: tp.Callable[[EngineState], None] = _noop,
        refresh_interval_ms: float = FRAME_INTERVAL_MS,
        rounding: RoundingRule = 'half_up',
    ) -> None:
        self.clock = clock
        self.scheduler = scheduler
        self.onDisplay = onDisplay
        self.onStateChanged = onStateChanged
        self.refresh_interval_ms = refresh_interval_ms
        self.rounding: RoundingRule = rounding

        self.timer_state = TimerState()
        self.refreshHandle: RefreshHandle | None = None

    @property
    def state(self) -> EngineState:
        if self.timer_state.running:
            return EngineState.RUNNING
        return EngineState.IDLE

    def isRunning(self) -> bool:
        return self.timer_state.running

    def controls(self) -> ControlStates:
        return ControlStates.fromState(self.state)

    def start(self) -> None:
        s = self.timer_state
        if s.running:
            return
        s.session_start_ms = self.clock.now()
        s.running = True
        assert self.refreshHandle is None
        self.refreshHandle = self.scheduler.startRepeating(
            self.refresh_interval_ms, self.refresh,
        )
        log.debug(f'start at {s.session_start_ms:.3f} ms, {s.accumulated_ms:.3f} ms banked')
        self.onStateChanged(self.state)
        self.publish()

    def stop(self) -> None:
        s = self.timer_state
        if not s.running:
            return
        t = self.clock.now()
        s.accumulated_ms += self.sessionDelta(t)
        s.running = False
        self.cancelRefresh()
        log.debug(f'stop, {s.accumulated_ms:.3f} ms banked')
        self.onStateChanged(self.state)
        self.publish()

    def reset(self) -> None:
        self.cancelRefresh()
        s = self.timer_state
        s.running = False
        s.accumulated_ms = 0.0
        s.session_start_ms = 0.0
        log.debug('reset')
        self.onStateChanged(self.state)
        self.onDisplay(ZERO_DISPLAY)

    def toggle(self) -> None:
        if self.timer_state.running:
            self.stop()
        else:
            self.start()

    def elapsed(self) -> float:
        s = self.timer_state
        if s.running:
            return s.accumulated_ms + self.sessionDelta(self.clock.now())
        return s.accumulated_ms

    def display(self) -> str:
        return formatSeconds(self.elapsed(), self.rounding)

    def sessionDelta(self, now_ms: float) -> float:
        # Only the wall-clock fallback can step backwards.
        return max(0.0, now_ms - self.timer_state.session_start_ms)

    def publish(self) -> None:
        self.onDisplay(self.display())

    def refresh(self) -> None:
        if not self.timer_state.running:
            # late tick from an already-cancelled loop
            return
        self.publish()

    def cancelRefresh(self) -> None:
        if self.refreshHandle is not None:
            self.refreshHandle.cancel()
            self.refreshHandle = None
