from .UI import UI as StopwatchUI
from .engine import TimerEngine, TimerState, EngineState, ControlStates
from .config import StopwatchConfig
from .clock import selectClock
from .scheduler import selectScheduler
from .formatting import formatSeconds

__all__ = [
    "StopwatchUI", "TimerEngine", "TimerState", "EngineState",
    "ControlStates", "StopwatchConfig", "selectClock", "selectScheduler",
    "formatSeconds",
]
