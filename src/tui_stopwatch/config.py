from __future__ import annotations

import json

from pydantic import BaseModel, ConfigDict, Field

from .clock import ClockPreference
from .formatting import RoundingRule
from .scheduler import FRAME_INTERVAL_MS, SchedulerPreference

class StopwatchConfig(BaseModel):
    refresh_interval_ms: float = Field(FRAME_INTERVAL_MS, gt=0)
    scheduler: SchedulerPreference = 'frame'
    clock: ClockPreference = 'auto'
    rounding: RoundingRule = 'half_up'
    title: str = 'Stopwatch'

    model_config = ConfigDict(
        frozen=True,
        extra='forbid',
    )

    @classmethod
    def fromFile(cls, abs_file_path: str) -> StopwatchConfig:
        '''
        A missing file means defaults.
        '''
        try:
            with open(abs_file_path, 'r', encoding='utf-8') as f:
                j = json.load(f)
        except FileNotFoundError:
            return cls()
        return cls.model_validate(j)

    def writeFile(self, abs_file_path: str) -> None:
        with open(abs_file_path, 'w', encoding='utf-8') as f:
            json.dump(self.model_dump(), f, indent=2)

    def overridden(self, **kw) -> StopwatchConfig:
        '''
        `None` values are ignored, so CLI options can be passed through as-is.
        '''
        updates = {k: v for k, v in kw.items() if v is not None}
        return self.model_validate({**self.model_dump(), **updates})
