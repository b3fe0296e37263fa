from textual import on
from textual.app import App, ComposeResult, ScreenStackError
from textual.binding import Binding
from textual.containers import Center, Horizontal
from textual.reactive import reactive
from textual.widgets import Button, Digits, Footer, Header

from .clock import ClockInterface, selectClock
from .config import StopwatchConfig
from .engine import EngineState, TimerEngine
from .formatting import ZERO_DISPLAY
from .scheduler import SchedulerInterface, selectScheduler
from .shared import titled

class UI(App):
    CSS_PATH = "styles.tcss"
    BINDINGS = [
        Binding("s", "start", "Start."),
        Binding("t", "stop", "Stop."),
        Binding("r", "reset", "Reset."),
        Binding("space", "toggle", "Start/Stop."),
        Binding("q", "quit", "Quit."),
    ]

    time_text: reactive[str] = reactive(ZERO_DISPLAY)
    engine_state: reactive[EngineState] = reactive(EngineState.IDLE)

    def __init__(
        self,
        config: StopwatchConfig | None = None,
        clock: ClockInterface | None = None,
        scheduler: SchedulerInterface | None = None,
    ) -> None:
        '''
        `clock` and `scheduler` default to whatever
        `config` selects. Pass them to substitute a host.
        '''
        super().__init__()

        self.config = config or StopwatchConfig()
        if clock is None:
            clock = selectClock(self.config.clock)
        if scheduler is None:
            scheduler = selectScheduler(self, self.config.scheduler)

        self.engine = TimerEngine(
            clock, scheduler,
            onDisplay=self.onDisplay,
            onStateChanged=self.onStateChanged,
            refresh_interval_ms=self.config.refresh_interval_ms,
            rounding=self.config.rounding,
        )

        self.title = self.config.title
        self.sub_title = (
            'monotonic clock' if clock.is_monotonic else
            'wall clock'
        )

    def compose(self) -> ComposeResult:
        yield Header(show_clock=False)
        with Center(id="display-pane"):
            yield titled(
                Digits(ZERO_DISPLAY, id="time-display"), 'Seconds',
                subtitle=EngineState.IDLE.value, skip_bottom=False,
            )
        with Center(id="controls-pane"):
            with Horizontal(id="controls"):
                yield Button("Start", id="start-btn", variant="success")
                yield Button("Stop",  id="stop-btn",  variant="error")
                yield Button("Reset", id="reset-btn")
        yield Footer(compact=True)

    def onDisplay(self, text: str) -> None:
        self.time_text = text

    def onStateChanged(self, state: EngineState) -> None:
        self.engine_state = state

    @on(Button.Pressed, '#start-btn')
    def action_start(self) -> None:
        self.engine.start()

    @on(Button.Pressed, '#stop-btn')
    def action_stop(self) -> None:
        self.engine.stop()

    @on(Button.Pressed, '#reset-btn')
    def action_reset(self) -> None:
        self.engine.reset()

    def action_toggle(self) -> None:
        self.engine.toggle()

    def watch_time_text(self, _, new_text: str) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        digits: Digits = self.query_one('#time-display', Digits)
        digits.update(new_text)

    def watch_engine_state(self, _, __) -> None:
        self.updateControls()

    def updateControls(self) -> None:
        try:
            self.screen
        except ScreenStackError:
            return
        digits: Digits = self.query_one('#time-display', Digits)
        digits.border_subtitle = self.engine.state.value
        controls = self.engine.controls()
        self.query_one('#start-btn', Button).disabled = not controls.start_enabled
        self.query_one('#stop-btn',  Button).disabled = not controls.stop_enabled
        self.query_one('#reset-btn', Button).disabled = not controls.reset_enabled

    def on_mount(self) -> None:
        self.updateControls()
        self.query_one('#start-btn', Button).focus()
        self.log(f'clock: {self.engine.clock!r}, scheduler: {self.engine.scheduler!r}')

    def exit(self, result=None, return_code=0, message=None) -> None:
        self.engine.stop()
        return super().exit(result, return_code, message)
