from .cli import app

app(prog_name="tui-stopwatch")
