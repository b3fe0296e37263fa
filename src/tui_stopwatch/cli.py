from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from .config import StopwatchConfig

app = typer.Typer(add_completion=False)


def loadConfig(
    config_path: Optional[str],
    refresh_ms: Optional[float] = None,
    scheduler: Optional[str] = None,
    clock: Optional[str] = None,
    rounding: Optional[str] = None,
) -> StopwatchConfig:
    base = (
        StopwatchConfig.fromFile(config_path) if config_path is not None
        else StopwatchConfig()
    )
    return base.overridden(
        refresh_interval_ms=refresh_ms,
        scheduler=scheduler,
        clock=clock,
        rounding=rounding,
    )


@app.command()
def main(
    config_path: Optional[str] = typer.Option(
        None, "--config", "-c", help="JSON config file. Missing file means defaults.",
    ),
    refresh_ms: Optional[float] = typer.Option(
        None, "--refresh-ms", help="Display refresh period in milliseconds, e.g. 16",
    ),
    scheduler: Optional[str] = typer.Option(
        None, help="Refresh loop: 'frame' (re-armed each tick) or 'interval'",
    ),
    clock: Optional[str] = typer.Option(
        None, help="Time source: 'auto', 'monotonic' or 'wall'",
    ),
    rounding: Optional[str] = typer.Option(
        None, help="Display rounding: 'half_up' or 'half_even'",
    ),
    dump_config: bool = typer.Option(
        False, "--dump-config", help="Print the effective config as JSON and exit",
    ),
) -> None:
    """Run the stopwatch in the terminal."""
    try:
        config = loadConfig(config_path, refresh_ms, scheduler, clock, rounding)
    except ValidationError as e:
        typer.echo(f"Invalid config:\n{e}", err=True)
        raise typer.Exit(code=2)
    except (ValueError, OSError) as e:  # malformed JSON, directory, no permission
        typer.echo(f"Could not read {config_path}: {e}", err=True)
        raise typer.Exit(code=2)

    if dump_config:
        typer.echo(config.model_dump_json(indent=2))
        raise typer.Exit()

    from .UI import UI
    UI(config).run()


if __name__ == "__main__":
    app()
