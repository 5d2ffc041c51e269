"""
Main CLI application using Typer.
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import pendulum
import typer
from pendulum import DateTime
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from ..config import AppConfig, get_default_config_path
from ..domain.exceptions import WorkingHoursError

app = typer.Typer(
    name="workinghours",
    help="Count working hours between two timestamps, excluding nights and weekends",
    add_completion=False
)

console = Console()


def _load_config(config_file: Optional[Path]) -> AppConfig:
    """
    Load the configuration file.

    An explicit --config must exist; without it the default path is used
    when present, otherwise the built-in defaults apply.
    """
    if config_file is not None:
        return AppConfig.load_from_yaml(config_file)

    config_path = get_default_config_path()
    if config_path.exists():
        return AppConfig.load_from_yaml(config_path)

    return AppConfig()


def _parse_timestamp(value: str, tz: str) -> DateTime:
    parsed = pendulum.parse(value, tz=tz)
    if not isinstance(parsed, DateTime):
        raise ValueError(f"Not a date or timestamp: '{value}'")
    return parsed


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


@app.command()
def hours(
    start: Annotated[str, typer.Argument(help="Start timestamp, e.g. 2022-01-14T17:30")],
    end: Annotated[str, typer.Argument(help="End timestamp, e.g. 2022-01-17T09:00")],
    config_file: Annotated[Optional[Path], typer.Option("--config", "-c", help="Path to config file. Defaults to ./config.yaml")] = None,
    timezone: Annotated[Optional[str], typer.Option("--timezone", "-z", help="Zone for timestamps without an offset")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Show calculation details.")] = False,
):
    """
    Calculate the working hours between START and END.

    Examples:

        workinghours hours 2022-01-14T17:30 2022-01-17T17:30

        workinghours hours "2022-01-10 09:00" "2022-01-21 17:30" --config work.yaml
    """
    _configure_logging(verbose)

    try:
        config = _load_config(config_file)
        tz = timezone or config.timezone

        start_dt = _parse_timestamp(start, tz)
        end_dt = _parse_timestamp(end, tz)

        calculator = config.build_calculator()
        result = calculator.get_working_hours(start_dt, end_dt)

    except (FileNotFoundError, WorkingHoursError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    if verbose:
        console.print(f"   Window: {calculator.window} ({tz})")
        console.print(f"   Span: {start_dt.format('DD.MM.YYYY HH:mm')} - {end_dt.format('DD.MM.YYYY HH:mm')}")

    console.print(f"{round(result, 4):g}")


@app.command()
def window(
    config_file: Optional[Path] = typer.Option(
        None,
        "--config", "-c",
        help="Path to config file"
    )
):
    """
    Show the configured working window.
    """
    try:
        config = _load_config(config_file)
        working_window = config.working_window.to_window()
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/bold red] {escape(str(e))}")
        raise typer.Exit(1)

    table = Table(
        title="Working window",
        show_header=True,
        header_style="bold cyan"
    )
    table.add_column("Opens", style="bold yellow")
    table.add_column("Closes", style="bold yellow")
    table.add_column("Hours/day")
    table.add_column("Timezone", style="dim")

    table.add_row(
        f"{working_window.start_time():%H:%M}",
        f"{working_window.end_time():%H:%M}",
        f"{working_window.daily_hours():g}",
        config.timezone,
    )

    console.print()
    console.print(table)
    console.print()


@app.command()
def version():
    """
    Show version information.
    """
    from .. import __version__
    console.print(f"\n[bold cyan]workinghours[/bold cyan] version [bold]{__version__}[/bold]\n")


if __name__ == "__main__":
    app()
