from __future__ import annotations

from typing import Optional

import typer
from pydantic import ValidationError

from cli.config import load_config
from cli.dashboard import Dashboard, stop_on_signals
from logging_config import configure_logging
from services.collector import CollectorError, build_default_collector

APP_NAME = "Temperature Checker"
APP_VERSION = "1.0"

app = typer.Typer(
    help=(
        "A useful script to keep an eye on device's temperatures. "
        "It includes information about the CPU, each CORE and the GPU."
    ),
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"{APP_NAME} {APP_VERSION}")
        raise typer.Exit()


def _validation_message(exc: ValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return str(exc)
    message = str(errors[0].get("msg", exc))
    return message.removeprefix("Value error, ")


@app.command()
def main(
    time: str = typer.Option(
        "1",
        "--time",
        "-t",
        metavar="TIME",
        help="Sets the time interval for checking temperature",
    ),
    delta_times: bool = typer.Option(
        False,
        "--delta-times",
        "-d",
        help="Show the change since the previous reading next to each temperature.",
    ),
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Print the version and exit.",
    ),
) -> None:
    """Continuously display CPU, core, ACPI and GPU temperatures."""
    try:
        config = load_config(time=time, delta=delta_times)
    except ValidationError as exc:
        typer.secho(f"Error: {_validation_message(exc)}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    configure_logging()
    dashboard = Dashboard(collector=build_default_collector(), config=config)

    typer.echo("Fetching temperatures, please wait...")
    try:
        with stop_on_signals(dashboard):
            dashboard.run()
    except CollectorError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
