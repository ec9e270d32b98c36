from __future__ import annotations

from datetime import datetime
from typing import Dict, Iterable, List, Optional

import typer

from models.records import Reading, Sample
from models.schemas import DeltaTier, TemperatureTier

CLEAR_SCREEN = "\x1b[2J\x1b[H"
TIMESTAMP_FORMAT = "%a %b %d %Y %H:%M:%S"
EXIT_HINT = "Press Ctrl+C to exit"
UNIT_SUFFIX = "(°C)"

WARM_THRESHOLD = 50.0
HOT_THRESHOLD = 70.0
SURGE_THRESHOLD = 5.0

_TEMPERATURE_COLORS = {
    TemperatureTier.cool: typer.colors.GREEN,
    TemperatureTier.warm: typer.colors.YELLOW,
    TemperatureTier.hot: typer.colors.RED,
}

_DELTA_COLORS = {
    DeltaTier.falling: typer.colors.GREEN,
    DeltaTier.steady: typer.colors.BLACK,
    DeltaTier.rising: typer.colors.YELLOW,
    DeltaTier.surging: typer.colors.RED,
}


def temperature_tier(value: float) -> TemperatureTier:
    if value < WARM_THRESHOLD:
        return TemperatureTier.cool
    if value < HOT_THRESHOLD:
        return TemperatureTier.warm
    return TemperatureTier.hot


def delta_tier(delta: float) -> DeltaTier:
    if delta < 0:
        return DeltaTier.falling
    if delta == 0:
        return DeltaTier.steady
    if delta < SURGE_THRESHOLD:
        return DeltaTier.rising
    return DeltaTier.surging


def style_temperature(value: float) -> str:
    return typer.style(f"{value:.1f}", fg=_TEMPERATURE_COLORS[temperature_tier(value)])


def style_delta(delta: float) -> str:
    return typer.style(f"{delta:+.1f}", fg=_DELTA_COLORS[delta_tier(delta)])


def format_header(interval: float, now: datetime) -> str:
    return f"Fetching temperatures every {interval:g}s... ({now.strftime(TIMESTAMP_FORMAT)})"


def format_reading(reading: Reading, delta: Optional[float] = None) -> str:
    line = f"{reading.label}\t{UNIT_SUFFIX}\t>>>\t{style_temperature(reading.value)}"
    if delta is not None:
        line += f"\t({style_delta(delta)})"
    return line


def format_readings(sample: Sample, deltas: Optional[Dict[str, float]] = None) -> List[str]:
    deltas = deltas or {}
    return [format_reading(reading, deltas.get(reading.label)) for reading in sample]


def echo_lines(lines: Iterable[str]) -> None:
    for line in lines:
        typer.echo(line)


def clear_screen() -> None:
    typer.echo(CLEAR_SCREEN, nl=False)


def render_header(interval: float, now: datetime) -> None:
    """Wipe the previous frame and print the title line."""
    clear_screen()
    typer.echo(format_header(interval, now))


def render_body(sample: Sample, deltas: Optional[Dict[str, float]] = None) -> None:
    echo_lines(format_readings(sample, deltas))
    typer.echo(EXIT_HINT)
