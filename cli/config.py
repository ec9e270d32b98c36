from __future__ import annotations

from typing import Optional

from models.schemas import MonitorConfig

DEFAULT_INTERVAL = 1.0


def _read_float(value: Optional[str], default: float) -> float:
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    try:
        return float(candidate)
    except ValueError:
        return default


def load_config(time: Optional[str] = None, delta: bool = False) -> MonitorConfig:
    """Build a validated config; unparseable intervals fall back to one second.

    Raises ``pydantic.ValidationError`` when the interval is below the minimum.
    """
    return MonitorConfig(interval=_read_float(time, DEFAULT_INTERVAL), delta=delta)
