from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache


_SENSORS_COMMAND_ENV = "TEMPCHECK_SENSORS_COMMAND"
_GPU_COMMAND_ENV = "TEMPCHECK_GPU_COMMAND"
_LOG_LEVEL_ENV = "LOG_LEVEL"


@dataclass(frozen=True)
class Settings:
    sensors_command: str
    gpu_command: str
    log_level: str


def _read_str_env(name: str, default: str) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    candidate = value.strip()
    return candidate or default


def _read_log_level(default: str) -> str:
    value = os.getenv(_LOG_LEVEL_ENV)
    if value is None:
        return default
    candidate = value.strip()
    if not candidate:
        return default
    return candidate.upper()


@lru_cache
def get_settings() -> Settings:
    return Settings(
        sensors_command=_read_str_env(_SENSORS_COMMAND_ENV, "sensors"),
        gpu_command=_read_str_env(_GPU_COMMAND_ENV, "nvidia-smi"),
        log_level=_read_log_level("WARNING"),
    )
