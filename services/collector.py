"""Run the external temperature utilities and gather their output."""

from __future__ import annotations

import json
import logging
import math
import subprocess
from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Optional, Sequence

from models.records import Sample
from services.extractor import build_sample
from settings import get_settings

logger = logging.getLogger(__name__)

GPU_QUERY_ARGS = ("--query-gpu=temperature.gpu", "--format=csv,noheader")


class CollectorError(Exception):
    """Raised when sensor data cannot be obtained."""

    def __init__(
        self, message: str, command: Sequence[str], returncode: Optional[int] = None
    ) -> None:
        super().__init__(message)
        self.command = tuple(command)
        self.returncode = returncode


class ProcessFailed(CollectorError):
    """The utility could not be started or exited with a non-zero status."""


class ParseFailed(CollectorError):
    """The utility produced output that could not be decoded."""


@dataclass(slots=True)
class RawSensorData:
    """Undecoded collector output: parsed sensor JSON plus the GPU reading."""

    sensors: Any
    gpu: float


class SensorCollector:
    """Invokes ``sensors`` and ``nvidia-smi`` one after the other."""

    def __init__(self, sensors_command: str = "sensors", gpu_command: str = "nvidia-smi") -> None:
        self.sensors_command = sensors_command
        self.gpu_command = gpu_command

    def collect(self) -> Sample:
        raw = self.collect_raw()
        return build_sample(raw.sensors, raw.gpu)

    def collect_raw(self) -> RawSensorData:
        sensors_output = self._run([self.sensors_command, "-j"], "Failed to fetch temperatures")
        try:
            sensors = json.loads(sensors_output)
        except json.JSONDecodeError as exc:
            logger.error(
                "Sensor utility returned malformed JSON",
                extra={"command": self.sensors_command},
            )
            raise ParseFailed(
                f"Could not parse {self.sensors_command} output: {exc}",
                command=[self.sensors_command, "-j"],
            ) from exc

        gpu_output = self._run(
            [self.gpu_command, *GPU_QUERY_ARGS], "Failed to fetch NVIDIA temperatures"
        )
        return RawSensorData(sensors=sensors, gpu=self._parse_gpu(gpu_output))

    def _run(self, command: list[str], failure_message: str) -> str:
        logger.debug("Running sensor utility", extra={"command": " ".join(command)})
        try:
            completed = subprocess.run(
                command,
                capture_output=True,
                text=True,
                errors="replace",
                check=False,
            )
        except OSError as exc:
            logger.error("Could not start sensor utility", extra={"command": command[0]})
            raise ProcessFailed(f"{failure_message}: {exc}", command=command) from exc

        if completed.returncode != 0:
            logger.error(
                "Sensor utility exited with an error",
                extra={"command": command[0], "returncode": completed.returncode},
            )
            raise ProcessFailed(
                f"{failure_message} ({command[0]} exited with status {completed.returncode})",
                command=command,
                returncode=completed.returncode,
            )
        return completed.stdout

    @staticmethod
    def _parse_gpu(output: str) -> float:
        candidate = output.strip()
        try:
            value = float(candidate)
        except ValueError:
            logger.debug("Unparseable GPU temperature, using 0.0", extra={"raw_value": candidate})
            return 0.0
        if not math.isfinite(value):
            logger.debug("Non-finite GPU temperature, using 0.0", extra={"raw_value": candidate})
            return 0.0
        return value


@lru_cache
def build_default_collector() -> SensorCollector:
    """Factory that wires the collector with configured executables."""
    settings = get_settings()
    return SensorCollector(
        sensors_command=settings.sensors_command,
        gpu_command=settings.gpu_command,
    )
