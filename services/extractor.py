"""Map ``sensors -j`` output onto an ordered temperature sample."""

from __future__ import annotations

import logging
import math
from typing import Any, List, Optional, Tuple

from models.records import Sample

logger = logging.getLogger(__name__)

CORETEMP_CHIP = "coretemp-isa-0000"
ACPI_CHIP = "acpitz-acpi-0"
CORE_PREFIX = "Core"
# coretemp numbers its inputs from temp2 for core 0; temp1 is the package.
# Other chip drivers are not known to follow this layout.
CORETEMP_CHANNEL_OFFSET = 2

CPU_LABEL = "CPU"
ACPI_LABEL = "ACPI"
GPU_LABEL = "GPU"


def _lookup(data: Any, *path: str) -> Any:
    node = data
    for key in path:
        if not isinstance(node, dict):
            return None
        node = node.get(key)
    return node


def _as_temperature(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    try:
        value = float(value)
    except OverflowError:
        return None
    if not math.isfinite(value):
        return None
    return value


def _core_readings(chip: Any) -> List[Tuple[int, float]]:
    if not isinstance(chip, dict):
        return []

    cores: list[tuple[int, float]] = []
    for key, fields in chip.items():
        if not key.startswith(CORE_PREFIX):
            continue
        tokens = key.split()
        if len(tokens) < 2:
            logger.debug("Skipping core entry without index", extra={"label": key})
            continue
        try:
            index = int(tokens[1])
        except ValueError:
            logger.debug("Skipping core entry with non-numeric index", extra={"label": key})
            continue
        temperature = _as_temperature(
            _lookup(fields, f"temp{index + CORETEMP_CHANNEL_OFFSET}_input")
        )
        if temperature is None:
            continue
        cores.append((index, temperature))

    cores.sort(key=lambda item: item[0])
    return cores


def extract_temperatures(raw: Any) -> Sample:
    """Build a sample holding CPU, ACPI and per-core readings.

    Fields that are absent or not numeric are left out of the result.
    Cores are ordered by their numeric index, not by the order in which the
    sensor utility lists them.
    """
    sample = Sample()

    cpu = _as_temperature(_lookup(raw, CORETEMP_CHIP, "Package id 0", "temp1_input"))
    if cpu is not None:
        sample.add(CPU_LABEL, cpu)

    acpi = _as_temperature(_lookup(raw, ACPI_CHIP, "temp1", "temp1_input"))
    if acpi is not None:
        sample.add(ACPI_LABEL, acpi)

    for index, temperature in _core_readings(_lookup(raw, CORETEMP_CHIP)):
        label = f"Core#{index}"
        if label in sample:
            logger.debug("Skipping duplicate core index", extra={"label": label})
            continue
        sample.add(label, temperature)

    return sample


def build_sample(raw: Any, gpu: float) -> Sample:
    """Extract sensor readings and append the GPU temperature last."""
    sample = extract_temperatures(raw)
    sample.add(GPU_LABEL, gpu)
    return sample
