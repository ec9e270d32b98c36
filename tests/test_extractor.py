"""Unit tests for mapping sensor JSON onto samples."""

from __future__ import annotations

from typing import Any, Dict

from services.extractor import build_sample, extract_temperatures


def _sensors_payload() -> Dict[str, Any]:
    """Trimmed ``sensors -j`` output from an Intel laptop."""

    return {
        "coretemp-isa-0000": {
            "Adapter": "ISA adapter",
            "Package id 0": {"temp1_input": 61.0, "temp1_max": 100.0, "temp1_crit": 100.0},
            "Core 1": {"temp3_input": 57.0, "temp3_max": 100.0},
            "Core 0": {"temp2_input": 55.0, "temp2_max": 100.0},
        },
        "acpitz-acpi-0": {
            "Adapter": "ACPI interface",
            "temp1": {"temp1_input": 27.8, "temp1_crit": 119.0},
        },
        "nvme-pci-0100": {
            "Adapter": "PCI adapter",
            "Composite": {"temp1_input": 38.85},
        },
    }


def test_extracts_cpu_package_temperature() -> None:
    sample = extract_temperatures(_sensors_payload())

    assert sample.get("CPU") == 61.0


def test_missing_acpi_chip_is_skipped() -> None:
    payload = _sensors_payload()
    del payload["acpitz-acpi-0"]

    sample = extract_temperatures(payload)

    assert "ACPI" not in sample
    assert sample.get("CPU") == 61.0


def test_core_index_maps_to_offset_input_channel() -> None:
    payload = {"coretemp-isa-0000": {"Core 3": {"temp5_input": 42.0, "temp3_input": 99.0}}}

    sample = extract_temperatures(payload)

    assert sample.as_dict() == {"Core#3": 42.0}


def test_order_is_cpu_acpi_cores_then_gpu() -> None:
    sample = build_sample(_sensors_payload(), gpu=48.0)

    assert sample.labels() == ["CPU", "ACPI", "Core#0", "Core#1", "GPU"]


def test_cores_are_sorted_numerically() -> None:
    payload = {
        "coretemp-isa-0000": {
            "Core 10": {"temp12_input": 40.0},
            "Core 2": {"temp4_input": 41.0},
            "Core 1": {"temp3_input": 42.0},
        }
    }

    sample = extract_temperatures(payload)

    assert sample.labels() == ["Core#1", "Core#2", "Core#10"]


def test_non_numeric_and_malformed_fields_are_skipped() -> None:
    payload = {
        "coretemp-isa-0000": {
            "Package id 0": {"temp1_input": "hot"},
            "Core": {"temp2_input": 50.0},
            "Core x": {"temp2_input": 50.0},
            "Core 0": {"temp2_input": True},
            "Core 1": "not-an-object",
            "Core 2": {"temp9_input": 50.0},
        },
        "acpitz-acpi-0": {"temp1": None},
    }

    sample = extract_temperatures(payload)

    assert len(sample) == 0


def test_integer_readings_are_accepted_as_floats() -> None:
    payload = {"coretemp-isa-0000": {"Package id 0": {"temp1_input": 45}}}

    sample = extract_temperatures(payload)

    assert sample.get("CPU") == 45.0
    assert isinstance(sample.get("CPU"), float)


def test_non_object_payload_yields_empty_sample() -> None:
    assert len(extract_temperatures([1, 2, 3])) == 0
    assert len(extract_temperatures(None)) == 0


def test_gpu_is_always_appended() -> None:
    sample = build_sample({}, gpu=0.0)

    assert sample.as_dict() == {"GPU": 0.0}


def test_integer_too_large_for_float_is_skipped() -> None:
    payload = {
        "coretemp-isa-0000": {
            "Package id 0": {"temp1_input": 10**400},
            "Core 0": {"temp2_input": 52.0},
        }
    }

    sample = extract_temperatures(payload)

    assert sample.as_dict() == {"Core#0": 52.0}
