"""Domain models shared across services."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional


@dataclass(slots=True)
class Reading:
    """A single labeled temperature in degrees Celsius."""

    label: str
    value: float


@dataclass
class Sample:
    """Ordered set of readings captured during one tick.

    Iteration follows insertion order, which is also the display order.
    """

    _values: Dict[str, float] = field(default_factory=dict)

    def add(self, label: str, value: float) -> None:
        if label in self._values:
            raise ValueError(f"Duplicate reading label {label!r} in sample.")
        value = float(value)
        if not math.isfinite(value):
            raise ValueError(f"Reading {label!r} is not a finite temperature: {value!r}")
        self._values[label] = value

    def get(self, label: str) -> Optional[float]:
        return self._values.get(label)

    def labels(self) -> List[str]:
        return list(self._values)

    def as_dict(self) -> Dict[str, float]:
        return dict(self._values)

    def copy(self) -> "Sample":
        return Sample(dict(self._values))

    def __iter__(self) -> Iterator[Reading]:
        for label, value in self._values.items():
            yield Reading(label=label, value=value)

    def __len__(self) -> int:
        return len(self._values)

    def __contains__(self, label: object) -> bool:
        return label in self._values
