"""Change tracking between consecutive samples."""

from __future__ import annotations

from typing import Dict, Optional

from models.records import Sample


def compute_deltas(current: Sample, previous: Optional[Sample]) -> Dict[str, float]:
    """Return ``current - previous`` for every label present in both samples.

    Labels that only exist in ``current`` are omitted, so callers can render
    a delta only where one is defined.
    """
    if not previous:
        return {}

    deltas: Dict[str, float] = {}
    for reading in current:
        before = previous.get(reading.label)
        if before is None:
            continue
        deltas[reading.label] = reading.value - before
    return deltas
