"""Polling loop that redraws the temperature dashboard."""

from __future__ import annotations

import logging
import signal
import threading
from contextlib import contextmanager
from datetime import datetime
from typing import Callable, Iterable, Iterator, Optional

from cli.render import render_body, render_header
from models.records import Sample
from models.schemas import MonitorConfig
from services.collector import SensorCollector
from services.deltas import compute_deltas

logger = logging.getLogger(__name__)


class Dashboard:
    """Collects a sample, renders it, and sleeps until stopped.

    Collector errors are not caught here; they end :meth:`run` and reach
    the caller.
    """

    def __init__(
        self,
        collector: SensorCollector,
        config: MonitorConfig,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.collector = collector
        self.config = config
        self._clock = clock
        self._stop_event = threading.Event()
        self.previous: Optional[Sample] = None

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def stop(self) -> None:
        self._stop_event.set()

    def tick(self) -> Sample:
        render_header(self.config.interval, self._clock())
        sample = self.collector.collect()

        deltas = compute_deltas(sample, self.previous) if self.config.delta else None
        render_body(sample, deltas)

        if self.config.delta:
            self.previous = sample.copy()
        return sample

    def run(self, max_ticks: Optional[int] = None) -> int:
        """Loop until stopped or ``max_ticks`` is reached; return the tick count."""
        ticks = 0
        while not self.stopped:
            if max_ticks is not None and ticks >= max_ticks:
                break
            ticks += 1
            logger.debug("Starting tick", extra={"tick": ticks})
            self.tick()
            if max_ticks is not None and ticks >= max_ticks:
                break
            self._sleep()
        return ticks

    def _sleep(self) -> None:
        self._stop_event.wait(self.config.interval)


@contextmanager
def stop_on_signals(
    dashboard: Dashboard,
    signals: Iterable[signal.Signals] = (signal.SIGINT, signal.SIGTERM),
) -> Iterator[None]:
    """Turn the given signals into a cooperative stop for the duration of the block."""

    def _handler(signum: int, _frame: object) -> None:
        logger.info("Stop requested", extra={"label": signal.Signals(signum).name})
        dashboard.stop()

    previous = {}
    for sig in signals:
        previous[sig] = signal.signal(sig, _handler)
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)
