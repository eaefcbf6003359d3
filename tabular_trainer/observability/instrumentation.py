#!filepath: tabular_trainer/observability/instrumentation.py
from __future__ import annotations

import time
from collections import OrderedDict
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any, Dict, Iterator

from tabular_trainer.observability.metrics import MetricRecorder
from tabular_trainer.observability.timeline_reporter import TimelineReporter


@dataclass
class Instrumentation:
    """
    Instrumentation (leaf-only accounting + parent scope).

    Rules:
    1. Timeline only records leaf timers (record=True)
    2. Step-level timers are scope boundaries only (record=False)
    3. A leaf entered twice accumulates into one timeline entry
    """

    enabled: bool = True

    def __post_init__(self):
        self.metrics = MetricRecorder(enabled=self.enabled)

        # leaf name -> accumulated seconds, first-entry order
        self.timeline: Dict[str, float] = OrderedDict()

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        if not self.enabled:
            yield
            return

        start = time.perf_counter()
        try:
            yield
        finally:
            if record:
                elapsed = time.perf_counter() - start
                self.timeline[name] = self.timeline.get(name, 0.0) + elapsed

    def record(self, name: str, value: Any):
        self.metrics.record(name, value)

    def snapshot(self) -> Dict[str, Any]:
        return self.metrics.snapshot()

    def generate_timeline_report(self, run_id: str):
        TimelineReporter(self.timeline, run_id).print()


class NoOpInstrumentation:
    """Observability disabled: same surface, no state."""

    @contextmanager
    def timer(self, name: str, *, record: bool = True) -> Iterator[None]:
        yield

    def record(self, name: str, value: Any):
        pass

    def snapshot(self) -> Dict[str, Any]:
        return {}

    def generate_timeline_report(self, run_id: str):
        pass
