#!filepath: tabular_trainer/observability/timeline_reporter.py
from typing import Dict

from tabular_trainer import logs


class TimelineReporter:
    """
    Per-run timeline: leaf name, seconds, share of the run total.
    """

    def __init__(self, timeline: Dict[str, float], run_id: str):
        self.timeline = timeline
        self.run_id = run_id

    def lines(self):
        total = sum(self.timeline.values())
        for name, sec in self.timeline.items():
            share = 100.0 * sec / total if total > 0 else 0.0
            yield f"{str(name):<24} {sec:>8.3f}s {share:>5.1f}%"
        yield f"{'total':<24} {total:>8.3f}s"

    def print(self):
        logs.info(f"[Timeline] Pipeline timeline for {self.run_id}")
        for line in self.lines():
            logs.info(f"[Timeline] {line}")
