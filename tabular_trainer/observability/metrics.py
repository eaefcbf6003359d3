#!filepath: tabular_trainer/observability/metrics.py
from dataclasses import dataclass, field
from typing import Any, Dict

from tabular_trainer import logs


@dataclass
class MetricRecorder:
    """
    Run-level counters (rows ingested, features after encoding, ...).
    The last value recorded under a name wins.
    """

    enabled: bool = True
    metrics: Dict[str, Any] = field(default_factory=dict)

    def record(self, name: str, value: Any):
        if not self.enabled:
            return
        self.metrics[name] = value
        logs.debug(f"[Metric] {name}={value}")

    def snapshot(self) -> Dict[str, Any]:
        return dict(self.metrics)
