#!filepath: tests/observability/test_metrics.py

from tabular_trainer.observability.metrics import MetricRecorder


def test_metric_record():
    m = MetricRecorder(enabled=True)
    m.record("rows", 123)

    assert m.metrics["rows"] == 123


def test_metric_disabled():
    m = MetricRecorder(enabled=False)
    m.record("rows", 123)

    assert "rows" not in m.metrics
