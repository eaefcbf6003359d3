#!filepath: tests/base_test/test_logger.py
from loguru import logger

from tabular_trainer import logs
from tabular_trainer.config.log_config import LogConfig
from tabular_trainer.utils.logger import init_logging


def capture():
    records = []
    sink_id = logger.add(lambda msg: records.append(msg.record), level="DEBUG")
    return records, sink_id


def test_run_scope_tags_records():
    records, sink_id = capture()

    with logs.run_scope("run-1"):
        logs.info("inside")
    logs.info("outside")

    logger.remove(sink_id)

    assert records[0]["extra"]["run_id"] == "run-1"
    assert records[1]["extra"].get("run_id") != "run-1"


def test_init_logging_writes_file(tmp_path):
    log_dir = tmp_path / "logs"
    init_logging(LogConfig(dir=str(log_dir), level="INFO"))

    with logs.run_scope("file-run"):
        logs.info("hello file")
    logger.complete()
    logger.remove()

    files = list(log_dir.glob("train_*.log"))
    assert len(files) == 1
    text = files[0].read_text(encoding="utf-8")
    assert "file-run" in text
    assert "hello file" in text
