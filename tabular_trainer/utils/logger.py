#!filepath: tabular_trainer/utils/logger.py
import os
import sys
from contextlib import contextmanager
from typing import Iterator

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level:<7} | {extra[run_id]} | {message}"
_NO_RUN = "-"


class Logging:
    """
    Training logger (loguru)
    ---------------------------------------
    - stderr sink always on
    - optional daily file sink (rotation / retention)
    - every record carries the run id of the enclosing `run_scope`
    ---------------------------------------
    """

    def __init__(
        self,
        log_dir: str | None = None,
        rotation: str = "1 day",
        retention: str = "30 days",
        log_level: str = "INFO",
    ):
        self.log_dir = log_dir
        self.rotation = rotation
        self.retention = retention
        self.level = log_level

        self._configure()

    def _configure(self) -> None:
        logger.remove()
        logger.configure(extra={"run_id": _NO_RUN})

        logger.add(sink=sys.stderr, level=self.level, format=_FORMAT)

        if self.log_dir:
            os.makedirs(self.log_dir, exist_ok=True)
            logger.add(
                sink=os.path.join(self.log_dir, "train_{time:YYYY-MM-DD}.log"),
                rotation=self.rotation,
                retention=self.retention,
                level=self.level,
                format=_FORMAT,
                enqueue=True,
                backtrace=True,
                diagnose=False,
            )
            logger.debug(f"[Logging] file sink -> {self.log_dir}")

    # ---------- basic interface ----------
    def debug(self, msg: str, *args, **kwargs):
        logger.debug(msg, *args, **kwargs)

    def info(self, msg: str, *args, **kwargs):
        logger.info(msg, *args, **kwargs)

    def warning(self, msg: str, *args, **kwargs):
        logger.warning(msg, *args, **kwargs)

    def error(self, msg: str, *args, **kwargs):
        logger.error(msg, *args, **kwargs)

    def exception(self, msg: str, *args, **kwargs):
        logger.exception(msg, *args, **kwargs)

    # ---------- run scope ----------
    @contextmanager
    def run_scope(self, run_id: str) -> Iterator[None]:
        """
        Tag every record emitted inside the block with `run_id`.
        """
        with logger.contextualize(run_id=run_id):
            yield


def init_logging(cfg) -> Logging:
    """
    Reconfigure the global `logs` sinks from a LogConfig.

    Modules hold a reference to the module-level `logs`, so the object is
    kept and only its loguru sinks are replaced.
    """
    logs.log_dir = cfg.dir
    logs.rotation = cfg.rotation
    logs.retention = cfg.retention
    logs.level = cfg.level
    logs._configure()
    return logs


# default global logs (stderr only, file sink via init_logging)
logs = Logging()
