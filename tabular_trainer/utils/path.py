#!filepath: tabular_trainer/utils/path.py
from __future__ import annotations

from pathlib import Path

from tabular_trainer import logs


class PathManager:
    """
    Directory layout of one model I/O root:

    <root>/
     ├── inputs/
     │     ├── schema/              <- exactly one *.json
     │     └── data/training/       <- exactly one *.csv
     └── model/
           └── artifacts/
                 └── predictor/

    Every location is resolved from the injected root; nothing is global.
    """

    def __init__(
        self,
        root: Path | str,
        *,
        schema_dir: str = "inputs/schema",
        train_dir: str = "inputs/data/training",
        artifacts_dir: str = "model/artifacts",
    ):
        self._root = Path(root).resolve()
        self._schema_dir = schema_dir
        self._train_dir = train_dir
        self._artifacts_dir = artifacts_dir
        logs.debug(f"[PathManager] root = {self._root}")

    @classmethod
    def from_config(cls, cfg) -> "PathManager":
        return cls(
            cfg.root,
            schema_dir=cfg.schema_dir,
            train_dir=cfg.train_dir,
            artifacts_dir=cfg.artifacts_dir,
        )

    def root(self) -> Path:
        return self._root

    # ---------------------------------------------------------
    # inputs/
    # ---------------------------------------------------------
    def schema_dir(self) -> Path:
        return self._root / self._schema_dir

    def train_dir(self) -> Path:
        return self._root / self._train_dir

    # ---------------------------------------------------------
    # model/
    # ---------------------------------------------------------
    def artifacts_dir(self) -> Path:
        return self._root / self._artifacts_dir
