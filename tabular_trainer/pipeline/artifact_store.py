# tabular_trainer/pipeline/artifact_store.py
from __future__ import annotations

import io
import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List

import joblib
import pandas as pd

from tabular_trainer import logs
from tabular_trainer.utils.filesystem import FileSystem


# -----------------------------------------------------------------------------
# Fixed artifact names (addressing contract with the inference side)
# -----------------------------------------------------------------------------
IMPUTATION = "imputation"
OHE_COLUMNS = "ohe"
TOP_K_MAP = "top_3_map"
COLNAME_MAPPING = "colname_mapping"
LABEL_ENCODER = "label_encoder"
ENCODED_TARGET = "encoded_target"
PREDICTOR = "predictor/predictor"
MANIFEST = "artifact"

_FORMATS: Dict[str, str] = {
    COLNAME_MAPPING: "csv",
    MANIFEST: "json",
}


def artifact_format(name: str) -> str:
    return _FORMATS.get(name, "joblib")


class ArtifactStore(ABC):
    """
    ArtifactStore（FINAL / FROZEN）

    Write-once store of learned artifacts, addressable by fixed name.
    """

    @abstractmethod
    def save(self, name: str, payload: Any) -> None:
        ...

    @abstractmethod
    def load(self, name: str) -> Any:
        ...

    @abstractmethod
    def exists(self, name: str) -> bool:
        ...

    @abstractmethod
    def names(self) -> List[str]:
        """Names saved by this store instance, in write order."""
        ...


class FileArtifactStore(ArtifactStore):
    """
    Directory-backed store.

    Formats:
    - colname_mapping -> CSV (original,sanitized)
    - artifact        -> JSON manifest
    - everything else -> joblib blob
    All writes are atomic (tmp -> rename).
    """

    def __init__(self, root: Path | str):
        self.root = Path(root)
        self._written: List[str] = []

    def path_of(self, name: str) -> Path:
        return self.root / f"{name}.{artifact_format(name)}"

    def save(self, name: str, payload: Any) -> None:
        path = self.path_of(name)
        fmt = artifact_format(name)

        if fmt == "csv":
            data = payload.to_csv(index=False).encode("utf-8")
        elif fmt == "json":
            data = json.dumps(payload, indent=2, ensure_ascii=False).encode("utf-8")
        else:
            buf = io.BytesIO()
            joblib.dump(payload, buf)
            data = buf.getvalue()

        FileSystem.safe_write(path, data)
        if name not in self._written:
            self._written.append(name)

        logs.info(f"[ArtifactStore] saved {name} -> {path}")

    def load(self, name: str) -> Any:
        path = self.path_of(name)
        if not path.exists():
            raise FileNotFoundError(f"[ArtifactStore] artifact not found: {path}")

        fmt = artifact_format(name)
        if fmt == "csv":
            return pd.read_csv(path, dtype=str, keep_default_na=False)
        if fmt == "json":
            return json.loads(path.read_text(encoding="utf-8"))
        return joblib.load(path)

    def exists(self, name: str) -> bool:
        return self.path_of(name).exists()

    def names(self) -> List[str]:
        return list(self._written)


class InMemoryArtifactStore(ArtifactStore):
    """Dict-backed store (tests / dry runs)."""

    def __init__(self):
        self._items: Dict[str, Any] = {}

    def save(self, name: str, payload: Any) -> None:
        self._items[name] = payload

    def load(self, name: str) -> Any:
        if name not in self._items:
            raise FileNotFoundError(f"[ArtifactStore] artifact not found: {name}")
        return self._items[name]

    def exists(self, name: str) -> bool:
        return name in self._items

    def names(self) -> List[str]:
        return list(self._items)
