# tabular_trainer/pipeline/model_artifact.py
from __future__ import annotations

import json
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Literal


MANIFEST_NAME = "artifact.json"


# ============================================================
# Model Spec (FROZEN)
# ============================================================
@dataclass(frozen=True)
class ModelSpec:
    family: Literal["xgboost"]
    task: Literal["binary_classification", "multiclass_classification"]
    version: str


# ============================================================
# Model Artifact (RUN-SCOPED)
# ============================================================
@dataclass(frozen=True)
class ModelArtifact:
    """
    ModelArtifact（FINAL / FROZEN）

    Semantics:
    - path always points to an artifact ROOT directory
    - NEVER points to a single file
    """

    path: Path | None
    spec: ModelSpec
    run_id: str | None = None
    created_at: datetime | None = None
    feature_names: list[str] | None = None
    artifacts: list[str] | None = None
    metrics: dict[str, Any] | None = None


def resolve_model_artifact_from_dir(artifact_dir: Path) -> ModelArtifact:
    """
    Resolve a persisted ModelArtifact from its manifest.
    """
    meta_path = Path(artifact_dir) / MANIFEST_NAME
    if not meta_path.exists():
        raise RuntimeError(
            f"[ModelArtifact] {MANIFEST_NAME} not found in {artifact_dir}"
        )

    meta = json.loads(meta_path.read_text(encoding="utf-8"))

    spec = ModelSpec(
        family=meta["spec"]["family"],
        task=meta["spec"]["task"],
        version=meta["spec"]["version"],
    )

    return ModelArtifact(
        path=Path(artifact_dir),
        spec=spec,
        run_id=meta.get("run_id"),
        created_at=datetime.fromisoformat(meta["created_at"]),
        feature_names=meta.get("feature_names"),
        artifacts=meta.get("artifacts"),
        metrics=meta.get("metrics"),
    )
