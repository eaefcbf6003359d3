# tabular_trainer/training/context.py
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import numpy as np
import pandas as pd

from tabular_trainer.core.artifacts import (
    CategoryMap,
    ColnameMapping,
    EncodedColumnSet,
    ImputationMap,
    LabelCodec,
)
from tabular_trainer.core.schema import SchemaModel
from tabular_trainer.pipeline.artifact_store import ArtifactStore
from tabular_trainer.pipeline.model_artifact import ModelArtifact
from tabular_trainer.training.engines.model_train_engine import ModelTrainEngine
from tabular_trainer.training.engines.train_result import TrainResult


@dataclass
class TrainingContext:
    """
    TrainingContext（FINAL / FROZEN）

    Semantics:
    - One context == one training run
    - run_id is immutable and mandatory
    - the context is the only owner of the dataset; steps hand it on
    """

    # -------------------------
    # Identity (FROZEN)
    # -------------------------
    run_id: str

    # -------------------------
    # Static bindings
    # -------------------------
    cfg: Any
    inst: Any
    store: ArtifactStore
    schema_dir: Path
    train_dir: Path

    # -------------------------
    # Resolved
    # -------------------------
    schema: Optional[SchemaModel] = None
    model_engine: Optional[ModelTrainEngine] = None

    # -------------------------
    # Data (single owner)
    # -------------------------
    dataset: Optional[pd.DataFrame] = None
    X: Optional[pd.DataFrame] = None
    ids: Optional[pd.Series] = None
    target: Optional[pd.Series] = None
    y: Optional[np.ndarray] = None

    # -------------------------
    # Learned artifacts (write-once)
    # -------------------------
    imputation_map: Optional[ImputationMap] = None
    category_map: Optional[CategoryMap] = None
    encoded_columns: Optional[EncodedColumnSet] = None
    colname_mapping: Optional[ColnameMapping] = None
    label_codec: Optional[LabelCodec] = None

    # -------------------------
    # Model
    # -------------------------
    train_result: Optional[TrainResult] = None
    model_artifact: Optional[ModelArtifact] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    def require(self, attr: str):
        value = getattr(self, attr)
        if value is None:
            raise RuntimeError(f"[TrainingContext] '{attr}' is not set; step order is broken")
        return value
