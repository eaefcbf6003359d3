# tabular_trainer/workflows/offline_training.py
from __future__ import annotations

from pathlib import Path

from tabular_trainer.config.app_config import AppConfig
from tabular_trainer.observability.instrumentation import Instrumentation
from tabular_trainer.pipeline.artifact_store import ArtifactStore, FileArtifactStore
from tabular_trainer.training.pipeline import TrainingPipeline
from tabular_trainer.training.steps.artifact_persist_step import ArtifactPersistStep
from tabular_trainer.training.steps.category_reduce_step import CategoryReduceStep
from tabular_trainer.training.steps.colname_sanitize_step import ColnameSanitizeStep
from tabular_trainer.training.steps.dataset_ingest_step import DatasetIngestStep
from tabular_trainer.training.steps.dataset_split_step import DatasetSplitStep
from tabular_trainer.training.steps.impute_step import ImputeStep
from tabular_trainer.training.steps.label_encode_step import LabelEncodeStep
from tabular_trainer.training.steps.model_resolve_step import ModelResolveStep
from tabular_trainer.training.steps.model_train_step import ModelTrainStep
from tabular_trainer.training.steps.one_hot_encode_step import OneHotEncodeStep
from tabular_trainer.training.steps.schema_resolve_step import SchemaResolveStep
from tabular_trainer.utils.path import PathManager


def build_offline_training(
    cfg: AppConfig | None = None,
    *,
    root: Path | str | None = None,
    store: ArtifactStore | None = None,
    inst: Instrumentation | None = None,
) -> TrainingPipeline:
    """
    Offline Training Workflow (FINAL / FROZEN)

    ingest -> split -> impute -> reduce -> one-hot -> sanitize
           -> label-encode -> train -> persist
    """
    if cfg is None:
        cfg = AppConfig.load()

    paths = cfg.paths if root is None else cfg.paths.model_copy(update={"root": str(root)})
    pm = PathManager.from_config(paths)

    if store is None:
        store = FileArtifactStore(pm.artifacts_dir())
    if inst is None:
        inst = Instrumentation()

    return TrainingPipeline(
        steps=[
            SchemaResolveStep(inst=inst),
            ModelResolveStep(inst=inst),
            DatasetIngestStep(inst=inst),
            DatasetSplitStep(inst=inst),
            ImputeStep(inst=inst),
            CategoryReduceStep(inst=inst),
            OneHotEncodeStep(inst=inst),
            ColnameSanitizeStep(inst=inst),
            LabelEncodeStep(inst=inst),
            ModelTrainStep(inst=inst),
            ArtifactPersistStep(inst=inst),
        ],
        store=store,
        inst=inst,
        cfg=cfg.training,
        schema_dir=pm.schema_dir(),
        train_dir=pm.train_dir(),
    )
