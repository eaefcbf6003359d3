from __future__ import annotations

from typing import Callable, Dict

from tabular_trainer.config.training_config import TrainingConfig
from tabular_trainer.core.schema import (
    BINARY_CLASSIFICATION,
    MULTICLASS_CLASSIFICATION,
)
from tabular_trainer.training.engines.model.xgb_classifier_train_engine import (
    XGBBinaryTrainEngine,
    XGBMulticlassTrainEngine,
)
from tabular_trainer.training.engines.model_train_engine import ModelTrainEngine
from tabular_trainer.utils.errors import UnsupportedModelCategory

_ENGINE_REGISTRY: Dict[str, Callable[[TrainingConfig], ModelTrainEngine]] = {
    BINARY_CLASSIFICATION: lambda cfg: XGBBinaryTrainEngine(cfg),
    MULTICLASS_CLASSIFICATION: lambda cfg: XGBMulticlassTrainEngine(cfg),
}


def supported_model_categories() -> list[str]:
    return list(_ENGINE_REGISTRY)


def resolve_model_train_engine(
    *, model_category: str, cfg: TrainingConfig
) -> ModelTrainEngine:
    if model_category not in _ENGINE_REGISTRY:
        available = ", ".join(_ENGINE_REGISTRY)
        raise UnsupportedModelCategory(
            f"Unsupported modelCategory '{model_category}'. Available: {available}"
        )

    return _ENGINE_REGISTRY[model_category](cfg)
