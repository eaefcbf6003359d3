# tabular_trainer/config/training_config.py
from __future__ import annotations

from pydantic import BaseModel, Field


class BoosterConfig(BaseModel):
    """
    Hyperparameters shared by every supported model category.
    """

    eta: float = 0.3
    max_depth: int = 6
    min_child_weight: float = 1
    subsample: float = 0.8
    colsample_bytree: float = 0.8
    nthread: int = 4
    seed: int = 0


class TrainingConfig(BaseModel):
    """
    TrainingConfig（FINAL / FROZEN）
    """

    # categorical reduction
    top_k: int = Field(default=3, ge=1)
    other_label: str = "Other"

    # column names
    colname_prefix: str = Field(default="feat_", min_length=1)

    # model
    num_rounds: int = Field(default=100, ge=1)
    booster: BoosterConfig = Field(default_factory=BoosterConfig)
