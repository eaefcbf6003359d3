from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

import numpy as np
import pandas as pd

from tabular_trainer.training.engines.train_result import TrainResult


class ModelTrainEngine(ABC):
    """
    Abstract ModelTrainEngine (FINAL)

    A concrete engine decides:
    - objective / eval metric for its model category
    - how the hyperparameter set is derived from config (+ observed labels)
    """

    task: str = ""

    def __init__(self, cfg):
        self.cfg = cfg

    @abstractmethod
    def params(self, y: np.ndarray) -> Dict[str, Any]:
        """
        Hyperparameter set; pure function of (category, cfg, y).
        """
        raise NotImplementedError

    @abstractmethod
    def train(self, *, X: pd.DataFrame, y: np.ndarray) -> TrainResult:
        raise NotImplementedError
