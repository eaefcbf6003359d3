# tabular_trainer/training/engines/model/xgb_classifier_train_engine.py
from __future__ import annotations

from typing import Any, Dict

import numpy as np
import pandas as pd
import xgboost as xgb

from tabular_trainer import logs
from tabular_trainer.core.schema import (
    BINARY_CLASSIFICATION,
    MULTICLASS_CLASSIFICATION,
)
from tabular_trainer.training.engines.model_train_engine import ModelTrainEngine
from tabular_trainer.training.engines.train_result import TrainResult


class XGBClassifierTrainEngine(ModelTrainEngine):
    """
    XGBoost batch classifier (FINAL)

    Shared hyperparameters come from TrainingConfig.booster; subclasses add
    the objective and eval metric of their model category.
    """

    objective: str = ""
    eval_metric: str = ""

    def base_params(self) -> Dict[str, Any]:
        b = self.cfg.booster
        return {
            "objective": self.objective,
            "eval_metric": self.eval_metric,
            "nthread": b.nthread,
            "eta": b.eta,
            "max_depth": b.max_depth,
            "min_child_weight": b.min_child_weight,
            "subsample": b.subsample,
            "colsample_bytree": b.colsample_bytree,
            "seed": b.seed,
        }

    def params(self, y: np.ndarray) -> Dict[str, Any]:
        return self.base_params()

    def train(self, *, X: pd.DataFrame, y: np.ndarray) -> TrainResult:
        params = self.params(y)
        num_rounds = self.cfg.num_rounds
        feature_names = [str(c) for c in X.columns]

        dtrain = xgb.DMatrix(
            X.to_numpy(dtype=np.float64),
            label=y,
            feature_names=feature_names,
        )

        evals_result: Dict[str, Dict[str, list]] = {}
        booster = xgb.train(
            params=params,
            dtrain=dtrain,
            num_boost_round=num_rounds,
            evals=[(dtrain, "train")],
            evals_result=evals_result,
            verbose_eval=False,
        )

        metrics = {
            f"train-{name}": float(values[-1])
            for name, values in evals_result.get("train", {}).items()
            if values
        }

        logs.info(
            f"[{self.__class__.__name__}] trained rounds={num_rounds} "
            f"rows={X.shape[0]} features={X.shape[1]} metrics={metrics}"
        )

        return TrainResult(
            model=booster,
            params=params,
            num_rounds=num_rounds,
            feature_names=feature_names,
            metrics=metrics,
        )


class XGBBinaryTrainEngine(XGBClassifierTrainEngine):
    task = BINARY_CLASSIFICATION
    objective = "binary:logistic"
    eval_metric = "logloss"


class XGBMulticlassTrainEngine(XGBClassifierTrainEngine):
    task = MULTICLASS_CLASSIFICATION
    objective = "multi:softprob"
    eval_metric = "mlogloss"

    def params(self, y: np.ndarray) -> Dict[str, Any]:
        params = self.base_params()
        # number of distinct codes actually observed, not declared
        params["num_class"] = int(len(np.unique(y)))
        return params
