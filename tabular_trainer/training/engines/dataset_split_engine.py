# tabular_trainer/training/engines/dataset_split_engine.py
from __future__ import annotations

from typing import Tuple

import pandas as pd

from tabular_trainer.core.schema import SchemaModel


class DatasetSplitEngine:
    """
    DatasetSplitEngine（FINAL / FROZEN）

    Responsibility:
    - Separate the identifier and the target from the feature columns

    Guarantees:
    - feature column order == ingestion order
    - ids / target keep the dataset's row order
    """

    def split(
        self, df: pd.DataFrame, schema: SchemaModel
    ) -> Tuple[pd.DataFrame, pd.Series, pd.Series]:
        ids = df[schema.id_name].copy()
        target = df[schema.target_name].copy()
        X = df.drop(columns=[schema.id_name, schema.target_name])
        return X, ids, target
