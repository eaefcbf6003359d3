# tabular_trainer/training/engines/impute_engine.py
from __future__ import annotations

from typing import Any, Dict, Tuple

import pandas as pd

from tabular_trainer.core.artifacts import ImputationMap
from tabular_trainer.core.schema import DataType, SchemaModel
from tabular_trainer.utils.errors import EmptyColumnError


class ImputeEngine:
    """
    ImputeEngine（FINAL / FROZEN）

    Fill values (learned from training data only):
    - NUMERIC     -> median of the non-missing values
    - CATEGORICAL -> first non-missing value in row order (not the mode)

    Only columns with at least one missing value get an entry.
    """

    def fit_apply(
        self, X: pd.DataFrame, schema: SchemaModel
    ) -> Tuple[pd.DataFrame, ImputationMap]:
        out = X.copy()
        fill_values: Dict[str, Any] = {}

        for col in out.columns:
            series = out[col]
            if not series.isna().any():
                continue

            observed = series.dropna()
            if observed.empty:
                raise EmptyColumnError(
                    f"Column '{col}' has no observed value; cannot learn a fill value"
                )

            if schema.data_type(col) is DataType.NUMERIC:
                value = float(observed.median())
            else:
                value = observed.iloc[0]

            out[col] = series.fillna(value)
            fill_values[col] = value

        return out, ImputationMap(fill_values=fill_values)

    def apply(self, X: pd.DataFrame, imputation: ImputationMap) -> pd.DataFrame:
        out = X.copy()
        for col in imputation.columns:
            if col in out.columns:
                out[col] = out[col].fillna(imputation[col])
        return out
