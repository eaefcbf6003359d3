# tabular_trainer/training/engines/one_hot_encode_engine.py
from __future__ import annotations

from typing import Sequence, Tuple

import pandas as pd

from tabular_trainer.core.artifacts import EncodedColumnSet


class OneHotEncodeEngine:
    """
    OneHotEncodeEngine（FINAL / FROZEN）

    Expansion:
    - one 0/1 indicator per observed value, named "<column>_<value>"
    - source columns are dropped
    - indicators are appended after the remaining columns, per source column
      in the given order, values sorted

    EncodedColumnSet == expanded columns - pre-expansion columns (ordered).
    """

    prefix_sep = "_"

    def fit_apply(
        self, X: pd.DataFrame, categorical: Sequence[str]
    ) -> Tuple[pd.DataFrame, EncodedColumnSet]:
        if not categorical:
            return X, EncodedColumnSet()

        expanded = self._expand(X, categorical)

        before = set(X.columns)
        encoded = tuple(c for c in expanded.columns if c not in before)

        return expanded, EncodedColumnSet(columns=encoded)

    def apply(
        self,
        X: pd.DataFrame,
        categorical: Sequence[str],
        encoded: EncodedColumnSet,
    ) -> pd.DataFrame:
        """
        Expand, then align to the training column set:
        - missing indicators are padded with 0
        - indicators unseen at training are dropped
        - order is the training order
        """
        if not categorical:
            return X

        expanded = self._expand(X, categorical)
        kept = [c for c in X.columns if c not in set(categorical)]

        return expanded.reindex(columns=kept + list(encoded), fill_value=0)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _expand(self, X: pd.DataFrame, categorical: Sequence[str]) -> pd.DataFrame:
        return pd.get_dummies(
            X,
            columns=list(categorical),
            prefix=list(categorical),
            prefix_sep=self.prefix_sep,
            dtype="int8",
        )
