# tabular_trainer/training/engines/category_reduce_engine.py
from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import pandas as pd

from tabular_trainer.core.artifacts import CategoryMap


class CategoryReduceEngine:
    """
    CategoryReduceEngine（FINAL / FROZEN）

    Top-K reduction per categorical column:
    - rank categories by frequency, descending
    - ties keep first-encountered order (stable sort over appearance order)
    - every value outside the top K becomes `other_label`

    Fewer than K distinct values simply yields a shorter list.
    """

    def __init__(self, top_k: int = 3, other_label: str = "Other"):
        self.top_k = top_k
        self.other_label = other_label

    # ======================================================================
    # Public API
    # ======================================================================
    def fit_apply(
        self, X: pd.DataFrame, categorical: Sequence[str]
    ) -> Tuple[pd.DataFrame, CategoryMap]:
        out = X.copy()
        categories: Dict[str, Tuple[str, ...]] = {}

        for col in categorical:
            top = tuple(self.top_categories(out[col], self.top_k))
            categories[col] = top
            out[col] = self._reduce(out[col], top)

        return out, CategoryMap(categories=categories, other_label=self.other_label)

    def apply(self, X: pd.DataFrame, category_map: CategoryMap) -> pd.DataFrame:
        out = X.copy()
        for col, top in category_map.categories.items():
            if col in out.columns:
                out[col] = out[col].where(out[col].isin(top), category_map.other_label)
        return out

    # ======================================================================
    # Internal
    # ======================================================================
    @staticmethod
    def top_categories(series: pd.Series, k: int) -> List:
        observed = series.dropna()
        counts = observed.value_counts(sort=False)
        appearance = pd.unique(observed)

        # sorted() is stable: equal counts keep appearance order
        ranked = sorted(appearance, key=lambda v: -counts[v])
        return list(ranked[:k])

    def _reduce(self, series: pd.Series, top: Tuple) -> pd.Series:
        return series.where(series.isin(top), self.other_label)
