# tabular_trainer/training/engines/colname_sanitize_engine.py
from __future__ import annotations

import re
from collections import Counter
from typing import List, Sequence, Tuple

import pandas as pd

from tabular_trainer.core.artifacts import ColnameMapping
from tabular_trainer.utils.errors import DuplicateColumnName


_WHITESPACE = re.compile(r"\s")
_INVALID = re.compile(r"[^A-Za-z0-9_]")


class ColnameSanitizeEngine:
    """
    ColnameSanitizeEngine（FINAL / FROZEN）

    name -> prefix + name with whitespace / non [A-Za-z0-9_] replaced by "_"

    Collisions left after the transform are resolved by appending "_<k>",
    k = 1-based occurrence index inside the colliding group, in column
    order, until every name is unique.
    """

    def __init__(self, prefix: str = "feat_"):
        self.prefix = prefix

    # ======================================================================
    # Public API
    # ======================================================================
    def sanitize(self, names: Sequence[str]) -> List[str]:
        names = [str(n) for n in names]

        duplicated = [n for n, c in Counter(names).items() if c > 1]
        if duplicated:
            raise DuplicateColumnName(f"Given column names are not unique: {duplicated}")

        sanitized = [self.prefix + self._clean(n) for n in names]
        return self._disambiguate(sanitized)

    def fit_apply(self, X: pd.DataFrame) -> Tuple[pd.DataFrame, ColnameMapping]:
        originals = [str(c) for c in X.columns]
        sanitized = self.sanitize(originals)

        mapping = ColnameMapping(pairs=tuple(zip(originals, sanitized)))

        out = X.copy()
        out.columns = sanitized
        return out, mapping

    def apply(self, X: pd.DataFrame, mapping: ColnameMapping) -> pd.DataFrame:
        missing = [o for o in mapping.originals if o not in X.columns]
        if missing:
            raise KeyError(f"Columns absent from frame: {missing}")

        out = X[mapping.originals].copy()
        out.columns = mapping.sanitized
        return out

    # ======================================================================
    # Internal
    # ======================================================================
    @staticmethod
    def _clean(name: str) -> str:
        name = name.strip()
        name = _WHITESPACE.sub("_", name)
        return _INVALID.sub("_", name)

    @staticmethod
    def _disambiguate(names: List[str]) -> List[str]:
        names = list(names)

        while True:
            counts = Counter(names)
            groups = [n for n in dict.fromkeys(names) if counts[n] > 1]
            if not groups:
                return names

            for group in groups:
                k = 0
                for i, n in enumerate(names):
                    if n == group:
                        k += 1
                        names[i] = f"{group}_{k}"
