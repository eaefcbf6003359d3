# tabular_trainer/training/engines/label_encode_engine.py
from __future__ import annotations

from typing import Sequence, Tuple

import numpy as np
import pandas as pd

from tabular_trainer.core.artifacts import LabelCodec
from tabular_trainer.utils.errors import UnmappableLabel


class LabelEncodeEngine:
    """
    LabelEncodeEngine（FINAL / FROZEN）

    code(value) = position of value in the schema-declared class list.

    The code table never depends on the data, so it is stable across any
    resampling of the training set. A value outside the declared classes
    (missing target included) is a hard failure.
    """

    def fit_apply(
        self, target: pd.Series, classes: Sequence[str]
    ) -> Tuple[np.ndarray, LabelCodec]:
        codec = LabelCodec(classes=tuple(str(c) for c in classes))
        return self.apply(target, codec), codec

    def apply(self, target: pd.Series, codec: LabelCodec) -> np.ndarray:
        codes = [codec.code_of(v) for v in target.tolist()]

        unmapped = [v for v, c in zip(target.tolist(), codes) if c is None]
        if unmapped:
            examples = list(dict.fromkeys(self._render(v) for v in unmapped))[:5]
            raise UnmappableLabel(
                f"{len(unmapped)} target value(s) not in declared classes "
                f"{list(codec.classes)}: {examples}"
            )

        return np.asarray(codes, dtype=np.int64)

    @staticmethod
    def _render(value) -> str:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return "<missing>"
        return str(value)
