from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from tabular_trainer.core.artifacts import LabelCodec
from tabular_trainer.training.engines.label_encode_engine import LabelEncodeEngine
from tabular_trainer.utils.errors import UnmappableLabel


def test_codes_follow_declared_class_order():
    target = pd.Series(["dog", "cat", "bird", "cat"], dtype=object)

    y, codec = LabelEncodeEngine().fit_apply(target, ["cat", "dog", "bird"])

    assert y.tolist() == [1, 0, 2, 0]
    assert y.dtype == np.int64
    assert codec.classes == ("cat", "dog", "bird")


def test_code_table_ignores_data_order():
    a, _ = LabelEncodeEngine().fit_apply(pd.Series(["yes", "no"]), ["no", "yes"])
    b, _ = LabelEncodeEngine().fit_apply(pd.Series(["no", "yes"]), ["no", "yes"])

    assert a.tolist() == [1, 0]
    assert b.tolist() == [0, 1]


def test_value_outside_classes_fails():
    with pytest.raises(UnmappableLabel):
        LabelEncodeEngine().fit_apply(pd.Series(["cat", "fish"]), ["cat", "dog"])


def test_missing_target_fails():
    with pytest.raises(UnmappableLabel):
        LabelEncodeEngine().fit_apply(pd.Series(["cat", np.nan], dtype=object), ["cat", "dog"])


def test_numeric_classes_match_text_target():
    y, codec = LabelEncodeEngine().fit_apply(pd.Series(["1", "0", "1"]), [0, 1])

    assert y.tolist() == [1, 0, 1]
    assert codec.classes == ("0", "1")


def test_decode_roundtrip():
    codec = LabelCodec(classes=("a", "b", "c"))

    y = LabelEncodeEngine().apply(pd.Series(["c", "a"]), codec)

    assert codec.decode(y) == ["c", "a"]


def test_missing_target_reported_as_missing_not_nan_text():
    target = pd.Series(["cat", np.nan, None], dtype=object)

    with pytest.raises(UnmappableLabel) as exc:
        LabelEncodeEngine().fit_apply(target, ["cat", "dog"])

    message = str(exc.value)
    assert "<missing>" in message
    assert "'nan'" not in message
    assert message.startswith("2 target value(s)")


def test_literal_nan_label_reported_verbatim():
    with pytest.raises(UnmappableLabel, match="'nan'"):
        LabelEncodeEngine().fit_apply(pd.Series(["nan"]), ["cat"])
