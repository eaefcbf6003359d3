from __future__ import annotations

import json

import joblib
import numpy as np
import pandas as pd
import pytest
import xgboost as xgb

from tabular_trainer.pipeline.artifact_store import (
    COLNAME_MAPPING,
    ENCODED_TARGET,
    IMPUTATION,
    LABEL_ENCODER,
    MANIFEST,
    OHE_COLUMNS,
    PREDICTOR,
    TOP_K_MAP,
)
from tabular_trainer.pipeline.model_artifact import resolve_model_artifact_from_dir
from tabular_trainer.utils.errors import (
    SchemaViolation,
    UnmappableLabel,
    UnsupportedModelCategory,
)
from tabular_trainer.workflows.offline_training import build_offline_training


HEADER = ["id", "num", "cat", "label"]


def scenario_rows():
    return [
        ["1", "1", "a", "yes"],
        ["2", "2", "a", "no"],
        ["3", None, "a", "yes"],
        ["4", "4", "b", "no"],
        ["5", "5", "c", "yes"],
    ]


# ============================================================
# 1. binary run: every artifact persisted, predictor usable
# ============================================================
def test_binary_run_persists_all_artifacts(make_model_io, schema_doc, to_csv, fast_cfg):
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"]),
        to_csv(HEADER, scenario_rows()),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    store = pipeline.store
    for name in (
        IMPUTATION,
        TOP_K_MAP,
        OHE_COLUMNS,
        COLNAME_MAPPING,
        LABEL_ENCODER,
        ENCODED_TARGET,
        PREDICTOR,
        MANIFEST,
    ):
        assert store.exists(name), name

    artifacts_dir = root / "model" / "artifacts"
    assert (artifacts_dir / "predictor" / "predictor.joblib").exists()
    assert (artifacts_dir / "colname_mapping.csv").exists()
    assert ctx.model_artifact.path == artifacts_dir.resolve()

    # learned state
    assert store.load(IMPUTATION) == {"num": 3.0}
    assert store.load(TOP_K_MAP) == {"cat": ["a", "b", "c"]}
    assert store.load(OHE_COLUMNS) == ["cat_a", "cat_b", "cat_c"]
    assert store.load(LABEL_ENCODER) == ["no", "yes"]
    assert store.load(ENCODED_TARGET).tolist() == [1, 0, 1, 0, 1]

    mapping = store.load(COLNAME_MAPPING)
    assert mapping["original"].tolist() == ["num", "cat_a", "cat_b", "cat_c"]
    assert mapping["sanitized"].tolist() == [
        "feat_num",
        "feat_cat_a",
        "feat_cat_b",
        "feat_cat_c",
    ]

    # no "Other" rows: three distinct values with K=3
    assert "cat_Other" not in ctx.encoded_columns

    booster = joblib.load(artifacts_dir / "predictor" / "predictor.joblib")
    dtest = xgb.DMatrix(
        ctx.X.to_numpy(dtype=np.float64),
        feature_names=list(ctx.X.columns),
    )
    preds = booster.predict(dtest)
    assert preds.shape == (5,)
    assert ((preds >= 0) & (preds <= 1)).all()


def test_manifest_is_written_last_and_resolvable(make_model_io, schema_doc, to_csv, fast_cfg):
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"]),
        to_csv(HEADER, scenario_rows()),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    pipeline.run("run-42")

    artifacts_dir = root / "model" / "artifacts"
    manifest = json.loads((artifacts_dir / "artifact.json").read_text(encoding="utf-8"))

    assert manifest["run_id"] == "run-42"
    assert manifest["spec"]["task"] == "binary_classification"
    assert manifest["params"]["objective"] == "binary:logistic"
    assert manifest["num_rounds"] == 5
    assert "train-logloss" in manifest["metrics"]
    assert manifest["counters"] == {"rows": 5, "features": 4}
    assert manifest["artifacts"][-1] == PREDICTOR
    assert pipeline.store.names()[-1] == MANIFEST

    artifact = resolve_model_artifact_from_dir(artifacts_dir)
    assert artifact.run_id == "run-42"
    assert artifact.feature_names == manifest["feature_names"]


# ============================================================
# 2. multiclass
# ============================================================
def test_multiclass_run(make_model_io, schema_doc, to_csv, fast_cfg):
    rows = [
        [str(i), str(i % 7), c, label]
        for i, (c, label) in enumerate(
            [
                ("red", "cat"),
                ("blue", "dog"),
                ("green", "bird"),
                ("red", "cat"),
                ("pink", "dog"),
                ("grey", "bird"),
                ("blue", "cat"),
                ("red", "dog"),
                ("green", "bird"),
            ]
        )
    ]
    root = make_model_io(
        schema_doc(
            numeric=["num"],
            categorical=["cat"],
            classes=["cat", "dog", "bird"],
            category="multiclass_classification",
        ),
        to_csv(HEADER, rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    assert ctx.train_result.params["num_class"] == 3
    assert ctx.train_result.params["objective"] == "multi:softprob"
    assert len(ctx.category_map["cat"]) == 3
    assert "cat_Other" in ctx.encoded_columns

    booster = pipeline.store.load(PREDICTOR)
    dtest = xgb.DMatrix(
        ctx.X.to_numpy(dtype=np.float64),
        feature_names=list(ctx.X.columns),
    )
    preds = booster.predict(dtest)
    assert preds.shape == (9, 3)
    assert np.allclose(preds.sum(axis=1), 1.0, atol=1e-5)


def test_numeric_only_schema_skips_categorical_artifacts(make_model_io, schema_doc, to_csv, fast_cfg):
    rows = [[str(i), str(i), str(i * 2), "yes" if i % 2 else "no"] for i in range(6)]
    root = make_model_io(
        schema_doc(numeric=["a", "b"]),
        to_csv(["id", "a", "b", "label"], rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    assert not pipeline.store.exists(TOP_K_MAP)
    assert not pipeline.store.exists(OHE_COLUMNS)
    assert pipeline.store.load(IMPUTATION) == {}
    assert list(ctx.X.columns) == ["feat_a", "feat_b"]
    assert pipeline.store.exists(PREDICTOR)


# ============================================================
# 3. failures
# ============================================================
def test_unsupported_category_persists_nothing(make_model_io, schema_doc, to_csv, fast_cfg):
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"], category="regression"),
        to_csv(HEADER, scenario_rows()),
    )

    pipeline = build_offline_training(fast_cfg, root=root)

    with pytest.raises(UnsupportedModelCategory):
        pipeline.run("test-run")

    assert pipeline.store.names() == []
    assert not (root / "model" / "artifacts" / "predictor" / "predictor.joblib").exists()


def test_unmappable_label_stops_before_training(make_model_io, schema_doc, to_csv, fast_cfg):
    rows = scenario_rows()
    rows[4][3] = "maybe"
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"]),
        to_csv(HEADER, rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)

    with pytest.raises(UnmappableLabel):
        pipeline.run("test-run")

    # artifacts of completed steps stay, nothing after the failure
    assert pipeline.store.exists(IMPUTATION)
    assert not pipeline.store.exists(PREDICTOR)
    assert not pipeline.store.exists(MANIFEST)


def test_missing_feature_column_is_schema_violation(make_model_io, schema_doc, to_csv, fast_cfg):
    root = make_model_io(
        schema_doc(numeric=["num", "other"], categorical=["cat"]),
        to_csv(HEADER, scenario_rows()),
    )

    with pytest.raises(SchemaViolation):
        build_offline_training(fast_cfg, root=root).run("test-run")


# ============================================================
# 4. column names that need sanitizing
# ============================================================
def test_awkward_column_names_train(make_model_io, schema_doc, to_csv, fast_cfg):
    header = ["id", "my value", "my-value", "label"]
    rows = [[str(i), str(i), str(10 - i), "yes" if i % 2 else "no"] for i in range(6)]
    root = make_model_io(
        schema_doc(numeric=["my value", "my-value"]),
        to_csv(header, rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    assert list(ctx.X.columns) == ["feat_my_value_1", "feat_my_value_2"]
    assert ctx.colname_mapping.to_original("feat_my_value_2") == "my-value"
    mapping = pipeline.store.load(COLNAME_MAPPING)
    assert isinstance(mapping, pd.DataFrame)
    assert mapping["original"].tolist() == ["my value", "my-value"]


# ============================================================
# 5. text that pandas would read as missing is data here
# ============================================================
def test_none_is_a_valid_target_class(make_model_io, schema_doc, to_csv, fast_cfg):
    rows = [[str(i), str(i), "a", "None" if i % 2 else "Some"] for i in range(4)]
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"], classes=["None", "Some"]),
        to_csv(HEADER, rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    assert ctx.y.tolist() == [1, 0, 1, 0]
    assert pipeline.store.load(LABEL_ENCODER) == ["None", "Some"]


def test_none_is_a_real_category(make_model_io, schema_doc, to_csv, fast_cfg):
    rows = [
        ["1", "1", "Pave", "yes"],
        ["2", "2", "None", "no"],
        ["3", "3", "None", "yes"],
        ["4", "4", "null", "no"],
    ]
    root = make_model_io(
        schema_doc(numeric=["num"], categorical=["cat"]),
        to_csv(HEADER, rows),
    )

    pipeline = build_offline_training(fast_cfg, root=root)
    ctx = pipeline.run("test-run")

    assert pipeline.store.load(IMPUTATION) == {}
    assert ctx.category_map["cat"] == ("None", "Pave", "null")
    assert list(ctx.encoded_columns) == ["cat_None", "cat_Pave", "cat_null"]
