# tests/conftest.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest
from loguru import logger

from tabular_trainer.config.app_config import AppConfig
from tabular_trainer.config.training_config import TrainingConfig
from tabular_trainer.core.schema import SchemaModel


@pytest.fixture(autouse=True)
def disable_file_logger():
    logger.remove()
    logger.add(lambda msg: None)
    yield


# ============================================================
# Schema helpers
# ============================================================
def schema_document(
    *,
    numeric: List[str] = (),
    categorical: List[str] = (),
    classes: List[str] = ("no", "yes"),
    category: str = "binary_classification",
    id_name: str = "id",
    target_name: str = "label",
) -> Dict:
    features = [{"name": n, "dataType": "NUMERIC"} for n in numeric]
    features += [{"name": n, "dataType": "CATEGORICAL"} for n in categorical]
    return {
        "title": "test schema",
        "modelCategory": category,
        "id": {"name": id_name, "description": "row id"},
        "target": {"name": target_name, "classes": list(classes)},
        "features": features,
    }


@pytest.fixture
def schema_doc():
    return schema_document


@pytest.fixture
def make_schema():
    def _make(**kwargs) -> SchemaModel:
        return SchemaModel.model_validate(schema_document(**kwargs))

    return _make


# ============================================================
# Model I/O directory
# ============================================================
@pytest.fixture
def make_model_io(tmp_path: Path):
    """
    <tmp>/model_inputs_outputs/
        inputs/schema/schema.json
        inputs/data/training/train.csv
    """

    def _make(schema: Dict, csv_text: str, root_name: str = "model_inputs_outputs") -> Path:
        root = tmp_path / root_name

        schema_dir = root / "inputs" / "schema"
        schema_dir.mkdir(parents=True)
        (schema_dir / "schema.json").write_text(json.dumps(schema), encoding="utf-8")

        train_dir = root / "inputs" / "data" / "training"
        train_dir.mkdir(parents=True)
        (train_dir / "train.csv").write_text(csv_text, encoding="utf-8")

        return root

    return _make


@pytest.fixture
def fast_cfg() -> AppConfig:
    return AppConfig(training=TrainingConfig(num_rounds=5))


@pytest.fixture
def to_csv():
    """rows -> CSV text; None cells are written as NA."""

    def _to_csv(header: List[str], rows: List[List[Optional[str]]]) -> str:
        lines = [",".join(header)]
        for row in rows:
            lines.append(",".join("NA" if v is None else str(v) for v in row))
        return "\n".join(lines) + "\n"

    return _to_csv
