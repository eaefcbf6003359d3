# tabular_trainer/training/engines/schema_load_engine.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError

from tabular_trainer import logs
from tabular_trainer.core.schema import SchemaModel
from tabular_trainer.utils.errors import SchemaViolation, UserInputError
from tabular_trainer.utils.filesystem import FileSystem


class SchemaLoadEngine:
    """
    SchemaLoadEngine（FINAL / FROZEN）

    Responsibility:
    - Locate exactly one *.json schema document in a directory
    - Parse it into an immutable SchemaModel
    """

    suffix = ".json"

    def locate(self, schema_dir: Path) -> Path:
        files = FileSystem.scan_dir(schema_dir, suffix=self.suffix)

        if not files:
            raise UserInputError(f"No schema file (*{self.suffix}) found in {schema_dir}")
        if len(files) > 1:
            names = ", ".join(f.name for f in files)
            raise UserInputError(
                f"Expected exactly one schema file in {schema_dir}, found: {names}"
            )

        return files[0]

    def load(self, schema_dir: Path) -> SchemaModel:
        path = self.locate(Path(schema_dir))
        logs.info(f"[SchemaLoadEngine] reading {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)

        return self.parse(raw)

    @staticmethod
    def parse(raw: Dict[str, Any]) -> SchemaModel:
        try:
            return SchemaModel.model_validate(raw)
        except ValidationError as e:
            raise SchemaViolation(f"Invalid schema document: {e}") from e
