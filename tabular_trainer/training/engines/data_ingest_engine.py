# tabular_trainer/training/engines/data_ingest_engine.py
from __future__ import annotations

import csv
from collections import Counter
from pathlib import Path
from typing import List

import pandas as pd

from tabular_trainer import logs
from tabular_trainer.core.schema import DataType, SchemaModel
from tabular_trainer.utils.errors import (
    DuplicateColumnName,
    SchemaViolation,
    UserInputError,
)
from tabular_trainer.utils.filesystem import FileSystem


class DataIngestEngine:
    """
    DataIngestEngine（FINAL / FROZEN）

    Responsibility:
    - Locate exactly one *.csv training file
    - Fix column names from the header line verbatim (no mangling)
    - Check the columns against the schema
    - Type every column from the schema right after reading

    Contract:
    - missing = the literal token NA, plus blank cells in NUMERIC columns
    - NUMERIC features -> float64 (missing = NaN)
    - CATEGORICAL features, id, target -> text (object, missing = NaN)
    - column order == header order
    """

    suffix = ".csv"
    # only the literal NA token is missing; "None", "null", "nan" stay text
    na_values = ["NA"]

    def locate(self, train_dir: Path) -> Path:
        files = FileSystem.scan_dir(train_dir, suffix=self.suffix)

        if not files:
            raise UserInputError(f"No data file (*{self.suffix}) found in {train_dir}")
        if len(files) > 1:
            names = ", ".join(f.name for f in files)
            raise UserInputError(
                f"Expected exactly one data file in {train_dir}, found: {names}"
            )

        return files[0]

    # ======================================================================
    # Public API
    # ======================================================================
    def read(self, train_dir: Path) -> pd.DataFrame:
        path = self.locate(Path(train_dir))
        header = self.read_header(path)

        duplicated = [name for name, n in Counter(header).items() if n > 1]
        if duplicated:
            raise DuplicateColumnName(f"Duplicate column names in {path.name}: {duplicated}")

        df = pd.read_csv(
            path,
            header=None,
            skiprows=1,
            names=header,
            dtype=str,
            keep_default_na=False,
            na_values=self.na_values,
        )

        logs.info(f"[DataIngestEngine] read {path.name} rows={len(df)} cols={len(header)}")
        return df

    @staticmethod
    def read_header(path: Path) -> List[str]:
        with open(path, "r", encoding="utf-8-sig", newline="") as f:
            return next(csv.reader(f), [])

    def conform(self, df: pd.DataFrame, schema: SchemaModel) -> pd.DataFrame:
        self.validate(df, schema)
        return self.coerce(df, schema)

    # ======================================================================
    # Internal
    # ======================================================================
    @staticmethod
    def validate(df: pd.DataFrame, schema: SchemaModel) -> None:
        columns = list(df.columns)
        roles = {schema.id_name, schema.target_name}

        for role, name in (("id", schema.id_name), ("target", schema.target_name)):
            if name not in columns:
                raise SchemaViolation(f"Declared {role} column '{name}' missing from data")

        declared = set(schema.feature_names)
        undeclared = [c for c in columns if c not in roles and c not in declared]
        if undeclared:
            raise SchemaViolation(f"Columns not declared in schema: {undeclared}")

        absent = [f for f in schema.feature_names if f not in roles and f not in columns]
        if absent:
            raise SchemaViolation(f"Schema features missing from data: {absent}")

    @staticmethod
    def coerce(df: pd.DataFrame, schema: SchemaModel) -> pd.DataFrame:
        out = df.copy()
        roles = {schema.id_name, schema.target_name}

        for col in out.columns:
            if col in roles or schema.data_type(col) is DataType.CATEGORICAL:
                out[col] = out[col].astype(object)
                continue

            text = out[col].astype(object).str.strip()
            # blank numeric cells are missing
            text = text.where(text != "")
            numeric = pd.to_numeric(text, errors="coerce")

            bad = text.notna() & numeric.isna()
            if bad.any():
                examples = text[bad].unique()[:5].tolist()
                raise SchemaViolation(
                    f"NUMERIC column '{col}' holds non-numeric values: {examples}"
                )

            out[col] = numeric.astype("float64")

        return out
