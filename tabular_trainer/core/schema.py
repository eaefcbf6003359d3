# tabular_trainer/core/schema.py
from __future__ import annotations

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict, Field, field_validator


BINARY_CLASSIFICATION = "binary_classification"
MULTICLASS_CLASSIFICATION = "multiclass_classification"


class DataType(str, Enum):
    NUMERIC = "NUMERIC"
    CATEGORICAL = "CATEGORICAL"


class FeatureSpec(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    data_type: DataType = Field(alias="dataType")


class IdSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str


class TargetSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    classes: List[str] = Field(..., min_length=1)

    @field_validator("classes", mode="before")
    @classmethod
    def _classes_as_text(cls, v):
        # JSON may declare numeric classes (0 / 1); data is read as text
        return [str(c) for c in v]


class SchemaModel(BaseModel):
    """
    SchemaModel（FINAL / FROZEN）

    Typed view of the dataset metadata. Pure data, lookups only.
    `modelCategory` is kept as free text on purpose: the unsupported-category
    check belongs to model resolution, not to schema parsing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    features: List[FeatureSpec]
    id: IdSpec
    target: TargetSpec
    model_category: str = Field(alias="modelCategory")

    # ------------------------------------------------------------------
    # lookups
    # ------------------------------------------------------------------
    @property
    def id_name(self) -> str:
        return self.id.name

    @property
    def target_name(self) -> str:
        return self.target.name

    @property
    def target_classes(self) -> List[str]:
        return list(self.target.classes)

    @property
    def feature_names(self) -> List[str]:
        return [f.name for f in self.features]

    @property
    def numeric_features(self) -> List[str]:
        return [f.name for f in self.features if f.data_type is DataType.NUMERIC]

    @property
    def categorical_features(self) -> List[str]:
        """Categorical features that are neither id nor target, in declaration order."""
        roles = {self.id_name, self.target_name}
        return [
            f.name
            for f in self.features
            if f.data_type is DataType.CATEGORICAL and f.name not in roles
        ]

    def data_type(self, name: str) -> DataType:
        for f in self.features:
            if f.name == name:
                return f.data_type
        raise KeyError(name)
