from .schema import DataType, FeatureSpec, SchemaModel
from .artifacts import (
    CategoryMap,
    ColnameMapping,
    EncodedColumnSet,
    ImputationMap,
    LabelCodec,
)

__all__ = [
    "DataType",
    "FeatureSpec",
    "SchemaModel",
    "ImputationMap",
    "CategoryMap",
    "EncodedColumnSet",
    "ColnameMapping",
    "LabelCodec",
]
