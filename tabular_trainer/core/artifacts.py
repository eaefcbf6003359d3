# tabular_trainer/core/artifacts.py
"""
Learned preprocessing artifacts (FINAL / FROZEN)

Every artifact is created exactly once per training run and never mutated.
`to_payload()` returns the plain structure that is persisted, so an
inference process can read it without importing this package.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional, Sequence, Tuple

import numpy as np
import pandas as pd


# ============================================================
# ImputationMap
# ============================================================
@dataclass(frozen=True)
class ImputationMap:
    """
    column -> fill value, for every column that had a missing value at training.
    """

    fill_values: Dict[str, Any] = field(default_factory=dict)

    def __contains__(self, column: str) -> bool:
        return column in self.fill_values

    def __getitem__(self, column: str) -> Any:
        return self.fill_values[column]

    def __len__(self) -> int:
        return len(self.fill_values)

    @property
    def columns(self) -> List[str]:
        return list(self.fill_values)

    def to_payload(self) -> Dict[str, Any]:
        return dict(self.fill_values)

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "ImputationMap":
        return cls(fill_values=dict(payload))


# ============================================================
# CategoryMap
# ============================================================
@dataclass(frozen=True)
class CategoryMap:
    """
    categorical column -> ordered top-K categories kept at training.
    Anything else is rewritten to `other_label`.
    """

    categories: Dict[str, Tuple[str, ...]] = field(default_factory=dict)
    other_label: str = "Other"

    def __contains__(self, column: str) -> bool:
        return column in self.categories

    def __getitem__(self, column: str) -> Tuple[str, ...]:
        return self.categories[column]

    def __len__(self) -> int:
        return len(self.categories)

    def to_payload(self) -> Dict[str, List[str]]:
        return {col: list(cats) for col, cats in self.categories.items()}

    @classmethod
    def from_payload(
        cls, payload: Dict[str, Sequence[str]], other_label: str = "Other"
    ) -> "CategoryMap":
        return cls(
            categories={col: tuple(cats) for col, cats in payload.items()},
            other_label=other_label,
        )


# ============================================================
# EncodedColumnSet
# ============================================================
@dataclass(frozen=True)
class EncodedColumnSet:
    """
    Ordered indicator columns added by one-hot expansion.
    Order is part of the contract: inference aligns to it, never reorders.
    """

    columns: Tuple[str, ...] = ()

    def __iter__(self) -> Iterator[str]:
        return iter(self.columns)

    def __len__(self) -> int:
        return len(self.columns)

    def __contains__(self, column: str) -> bool:
        return column in self.columns

    def to_payload(self) -> List[str]:
        return list(self.columns)

    @classmethod
    def from_payload(cls, payload: Sequence[str]) -> "EncodedColumnSet":
        return cls(columns=tuple(payload))


# ============================================================
# ColnameMapping
# ============================================================
@dataclass(frozen=True)
class ColnameMapping:
    """
    Ordered (original, sanitized) pairs; invertible by lookup.
    """

    pairs: Tuple[Tuple[str, str], ...] = ()

    def __len__(self) -> int:
        return len(self.pairs)

    @property
    def originals(self) -> List[str]:
        return [o for o, _ in self.pairs]

    @property
    def sanitized(self) -> List[str]:
        return [s for _, s in self.pairs]

    def to_sanitized(self, original: str) -> str:
        for o, s in self.pairs:
            if o == original:
                return s
        raise KeyError(original)

    def to_original(self, sanitized: str) -> str:
        for o, s in self.pairs:
            if s == sanitized:
                return o
        raise KeyError(sanitized)

    def to_payload(self) -> pd.DataFrame:
        return pd.DataFrame(
            {"original": self.originals, "sanitized": self.sanitized},
            columns=["original", "sanitized"],
        )

    @classmethod
    def from_payload(cls, payload: pd.DataFrame) -> "ColnameMapping":
        return cls(
            pairs=tuple(
                zip(
                    payload["original"].astype(str).tolist(),
                    payload["sanitized"].astype(str).tolist(),
                )
            )
        )


# ============================================================
# LabelCodec
# ============================================================
@dataclass(frozen=True)
class LabelCodec:
    """
    Schema-declared class order: class at position i <-> code i.
    """

    classes: Tuple[str, ...]

    def code_of(self, value: Any) -> Optional[int]:
        if value is None or (not isinstance(value, str) and pd.isna(value)):
            return None
        try:
            return self.classes.index(str(value))
        except ValueError:
            return None

    def decode(self, codes: Sequence[int] | np.ndarray) -> List[str]:
        return [self.classes[int(c)] for c in codes]

    def to_payload(self) -> List[str]:
        return list(self.classes)

    @classmethod
    def from_payload(cls, payload: Sequence[str]) -> "LabelCodec":
        return cls(classes=tuple(str(c) for c in payload))
