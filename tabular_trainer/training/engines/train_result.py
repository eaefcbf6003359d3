from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class TrainResult:
    """
    TrainResult（FINAL / FROZEN）

    In-memory result of one fit; no I/O semantics.
    """

    model: Any
    params: Dict[str, Any]
    num_rounds: int
    feature_names: List[str] = field(default_factory=list)
    metrics: Dict[str, float] = field(default_factory=dict)
