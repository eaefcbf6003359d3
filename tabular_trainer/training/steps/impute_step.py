from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import IMPUTATION
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.impute_engine import ImputeEngine


class ImputeStep(PipelineStep):
    """
    ImputeStep（FINAL / FROZEN）

    Contract:
    - consumes ctx.X
    - produces ctx.X (no missing values) + ctx.imputation_map
    - persists the map; it is reused verbatim at inference
    """

    stage = "impute"

    def __init__(self, engine: ImputeEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or ImputeEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.leaf():
            X, imputation = self.engine.fit_apply(ctx.require("X"), ctx.require("schema"))

        ctx.X = X
        ctx.imputation_map = imputation
        ctx.store.save(IMPUTATION, imputation.to_payload())

        logs.info(f"[ImputeStep] imputed columns={imputation.columns}")
        return ctx
