from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import COLNAME_MAPPING
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.colname_sanitize_engine import ColnameSanitizeEngine


class ColnameSanitizeStep(PipelineStep):
    """
    Contract:
    - consumes ctx.X with final feature columns
    - produces ctx.X with safe identifiers + ctx.colname_mapping (persisted as CSV)
    """

    stage = "colname_sanitize"

    def __init__(self, engine: ColnameSanitizeEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        engine = self.engine or ColnameSanitizeEngine(prefix=ctx.cfg.colname_prefix)

        with self.leaf():
            X, mapping = engine.fit_apply(ctx.require("X"))

        ctx.X = X
        ctx.colname_mapping = mapping
        self.inst.record("features", len(mapping))
        ctx.store.save(COLNAME_MAPPING, mapping.to_payload())

        logs.info(f"[ColnameSanitizeStep] renamed {len(mapping)} columns")
        return ctx
