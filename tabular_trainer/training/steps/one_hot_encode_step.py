from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import OHE_COLUMNS
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.one_hot_encode_engine import OneHotEncodeEngine


class OneHotEncodeStep(PipelineStep):
    """
    OneHotEncodeStep（FINAL / FROZEN）

    Contract:
    - consumes ctx.X after category reduction
    - produces ctx.X (expanded) + ctx.encoded_columns
    - skipped (nothing persisted) without categorical features
    """

    stage = "one_hot_encode"

    def __init__(self, engine: OneHotEncodeEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or OneHotEncodeEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        categorical = ctx.require("schema").categorical_features

        with self.leaf():
            X, encoded = self.engine.fit_apply(ctx.require("X"), categorical)

        ctx.X = X
        ctx.encoded_columns = encoded

        if not categorical:
            logs.info("[OneHotEncodeStep] no categorical features, skip")
            return ctx

        ctx.store.save(OHE_COLUMNS, encoded.to_payload())
        logs.info(f"[OneHotEncodeStep] encoded columns={len(encoded)}")
        return ctx
