from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import TOP_K_MAP
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.category_reduce_engine import CategoryReduceEngine


class CategoryReduceStep(PipelineStep):
    """
    CategoryReduceStep（FINAL / FROZEN）

    Skipped (nothing persisted) when the schema has no categorical feature.
    """

    stage = "category_reduce"

    def __init__(self, engine: CategoryReduceEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine

    def run(self, ctx: TrainingContext) -> TrainingContext:
        categorical = ctx.require("schema").categorical_features
        if not categorical:
            logs.info("[CategoryReduceStep] no categorical features, skip")
            return ctx

        engine = self.engine or CategoryReduceEngine(
            top_k=ctx.cfg.top_k,
            other_label=ctx.cfg.other_label,
        )

        with self.leaf():
            X, category_map = engine.fit_apply(ctx.require("X"), categorical)

        ctx.X = X
        ctx.category_map = category_map
        ctx.store.save(TOP_K_MAP, category_map.to_payload())

        logs.info(f"[CategoryReduceStep] top-{engine.top_k} map={category_map.to_payload()}")
        return ctx
