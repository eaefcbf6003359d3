from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.registry import resolve_model_train_engine


class ModelResolveStep(PipelineStep):
    """
    ModelResolveStep（FINAL / FROZEN）

    Resolve the train engine from schema.modelCategory before any data is
    touched, so an unsupported category fails with nothing persisted.
    """

    stage = "model_resolve"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        schema = ctx.require("schema")

        ctx.model_engine = resolve_model_train_engine(
            model_category=schema.model_category,
            cfg=ctx.cfg,
        )

        logs.info(
            f"[ModelResolveStep] category={schema.model_category} "
            f"engine={ctx.model_engine.__class__.__name__}"
        )
        return ctx
