from __future__ import annotations

from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext


class ModelTrainStep(PipelineStep):
    """
    ModelTrainStep（FINAL）

    Contract:
    - consumes ctx.X / ctx.y / ctx.model_engine
    - produces ctx.train_result
    """

    stage = "model_train"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        engine = ctx.require("model_engine")

        with self.leaf():
            result = engine.train(X=ctx.require("X"), y=ctx.require("y"))

        ctx.train_result = result
        ctx.metrics.update(result.metrics)
        return ctx
