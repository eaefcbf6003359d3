from __future__ import annotations

from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.dataset_split_engine import DatasetSplitEngine


class DatasetSplitStep(PipelineStep):
    """
    Contract:
    - consumes ctx.dataset (and releases it)
    - produces ctx.X / ctx.ids / ctx.target
    """

    stage = "dataset_split"

    def __init__(self, engine: DatasetSplitEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or DatasetSplitEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.leaf():
            X, ids, target = self.engine.split(ctx.require("dataset"), ctx.require("schema"))

        ctx.X, ctx.ids, ctx.target = X, ids, target
        ctx.dataset = None
        return ctx
