from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.data_ingest_engine import DataIngestEngine


class DatasetIngestStep(PipelineStep):
    """
    DatasetIngestStep（FINAL / FROZEN）

    Contract:
    - produces ctx.dataset, typed from the schema
    """

    stage = "dataset_ingest"

    def __init__(self, engine: DataIngestEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or DataIngestEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        schema = ctx.require("schema")

        with self.leaf():
            df = self.engine.read(ctx.train_dir)
            df = self.engine.conform(df, schema)

        ctx.dataset = df
        self.inst.record("rows", len(df))

        logs.info(f"[DatasetIngestStep] rows={len(df)} columns={list(df.columns)}")
        return ctx
