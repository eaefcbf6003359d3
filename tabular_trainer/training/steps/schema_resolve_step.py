from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.schema_load_engine import SchemaLoadEngine


class SchemaResolveStep(PipelineStep):
    """
    SchemaResolveStep（FINAL / FROZEN）

    Responsibility:
    - Load the single schema document
    - Attach the immutable SchemaModel to context
    """

    stage = "schema_resolve"

    def __init__(self, engine: SchemaLoadEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or SchemaLoadEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        with self.leaf():
            schema = self.engine.load(ctx.schema_dir)

        ctx.schema = schema

        logs.info(
            "[SchemaResolveStep] "
            f"numeric={schema.numeric_features} "
            f"categorical={schema.categorical_features} "
            f"id={schema.id_name} target={schema.target_name} "
            f"category={schema.model_category}"
        )
        return ctx
