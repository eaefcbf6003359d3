from __future__ import annotations

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import ENCODED_TARGET, LABEL_ENCODER
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.training.engines.label_encode_engine import LabelEncodeEngine


class LabelEncodeStep(PipelineStep):
    """
    LabelEncodeStep（FINAL / FROZEN）

    Contract:
    - consumes ctx.target
    - produces ctx.y (int codes) + ctx.label_codec
    - persists the class order and the encoded target
    """

    stage = "label_encode"

    def __init__(self, engine: LabelEncodeEngine | None = None, inst=None):
        super().__init__(inst)
        self.engine = engine or LabelEncodeEngine()

    def run(self, ctx: TrainingContext) -> TrainingContext:
        schema = ctx.require("schema")

        with self.leaf():
            y, codec = self.engine.fit_apply(ctx.require("target"), schema.target_classes)

        ctx.y = y
        ctx.label_codec = codec
        ctx.store.save(LABEL_ENCODER, codec.to_payload())
        ctx.store.save(ENCODED_TARGET, y)

        logs.info(f"[LabelEncodeStep] classes={list(codec.classes)} rows={len(y)}")
        return ctx
