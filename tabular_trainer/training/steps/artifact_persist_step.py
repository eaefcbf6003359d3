# tabular_trainer/training/steps/artifact_persist_step.py
from __future__ import annotations

from datetime import datetime, timezone

from tabular_trainer import logs
from tabular_trainer.pipeline.artifact_store import MANIFEST, PREDICTOR
from tabular_trainer.pipeline.model_artifact import ModelArtifact, ModelSpec
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext


class ArtifactPersistStep(PipelineStep):
    """
    ArtifactPersistStep（FINAL / FROZEN）

    Semantics:
    - Persist the trained model
    - Write the run manifest last (its presence marks a complete run)
    - Produces ModelArtifact bound to the run
    """

    stage = "training_finalize"
    model_version = "v1"

    def run(self, ctx: TrainingContext) -> TrainingContext:
        result = ctx.require("train_result")
        schema = ctx.require("schema")

        ctx.store.save(PREDICTOR, result.model)

        spec = ModelSpec(
            family="xgboost",
            task=schema.model_category,
            version=self.model_version,
        )
        created_at = datetime.now(timezone.utc)

        manifest = {
            "run_id": ctx.run_id,
            "created_at": created_at.isoformat(),
            "spec": {
                "family": spec.family,
                "task": spec.task,
                "version": spec.version,
            },
            "params": result.params,
            "num_rounds": result.num_rounds,
            "metrics": dict(ctx.metrics),
            "counters": self.inst.snapshot(),
            "feature_names": list(result.feature_names),
            "artifacts": ctx.store.names(),
        }
        ctx.store.save(MANIFEST, manifest)

        ctx.model_artifact = ModelArtifact(
            path=getattr(ctx.store, "root", None),
            spec=spec,
            run_id=ctx.run_id,
            created_at=created_at,
            feature_names=list(result.feature_names),
            artifacts=ctx.store.names(),
            metrics=dict(ctx.metrics),
        )
        logs.info(f"[ArtifactPersistStep] model_artifact={ctx.model_artifact}")

        return ctx
