# tabular_trainer/training/pipeline.py
from __future__ import annotations

from pathlib import Path
from typing import List

from tabular_trainer import logs
from tabular_trainer.observability.instrumentation import Instrumentation
from tabular_trainer.pipeline.artifact_store import ArtifactStore
from tabular_trainer.pipeline.step import PipelineStep
from tabular_trainer.training.context import TrainingContext
from tabular_trainer.utils.errors import TrainingError


class TrainingPipeline:
    """
    TrainingPipeline（FINAL / FROZEN）

    Semantics:
    - single pass, single thread: each step fully consumes the previous output
    - steps execute semantics, the pipeline only sequences them
    - fail fast: the first error stops the run; artifacts already written stay
    """

    def __init__(
        self,
        *,
        steps: List[PipelineStep],
        store: ArtifactStore,
        inst: Instrumentation,
        cfg,
        schema_dir: Path,
        train_dir: Path,
    ):
        self.steps = steps
        self.store = store
        self.inst = inst
        self.cfg = cfg
        self.schema_dir = Path(schema_dir)
        self.train_dir = Path(train_dir)

    def run(self, run_id: str) -> TrainingContext:
        with logs.run_scope(run_id):
            return self._run(run_id)

    def _run(self, run_id: str) -> TrainingContext:
        logs.info(f"[TrainingPipeline] START run_id={run_id}")

        ctx = TrainingContext(
            run_id=run_id,
            cfg=self.cfg,
            inst=self.inst,
            store=self.store,
            schema_dir=self.schema_dir,
            train_dir=self.train_dir,
        )

        for step in self.steps:
            try:
                with step.timed():
                    ctx = step.run(ctx)
            except Exception as e:
                kind = e.kind if isinstance(e, TrainingError) else type(e).__name__
                logs.exception(
                    f"[TrainingPipeline] {step.step_name} failed kind={kind}: {e}"
                )
                raise

        self.inst.generate_timeline_report(run_id)
        logs.info(f"[TrainingPipeline] DONE run_id={run_id}")
        return ctx
