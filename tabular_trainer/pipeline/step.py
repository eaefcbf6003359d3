from __future__ import annotations

from tabular_trainer.observability.instrumentation import (
    Instrumentation,
    NoOpInstrumentation,
)


class PipelineStep:
    """
    Pipeline step base (FINAL / FROZEN)

    Responsibility (only):
      1. orchestration of ONE stage over the context
      2. step-level time boundary (parent scope)

    Rules:
      - the step itself never enters the timeline
      - data semantics live in the engine, timed as a leaf
      - instrumentation is optional; step behaviour never depends on it
    """

    stage: str = ""

    def __init__(self, inst: Instrumentation | None = None):
        self.inst: Instrumentation | NoOpInstrumentation = (
            inst if inst is not None else NoOpInstrumentation()
        )

    # --------------------------------------------------
    # Step identity
    # --------------------------------------------------
    @property
    def step_name(self) -> str:
        return self.__class__.__name__

    # --------------------------------------------------
    # Step-level timer (parent scope, not recorded)
    # --------------------------------------------------
    def timed(self):
        return self.inst.timer(self.step_name, record=False)

    def leaf(self, name: str | None = None):
        return self.inst.timer(name or self.stage or self.step_name)

    # --------------------------------------------------
    # Contract
    # --------------------------------------------------
    def run(self, ctx):
        raise NotImplementedError
