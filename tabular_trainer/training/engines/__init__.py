"""
Training Engines (FINAL / FROZEN)

Each engine owns the COMPLETE semantics of one preprocessing or training
stage. Steps only move values between the TrainingContext and an engine.

Fit / apply
-----------

Every preprocessing engine has two halves:

fit_apply(...)
    Learn an artifact from training data and apply it in the same pass.

apply(...)
    Re-apply a previously learned artifact verbatim. Nothing is
    re-estimated, which is what keeps inference free of data leakage.

Engines MUST NOT:
- read or write artifacts (steps own the ArtifactStore)
- keep a reference to the dataset after returning
- guess column types (the schema decides)
"""
