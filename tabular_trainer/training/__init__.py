"""
Training Doctrine (FINAL / FROZEN)

One training run = one closed, finite, schema-described dataset.

------------------------------------------------------------
Run semantics
------------------------------------------------------------

- single pass, single thread, fully materialized in memory
- each step consumes the previous step's output completely
- every learned artifact is created exactly once and never mutated
- the first error stops the run (no partial-success mode)

------------------------------------------------------------
Anti-leakage contract
------------------------------------------------------------

Everything inference needs is learned here and persisted:

    imputation       fill value per column with missing data
    top_3_map        kept categories per categorical column
    ohe              ordered indicator columns
    colname_mapping  original <-> sanitized feature names
    label_encoder    schema-declared class order
    predictor        the boosted model

Inference re-applies these verbatim. It never re-estimates them.
"""
