# tabular_trainer/utils/errors.py
class UserInputError(RuntimeError):
    """
    Raised for invalid user-provided config or input locations.
    Should NOT print traceback.
    """


class TrainingError(RuntimeError):
    """
    Base of the training-run failure taxonomy.

    Every subclass is fatal to the run: the pipeline stops at the first
    one and surfaces it unchanged to the caller.
    """

    kind: str = "TrainingError"


class SchemaViolation(TrainingError):
    """Dataset column not declared in schema, or declared id/target/feature missing from data."""

    kind = "SchemaViolation"


class EmptyColumnError(SchemaViolation):
    """Feature column without a single observed value; no fill value can be learned."""

    kind = "EmptyColumn"


class DuplicateColumnName(TrainingError):
    """Two columns share the same name before sanitization."""

    kind = "DuplicateColumnName"


class UnsupportedModelCategory(TrainingError):
    """modelCategory outside binary_classification / multiclass_classification."""

    kind = "UnsupportedModelCategory"


class UnmappableLabel(TrainingError):
    """Target value absent from the schema's declared class list."""

    kind = "UnmappableLabel"
