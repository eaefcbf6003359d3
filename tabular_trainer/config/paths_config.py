#!filepath: tabular_trainer/config/paths_config.py
from pydantic import BaseModel


class PathsConfig(BaseModel):
    """
    Model I/O locations, relative to `root`.
    """

    root: str = "model_inputs_outputs"
    schema_dir: str = "inputs/schema"
    train_dir: str = "inputs/data/training"
    artifacts_dir: str = "model/artifacts"
