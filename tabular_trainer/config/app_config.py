#!filepath: tabular_trainer/config/app_config.py
import os

import yaml
from dotenv import load_dotenv
from pydantic import BaseModel, Field

from .log_config import LogConfig
from .paths_config import PathsConfig
from .training_config import TrainingConfig


def package_root() -> str:
    """
    tabular_trainer/config/app_config.py -> tabular_trainer/config -> tabular_trainer
    """
    return os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))


def project_root() -> str:
    return os.path.abspath(os.path.join(package_root(), ".."))


class AppConfig(BaseModel):
    log: LogConfig = Field(default_factory=LogConfig)
    paths: PathsConfig = Field(default_factory=PathsConfig)
    training: TrainingConfig = Field(default_factory=TrainingConfig)

    @classmethod
    def load(cls, path: str | None = None) -> "AppConfig":
        """
        Load YAML config + .env
        - default file: tabular_trainer/config/base.yml
        - MODEL_IO_ROOT overrides paths.root
        - independent of the current working directory
        """
        load_dotenv(os.path.join(project_root(), ".env"))

        if path is None:
            path = os.path.join(package_root(), "config", "base.yml")

        if not os.path.exists(path):
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            raw = yaml.safe_load(f) or {}

        root_override = os.getenv("MODEL_IO_ROOT")
        if root_override:
            raw.setdefault("paths", {})
            raw["paths"]["root"] = root_override

        return cls(**raw)
