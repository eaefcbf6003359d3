#!filepath: tabular_trainer/cli.py
from datetime import datetime
from typing import Optional

import typer
from rich import print

from tabular_trainer import __version__
from tabular_trainer.config.app_config import AppConfig
from tabular_trainer.utils.errors import TrainingError, UserInputError
from tabular_trainer.utils.logger import init_logging

app = typer.Typer(help="Tabular XGBoost Trainer CLI")


@app.command()
def version():
    print(f"v{__version__}")


@app.command()
def train(
    config: Optional[str] = typer.Option(None, help="YAML config (default: packaged base.yml)"),
    root: Optional[str] = typer.Option(None, help="Model I/O root, overrides paths.root"),
    run_id: Optional[str] = typer.Option(None, help="Run identifier (default: timestamp)"),
):
    """
    Train the classifier from <root>/inputs and persist artifacts under <root>/model.
    """
    from tabular_trainer.workflows.offline_training import build_offline_training

    try:
        cfg = AppConfig.load(config)
    except (FileNotFoundError, ValueError) as e:
        print(f"[red]Invalid config: {e}[/red]")
        raise typer.Exit(code=1)

    init_logging(cfg.log)

    if run_id is None:
        run_id = datetime.now().strftime("%Y%m%d-%H%M%S")

    print(f"[green]Training run {run_id}[/green]")

    pipeline = build_offline_training(cfg, root=root)
    try:
        ctx = pipeline.run(run_id)
    except TrainingError as e:
        print(f"[red]{e.kind}: {e}[/red]")
        raise typer.Exit(code=1)
    except UserInputError as e:
        print(f"[red]{e}[/red]")
        raise typer.Exit(code=1)

    print(f"[blue]Artifacts written to {ctx.model_artifact.path}[/blue]")


if __name__ == "__main__":
    app()

# python -m tabular_trainer.cli train --root ./model_inputs_outputs
