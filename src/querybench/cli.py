"""Typer-based CLI running the full benchmark comparison."""

from __future__ import annotations

import logging
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from .config import DEFAULT_SIZE, BenchConfig
from .data import generate_dataset
from .errors import (
    ConfigurationError,
    InvalidInputError,
    ScenarioError,
    ValidationMismatchError,
)
from .harness import run_all
from .progress import ConsoleProgress
from .scenarios import build_scenarios

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="Compare plain Python with NumPy, pandas and Polars on common query workloads.",
    add_completion=False,
)
console = Console()


def run_benchmarks(config: BenchConfig, *, console: Console) -> None:
    """Generate the shared dataset and run every selected scenario."""
    dataset = generate_dataset(config.size, seed=config.seed)
    logger.debug(
        "Generated dataset: %d products, %d orders, %d users",
        len(dataset.products),
        len(dataset.orders),
        len(dataset.users),
    )
    run_all(
        build_scenarios(dataset, config.size),
        console=console,
        name_filter=config.name_filter,
        progress=ConsoleProgress(console),
        artifact_dir=config.artifact_dir,
    )


@app.command()
def main(
    size: int = typer.Argument(
        DEFAULT_SIZE, help="Dataset size and loop bound used by scenarios (>= 10)."
    ),
    name_filter: str | None = typer.Option(
        None,
        "--filter",
        help="Only run scenarios whose name contains this text (env: QUERYBENCH_FILTER).",
    ),
    artifact_dir: Path | None = typer.Option(
        None,
        "--artifact-dir",
        help="Directory for mismatch artifacts (env: QUERYBENCH_ARTIFACT_DIR, default ./tmp).",
    ),
    seed: int | None = typer.Option(
        None, "--seed", help="Seed dataset content (env: QUERYBENCH_SEED)."
    ),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging."),
) -> None:
    """Run every benchmark scenario and print comparison tables."""
    if debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s %(message)s")

    try:
        config = BenchConfig.from_env(
            size=size, name_filter=name_filter, artifact_dir=artifact_dir, seed=seed
        )
        run_benchmarks(config, console=console)
    except ValidationMismatchError as exc:
        console.print(f"[bold red]Validation failed:[/bold red] {escape(str(exc))}")
        if exc.artifact_paths is not None:
            written = ", ".join(str(path) for path in exc.artifact_paths)
            console.print(f"[red]Wrote:[/red] {escape(written)}")
        raise typer.Exit(code=1) from None
    except (InvalidInputError, ConfigurationError, ScenarioError) as exc:
        console.print(f"[bold red]Benchmark failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from None

    console.print("\nDone!", markup=False, highlight=False)
