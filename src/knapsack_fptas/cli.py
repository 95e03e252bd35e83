"""
Unified CLI for knapsack_fptas.

Provides subcommands to solve, evaluate and benchmark the solvers.
"""

import logging
from pathlib import Path
from typing import Any

import click
from pydantic import BaseModel, ValidationError

from knapsack_fptas import __version__
from knapsack_fptas.config import (
    ExperimentConfig,
    load_config,
    validate_config_file,
)
from knapsack_fptas.config.loader import config_to_dict
from knapsack_fptas.utils.error_handler import ConfigurationError, handle_cli_errors
from knapsack_fptas.utils.logger import log_experiment_config, log_metrics, setup_logger


def _parse_float_list(text: str, name: str) -> list[float]:
    try:
        return [float(tok) for tok in text.split(",") if tok.strip()]
    except ValueError as e:
        raise ConfigurationError(
            f"--{name} must be comma-separated numbers, got {text!r}",
            suggestion=f"Example: --{name} 0.2,0.4,0.6",
        ) from e


def _load(config_path: str | None) -> ExperimentConfig:
    return load_config(config_path) if config_path else ExperimentConfig()


def _override(section: BaseModel, **updates: Any) -> BaseModel:
    """Rebuild a config section with command-line overrides, re-running validation."""
    try:
        return type(section)(**{**section.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigurationError(f"Invalid option: {e.errors()[0]['msg']}") from e


def _logger(config: ExperimentConfig, verbose: bool) -> logging.Logger:
    level = logging.DEBUG if verbose else getattr(logging, config.logging.level)
    return setup_logger("knapsack_fptas", log_file=config.logging.log_file, level=level)


@click.group()
@click.version_option(version=__version__)
def main():
    """
    knapsack_fptas - exact, approximate and greedy 0/1 knapsack solvers.

    Examples:
        knapsack-fptas solve data/instances/example_4.txt --solver fptas --epsilon 0.2
        knapsack-fptas evaluate data/instances/example_4.txt --epsilons 0.2,0.4,0.6,0.8,1.0
        knapsack-fptas benchmark --config configs/evaluate_default.yaml
    """
    pass


@main.command()
@click.argument("instance", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--solver",
    type=click.Choice(["dynamic", "fptas", "heuristic"], case_sensitive=False),
    default="dynamic",
    help="Solver to run",
)
@click.option("--epsilon", type=float, default=0.1, help="FPTAS precision (>= 1 means exact)")
@click.option("--capacity", type=int, help="Override the capacity from the file")
@click.option("--value-only", is_flag=True, help="Dynamic solver: rolling rows, no selection")
@click.option("--inclusive-fill", is_flag=True, help="Heuristic: accept items that exactly fill")
@click.option("--max-table-cells", type=int, help="Dynamic table size limit")
@click.option("--config", type=click.Path(exists=True), help="Configuration YAML file")
@click.option("--verbose", is_flag=True, help="Debug logging")
@click.option("--debug", is_flag=True, help="Show tracebacks on error")
@handle_cli_errors()
def solve(
    instance,
    solver,
    epsilon,
    capacity,
    value_only,
    inclusive_fill,
    max_table_cells,
    config,
    verbose,
    debug,
):
    """Solve one instance file with one solver."""
    from knapsack_fptas.data import read_instance
    from knapsack_fptas.eval import evaluate_solver, resolve_reference

    cfg = _load(config)
    if value_only:
        cfg.dynamic = _override(cfg.dynamic, value_only=True)
    if inclusive_fill:
        cfg.heuristic = _override(cfg.heuristic, inclusive_fill=True)
    if max_table_cells is not None:
        cfg.dynamic = _override(cfg.dynamic, max_table_cells=max_table_cells)
    if capacity is not None:
        cfg.evaluation = _override(cfg.evaluation, capacity=capacity)
    logger = _logger(cfg, verbose)

    inst = resolve_reference(read_instance(instance), cfg)
    record = evaluate_solver(solver.lower(), inst, cfg, epsilon=epsilon)

    error = record.relative_error if record.relative_error is not None else "NA"
    log_metrics(
        logger,
        {"value": record.value, "error": error, "time_ms": record.time_ms},
        prefix=f"{record.label} |",
    )
    click.echo(f"value: {record.value}")
    click.echo(f"selected: {record.n_selected}/{record.n_items}")


@main.command()
@click.argument("instance", type=click.Path(exists=True, dir_okay=False), required=False)
@click.option("--config", type=click.Path(exists=True), help="Configuration YAML file")
@click.option("--epsilons", type=str, help="Comma-separated FPTAS epsilons (overrides config)")
@click.option(
    "--solvers", type=str, help="Comma-separated solvers, e.g. 'fptas,heuristic,dynamic'"
)
@click.option("--capacity", type=int, help="Override the capacity from the file")
@click.option("--repeats", type=int, help="Timed runs per solver")
@click.option("--csv", "csv_path", type=click.Path(), help="Write results to CSV")
@click.option("--json", "json_path", type=click.Path(), help="Write results to JSON")
@click.option("--verbose", is_flag=True, help="Debug logging")
@click.option("--debug", is_flag=True, help="Show tracebacks on error")
@handle_cli_errors()
def evaluate(instance, config, epsilons, solvers, capacity, repeats, csv_path, json_path, verbose, debug):
    """Run the FPTAS/heuristic schedule on an instance file and report errors."""
    from knapsack_fptas.data import read_instance
    from knapsack_fptas.eval import (
        export_results_to_csv,
        export_results_to_json,
        log_records,
        run_evaluation,
        summarize_records,
    )

    cfg = _load(config)
    updates = {}
    if instance:
        updates["instance"] = Path(instance)
    if solvers:
        updates["solvers"] = [s.strip().lower() for s in solvers.split(",") if s.strip()]
    if capacity is not None:
        updates["capacity"] = capacity
    if repeats is not None:
        updates["repeats"] = repeats
    if updates:
        cfg.evaluation = _override(cfg.evaluation, **updates)
    if epsilons:
        cfg.fptas = _override(cfg.fptas, epsilons=_parse_float_list(epsilons, "epsilons"))

    if cfg.evaluation.instance is None:
        raise ConfigurationError(
            "No instance file given",
            suggestion="Pass INSTANCE or set evaluation.instance in the config.",
        )

    logger = _logger(cfg, verbose)
    log_experiment_config(logger, config_to_dict(cfg), "Evaluation Configuration")

    inst = read_instance(cfg.evaluation.instance)
    records = run_evaluation(inst, cfg)
    log_records(records, logger)

    if csv_path:
        export_results_to_csv(records, csv_path)
    if json_path:
        export_results_to_json(records, json_path, summary=summarize_records(records))


@main.command()
@click.option("--config", type=click.Path(exists=True), help="Configuration YAML file")
@click.option("--n-instances", type=int, help="Number of random instances (overrides config)")
@click.option("--seed", type=int, help="Random seed (overrides config)")
@click.option("--csv", "csv_path", type=click.Path(), help="Write results to CSV")
@click.option("--json", "json_path", type=click.Path(), help="Write results and summary to JSON")
@click.option("--verbose", is_flag=True, help="Debug logging")
@click.option("--debug", is_flag=True, help="Show tracebacks on error")
@handle_cli_errors()
def benchmark(config, n_instances, seed, csv_path, json_path, verbose, debug):
    """Compare the solvers on random instances with exact references."""
    from knapsack_fptas.eval import (
        export_results_to_csv,
        export_results_to_json,
        log_summary,
        run_benchmark,
        summarize_records,
    )

    cfg = _load(config)
    if seed is not None:
        cfg = _override(cfg, seed=seed)
    if n_instances is not None:
        cfg.benchmark = _override(cfg.benchmark, n_instances=n_instances)
    logger = _logger(cfg, verbose)
    log_experiment_config(logger, config_to_dict(cfg), "Benchmark Configuration")

    records = run_benchmark(cfg)
    summary = summarize_records(records)
    log_summary(summary, logger)

    if csv_path:
        export_results_to_csv(records, csv_path)
    if json_path:
        export_results_to_json(records, json_path, summary=summary)


@main.command()
@click.argument("output", type=click.Path(dir_okay=False))
@click.option("--n-items", type=int, default=20, show_default=True, help="Number of items")
@click.option("--seed", type=int, default=42, show_default=True, help="Random seed")
@click.option("--max-weight", type=int, default=100, show_default=True, help="Largest weight")
@click.option("--max-value", type=int, default=100, show_default=True, help="Largest value")
@click.option(
    "--capacity-ratio", type=float, default=0.5, show_default=True, help="Capacity / total weight"
)
@click.option("--debug", is_flag=True, help="Show tracebacks on error")
@handle_cli_errors()
def generate(output, n_items, seed, max_weight, max_value, capacity_ratio, debug):
    """Write a random instance file with its exact optimum in the header."""
    from knapsack_fptas.data import InstanceGenerator, with_reference, write_instance

    items = InstanceGenerator(seed=seed).generate(
        n_items,
        weight_range=(1, max_weight),
        value_range=(1, max_value),
        capacity_ratio=capacity_ratio,
    )
    instance = with_reference(items, name=Path(output).name)
    path = write_instance(output, instance.items, instance.reference_value)
    click.echo(f"Wrote {instance!r} to {path}")


@main.command(name="validate-config")
@click.argument("config", type=click.Path())
def validate_config(config):
    """Check a configuration YAML file against the schema."""
    is_valid, message = validate_config_file(config)
    click.secho(message, fg="green" if is_valid else "red", err=not is_valid)
    if not is_valid:
        raise SystemExit(1)


if __name__ == "__main__":
    main()
