"""
Timed solver runs against a reference optimum.

The default schedule on an instance file is the FPTAS at each configured
epsilon followed by the greedy heuristic.
"""

import time
from collections import defaultdict
from dataclasses import asdict, dataclass

import numpy as np
from tqdm import tqdm

from knapsack_fptas.config.schemas import ExperimentConfig
from knapsack_fptas.data.generator import InstanceGenerator, with_reference
from knapsack_fptas.data.items import ItemSet
from knapsack_fptas.data.reader import Instance
from knapsack_fptas.metrics import relative_error, summarize_errors
from knapsack_fptas.solvers import DynamicSolver, create_solver
from knapsack_fptas.utils.error_handler import MetricError
from knapsack_fptas.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class EvaluationRecord:
    """Single solver run on one instance."""

    instance: str
    solver: str
    epsilon: float | None
    value: int
    reference: int | None
    relative_error: float | None
    feasible: bool
    time_ms: float
    n_items: int
    capacity: int
    n_selected: int

    @property
    def label(self) -> str:
        if self.epsilon is None:
            return self.solver
        return f"{self.solver} ({self.epsilon:.2f})"

    def to_dict(self) -> dict:
        return asdict(self)


def _has_fitting_value(items: ItemSet) -> bool:
    return any(item.value > 0 and item.weight <= items.capacity for item in items)


def resolve_reference(instance: Instance, config: ExperimentConfig) -> Instance:
    """
    Apply the configured capacity override and settle the reference value.

    The dynamic solver computes the reference when the file has none, when
    the capacity was overridden, or when ``recompute_reference`` is set.
    A stored reference of 0 counts as missing whenever some item of
    positive value fits, since instance files store a missing optimum as 0.
    """
    evaluation = config.evaluation
    items = instance.items
    reference = instance.reference_value
    recompute = evaluation.recompute_reference or reference is None
    if reference == 0 and _has_fitting_value(items):
        recompute = True

    if evaluation.capacity is not None and evaluation.capacity != items.capacity:
        items = items.with_capacity(evaluation.capacity)
        recompute = True

    if recompute:
        reference = DynamicSolver(config.dynamic).solve(items).value
        logger.info(f"Reference for {instance.name} computed by the dynamic solver: {reference}")

    return Instance(items=items, reference_value=reference, name=instance.name)


def evaluate_solver(
    name: str,
    instance: Instance,
    config: ExperimentConfig | None = None,
    epsilon: float | None = None,
    repeats: int = 1,
) -> EvaluationRecord:
    """
    Run one solver, timing it with ``time.perf_counter``.

    Args:
        name: Solver name ("dynamic", "fptas", "heuristic")
        instance: Instance with an optional reference value
        config: Solver settings
        epsilon: FPTAS precision (ignored by other solvers)
        repeats: Number of timed runs; the fastest is reported

    Returns:
        EvaluationRecord
    """
    config = config if config is not None else ExperimentConfig()
    solver = create_solver(name, config, epsilon=epsilon)
    items = instance.items

    best_time = float("inf")
    solution = None
    for _ in range(max(1, repeats)):
        start_time = time.perf_counter()
        solution = solver.solve(items)
        best_time = min(best_time, time.perf_counter() - start_time)

    error = None
    if instance.reference_value is not None:
        try:
            error = relative_error(solution.value, instance.reference_value)
        except MetricError as e:
            logger.warning(f"{instance.name}: {e.message}")

    return EvaluationRecord(
        instance=instance.name,
        solver=name,
        epsilon=solver.epsilon if name == "fptas" else None,
        value=solution.value,
        reference=instance.reference_value,
        relative_error=error,
        feasible=solution.is_feasible(items),
        time_ms=best_time * 1000.0,
        n_items=len(items),
        capacity=items.capacity,
        n_selected=len(solution.indices),
    )


def run_evaluation(instance: Instance, config: ExperimentConfig | None = None) -> list[EvaluationRecord]:
    """
    Evaluate every configured solver on one instance.

    FPTAS runs once per configured epsilon.
    """
    config = config if config is not None else ExperimentConfig()
    instance = resolve_reference(instance, config)
    repeats = config.evaluation.repeats

    records = []
    for name in config.evaluation.solvers:
        if name == "fptas":
            for eps in config.fptas.epsilons:
                records.append(evaluate_solver(name, instance, config, epsilon=eps, repeats=repeats))
        else:
            records.append(evaluate_solver(name, instance, config, repeats=repeats))
    return records


def run_benchmark(
    config: ExperimentConfig | None = None, verbose: bool = True
) -> list[EvaluationRecord]:
    """
    Evaluate the configured solvers on randomly generated instances.

    References come from the dynamic solver.
    """
    config = config if config is not None else ExperimentConfig()
    bench = config.benchmark
    generator = InstanceGenerator(seed=config.seed)
    item_sets = generator.generate_batch(
        bench.n_instances,
        (bench.n_items_min, bench.n_items_max),
        weight_range=bench.weight_range,
        value_range=bench.value_range,
        capacity_ratio=bench.capacity_ratio,
    )

    records = []
    for idx, items in enumerate(tqdm(item_sets, desc="Benchmark", disable=not verbose)):
        instance = with_reference(items, name=f"random_{idx:04d}", dynamic_config=config.dynamic)
        for name in config.evaluation.solvers:
            if name == "fptas":
                for eps in config.fptas.epsilons:
                    records.append(evaluate_solver(name, instance, config, epsilon=eps))
            else:
                records.append(evaluate_solver(name, instance, config))
    return records


def summarize_records(records: list[EvaluationRecord]) -> dict[str, dict]:
    """
    Aggregate statistics per solver label.

    Returns:
        Mapping of label -> error statistics, mean/median time,
        feasibility rate and instance count
    """
    grouped: dict[str, list[EvaluationRecord]] = defaultdict(list)
    for record in records:
        grouped[record.label].append(record)

    summary = {}
    for label, group in grouped.items():
        errors = [r.relative_error for r in group if r.relative_error is not None]
        times = [r.time_ms for r in group]
        stats = summarize_errors(errors)
        summary[label] = {
            "mean_error": stats["mean"],
            "median_error": stats["median"],
            "min_error": stats["min"],
            "max_error": stats["max"],
            "mean_time_ms": float(np.mean(times)),
            "median_time_ms": float(np.median(times)),
            "feasibility_rate": float(np.mean([r.feasible for r in group])),
            "n_instances": len(group),
        }
    return summary
