"""Exact, approximate and heuristic 0/1 knapsack solvers."""

from knapsack_fptas.config.schemas import ExperimentConfig
from knapsack_fptas.solvers.dynamic import DynamicSolver, solve_dynamic
from knapsack_fptas.solvers.fptas import (
    FPTASSolver,
    clamp_epsilon,
    scale_factor,
    scale_value,
    solve_fptas,
)
from knapsack_fptas.solvers.heuristic import HeuristicSolver, greedy_order, ratio, solve_greedy

SOLVER_NAMES = ("dynamic", "fptas", "heuristic")


def create_solver(
    name: str, config: ExperimentConfig | None = None, epsilon: float | None = None
) -> DynamicSolver | FPTASSolver | HeuristicSolver:
    """
    Create a solver by name.

    Args:
        name: One of ``SOLVER_NAMES``
        config: Settings for the solver (defaults when None)
        epsilon: FPTAS precision; defaults to the first configured epsilon

    Raises:
        KeyError: If name is not a known solver
    """
    config = config if config is not None else ExperimentConfig()
    if name == "dynamic":
        return DynamicSolver(config.dynamic)
    if name == "fptas":
        if epsilon is None:
            epsilon = config.fptas.epsilons[0] if config.fptas.epsilons else 0.0
        return FPTASSolver(epsilon, config.dynamic)
    if name == "heuristic":
        return HeuristicSolver(config.heuristic)
    available = ", ".join(SOLVER_NAMES)
    raise KeyError(f"Solver '{name}' not found. Available: {available}")


__all__ = [
    "DynamicSolver",
    "FPTASSolver",
    "HeuristicSolver",
    "SOLVER_NAMES",
    "create_solver",
    "solve_dynamic",
    "solve_fptas",
    "solve_greedy",
    "clamp_epsilon",
    "scale_factor",
    "scale_value",
    "greedy_order",
    "ratio",
]
