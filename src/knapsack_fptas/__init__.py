"""
knapsack_fptas - 0/1 Knapsack Solvers
=====================================

Exact, approximate and heuristic solvers for the 0/1 knapsack problem,
with tooling to compare their solution quality and running time.

Main modules:
- data: Item/ItemSet/Solution records, instance files, random instances
- solvers: Dynamic programming, FPTAS and greedy ratio heuristic
- metrics: Relative error and optimality gap
- eval: Timed evaluation runs and reporting
- config: Pydantic configuration schemas and YAML loading
"""

__version__ = "1.0.0"

from knapsack_fptas.data import Item, ItemSet, Solution
from knapsack_fptas.metrics import optimality_gap, relative_error
from knapsack_fptas.solvers import (
    DynamicSolver,
    FPTASSolver,
    HeuristicSolver,
    solve_dynamic,
    solve_fptas,
    solve_greedy,
)
from knapsack_fptas.utils.error_handler import (
    InvalidInputError,
    KnapsackError,
    MetricError,
    TableSizeError,
)

__all__ = [
    "__version__",
    "Item",
    "ItemSet",
    "Solution",
    "DynamicSolver",
    "FPTASSolver",
    "HeuristicSolver",
    "solve_dynamic",
    "solve_fptas",
    "solve_greedy",
    "relative_error",
    "optimality_gap",
    "KnapsackError",
    "InvalidInputError",
    "TableSizeError",
    "MetricError",
]
