"""
Exact 0/1 knapsack solver by dynamic programming over capacities.

``table[w, i]`` holds the best value reachable with the first ``i`` items
under capacity ``w``. The table is filled one item column at a time with
NumPy slices; the selection is rebuilt by an iterative walk from
``(capacity, n)`` back to column 0.
"""

import numpy as np

from knapsack_fptas.config.schemas import DynamicConfig
from knapsack_fptas.data.items import ItemSet, Solution
from knapsack_fptas.utils.error_handler import TableSizeError, require_non_negative_int
from knapsack_fptas.utils.logger import get_logger

logger = get_logger(__name__)

_INT64_MAX = np.iinfo(np.int64).max


def _table_dtype(values: list[int]) -> type | np.dtype:
    # Python ints when the optimum could overflow int64
    return np.int64 if sum(values) <= _INT64_MAX else object


class DynamicSolver:
    """
    Pseudo-polynomial exact solver, O(n * capacity) time.

    Memory is O(n * capacity) for the full table, bounded by
    ``config.max_table_cells``. With ``config.value_only`` two rolling rows
    of length ``capacity + 1`` are kept and no selection is rebuilt.
    """

    name = "dynamic"

    def __init__(self, config: DynamicConfig | None = None):
        self.config = config if config is not None else DynamicConfig()

    def solve(self, items: ItemSet, capacity: int | None = None) -> Solution:
        """
        Solve exactly.

        Args:
            items: Items to choose from
            capacity: Overrides ``items.capacity`` when given

        Returns:
            Solution with the optimal selection in item order

        Raises:
            InvalidInputError: If capacity is negative
            TableSizeError: If the table exceeds ``max_table_cells``
        """
        if capacity is None:
            capacity = items.capacity
        capacity = require_non_negative_int(capacity, "capacity")
        n_items = len(items)

        if n_items == 0:
            return Solution.empty(0)

        if self.config.value_only:
            return Solution(
                selection=(False,) * n_items,
                value=self.optimal_value(items, capacity),
                reconstructed=False,
            )

        table = self.build_table(items, capacity)
        selection = self.backtrack(items, table)
        return Solution(selection=selection, value=int(table[capacity, n_items]))

    def _check_size(self, cells: int, what: str) -> None:
        limit = self.config.max_table_cells
        if cells > limit:
            raise TableSizeError(
                f"{what} needs {cells:,} cells, above the limit of {limit:,}",
                suggestion="Enable value_only mode for a value-only answer, "
                "lower the capacity, or raise dynamic.max_table_cells.",
            )

    def build_table(self, items: ItemSet, capacity: int | None = None) -> np.ndarray:
        """
        Fill the full ``(capacity + 1) x (n + 1)`` table.

        Column 0 is zero. Row 0 stays zero unless zero-weight items
        carry value, since those fit a zero capacity.
        """
        if capacity is None:
            capacity = items.capacity
        capacity = require_non_negative_int(capacity, "capacity")
        n_items = len(items)
        self._check_size((capacity + 1) * (n_items + 1), "DP table")

        values = items.values
        table = np.zeros((capacity + 1, n_items + 1), dtype=_table_dtype(values))
        logger.debug(f"DP table {table.shape} dtype={table.dtype}")

        for i in range(1, n_items + 1):
            weight = items[i - 1].weight
            value = values[i - 1]
            prev = table[:, i - 1]
            col = table[:, i]
            col[:] = prev
            if weight <= capacity:
                # w in [weight, capacity]: take item i-1 on top of table[w - weight, i-1]
                candidate = prev[: capacity + 1 - weight] + value
                col[weight:] = np.maximum(prev[weight:], candidate)

        return table

    def backtrack(self, items: ItemSet, table: np.ndarray) -> tuple[bool, ...]:
        """
        Rebuild the selection from a filled table.

        An item is included when its weight is zero or when it changed the
        table value at the current capacity. Zero-weight items are always
        included, even when their value is zero.
        """
        n_items = len(items)
        selection = [False] * n_items
        w = table.shape[0] - 1

        for i in range(n_items, 0, -1):
            weight = items[i - 1].weight
            if weight == 0 or table[w, i] != table[w, i - 1]:
                selection[i - 1] = True
                w -= weight

        return tuple(selection)

    def optimal_value(self, items: ItemSet, capacity: int | None = None) -> int:
        """Optimum only, using two rolling rows of length ``capacity + 1``."""
        if capacity is None:
            capacity = items.capacity
        capacity = require_non_negative_int(capacity, "capacity")
        self._check_size(2 * (capacity + 1), "Rolling rows")

        values = items.values
        row = np.zeros(capacity + 1, dtype=_table_dtype(values))
        for item in items:
            if item.weight > capacity:
                continue
            nxt = row.copy()
            candidate = row[: capacity + 1 - item.weight] + item.value
            nxt[item.weight :] = np.maximum(row[item.weight :], candidate)
            row = nxt

        return int(row[capacity])


def solve_dynamic(
    items: ItemSet, capacity: int | None = None, config: DynamicConfig | None = None
) -> Solution:
    """
    Solve an instance exactly.

    Args:
        items: Items to choose from
        capacity: Overrides ``items.capacity`` when given
        config: Solver settings

    Returns:
        Optimal Solution
    """
    return DynamicSolver(config).solve(items, capacity)
