"""
Greedy Solver for Knapsack Problem
Uses value-to-weight ratio heuristic
"""

from fractions import Fraction

from knapsack_fptas.config.schemas import HeuristicConfig
from knapsack_fptas.data.items import Item, ItemSet, Solution
from knapsack_fptas.utils.error_handler import require_non_negative_int


def ratio(item: Item) -> Fraction | float:
    """
    Exact value-to-weight ratio used for ordering.

    ``+inf`` for a zero-weight item with positive value, zero when both
    are zero.
    """
    if item.weight == 0:
        return float("inf") if item.value > 0 else Fraction(0)
    return Fraction(item.value, item.weight)


def greedy_order(items: ItemSet) -> list[int]:
    """
    Original indices sorted by descending ratio.

    Equal ratios keep ascending index order.
    """
    return sorted(range(len(items)), key=lambda idx: (-ratio(items[idx]), idx))


class HeuristicSolver:
    """
    Greedy algorithm for 0-1 Knapsack Problem, O(n log n)

    Algorithm:
    1. Compute value/weight ratio for each item
    2. Sort items by ratio in descending order
    3. Scan once, adding an item while ``weight_used + weight < capacity``

    The strict comparison skips an item that would exactly fill the
    remaining capacity. Set ``inclusive_fill`` to accept it instead.
    """

    name = "heuristic"

    def __init__(self, config: HeuristicConfig | None = None):
        self.config = config if config is not None else HeuristicConfig()

    def solve(self, items: ItemSet, capacity: int | None = None) -> Solution:
        """
        Solve knapsack instance using greedy heuristic

        Args:
            items: Items to choose from
            capacity: Overrides ``items.capacity`` when given

        Returns:
            Feasible Solution, no optimality guarantee
        """
        if capacity is None:
            capacity = items.capacity
        capacity = require_non_negative_int(capacity, "capacity")
        inclusive = self.config.inclusive_fill

        selection = [False] * len(items)
        weight_used = 0
        value = 0

        for idx in greedy_order(items):
            item = items[idx]
            new_weight = weight_used + item.weight
            fits = new_weight <= capacity if inclusive else new_weight < capacity
            if fits:
                selection[idx] = True
                weight_used = new_weight
                value += item.value

        return Solution(selection=tuple(selection), value=value)


def solve_greedy(
    items: ItemSet, capacity: int | None = None, config: HeuristicConfig | None = None
) -> Solution:
    """
    Solve knapsack instance using greedy heuristic.

    Args:
        items: Items to choose from
        capacity: Overrides ``items.capacity`` when given
        config: Fill rule settings

    Returns:
        Solution; ``Solution.indices`` lists the included original indices
    """
    return HeuristicSolver(config).solve(items, capacity)
