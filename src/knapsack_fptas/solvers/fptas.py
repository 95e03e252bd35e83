"""
Fully polynomial-time approximation scheme built on the dynamic solver.

Values are divided by a scale factor ``K = epsilon * vmax / n`` (never below
1) and floored; the dynamic solver runs on that private copy with the
original capacity. ``vmax`` is taken over items that fit the capacity, so
``vmax <= OPT``. Each scaled item loses less than ``K`` of value, so the
returned selection is worth at least ``OPT - n*K = OPT - epsilon*vmax >=
(1 - epsilon) * OPT``.
"""

from fractions import Fraction

from knapsack_fptas.config.schemas import DynamicConfig
from knapsack_fptas.data.items import ItemSet, Solution
from knapsack_fptas.solvers.dynamic import DynamicSolver
from knapsack_fptas.utils.error_handler import require_epsilon, require_non_negative_int
from knapsack_fptas.utils.logger import get_logger

logger = get_logger(__name__)


def clamp_epsilon(epsilon: float) -> float:
    """Validate epsilon; values >= 1 carry no guarantee and are treated as 0 (exact)."""
    epsilon = require_epsilon(epsilon)
    if epsilon >= 1.0:
        logger.warning(f"epsilon={epsilon} >= 1 gives no guarantee, solving exactly (epsilon=0)")
        return 0.0
    return epsilon


def scale_factor(epsilon: float, max_value: int, n_items: int) -> Fraction:
    """
    Scale factor K for the given precision, as an exact rational.

    Returns 1 (no scaling) when ``epsilon * vmax / n <= 1``, which covers
    ``epsilon == 0``.
    """
    if n_items <= 0 or max_value <= 0:
        return Fraction(1)
    return max(Fraction(1), Fraction(epsilon) * max_value / n_items)


def scale_value(value: int, k: Fraction) -> int:
    """``floor(value / K)`` in integer arithmetic."""
    return value * k.denominator // k.numerator


class FPTASSolver:
    """
    Approximate solver with a ``(1 - epsilon)`` guarantee.

    ``Solution.value`` is the true value of the returned selection. The
    scaled optimum and ``K`` are kept on the solution; ``rescaled_value``
    gives ``round(scaled_value * K)``, a lower estimate of that value.
    """

    name = "fptas"

    def __init__(self, epsilon: float = 0.1, dynamic_config: DynamicConfig | None = None):
        self.epsilon = require_epsilon(epsilon)
        config = dynamic_config if dynamic_config is not None else DynamicConfig()
        # the selection is needed to report values in original units
        self.dynamic = DynamicSolver(config.model_copy(update={"value_only": False}))

    def solve(
        self, items: ItemSet, epsilon: float | None = None, capacity: int | None = None
    ) -> Solution:
        """
        Solve approximately.

        Args:
            items: Items to choose from; never modified
            epsilon: Overrides the solver's epsilon when given
            capacity: Overrides ``items.capacity`` when given

        Returns:
            Solution whose value is within ``(1 - epsilon)`` of the optimum

        Raises:
            InvalidInputError: If epsilon or capacity is negative
            TableSizeError: If the dynamic table exceeds its limit
        """
        epsilon = clamp_epsilon(self.epsilon if epsilon is None else epsilon)
        if capacity is None:
            capacity = items.capacity
        capacity = require_non_negative_int(capacity, "capacity")

        n_items = len(items)
        # items heavier than the capacity can never be taken
        vmax = max((item.value for item in items if item.weight <= capacity), default=0)
        if n_items == 0 or vmax == 0:
            logger.debug("No item of positive value fits, returning the empty selection")
            return Solution.empty(n_items)

        k = scale_factor(epsilon, vmax, n_items)
        if k > 1:
            scaled = items.with_values([scale_value(v, k) for v in items.values])
        else:
            scaled = items
        logger.debug(f"FPTAS epsilon={epsilon} vmax={vmax} n={n_items} K={k}")

        scaled_solution = self.dynamic.solve(scaled, capacity)
        value = sum(item.value for item, flag in zip(items, scaled_solution.selection) if flag)

        return Solution(
            selection=scaled_solution.selection,
            value=value,
            scaled_value=scaled_solution.value,
            scale_factor=k,
        )


def solve_fptas(
    items: ItemSet,
    epsilon: float,
    capacity: int | None = None,
    dynamic_config: DynamicConfig | None = None,
) -> Solution:
    """Solve with the FPTAS. See :class:`FPTASSolver`."""
    return FPTASSolver(epsilon, dynamic_config).solve(items, capacity=capacity)
