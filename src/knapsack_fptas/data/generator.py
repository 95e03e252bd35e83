"""
Random knapsack instance generator.

Used by the benchmark command and tests to produce reproducible instances.
"""

from typing import Any

import numpy as np

from knapsack_fptas.config.schemas import DynamicConfig
from knapsack_fptas.data.items import ItemSet
from knapsack_fptas.data.reader import Instance


class InstanceGenerator:
    """Generates random 0/1 knapsack instances"""

    def __init__(self, seed: int = 42):
        self.rng = np.random.RandomState(seed)

    def generate(
        self,
        n_items: int,
        weight_range: tuple[int, int] = (1, 100),
        value_range: tuple[int, int] = (1, 100),
        capacity_ratio: float = 0.5,
    ) -> ItemSet:
        """
        Generate a random ItemSet

        Args:
            n_items: Number of items
            weight_range: (min_weight, max_weight) for items, inclusive
            value_range: (min_value, max_value) for items, inclusive
            capacity_ratio: Capacity as a fraction of total weight (default: 0.5)

        Returns:
            ItemSet
        """
        weights = self.rng.randint(weight_range[0], weight_range[1] + 1, size=n_items)
        values = self.rng.randint(value_range[0], value_range[1] + 1, size=n_items)

        total_weight = int(np.sum(weights))
        capacity = int(total_weight * capacity_ratio)

        return ItemSet.from_pairs(values.tolist(), weights.tolist(), capacity)

    def generate_batch(
        self, n_instances: int, n_items_range: tuple[int, int], **kwargs: Any
    ) -> list[ItemSet]:
        """
        Generate multiple instances with varying sizes

        Args:
            n_instances: Number of instances to generate
            n_items_range: (min_items, max_items) range, inclusive
            **kwargs: Additional arguments passed to generate

        Returns:
            List of ItemSet objects
        """
        instances = []
        for _ in range(n_instances):
            n_items = self.rng.randint(n_items_range[0], n_items_range[1] + 1)
            instances.append(self.generate(int(n_items), **kwargs))
        return instances


def with_reference(
    items: ItemSet, name: str = "generated", dynamic_config: DynamicConfig | None = None
) -> Instance:
    """Attach the exact optimum (from the dynamic solver) to a generated set."""
    from knapsack_fptas.solvers.dynamic import DynamicSolver

    solution = DynamicSolver(dynamic_config).solve(items)
    return Instance(items=items, reference_value=solution.value, name=name)
