"""
Pytest configuration and shared fixtures for testing.
"""

import itertools
from pathlib import Path

import pytest

from knapsack_fptas.data import InstanceGenerator, ItemSet

REPO_ROOT = Path(__file__).resolve().parents[1]


def _brute_force(items: ItemSet, capacity: int | None = None) -> int:
    """Best value over all 2^n subsets (n <= 12)."""
    capacity = items.capacity if capacity is None else capacity
    assert len(items) <= 12, "brute force is only for tiny instances"
    best = 0
    for mask in itertools.product((False, True), repeat=len(items)):
        weight = sum(item.weight for item, flag in zip(items, mask) if flag)
        if weight <= capacity:
            best = max(best, sum(item.value for item, flag in zip(items, mask) if flag))
    return best


@pytest.fixture
def four_items():
    """
    Four-item instance with capacity 7.

    Optimum 9: items 1 (w=3, v=4) and 2 (w=4, v=5).
    """
    return ItemSet.from_pairs(values=[1, 4, 5, 7], weights=[1, 3, 4, 5], capacity=7)


@pytest.fixture
def four_items_scaled_up():
    """Same as ``four_items`` with every value multiplied by 100 (optimum 900)."""
    return ItemSet.from_pairs(values=[100, 400, 500, 700], weights=[1, 3, 4, 5], capacity=7)


@pytest.fixture
def example_instance_path():
    """Instance file shipped with the repository (same items as ``four_items``)."""
    return REPO_ROOT / "data" / "instances" / "example_4.txt"


@pytest.fixture
def default_config_path():
    return REPO_ROOT / "configs" / "evaluate_default.yaml"


@pytest.fixture(scope="session")
def tiny_random_instances():
    """
    Forty random instances with 1-12 items, including zero weights and values.
    """
    generator = InstanceGenerator(seed=7)
    return generator.generate_batch(
        40, (1, 12), weight_range=(0, 20), value_range=(0, 50), capacity_ratio=0.5
    )


@pytest.fixture(scope="session")
def valued_random_instances():
    """Random instances with large values so FPTAS scaling is active."""
    generator = InstanceGenerator(seed=11)
    return generator.generate_batch(
        30, (2, 12), weight_range=(1, 30), value_range=(1, 5000), capacity_ratio=0.4
    )


@pytest.fixture
def brute_force():
    """Exhaustive optimum for instances with at most 12 items."""
    return _brute_force
