"""
Item, ItemSet and Solution records shared by every solver.

An ItemSet is immutable: solvers that need different values (FPTAS scaling)
derive a private copy with :meth:`ItemSet.with_values`.
"""

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from fractions import Fraction

import numpy as np

from knapsack_fptas.utils.error_handler import InvalidInputError, require_non_negative_int


@dataclass(frozen=True)
class Item:
    """A single 0/1 item."""

    value: int
    weight: int

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", require_non_negative_int(self.value, "value"))
        object.__setattr__(self, "weight", require_non_negative_int(self.weight, "weight"))


@dataclass(frozen=True)
class ItemSet:
    """
    Ordered items plus a capacity.

    Item order is significant: it defines the index space used by
    selections and by DP backtracking.

    Attributes:
        items: Tuple of Item records
        capacity: Non-negative integer capacity
    """

    items: tuple[Item, ...]
    capacity: int

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for idx, item in enumerate(items):
            if not isinstance(item, Item):
                raise InvalidInputError(
                    f"Item {idx} must be an Item, got {type(item).__name__}",
                    suggestion="Build the set with ItemSet.from_pairs(values, weights, capacity).",
                )
        object.__setattr__(self, "items", items)
        object.__setattr__(self, "capacity", require_non_negative_int(self.capacity, "capacity"))

    @classmethod
    def from_pairs(
        cls, values: Iterable[int], weights: Iterable[int], capacity: int
    ) -> "ItemSet":
        """
        Build an ItemSet from parallel value and weight sequences.

        Raises:
            InvalidInputError: On length mismatch or negative/non-integer numbers
        """
        values = list(values)
        weights = list(weights)
        if len(values) != len(weights):
            raise InvalidInputError(
                f"values and weights differ in length ({len(values)} != {len(weights)})"
            )
        items = []
        for idx, (v, w) in enumerate(zip(values, weights)):
            try:
                items.append(Item(value=v, weight=w))
            except InvalidInputError as e:
                raise InvalidInputError(f"Item {idx}: {e.message}", e.suggestion) from e
        return cls(tuple(items), capacity)

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.items)

    def __getitem__(self, idx: int) -> Item:
        return self.items[idx]

    @property
    def n_items(self) -> int:
        return len(self.items)

    @property
    def values(self) -> list[int]:
        return [item.value for item in self.items]

    @property
    def weights(self) -> list[int]:
        return [item.weight for item in self.items]

    @property
    def max_value(self) -> int:
        return max(self.values, default=0)

    def with_capacity(self, capacity: int) -> "ItemSet":
        """Copy of this set with another capacity."""
        return ItemSet(self.items, capacity)

    def with_values(self, values: Sequence[int]) -> "ItemSet":
        """Copy of this set with every value replaced, weights and order kept."""
        if len(values) != len(self.items):
            raise InvalidInputError(
                f"Expected {len(self.items)} values, got {len(values)}"
            )
        return ItemSet.from_pairs(values, self.weights, self.capacity)

    def __repr__(self) -> str:
        return f"ItemSet(n_items={self.n_items}, capacity={self.capacity})"


@dataclass(frozen=True)
class Solution:
    """
    Result returned by every solver.

    Attributes:
        selection: One flag per item, in ItemSet order
        value: Achieved value in original value units
        scaled_value: Optimum of the scaled instance (FPTAS only)
        scale_factor: Scale factor K applied to values (FPTAS only)
        reconstructed: False when the solver ran in value-only mode and the
            selection was not rebuilt
    """

    selection: tuple[bool, ...]
    value: int
    scaled_value: int | None = None
    scale_factor: Fraction | float | None = None
    reconstructed: bool = field(default=True)

    def __post_init__(self) -> None:
        object.__setattr__(self, "selection", tuple(bool(flag) for flag in self.selection))
        object.__setattr__(self, "value", int(self.value))

    @classmethod
    def empty(cls, n_items: int) -> "Solution":
        """The trivial solution: nothing selected, value 0."""
        return cls(selection=(False,) * n_items, value=0)

    @property
    def indices(self) -> list[int]:
        """Original indices of the included items, ascending."""
        return [idx for idx, flag in enumerate(self.selection) if flag]

    @property
    def rescaled_value(self) -> int | None:
        """``round(scaled_value * scale_factor)``, the scaled optimum in original units."""
        if self.scaled_value is None or self.scale_factor is None:
            return None
        return int(round(self.scaled_value * self.scale_factor))

    def as_array(self) -> np.ndarray:
        """Selection as a 0/1 int32 vector."""
        return np.asarray(self.selection, dtype=np.int32)

    def total_weight(self, items: ItemSet) -> int:
        return sum(item.weight for item, flag in zip(items, self.selection) if flag)

    def total_value(self, items: ItemSet) -> int:
        return sum(item.value for item, flag in zip(items, self.selection) if flag)

    def is_feasible(self, items: ItemSet) -> bool:
        """True when the selection matches the set and fits its capacity."""
        return len(self.selection) == len(items) and self.total_weight(items) <= items.capacity
