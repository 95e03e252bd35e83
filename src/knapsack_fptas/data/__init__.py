"""Item records, instance files and random instance generation."""

from knapsack_fptas.data.generator import InstanceGenerator, with_reference
from knapsack_fptas.data.items import Item, ItemSet, Solution
from knapsack_fptas.data.reader import Instance, parse_instance, read_instance, write_instance

__all__ = [
    "Item",
    "ItemSet",
    "Solution",
    "Instance",
    "parse_instance",
    "read_instance",
    "write_instance",
    "InstanceGenerator",
    "with_reference",
]
