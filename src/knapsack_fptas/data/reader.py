"""
Reader and writer for the line-oriented instance format.

First line: ``<label> <capacity> <label> <referenceValue>``, e.g.
``capacity 269 optimum 295``. Every following non-blank line holds one
``<weight> <value>`` pair.
"""

from dataclasses import dataclass
from pathlib import Path

from knapsack_fptas.data.items import Item, ItemSet
from knapsack_fptas.utils.error_handler import DataError, InvalidInputError
from knapsack_fptas.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Instance:
    """An ItemSet read from disk with its known optimum, if any."""

    items: ItemSet
    reference_value: int | None = None
    name: str = "instance"

    def __repr__(self) -> str:
        return (
            f"Instance(name={self.name!r}, n_items={self.items.n_items}, "
            f"capacity={self.items.capacity}, reference={self.reference_value})"
        )


def _parse_int(token: str, line_no: int, path: str) -> int:
    try:
        return int(token)
    except ValueError as e:
        raise DataError(
            f"{path}:{line_no}: expected an integer, got {token!r}",
            suggestion="Instance files hold whitespace-separated integers only.",
        ) from e


def parse_instance(text: str, name: str = "instance") -> Instance:
    """
    Parse instance text.

    Args:
        text: File contents
        name: Label used in error messages and reports

    Returns:
        Instance with items, capacity and reference value

    Raises:
        DataError: On a missing/short header or a malformed item line
    """
    lines = text.splitlines()
    if not lines or not lines[0].strip():
        raise DataError(
            f"{name}: missing header line",
            suggestion="The first line must read '<label> <capacity> <label> <optimum>'.",
        )

    header = lines[0].split()
    if len(header) < 4:
        raise DataError(
            f"{name}:1: header needs 4 tokens, got {len(header)}",
            suggestion="The first line must read '<label> <capacity> <label> <optimum>'.",
        )
    capacity = _parse_int(header[1], 1, name)
    reference = _parse_int(header[3], 1, name)

    items = []
    for line_no, line in enumerate(lines[1:], start=2):
        tokens = line.split()
        if not tokens:
            continue
        if len(tokens) < 2:
            raise DataError(f"{name}:{line_no}: expected '<weight> <value>', got {line!r}")
        weight = _parse_int(tokens[0], line_no, name)
        value = _parse_int(tokens[1], line_no, name)
        try:
            items.append(Item(value=value, weight=weight))
        except InvalidInputError as e:
            raise DataError(f"{name}:{line_no}: {e.message}") from e

    try:
        item_set = ItemSet(tuple(items), capacity)
    except InvalidInputError as e:
        raise DataError(f"{name}:1: {e.message}") from e

    return Instance(items=item_set, reference_value=reference, name=name)


def read_instance(path: str | Path) -> Instance:
    """Read an instance file. See :func:`parse_instance`."""
    path = Path(path)
    text = path.read_text()
    instance = parse_instance(text, name=path.name)
    logger.debug(f"Loaded {instance!r} from {path}")
    return instance


def write_instance(
    path: str | Path,
    items: ItemSet,
    reference_value: int | None = None,
    capacity_label: str = "capacity",
    reference_label: str = "optimum",
) -> Path:
    """
    Write an ItemSet in the instance format.

    A missing reference is written as 0.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    reference = 0 if reference_value is None else int(reference_value)
    lines = [f"{capacity_label} {items.capacity} {reference_label} {reference}"]
    lines.extend(f"{item.weight} {item.value}" for item in items)

    path.write_text("\n".join(lines) + "\n")
    logger.debug(f"Wrote {items!r} to {path}")
    return path
