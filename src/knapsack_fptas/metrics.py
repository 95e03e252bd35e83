"""
Solution quality metrics.

Pure functions with no side effects - suitable for library use.
"""

from collections.abc import Iterable

import numpy as np

from knapsack_fptas.utils.error_handler import MetricError


def relative_error(achieved: float, reference: float) -> float:
    """
    Signed relative deviation of an achieved value from a reference.

    Args:
        achieved: Value reached by a solver
        reference: Known optimum

    Returns:
        ``(achieved - reference) / reference``: negative when short of the
        reference, zero when equal

    Raises:
        MetricError: If reference is zero

    Example:
        >>> relative_error(90, 100)
        -0.1
    """
    if reference == 0:
        raise MetricError(
            f"relative error is undefined for reference 0 (achieved={achieved})",
            suggestion="Compare against a non-zero optimum or report absolute values.",
        )
    return (achieved - reference) / reference


def optimality_gap(achieved: float, reference: float) -> float:
    """
    Optimality gap as percentage.

    Returns:
        Gap percentage: (reference - achieved) / reference * 100

    Example:
        >>> optimality_gap(98, 100)
        2.0
    """
    return -100.0 * relative_error(achieved, reference)


def summarize_errors(errors: Iterable[float]) -> dict[str, float | int | None]:
    """
    Aggregate statistics over relative errors.

    Returns:
        Dictionary with mean/median/std/min/max and count; statistics are
        None when there are no errors
    """
    errors = np.asarray(list(errors), dtype=np.float64)
    if errors.size == 0:
        return {"count": 0, "mean": None, "median": None, "std": None, "min": None, "max": None}
    return {
        "count": int(errors.size),
        "mean": float(np.mean(errors)),
        "median": float(np.median(errors)),
        "std": float(np.std(errors)),
        "min": float(np.min(errors)),
        "max": float(np.max(errors)),
    }
