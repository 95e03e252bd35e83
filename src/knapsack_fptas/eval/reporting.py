"""
Evaluation result reporting and I/O utilities.

Handles export of results to CSV, JSON, and console output.
"""

import csv
import json
import logging
from datetime import datetime
from pathlib import Path

from knapsack_fptas.eval.runner import EvaluationRecord
from knapsack_fptas.utils.logger import get_logger

logger = get_logger(__name__)

_COLUMNS = ("solver", "value", "reference", "error", "time_ms", "feasible")


def _fmt_error(error: float | None) -> str:
    return "NA" if error is None else f"{error:+.4f}"


def format_records_table(records: list[EvaluationRecord]) -> list[str]:
    """
    Render records as fixed-width text lines.

    Example:
        >>> for line in format_records_table(records):
        ...     print(line)
    """
    lines = [
        f"{'solver':>18} {'value':>10} {'reference':>10} {'error':>9} {'time_ms':>11} {'feasible':>8}"
    ]
    lines.append("-" * len(lines[0]))
    for r in records:
        reference = "NA" if r.reference is None else str(r.reference)
        lines.append(
            f"{r.label:>18} {r.value:>10} {reference:>10} {_fmt_error(r.relative_error):>9} "
            f"{r.time_ms:>11.3f} {str(r.feasible):>8}"
        )
    return lines


def log_records(records: list[EvaluationRecord], log: logging.Logger | None = None) -> None:
    """Write the records table to a logger."""
    log = log if log is not None else logger
    for line in format_records_table(records):
        log.info(line)


def export_results_to_csv(
    records: list[EvaluationRecord], filepath: str | Path, include_metadata: bool = True
) -> Path | None:
    """
    Export evaluation records to CSV format.

    Args:
        records: Evaluation records (one per solver run)
        filepath: Path to save CSV file
        include_metadata: If True, append a timestamp column

    Returns:
        Path written, or None when there was nothing to export
    """
    if not records:
        logger.warning("No results to export")
        return None

    rows = [r.to_dict() for r in records]
    fieldnames = list(rows[0].keys())
    if include_metadata:
        fieldnames.append("timestamp")

    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().isoformat()
    with open(filepath, "w", newline="") as f:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()
        for row in rows:
            if include_metadata:
                row["timestamp"] = timestamp
            writer.writerow(row)

    logger.info(f"Results exported to CSV: {filepath}")
    return filepath


def export_results_to_json(
    records: list[EvaluationRecord],
    filepath: str | Path,
    summary: dict | None = None,
) -> Path:
    """
    Export evaluation records (and an optional summary) to JSON.

    Args:
        records: Evaluation records
        filepath: Path to save JSON file
        summary: Optional per-solver summary from ``summarize_records``
    """
    filepath = Path(filepath)
    filepath.parent.mkdir(parents=True, exist_ok=True)

    payload = {
        "timestamp": datetime.now().isoformat(),
        "results": [r.to_dict() for r in records],
    }
    if summary is not None:
        payload["summary"] = summary

    with open(filepath, "w") as f:
        json.dump(payload, f, indent=2)

    logger.info(f"Results exported to JSON: {filepath}")
    return filepath


def log_summary(summary: dict[str, dict], log: logging.Logger | None = None) -> None:
    """Write per-solver summary lines to a logger."""
    log = log if log is not None else logger
    for label, stats in summary.items():
        log.info(
            f"{label:>18} | mean error: {_fmt_error(stats['mean_error'])} | "
            f"worst error: {_fmt_error(stats['min_error'])} | "
            f"mean time: {stats['mean_time_ms']:.3f} ms | "
            f"feasible: {stats['feasibility_rate']:.0%} | n={stats['n_instances']}"
        )
