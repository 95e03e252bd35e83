"""Timed evaluation of the solvers and result reporting."""

from knapsack_fptas.eval.reporting import (
    export_results_to_csv,
    export_results_to_json,
    format_records_table,
    log_records,
    log_summary,
)
from knapsack_fptas.eval.runner import (
    EvaluationRecord,
    evaluate_solver,
    resolve_reference,
    run_benchmark,
    run_evaluation,
    summarize_records,
)

__all__ = [
    "EvaluationRecord",
    "evaluate_solver",
    "resolve_reference",
    "run_evaluation",
    "run_benchmark",
    "summarize_records",
    "format_records_table",
    "log_records",
    "log_summary",
    "export_results_to_csv",
    "export_results_to_json",
]
