"""Utility functions for logging and error handling."""

from knapsack_fptas.utils.error_handler import (
    ConfigurationError,
    DataError,
    InvalidInputError,
    KnapsackError,
    MetricError,
    TableSizeError,
)
from knapsack_fptas.utils.logger import (
    get_logger,
    log_experiment_config,
    log_metrics,
    setup_logger,
)

__all__ = [
    "setup_logger",
    "get_logger",
    "log_experiment_config",
    "log_metrics",
    "KnapsackError",
    "InvalidInputError",
    "TableSizeError",
    "MetricError",
    "DataError",
    "ConfigurationError",
]
