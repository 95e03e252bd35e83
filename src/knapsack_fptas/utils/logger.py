"""
Logging configuration for solver runs and evaluations.

Provides centralized logging setup with file handlers, console output,
and a consistent format for timing and diagnostic messages.
"""

import logging
import sys
from pathlib import Path


def setup_logger(
    name: str = "knapsack_fptas",
    log_file: Path | None = None,
    level: int = logging.INFO,
    console_output: bool = True,
) -> logging.Logger:
    """
    Configure and return a logger with file and/or console handlers.

    Args:
        name: Logger name (typically module name or "knapsack_fptas")
        log_file: Path to log file (if None, only console logging)
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        console_output: If True, also log to console (stdout)

    Returns:
        Configured logger instance

    Example:
        >>> logger = setup_logger(log_file=Path("runs/eval.log"))
        >>> logger.info("Evaluation started")
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file, mode="a")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    if console_output:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        logger.addHandler(console_handler)

    logger.propagate = False

    return logger


def get_logger(name: str = "knapsack_fptas") -> logging.Logger:
    """
    Get a module logger.

    Child loggers (``knapsack_fptas.solvers.dynamic`` etc.) get no handlers of
    their own and inherit the package logger's configuration, so library code
    stays silent until an entry point calls :func:`setup_logger`.

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logging.getLogger(name)


def log_experiment_config(
    logger: logging.Logger, config: dict, title: str = "Experiment Configuration"
) -> None:
    """
    Log a configuration mapping in a structured block.

    Args:
        logger: Logger instance
        config: Configuration dictionary (nested dicts are flattened)
        title: Title for the config block
    """
    logger.info("=" * 60)
    logger.info(f"{title:^60}")
    logger.info("=" * 60)

    for key, value in sorted(_flatten(config).items()):
        logger.info(f"  {key:.<30} {value}")

    logger.info("=" * 60)


def log_metrics(
    logger: logging.Logger, metrics: dict, prefix: str = "", precision: int = 4
) -> None:
    """
    Log metrics in a formatted way.

    Args:
        logger: Logger instance
        metrics: Dictionary of metric name -> value
        prefix: Prefix string (e.g., "FPTAS (0.20) |")
        precision: Number of decimal places for float formatting

    Example:
        >>> log_metrics(logger, {"value": 295, "error": -0.0133}, prefix="Heuristic |")
    """
    metric_strs = []
    for name, value in metrics.items():
        if isinstance(value, float):
            metric_strs.append(f"{name}: {value:.{precision}f}")
        else:
            metric_strs.append(f"{name}: {value}")

    message = " | ".join(metric_strs)
    if prefix:
        message = f"{prefix} {message}"

    logger.info(message)


def _flatten(config: dict, parent: str = "") -> dict:
    flat = {}
    for key, value in config.items():
        full_key = f"{parent}.{key}" if parent else str(key)
        if isinstance(value, dict):
            flat.update(_flatten(value, full_key))
        else:
            flat[full_key] = value
    return flat
