"""
Configuration management and validation.

Provides Pydantic schemas and utilities for loading and validating
solver and evaluation configurations.
"""

from knapsack_fptas.config.loader import (
    config_to_dict,
    load_config,
    save_config,
    validate_config_file,
)
from knapsack_fptas.config.schemas import (
    BenchmarkConfig,
    DynamicConfig,
    EvaluationConfig,
    ExperimentConfig,
    FPTASConfig,
    HeuristicConfig,
    LoggingConfig,
)

__all__ = [
    "ExperimentConfig",
    "DynamicConfig",
    "FPTASConfig",
    "HeuristicConfig",
    "EvaluationConfig",
    "BenchmarkConfig",
    "LoggingConfig",
    "load_config",
    "save_config",
    "config_to_dict",
    "validate_config_file",
]
