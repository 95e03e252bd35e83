"""
Configuration loading and validation utilities.

Provides functions to load YAML configs and validate them against Pydantic schemas.
"""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from knapsack_fptas.config.schemas import ExperimentConfig
from knapsack_fptas.utils.error_handler import ConfigurationError


def load_config(config_path: str | Path) -> ExperimentConfig:
    """
    Load and validate an experiment configuration from a YAML file.

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated ExperimentConfig object

    Raises:
        ConfigurationError: If file not found, invalid YAML, or validation fails

    Example:
        >>> config = load_config("configs/evaluate_default.yaml")
        >>> config.fptas.epsilons
        [0.2, 0.4, 0.6, 0.8, 1.0]
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise ConfigurationError(
            f"Configuration file not found: {config_path}",
            suggestion="Check the path or start from configs/evaluate_default.yaml.",
        )

    try:
        with open(config_file) as f:
            config_dict = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(
            f"Invalid YAML in config file: {config_path}",
            suggestion=f"Fix YAML syntax error: {e}",
        ) from e
    except OSError as e:
        raise ConfigurationError(
            f"Failed to read config file: {config_path}",
            suggestion=f"Error: {e}",
        ) from e

    if config_dict is None:
        raise ConfigurationError(
            f"Empty configuration file: {config_path}",
            suggestion="Add configuration parameters to the YAML file.",
        )
    if not isinstance(config_dict, dict):
        raise ConfigurationError(
            f"Configuration root must be a mapping: {config_path}",
            suggestion="Use 'key: value' pairs at the top level of the YAML file.",
        )

    try:
        config = ExperimentConfig(**config_dict)
    except ValidationError as e:
        errors = []
        for error in e.errors():
            loc = " -> ".join(str(x) for x in error["loc"])
            msg = error["msg"]
            errors.append(f"  - {loc}: {msg}")

        error_msg = "\n".join(errors)
        raise ConfigurationError(
            f"Configuration validation failed for {config_path}:\n{error_msg}",
            suggestion="Fix the configuration errors listed above. "
            "See configs/evaluate_default.yaml for a valid example.",
        ) from e

    return config


def validate_config_file(config_path: str | Path) -> tuple[bool, str]:
    """
    Validate config file without raising exceptions.

    Returns:
        Tuple of (is_valid, message)
    """
    try:
        load_config(config_path)
        return True, f"Configuration is valid: {config_path}"
    except ConfigurationError as e:
        return False, e.message


def config_to_dict(config: ExperimentConfig) -> dict[str, Any]:
    """Convert ExperimentConfig to a YAML-friendly dictionary."""
    return config.model_dump(mode="json")


def save_config(config: ExperimentConfig, output_path: str | Path) -> None:
    """
    Save ExperimentConfig to YAML file.

    Args:
        config: ExperimentConfig instance
        output_path: Path to save YAML file
    """
    output_file = Path(output_path)
    output_file.parent.mkdir(parents=True, exist_ok=True)

    with open(output_file, "w") as f:
        yaml.dump(config_to_dict(config), f, default_flow_style=False, sort_keys=False, indent=2)
