"""
Tests for configuration schemas and YAML loading.
"""

import pytest
from pydantic import ValidationError

from knapsack_fptas.config import (
    BenchmarkConfig,
    EvaluationConfig,
    ExperimentConfig,
    FPTASConfig,
    load_config,
    save_config,
    validate_config_file,
)
from knapsack_fptas.utils.error_handler import ConfigurationError


class TestSchemas:
    """Defaults and validation rules."""

    def test_defaults(self):
        config = ExperimentConfig()

        assert config.fptas.epsilons == [0.2, 0.4, 0.6, 0.8, 1.0]
        assert config.evaluation.solvers == ["fptas", "heuristic"]
        assert config.dynamic.value_only is False
        assert config.heuristic.inclusive_fill is False

    def test_negative_epsilon_rejected(self):
        with pytest.raises(ValidationError):
            FPTASConfig(epsilons=[0.2, -0.1])

    def test_unknown_solver_rejected(self):
        with pytest.raises(ValidationError):
            EvaluationConfig(solvers=["genetic"])

    def test_empty_solver_list_rejected(self):
        with pytest.raises(ValidationError):
            EvaluationConfig(solvers=[])

    def test_item_range_order(self):
        with pytest.raises(ValidationError):
            BenchmarkConfig(n_items_min=20, n_items_max=10)

    def test_extra_field_rejected(self):
        with pytest.raises(ValidationError):
            ExperimentConfig(unknown_field=1)

    def test_seed_range(self):
        with pytest.raises(ValidationError):
            ExperimentConfig(seed=2**32)


class TestLoader:
    """YAML loading and error wrapping."""

    def test_load_default_file(self, default_config_path):
        config = load_config(default_config_path)

        assert config.seed == 42
        assert config.fptas.epsilons == [0.2, 0.4, 0.6, 0.8, 1.0]
        assert config.benchmark.value_range == (1, 1000)

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="not found"):
            load_config(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "bad.yaml"
        path.write_text("fptas: [unclosed\n")
        with pytest.raises(ConfigurationError, match="Invalid YAML"):
            load_config(path)

    def test_empty_file(self, tmp_path):
        path = tmp_path / "empty.yaml"
        path.write_text("")
        with pytest.raises(ConfigurationError, match="Empty"):
            load_config(path)

    def test_validation_error_lists_location(self, tmp_path):
        path = tmp_path / "neg.yaml"
        path.write_text("dynamic:\n  max_table_cells: 0\n")
        with pytest.raises(ConfigurationError, match="max_table_cells"):
            load_config(path)

    def test_save_and_reload(self, tmp_path):
        config = ExperimentConfig(seed=7, fptas=FPTASConfig(epsilons=[0.5]))
        path = tmp_path / "saved" / "config.yaml"
        save_config(config, path)

        assert load_config(path) == config

    def test_validate_config_file(self, default_config_path, tmp_path):
        is_valid, _ = validate_config_file(default_config_path)
        assert is_valid

        is_valid, message = validate_config_file(tmp_path / "missing.yaml")
        assert not is_valid
        assert "not found" in message
