"""
Integration tests for the knapsack-fptas command line.
"""

import json

import pytest
from click.testing import CliRunner

from knapsack_fptas.cli import main
from knapsack_fptas.data import read_instance


@pytest.fixture
def runner():
    return CliRunner()


class TestSolveCommand:
    """``knapsack-fptas solve``."""

    @pytest.mark.parametrize(
        "solver, expected",
        [("dynamic", 9), ("fptas", 9), ("heuristic", 8)],
    )
    def test_solvers(self, runner, example_instance_path, solver, expected):
        result = runner.invoke(main, ["solve", str(example_instance_path), "--solver", solver])

        assert result.exit_code == 0, result.output
        assert f"value: {expected}" in result.output

    def test_capacity_override(self, runner, example_instance_path):
        result = runner.invoke(main, ["solve", str(example_instance_path), "--capacity", "0"])

        assert result.exit_code == 0, result.output
        assert "value: 0" in result.output

    def test_value_only(self, runner, example_instance_path):
        result = runner.invoke(main, ["solve", str(example_instance_path), "--value-only"])

        assert result.exit_code == 0, result.output
        assert "value: 9" in result.output
        assert "selected: 0/4" in result.output

    def test_table_limit_error(self, runner, example_instance_path):
        result = runner.invoke(
            main, ["solve", str(example_instance_path), "--max-table-cells", "5"]
        )

        assert result.exit_code == 1
        assert "cells" in result.output

    @pytest.mark.parametrize("cells", ["0", "-5"])
    def test_table_limit_must_be_positive(self, runner, example_instance_path, cells):
        result = runner.invoke(
            main, ["solve", str(example_instance_path), "--max-table-cells", cells]
        )

        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_negative_epsilon(self, runner, example_instance_path):
        result = runner.invoke(
            main, ["solve", str(example_instance_path), "--solver", "fptas", "--epsilon", "-0.5"]
        )

        assert result.exit_code == 1
        assert "epsilon" in result.output


class TestEvaluateCommand:
    """``knapsack-fptas evaluate``."""

    def test_evaluate_exports(self, runner, example_instance_path, tmp_path):
        csv_path = tmp_path / "results.csv"
        json_path = tmp_path / "results.json"
        result = runner.invoke(
            main,
            [
                "evaluate",
                str(example_instance_path),
                "--epsilons",
                "0.5,1.0",
                "--solvers",
                "fptas,heuristic",
                "--csv",
                str(csv_path),
                "--json",
                str(json_path),
            ],
        )

        assert result.exit_code == 0, result.output
        assert csv_path.exists()
        payload = json.loads(json_path.read_text())
        assert [r["solver"] for r in payload["results"]] == ["fptas", "fptas", "heuristic"]

    def test_evaluate_with_config(self, runner, default_config_path, example_instance_path):
        result = runner.invoke(
            main, ["evaluate", str(example_instance_path), "--config", str(default_config_path)]
        )

        assert result.exit_code == 0, result.output
        assert "heuristic" in result.output

    def test_evaluate_without_instance(self, runner):
        result = runner.invoke(main, ["evaluate"])

        assert result.exit_code == 1
        assert "No instance" in result.output

    def test_bad_epsilons(self, runner, example_instance_path):
        result = runner.invoke(main, ["evaluate", str(example_instance_path), "--epsilons", "a,b"])

        assert result.exit_code == 1

    def test_unknown_solver(self, runner, example_instance_path):
        result = runner.invoke(
            main, ["evaluate", str(example_instance_path), "--solvers", "genetic"]
        )

        assert result.exit_code == 1


class TestOtherCommands:
    """``generate``, ``benchmark`` and ``validate-config``."""

    def test_generate(self, runner, tmp_path):
        output = tmp_path / "random_12.txt"
        result = runner.invoke(main, ["generate", str(output), "--n-items", "12", "--seed", "3"])

        assert result.exit_code == 0, result.output
        instance = read_instance(output)
        assert len(instance.items) == 12
        assert instance.reference_value > 0

    def test_benchmark(self, runner, tmp_path):
        json_path = tmp_path / "bench.json"
        result = runner.invoke(
            main, ["benchmark", "--n-instances", "2", "--seed", "9", "--json", str(json_path)]
        )

        assert result.exit_code == 0, result.output
        payload = json.loads(json_path.read_text())
        assert "heuristic" in payload["summary"]

    def test_benchmark_rejects_zero_instances(self, runner):
        result = runner.invoke(main, ["benchmark", "--n-instances", "0"])

        assert result.exit_code == 1
        assert "Invalid option" in result.output

    def test_validate_config(self, runner, default_config_path, tmp_path):
        result = runner.invoke(main, ["validate-config", str(default_config_path)])
        assert result.exit_code == 0

        bad = tmp_path / "bad.yaml"
        bad.write_text("fptas:\n  epsilons: [-1]\n")
        result = runner.invoke(main, ["validate-config", str(bad)])
        assert result.exit_code == 1
