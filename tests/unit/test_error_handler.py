"""
Tests for error formatting and the CLI error decorator.
"""

import click
from click.testing import CliRunner

from knapsack_fptas.utils.error_handler import (
    InvalidInputError,
    TableSizeError,
    format_exception_info,
    handle_cli_errors,
)


def _command(exc):
    @click.command()
    @click.option("--debug", is_flag=True)
    @handle_cli_errors()
    def fail(debug):
        raise exc

    return fail


class TestFormatExceptionInfo:
    """Formatting of package and foreign exceptions."""

    def test_package_error_with_suggestion(self):
        exc = TableSizeError("table too large", suggestion="Lower the capacity.")
        assert format_exception_info(exc) == "Error: table too large\nSuggestion: Lower the capacity."

    def test_foreign_error(self):
        assert format_exception_info(RuntimeError("boom")) == "error (RuntimeError): boom"

    def test_traceback_requested(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError as e:
            text = format_exception_info(e, show_traceback=True)
        assert text.startswith("Traceback")
        assert "RuntimeError: boom" in text


class TestHandleCliErrors:
    """Exit codes and messages produced by the decorator."""

    def test_package_error(self):
        exc = InvalidInputError("capacity must be non-negative", suggestion="Use 0 or more.")
        result = CliRunner().invoke(_command(exc))

        assert result.exit_code == 1
        assert "Error: capacity must be non-negative" in result.output
        assert "Suggestion: Use 0 or more." in result.output

    def test_unexpected_error(self):
        result = CliRunner().invoke(_command(RuntimeError("boom")))

        assert result.exit_code == 1
        assert "Unexpected error (RuntimeError): boom" in result.output

    def test_missing_file(self):
        result = CliRunner().invoke(_command(FileNotFoundError(2, "missing", "nowhere.txt")))

        assert result.exit_code == 1
        assert "File not found: nowhere.txt" in result.output
