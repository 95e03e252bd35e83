"""
Error handling utilities for the knapsack solvers and CLI.

Provides the exception hierarchy raised at solver entry points and a
decorator that turns those errors into readable CLI messages.
"""

import functools
import sys
import traceback
from collections.abc import Callable
from typing import Any, TypeVar

import click

# Type variable for decorators
F = TypeVar("F", bound=Callable[..., Any])


# ============================================================================
# Custom Exception Hierarchy
# ============================================================================


class KnapsackError(Exception):
    """Base exception for knapsack_fptas errors."""

    def __init__(self, message: str, suggestion: str | None = None) -> None:
        """
        Initialize error with message and optional suggestion.

        Args:
            message: Error description
            suggestion: Actionable suggestion for fixing the error
        """
        self.message = message
        self.suggestion = suggestion
        super().__init__(message)

    def format_error(self) -> str:
        """Format error message with suggestion."""
        parts = [f"Error: {self.message}"]
        if self.suggestion:
            parts.append(f"Suggestion: {self.suggestion}")
        return "\n".join(parts)


class InvalidInputError(KnapsackError, ValueError):
    """Negative or non-integer weight, value, capacity or epsilon."""

    pass


class TableSizeError(KnapsackError, MemoryError):
    """DP table would exceed the configured memory ceiling."""

    pass


class MetricError(KnapsackError, ArithmeticError):
    """Quality metric is undefined for the given arguments."""

    pass


class DataError(KnapsackError):
    """Error related to reading or writing instance files."""

    pass


class ConfigurationError(KnapsackError):
    """Error related to configuration files or parameters."""

    pass


# ============================================================================
# Error Handlers
# ============================================================================


def format_exception_info(exc: Exception, show_traceback: bool = False) -> str:
    """
    Format exception information for display.

    Args:
        exc: The exception to format
        show_traceback: Whether to include full traceback

    Returns:
        Formatted error string
    """
    if isinstance(exc, KnapsackError):
        return exc.format_error()
    elif show_traceback:
        return "".join(traceback.format_exception(type(exc), exc, exc.__traceback__))
    else:
        return f"error ({type(exc).__name__}): {exc}"


def handle_cli_errors(
    debug_flag_name: str = "debug",
) -> Callable[[F], F]:
    """
    Decorator for CLI commands to handle errors gracefully.

    Args:
        debug_flag_name: Name of the debug flag in the command signature

    Returns:
        Decorator function

    Example:
        >>> @click.command()
        >>> @click.option("--debug", is_flag=True)
        >>> @handle_cli_errors()
        >>> def solve(debug):
        ...     pass
    """

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            debug_mode = kwargs.get(debug_flag_name, False)

            try:
                return func(*args, **kwargs)

            except KnapsackError as e:
                click.secho(format_exception_info(e), fg="red", err=True)
                if debug_mode:
                    click.secho("\nFull traceback:", fg="yellow", err=True)
                    traceback.print_exc()
                sys.exit(1)

            except FileNotFoundError as e:
                msg = f"File not found: {e.filename}"
                suggestion = "Check that the path exists and is spelled correctly."
                click.secho(f"Error: {msg}", fg="red", err=True)
                click.secho(f"Suggestion: {suggestion}", fg="yellow", err=True)
                if debug_mode:
                    traceback.print_exc()
                sys.exit(1)

            except KeyboardInterrupt:
                click.secho("\n\nOperation cancelled by user.", fg="yellow", err=True)
                sys.exit(130)

            except Exception as e:
                if debug_mode:
                    click.secho("Unexpected error occurred:", fg="red", err=True)
                    traceback.print_exc()
                else:
                    click.secho(f"Unexpected {format_exception_info(e)}", fg="red", err=True)
                    click.secho(
                        "\nTip: Run with --debug flag to see full traceback", fg="yellow", err=True
                    )
                sys.exit(1)

        return wrapper  # type: ignore

    return decorator


# ============================================================================
# Validation Utilities
# ============================================================================


def require_non_negative_int(value: Any, name: str) -> int:
    """
    Validate that value is a non-negative integer.

    Accepts Python and NumPy integers; rejects bools and floats.

    Args:
        value: Value to validate
        name: Parameter name for error messages

    Returns:
        Validated value as a Python int

    Raises:
        InvalidInputError: If value is not a non-negative integer
    """
    if isinstance(value, bool) or not hasattr(value, "__index__"):
        raise InvalidInputError(
            f"{name} must be an integer, got: {value!r}",
            suggestion=f"Provide a whole number for {name}.",
        )
    value = int(value)
    if value < 0:
        raise InvalidInputError(
            f"{name} must be non-negative, got: {value}",
            suggestion=f"Provide a value >= 0 for {name}.",
        )
    return value


def require_epsilon(value: float, name: str = "epsilon") -> float:
    """
    Validate an approximation parameter.

    Values >= 1 are accepted here; solvers decide how to clamp them.

    Raises:
        InvalidInputError: If value is negative or not a finite number
    """
    try:
        value = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidInputError(f"{name} must be a number, got: {value!r}") from e
    if value != value or value in (float("inf"), float("-inf")):
        raise InvalidInputError(f"{name} must be finite, got: {value}")
    if value < 0.0:
        raise InvalidInputError(
            f"{name} must be non-negative, got: {value}",
            suggestion="Use 0 for an exact solution or a value in (0, 1) to approximate.",
        )
    return value
