"""
Pydantic schemas for configuration validation.

Defines solver settings and the structure of evaluation/benchmark
configuration files.
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

SolverName = Literal["dynamic", "fptas", "heuristic"]


class DynamicConfig(BaseModel):
    """Dynamic-programming solver settings."""

    model_config = ConfigDict(extra="forbid")

    max_table_cells: int = Field(
        default=50_000_000,
        description="Upper bound on (capacity+1)*(n+1) cells of the full DP table",
        ge=1,
    )
    value_only: bool = Field(
        default=False,
        description="Keep two rolling rows instead of the full table; no selection is rebuilt",
    )


class HeuristicConfig(BaseModel):
    """Greedy ratio heuristic settings."""

    model_config = ConfigDict(extra="forbid")

    inclusive_fill: bool = Field(
        default=False,
        description="Accept an item that exactly fills the remaining capacity",
    )


class FPTASConfig(BaseModel):
    """FPTAS settings."""

    model_config = ConfigDict(extra="forbid")

    epsilons: list[float] = Field(
        default=[0.2, 0.4, 0.6, 0.8, 1.0],
        description="Approximation parameters evaluated in order (>= 1 means exact)",
    )

    @field_validator("epsilons")
    @classmethod
    def check_epsilons(cls, v: list[float]) -> list[float]:
        """Ensure epsilons are non-negative."""
        for eps in v:
            if eps < 0.0:
                raise ValueError(f"epsilon must be >= 0, got {eps}")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = Field(
        default="INFO", description="Log level"
    )
    log_file: Path | None = Field(default=None, description="Optional log file")


class EvaluationConfig(BaseModel):
    """Which solvers to run on an instance file and how to judge them."""

    model_config = ConfigDict(extra="forbid")

    instance: Path | None = Field(default=None, description="Instance file to evaluate")
    capacity: int | None = Field(
        default=None, description="Override the capacity read from the file", ge=0
    )
    solvers: list[SolverName] = Field(
        default=["fptas", "heuristic"], description="Solvers to run, in order"
    )
    repeats: int = Field(default=1, description="Timed runs per solver (best time kept)", ge=1)
    recompute_reference: bool = Field(
        default=False,
        description="Use the dynamic solver's optimum instead of the file's reference value",
    )

    @field_validator("solvers")
    @classmethod
    def check_non_empty(cls, v: list[str]) -> list[str]:
        """Ensure at least one solver is requested."""
        if not v:
            raise ValueError("Must request at least one solver")
        return v


class BenchmarkConfig(BaseModel):
    """Random-instance benchmark settings."""

    model_config = ConfigDict(extra="forbid")

    n_instances: int = Field(default=20, description="Number of generated instances", ge=1)
    n_items_min: int = Field(default=10, description="Minimum number of items", ge=1)
    n_items_max: int = Field(default=50, description="Maximum number of items", ge=1)
    value_range: tuple[int, int] = Field(default=(1, 1000), description="Range for item values")
    weight_range: tuple[int, int] = Field(default=(1, 100), description="Range for item weights")
    capacity_ratio: float = Field(
        default=0.5, description="Capacity as fraction of total weight", gt=0.0, le=1.0
    )

    @field_validator("value_range", "weight_range")
    @classmethod
    def check_valid_range(cls, v: tuple[int, int]) -> tuple[int, int]:
        """Ensure range is valid (0 <= min <= max)."""
        if v[0] > v[1]:
            raise ValueError(f"Invalid range: {v}. Min must be <= Max.")
        if v[0] < 0:
            raise ValueError(f"Range minimum must be >= 0, got {v[0]}")
        return v

    @model_validator(mode="after")
    def check_items_range(self) -> "BenchmarkConfig":
        """Ensure n_items_min <= n_items_max."""
        if self.n_items_min > self.n_items_max:
            raise ValueError(
                f"n_items_min ({self.n_items_min}) must be <= n_items_max ({self.n_items_max})"
            )
        return self


class ExperimentConfig(BaseModel):
    """Complete configuration for an evaluation or benchmark run."""

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    seed: int = Field(default=42, description="Random seed for generated instances", ge=0)

    dynamic: DynamicConfig = Field(default_factory=DynamicConfig)
    fptas: FPTASConfig = Field(default_factory=FPTASConfig)
    heuristic: HeuristicConfig = Field(default_factory=HeuristicConfig)
    evaluation: EvaluationConfig = Field(default_factory=EvaluationConfig)
    benchmark: BenchmarkConfig = Field(default_factory=BenchmarkConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: int) -> int:
        """Validate seed range (numpy RandomState accepts 32-bit seeds)."""
        if not (0 <= v < 2**32):
            raise ValueError(f"Seed must be in range [0, {2**32 - 1}], got {v}")
        return v
