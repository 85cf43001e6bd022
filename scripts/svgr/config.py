"""Configuration models and loaders for SVG grid combining."""

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigurationError


class SortMode(str, Enum):
    """Ordering applied to source files before placement."""

    DEFAULT = "default"
    RANDOM = "random"


class LayoutSpec(BaseModel):
    """Grid shape, scale and spacing for the combined sheet."""

    model_config = ConfigDict(frozen=True)

    scaling_factor: float = Field(
        1.0, gt=0, allow_inf_nan=False, description="Uniform scale for cells and margins"
    )
    margin_top: int = Field(0, ge=0, description="Vertical gap between rows (unscaled)")
    margin_left: int = Field(0, ge=0, description="Horizontal gap between columns (unscaled)")
    rows: int = Field(..., gt=0)
    columns: int = Field(..., gt=0)

    @property
    def capacity(self) -> int:
        """Number of grid cells."""
        return self.rows * self.columns


class CombineConfig(BaseModel):
    """Everything one `combine` run needs, built once at the CLI boundary."""

    model_config = ConfigDict(frozen=True)

    source_directory: Path
    layout: LayoutSpec
    sort: SortMode = SortMode.DEFAULT
    out: Path | None = Field(None, description="Output file, stdout when unset")
    seed: int | None = Field(None, description="Seed for random ordering")
    jobs: int = Field(1, ge=1, description="Parallel extraction workers")


# Keys a YAML config file may provide, mapped to their CombineConfig/LayoutSpec home
LAYOUT_KEYS = ("scaling_factor", "margin_top", "margin_left")
RUN_KEYS = ("sort", "seed", "jobs")


def load_yaml(path: Path) -> dict[str, Any]:
    """Load a YAML file and return its contents."""
    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigurationError(f"Expected a mapping at the top of {path}")
    return data


def load_combine_defaults(path: Path) -> dict[str, Any]:
    """Load combine option defaults from a YAML config file.

    Accepts either a flat mapping or one nested under a `combine` key.
    Unknown keys are rejected so typos do not pass silently.

    Args:
        path: Path to YAML config file

    Returns:
        Dict with any of scaling_factor, margin_top, margin_left, sort, seed, jobs
    """
    if not path.exists():
        raise ConfigurationError(f"Config file not found: {path}")

    data = load_yaml(path)
    section = data.get("combine", data)
    if not isinstance(section, dict):
        raise ConfigurationError(f"'combine' section of {path} must be a mapping")

    unknown = sorted(set(section) - set(LAYOUT_KEYS) - set(RUN_KEYS))
    if unknown:
        raise ConfigurationError(f"Unknown keys in {path}: {', '.join(unknown)}")
    return dict(section)


def build_combine_config(
    source_directory: Path,
    rows: int,
    columns: int,
    options: dict[str, Any],
    out: Path | None = None,
) -> CombineConfig:
    """Validate raw option values into a CombineConfig.

    Args:
        source_directory: Directory holding the source SVG files
        rows: Grid rows
        columns: Grid columns
        options: Values for LAYOUT_KEYS and RUN_KEYS; None entries are ignored
        out: Output path, or None for stdout

    Returns:
        Frozen CombineConfig

    Raises:
        ConfigurationError: if any value is out of range
    """
    layout_values = {k: options[k] for k in LAYOUT_KEYS if options.get(k) is not None}
    run_values = {k: options[k] for k in RUN_KEYS if options.get(k) is not None}
    try:
        layout = LayoutSpec(rows=rows, columns=columns, **layout_values)
        return CombineConfig(
            source_directory=source_directory,
            layout=layout,
            out=out,
            **run_values,
        )
    except ValidationError as e:
        raise ConfigurationError(_describe_validation_error(e)) from e


def _describe_validation_error(error: ValidationError) -> str:
    """Flatten a pydantic ValidationError into one readable line."""
    parts = []
    for item in error.errors():
        field = ".".join(str(loc) for loc in item["loc"])
        parts.append(f"{field}: {item['msg']}")
    return "Invalid configuration: " + "; ".join(parts)
