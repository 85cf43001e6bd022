"""
Combine single-illustration SVG files into one grid-shaped SVG sheet.

Usage:
    python -m svgr combine icons/ 4 8 --scaling-factor 0.5 --out sheet.svg
    svgr combine icons/ 2 3 --margin-left 10 --sort random --seed 7
"""

from .config import (
    SortMode,
    LayoutSpec,
    CombineConfig,
    load_yaml,
    load_combine_defaults,
    build_combine_config,
)
from .errors import SvgrError, ConfigurationError, SvgParseError
from .sources import list_svg_files
from .combiner import combine_svgs, run_combine

__all__ = [
    # Config
    "SortMode",
    "LayoutSpec",
    "CombineConfig",
    "load_yaml",
    "load_combine_defaults",
    "build_combine_config",
    # Errors
    "SvgrError",
    "ConfigurationError",
    "SvgParseError",
    # Sources
    "list_svg_files",
    # Combiner
    "combine_svgs",
    "run_combine",
]
