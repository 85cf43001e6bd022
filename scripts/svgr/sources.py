"""Source file discovery and ordering."""

import logging
import random
import re
from pathlib import Path
from typing import Callable

from .config import SortMode
from .errors import ConfigurationError

logger = logging.getLogger(__name__)

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def numeric_stem(path: Path) -> int:
    """Return the integer at the start of a filename stem, 0 if there is none.

    "12.svg" -> 12, "007-star.svg" -> 7, "icon.svg" -> 0
    """
    match = _LEADING_INT_RE.match(path.stem)
    return int(match.group(1)) if match else 0


def sort_default(paths: list[Path], seed: int | None = None) -> list[Path]:
    """Order by numeric filename stem, ties broken by filename."""
    return sorted(paths, key=lambda p: (numeric_stem(p), p.name))


def sort_random(paths: list[Path], seed: int | None = None) -> list[Path]:
    """Shuffle, reproducibly when a seed is given."""
    shuffled = list(paths)
    random.Random(seed).shuffle(shuffled)
    return shuffled


SORTERS: dict[SortMode, Callable[[list[Path], int | None], list[Path]]] = {
    SortMode.DEFAULT: sort_default,
    SortMode.RANDOM: sort_random,
}


def list_svg_files(directory: Path, sort: SortMode, seed: int | None = None) -> list[Path]:
    """List the `*.svg` files of a directory in placement order.

    Args:
        directory: Directory to scan (not recursive)
        sort: Ordering to apply
        seed: Seed for random ordering

    Returns:
        Ordered list of SVG file paths

    Raises:
        ConfigurationError: if the directory does not exist
    """
    if not directory.is_dir():
        raise ConfigurationError(f"Source directory not found: {directory}")

    # Glob order is filesystem dependent; start from a stable order.
    # Hidden files (e.g. macOS "._1.svg" resource forks) are skipped.
    paths = sorted(
        p for p in directory.glob("*.svg") if p.is_file() and not p.name.startswith(".")
    )
    if not paths:
        logger.warning("No SVG files found in %s", directory)
    return SORTERS[sort](paths, seed)
