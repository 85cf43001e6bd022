"""Combining a directory of SVG illustrations into one grid sheet."""

import logging
import xml.etree.ElementTree as ET
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Sequence

from .config import CombineConfig, LayoutSpec
from .sources import list_svg_files
from .svg.composer import compose
from .svg.extractor import extract_file
from .svg.layout import build_canvas
from .svg.utils import save_svg_file

logger = logging.getLogger(__name__)


def extract_all(paths: Sequence[Path], jobs: int = 1) -> list[ET.Element]:
    """Extract the drawable units of every file, in file order.

    Args:
        paths: Source SVG files in placement order
        jobs: Number of worker threads; 1 extracts sequentially

    Returns:
        Flat list of units, grouped by file in the order of `paths`
    """
    if jobs > 1 and len(paths) > 1:
        # map() yields results in submission order
        with ThreadPoolExecutor(max_workers=jobs) as executor:
            per_file = list(executor.map(extract_file, paths))
    else:
        per_file = [extract_file(path) for path in paths]
    return [unit for units in per_file for unit in units]


def combine_svgs(paths: Sequence[Path], layout: LayoutSpec, jobs: int = 1) -> str:
    """Combine SVG files into a single grid SVG document.

    Only the first `layout.capacity` files are read, and only the first
    `layout.capacity` units they yield are placed.

    Args:
        paths: Source SVG files in placement order
        layout: Grid shape, scale and margins
        jobs: Number of extraction worker threads

    Returns:
        Serialized SVG document

    Raises:
        SvgParseError: if any source file is malformed
        OSError: if any source file cannot be read
    """
    selected = list(paths)[: layout.capacity]
    units = extract_all(selected, jobs)
    canvas = build_canvas(units[: layout.capacity], layout)
    logger.debug("Composing %d unit(s) from %d file(s)", len(canvas.cells), len(selected))
    return compose(canvas)


def run_combine(config: CombineConfig) -> str:
    """Execute one combine run: scan, combine, write.

    The output is written once, after the whole document is built, so a
    failure leaves no partial output behind.

    Args:
        config: Validated run configuration

    Returns:
        The serialized document that was written
    """
    paths = list_svg_files(config.source_directory, config.sort, config.seed)
    logger.info(
        "Combining %d of %d SVG file(s) from %s into a %dx%d grid",
        min(len(paths), config.layout.capacity), len(paths), config.source_directory,
        config.layout.rows, config.layout.columns,
    )

    document = combine_svgs(paths, config.layout, config.jobs)
    save_svg_file(config.out, document)
    if config.out is not None:
        logger.info("Combined SVG written to %s", config.out)
    return document
