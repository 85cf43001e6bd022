"""SVG extraction, grid layout and composition."""

from .utils import SVG_NS, strip_namespaces, format_number
from .extractor import parse_svg, extract_units, extract_file
from .layout import CELL_SIZE, Placement, GridPlan, Canvas, canvas_size, plan_grid, build_canvas
from .composer import build_document, compose

__all__ = [
    # Utils
    "SVG_NS",
    "strip_namespaces",
    "format_number",
    # Extractor
    "parse_svg",
    "extract_units",
    "extract_file",
    # Layout
    "CELL_SIZE",
    "Placement",
    "GridPlan",
    "Canvas",
    "canvas_size",
    "plan_grid",
    "build_canvas",
    # Composer
    "build_document",
    "compose",
]
