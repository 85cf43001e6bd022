"""Grid placement of drawable units on the combined canvas."""

import logging
import xml.etree.ElementTree as ET
from typing import Sequence

from pydantic import BaseModel, ConfigDict

from ..config import LayoutSpec
from .utils import format_number

logger = logging.getLogger(__name__)

# Every source illustration is assumed to fit a center-anchored 100x100 box
CELL_SIZE = 100
CELL_HALF = CELL_SIZE / 2


class Placement(BaseModel):
    """Position and scale of one unit on the canvas."""

    model_config = ConfigDict(frozen=True)

    index: int
    row: int
    column: int
    translate_x: float
    translate_y: float
    scale: float

    def transform(self) -> str:
        """Return the SVG transform attribute value for this placement."""
        return (
            f"translate({format_number(self.translate_x)}, {format_number(self.translate_y)}) "
            f"scale({format_number(self.scale)})"
        )


class GridPlan(BaseModel):
    """Canvas size and the placements of the units that fit on it."""

    model_config = ConfigDict(frozen=True)

    width: float
    height: float
    placements: tuple[Placement, ...] = ()


class Canvas(BaseModel):
    """Canvas size plus each unit paired with its placement, in order."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    width: float
    height: float
    cells: list[tuple[ET.Element, Placement]] = []


def canvas_size(layout: LayoutSpec) -> tuple[float, float]:
    """Compute (width, height) of the canvas for a layout."""
    s = layout.scaling_factor
    width = layout.columns * CELL_SIZE * s + (layout.columns - 1) * layout.margin_left * s
    height = layout.rows * CELL_SIZE * s + (layout.rows - 1) * layout.margin_top * s
    return width, height


def plan_grid(unit_count: int, layout: LayoutSpec) -> GridPlan:
    """Assign row-major placements for up to `layout.capacity` units.

    The grid is centered horizontally through the `(width - cell) / 2` term.
    Rows are stacked from the top with no vertical centering term; output
    sheets from earlier releases depend on that, so it is kept.

    Args:
        unit_count: Number of units available for placement
        layout: Grid shape, scale and margins

    Returns:
        GridPlan with min(unit_count, capacity) placements
    """
    s = layout.scaling_factor
    width, height = canvas_size(layout)
    cell = CELL_SIZE * s
    step_x = cell + layout.margin_left * s
    step_y = cell + layout.margin_top * s
    offset_x = (width - cell) / 2

    placements = []
    for index in range(min(unit_count, layout.capacity)):
        row, column = divmod(index, layout.columns)
        x = column * step_x + offset_x
        y = row * step_y

        # Offset by half the cell so the transform places the unit's center
        placements.append(
            Placement(
                index=index,
                row=row,
                column=column,
                translate_x=x + CELL_HALF * s,
                translate_y=y + CELL_HALF * s,
                scale=s,
            )
        )

    logger.debug(
        "Planned %d placement(s) on %sx%s canvas",
        len(placements), format_number(width), format_number(height),
    )
    return GridPlan(width=width, height=height, placements=tuple(placements))


def build_canvas(units: Sequence[ET.Element], layout: LayoutSpec) -> Canvas:
    """Pair units with their grid placements.

    Units beyond the grid capacity are dropped.

    Args:
        units: Drawable units in placement order
        layout: Grid shape, scale and margins

    Returns:
        Canvas ready for composition
    """
    if len(units) > layout.capacity:
        logger.warning(
            "Grid %dx%d holds %d unit(s); dropping %d",
            layout.rows, layout.columns, layout.capacity, len(units) - layout.capacity,
        )

    plan = plan_grid(len(units), layout)
    cells = [(units[p.index], p) for p in plan.placements]
    return Canvas(width=plan.width, height=plan.height, cells=cells)
