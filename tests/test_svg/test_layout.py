"""Tests for grid layout planning."""

from __future__ import annotations

import xml.etree.ElementTree as ET

import pytest

from svgr.config import LayoutSpec
from svgr.svg.layout import Placement, build_canvas, canvas_size, plan_grid


def _layout(**overrides) -> LayoutSpec:
    values = {"rows": 2, "columns": 3}
    values.update(overrides)
    return LayoutSpec(**values)


def _translate(p: Placement) -> tuple[float, float]:
    return p.translate_x, p.translate_y


class TestCanvasSize:
    def test_two_by_three(self):
        assert canvas_size(_layout()) == (300, 200)

    def test_margins_between_cells_only(self):
        width, height = canvas_size(_layout(margin_left=10, margin_top=20))
        assert width == 3 * 100 + 2 * 10
        assert height == 2 * 100 + 1 * 20

    def test_scaling_applies_to_margins(self):
        width, height = canvas_size(_layout(scaling_factor=0.5, margin_left=10, margin_top=20))
        assert width == pytest.approx(160)
        assert height == pytest.approx(110)

    def test_single_cell(self):
        assert canvas_size(_layout(rows=1, columns=1, margin_left=50, margin_top=50)) == (100, 100)

    @pytest.mark.parametrize(
        "field,values",
        [
            ("rows", [1, 2, 5]),
            ("columns", [1, 3, 8]),
            ("scaling_factor", [0.25, 1.0, 2.5]),
            ("margin_top", [0, 4, 40]),
            ("margin_left", [0, 4, 40]),
        ],
    )
    def test_monotonic(self, field, values):
        sizes = [canvas_size(_layout(**{field: v})) for v in values]
        for smaller, larger in zip(sizes, sizes[1:]):
            assert larger[0] >= smaller[0]
            assert larger[1] >= smaller[1]


class TestPlanGrid:
    def test_row_major_order(self):
        plan = plan_grid(6, _layout())
        assert [(p.row, p.column) for p in plan.placements] == [
            (0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2),
        ]
        assert [p.index for p in plan.placements] == list(range(6))

    def test_translations_two_by_three(self):
        plan = plan_grid(6, _layout())
        assert (plan.width, plan.height) == (300, 200)
        # Horizontal offset (300 - 100) / 2 = 100 is added to every column
        assert _translate(plan.placements[0]) == (150, 50)
        assert _translate(plan.placements[2]) == (350, 50)
        assert _translate(plan.placements[4]) == (250, 150)
        assert all(p.scale == 1 for p in plan.placements)

    def test_rows_not_centered_vertically(self):
        # Only the x axis has a centering term; the first row always sits at
        # half a cell from the top, however tall the canvas is
        plan = plan_grid(1, _layout(rows=4, columns=1))
        assert plan.height == 400
        assert _translate(plan.placements[0]) == (50, 50)

    def test_horizontal_centering_term(self):
        layout = _layout(rows=1, columns=2, scaling_factor=2)
        plan = plan_grid(2, layout)
        assert plan.width == 400
        # (400 - 200) / 2 = 100 shifts every column right
        assert _translate(plan.placements[0]) == (200, 100)
        assert _translate(plan.placements[1]) == (400, 100)

    def test_margins_and_scale(self):
        plan = plan_grid(6, _layout(scaling_factor=0.5, margin_left=10, margin_top=20))
        width = plan.width
        step_x = 50 + 5
        step_y = 50 + 10
        p = plan.placements[5]
        assert p.translate_x == pytest.approx(2 * step_x + (width - 50) / 2 + 25)
        assert p.translate_y == pytest.approx(1 * step_y + 25)
        assert p.scale == 0.5

    @pytest.mark.parametrize("count,expected", [(0, 0), (1, 1), (5, 5), (6, 6), (9, 6)])
    def test_placement_count(self, count, expected):
        assert len(plan_grid(count, _layout()).placements) == expected

    def test_transform_string(self):
        plan = plan_grid(1, _layout(scaling_factor=0.5))
        assert plan.placements[0].transform() == "translate(75, 25) scale(0.5)"


class TestBuildCanvas:
    def test_pairs_units_with_placements(self):
        units = [ET.Element("g", id=str(i)) for i in range(4)]
        canvas = build_canvas(units, _layout())
        assert [u.get("id") for u, _ in canvas.cells] == ["0", "1", "2", "3"]
        assert [p.index for _, p in canvas.cells] == [0, 1, 2, 3]

    def test_excess_units_dropped(self, caplog):
        units = [ET.Element("g", id=str(i)) for i in range(8)]
        canvas = build_canvas(units, _layout())
        assert len(canvas.cells) == 6
        assert canvas.cells[-1][0].get("id") == "5"
        assert "dropping 2" in caplog.text

    def test_empty(self):
        canvas = build_canvas([], _layout())
        assert canvas.cells == []
        assert (canvas.width, canvas.height) == (300, 200)
