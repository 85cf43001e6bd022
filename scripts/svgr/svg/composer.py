"""Assembly and serialization of the combined SVG document."""

import xml.etree.ElementTree as ET

from .layout import Canvas
from .utils import SVG_NS, format_number


def build_document(canvas: Canvas) -> ET.Element:
    """Build the root `<svg>` element with every placed unit appended.

    Each unit's `transform` attribute is overwritten with its placement,
    so units must not be reused afterwards.

    Args:
        canvas: Canvas size and positioned units

    Returns:
        Root element of the combined document
    """
    root = ET.Element(
        "svg",
        {
            "xmlns": SVG_NS,
            "width": format_number(canvas.width),
            "height": format_number(canvas.height),
        },
    )
    for unit, placement in canvas.cells:
        unit.set("transform", placement.transform())
        root.append(unit)
    return root


def compose(canvas: Canvas) -> str:
    """Serialize a canvas into UTF-8 SVG document text."""
    root = build_document(canvas)
    return ET.tostring(root, encoding="UTF-8", xml_declaration=True).decode("utf-8") + "\n"
