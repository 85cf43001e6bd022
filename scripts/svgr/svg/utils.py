"""XML and SVG utility functions."""

import logging
import math
import sys
import xml.etree.ElementTree as ET
from pathlib import Path

# SVG namespace constants
SVG_NS = "http://www.w3.org/2000/svg"

logger = logging.getLogger(__name__)


def local_name(name: str) -> str:
    """Drop a `{namespace}` prefix from an ElementTree tag or attribute name."""
    if name.startswith("{"):
        return name.split("}", 1)[1]
    return name


def strip_namespaces(root: ET.Element) -> ET.Element:
    """Rewrite every tag and attribute name in the tree to its local name.

    When a prefixed attribute collapses onto a name the element already
    carries unprefixed (`xlink:href` next to `href`), the unprefixed value
    is kept.

    Modifies the tree in place. Comments and processing instructions are left
    alone since their tags are factory functions, not strings.

    Args:
        root: Root of the tree to normalize

    Returns:
        The same root, for chaining
    """
    for element in root.iter():
        if not isinstance(element.tag, str):
            continue
        element.tag = local_name(element.tag)
        if any(key.startswith("{") for key in element.attrib):
            attrib = {key: value for key, value in element.attrib.items() if not key.startswith("{")}
            for key, value in element.attrib.items():
                if not key.startswith("{"):
                    continue
                name = local_name(key)
                if name in attrib:
                    logger.debug("<%s>: dropping %s, keeping unprefixed %s", element.tag, key, name)
                    continue
                attrib[name] = value
            element.attrib.clear()
            element.attrib.update(attrib)
    return root


def format_number(value: float) -> str:
    """Format a coordinate for an SVG attribute.

    Integral values drop the trailing `.0` (300.0 -> "300"); everything else
    uses the shortest repr that round-trips (12.5 -> "12.5").
    """
    value = float(value)
    if math.isfinite(value) and value.is_integer():
        return str(int(value))
    return repr(value)


def load_svg_file(path: Path) -> bytes:
    """Load SVG file content.

    Bytes are returned so the XML parser honours the document's own
    encoding declaration.

    Args:
        path: Path to SVG file

    Returns:
        Raw SVG file content
    """
    return path.read_bytes()


def save_svg_file(path: Path | None, content: str) -> None:
    """Save SVG content to a file, or to stdout when no path is given.

    Args:
        path: Path to save SVG file, or None for stdout
        content: SVG content to save
    """
    if path is None:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")
        sys.stdout.flush()
        return
    path.write_text(content, encoding="utf-8")
