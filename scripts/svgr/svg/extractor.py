"""Extraction of placeable content from single-illustration SVG documents."""

import copy
import logging
import xml.etree.ElementTree as ET
from pathlib import Path

from ..errors import SvgParseError
from .utils import load_svg_file, strip_namespaces

logger = logging.getLogger(__name__)


def parse_svg(source_document: str | bytes, source: str = "<string>") -> ET.Element:
    """Parse SVG markup into a namespace-free element tree.

    Args:
        source_document: Raw SVG markup
        source: Label used in error messages

    Returns:
        Root `svg` element with all namespaces stripped

    Raises:
        SvgParseError: if the markup is malformed or the root is not `svg`
    """
    try:
        root = ET.fromstring(source_document)
    except ET.ParseError as e:
        raise SvgParseError(str(e), source=source, position=getattr(e, "position", None)) from e

    strip_namespaces(root)
    if root.tag != "svg":
        raise SvgParseError(f"root element is <{root.tag}>, expected <svg>", source=source)
    return root


def extract_units(source_document: str | bytes, source: str = "<string>") -> list[ET.Element]:
    """Extract the drawable units of one SVG document.

    A document with top-level `<g>` elements yields a copy of each of them,
    untouched. A document without any yields a single new `<g>` wrapping all
    children of the root `<svg>`, in document order. The root's own
    attributes (viewBox, size, presentation attributes) are not carried over.

    Returned elements are independent copies; nothing references the parsed
    input tree afterwards.

    Args:
        source_document: Raw SVG markup
        source: Label used in error messages

    Returns:
        List of `<g>` elements, at least one

    Raises:
        SvgParseError: if the markup is malformed
    """
    root = parse_svg(source_document, source)

    groups = [child for child in root if child.tag == "g"]
    if groups:
        logger.debug("%s: %d top-level group(s)", source, len(groups))
        return [copy.deepcopy(group) for group in groups]

    # Wrap all child elements of the SVG document in a group
    wrapper = ET.Element("g")
    wrapper.extend(copy.deepcopy(child) for child in root)
    logger.debug("%s: no top-level group, wrapped %d element(s)", source, len(wrapper))
    return [wrapper]


def extract_file(path: Path) -> list[ET.Element]:
    """Read an SVG file and extract its drawable units."""
    return extract_units(load_svg_file(path), source=str(path))
