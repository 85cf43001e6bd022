"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest


# Sample source illustrations

GROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" width="100" height="100" viewBox="-50 -50 100 100">
  <g id="body" fill="#4ECDC4"><circle cx="0" cy="0" r="40"/></g>
</svg>'''

TWO_GROUPS_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-50 -50 100 100">
  <g id="back" transform="rotate(45)"><rect x="-30" y="-30" width="60" height="60"/></g>
  <g id="front"><circle cx="0" cy="0" r="10" fill="#FF6B6B"/></g>
</svg>'''

UNGROUPED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg" viewBox="-50 -50 100 100" fill="none">
  <rect x="-40" y="-40" width="80" height="80"/>
  <circle cx="0" cy="0" r="20"/>
  <path d="M-10 0 L10 0"/>
</svg>'''

# Inkscape-style output: prefixed namespaces on elements and attributes
PREFIXED_SVG = '''<?xml version="1.0" encoding="UTF-8"?>
<svg:svg xmlns:svg="http://www.w3.org/2000/svg" xmlns:xlink="http://www.w3.org/1999/xlink">
  <svg:defs><svg:circle id="dot" r="5"/></svg:defs>
  <svg:use xlink:href="#dot" x="10" y="10"/>
</svg:svg>'''

NESTED_GROUP_SVG = '''<svg xmlns="http://www.w3.org/2000/svg">
  <defs><linearGradient id="fade"/></defs>
  <a href="#"><g id="inner"><path d="M0 0"/></g></a>
</svg>'''

MALFORMED_SVG = '''<svg xmlns="http://www.w3.org/2000/svg"><g><circle r="1"></g>'''

NOT_SVG = '''<html><body><g/></body></html>'''


@pytest.fixture
def grouped_svg() -> str:
    return GROUPED_SVG


@pytest.fixture
def ungrouped_svg() -> str:
    return UNGROUPED_SVG


@pytest.fixture
def icon_dir(tmp_path: Path) -> Path:
    """Directory with numbered icons, deliberately not in lexical order."""
    directory = tmp_path / "icons"
    directory.mkdir()
    (directory / "10.svg").write_text(TWO_GROUPS_SVG)
    (directory / "2.svg").write_text(UNGROUPED_SVG)
    (directory / "1.svg").write_text(GROUPED_SVG)
    (directory / "notes.txt").write_text("not an svg")
    return directory
