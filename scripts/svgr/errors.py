"""Exceptions raised by svgr."""

from xml.etree.ElementTree import ParseError


class SvgrError(Exception):
    """Base class for errors reported to the user."""


class ConfigurationError(SvgrError):
    """Invalid layout values, config file or source directory."""


class SvgParseError(SvgrError, ParseError):
    """A source document is not a well-formed SVG.

    Attributes:
        source: Label of the offending document (usually its path)
        position: (line, column) reported by the XML parser; None when the
            document is well-formed but rejected (e.g. a non-svg root)
    """

    def __init__(self, message: str, source: str = "<string>", position: tuple[int, int] | None = None):
        super().__init__(f"{source}: {message}")
        self.source = source
        self.position = position
