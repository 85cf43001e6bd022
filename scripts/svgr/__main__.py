"""CLI entry point for svgr package.

Usage:
    python -m svgr combine <source_directory> <rows> <columns> [options]
"""

from .cli import main

if __name__ == "__main__":
    main()
