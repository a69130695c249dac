"""
CLI layer for oranpy.

Provides a Typer application whose ``demo`` sub-commands print worked
examples of the container builders and the fallback executor.  All
behaviour lives in ``oranpy.core`` -- this package handles only terminal
transport: argument parsing and coloured output.

Entry point::

    oranpy --help
"""

from oranpy.cli.app import app

__all__ = ["app"]
