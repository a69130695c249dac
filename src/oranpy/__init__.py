"""
oranpy - null-safe container builders and try/except one-liners.

- oranpy.core: Container builders, fallback executor, errors, result envelope
- oranpy.cli: ``oranpy`` demonstration CLI
"""

__version__ = "0.2.0"

from oranpy.core import *  # noqa
