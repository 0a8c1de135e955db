"""
Version information for the EA letter writing engine.

This file is the single source of truth for version numbers.
setup.py and the CLI import from here.
"""

__version__ = "0.3.0"
__version_info__ = (0, 3, 0)
