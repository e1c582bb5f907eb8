# -*- coding: utf-8 -*-
"""yapSCAD: build OpenSCAD scripts from a tree of Python objects"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("yapSCAD")
except PackageNotFoundError:  # pragma: no cover - source checkout, not installed
    __version__ = "unknown"
