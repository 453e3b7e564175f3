"""Kernel value types — public re-export surface.

Modules:
  option.py — Some, Nothing, Option, some_if
"""

from querypage.kernel.types.option import Nothing, Option, Some, some_if

__all__ = ["Nothing", "Option", "Some", "some_if"]
