"""Kernel value types – public re-export surface."""

from csvtable.kernel.types.option import Nothing, Option, Some, option_of

__all__ = ["Nothing", "Option", "Some", "option_of"]
