"""
Core logic for triggerwrap.

Pure functions over source text and file ids; nothing here does I/O.
"""

from .splitter import (
    IIFE_OPEN,
    IIFE_CLOSE,
    could_be_import_line,
    find_region_boundary,
    find_body_import,
    check_body_imports,
    split_source,
    wrap_in_iife,
)
from .filters import PathFilter, create_filter, normalize_path

__all__ = [
    "IIFE_OPEN",
    "IIFE_CLOSE",
    "could_be_import_line",
    "find_region_boundary",
    "find_body_import",
    "check_body_imports",
    "split_source",
    "wrap_in_iife",
    "PathFilter",
    "create_filter",
    "normalize_path",
]
