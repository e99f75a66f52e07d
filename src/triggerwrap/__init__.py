"""
triggerwrap - lets trigger scripts with early returns go through a bundler.

Splits a script into its static import prologue and its body, and wraps the
body in an immediately-invoked function so a bare `return` parses.
"""

__version__ = "0.1.0"

from .domain import ImportInBodyError, ImportViolation, SourceSplit, TransformOptions
from .services import TriggerTransformer, create_plugin

__all__ = [
    "__version__",
    "ImportInBodyError",
    "ImportViolation",
    "SourceSplit",
    "TransformOptions",
    "TriggerTransformer",
    "create_plugin",
]
