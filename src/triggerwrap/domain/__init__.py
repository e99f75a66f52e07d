"""
Domain layer for triggerwrap.

Contains all domain models and exceptions with no dependencies on the
services or the CLI.
"""

from .models import (
    SourceSplit,
    ImportViolation,
    TransformOptions,
    FileOutcome,
    BuildSummary,
)
from .exceptions import (
    ImportInBodyError,
    ConfigLoadError,
)

__all__ = [
    # Models
    "SourceSplit",
    "ImportViolation",
    "TransformOptions",
    "FileOutcome",
    "BuildSummary",
    # Exceptions
    "ImportInBodyError",
    "ConfigLoadError",
]
