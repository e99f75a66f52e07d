"""
Terminal output for triggerwrap.
"""

from .console import console
from .progress import RichProgressReporter, CIProgressReporter, NullProgressReporter

__all__ = [
    "console",
    "RichProgressReporter",
    "CIProgressReporter",
    "NullProgressReporter",
]
