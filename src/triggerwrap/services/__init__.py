"""
Services layer for triggerwrap.

Contains the transform entry point and the batch orchestration around it.
"""

from .transformer import TriggerTransformer, create_plugin
from .build import BuildRunner, collect_source_files, read_source, write_source

__all__ = [
    "TriggerTransformer",
    "create_plugin",
    "BuildRunner",
    "collect_source_files",
    "read_source",
    "write_source",
]
