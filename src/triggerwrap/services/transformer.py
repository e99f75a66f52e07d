"""
Transform entry point invoked once per file by the host build pipeline.
"""

import os
from typing import Optional, Union

from ..core.filters import PathFilter
from ..core.splitter import split_source, wrap_in_iife
from ..domain.models import TransformOptions
from ..protocols import FileFilter


class TriggerTransformer:
    """
    Separates static imports from the module body and wraps the body in an
    IIFE so that early returns don't block parsing.

    Only entry points should be included for transformation. The transformer
    holds its filter as a plain value; there is no shared state between calls,
    so one instance can serve files in parallel.
    """

    def __init__(
        self,
        options: Optional[TransformOptions] = None,
        file_filter: Optional[FileFilter] = None,
        resolve: Union[str, os.PathLike, bool, None] = None,
    ):
        """
        Initialize the transformer.

        Args:
            options: Include/exclude patterns. Ignored when file_filter is given.
            file_filter: Ready-made eligibility predicate
            resolve: Base directory for relative patterns (see PathFilter)
        """
        self.options = options or TransformOptions()
        if file_filter is None:
            file_filter = PathFilter(
                include=self.options.include,
                exclude=self.options.exclude,
                resolve=resolve,
            )
        self.filter = file_filter

    def is_eligible(self, file_id: Union[str, os.PathLike]) -> bool:
        return self.filter(file_id)

    def transform(self, code: str, file_id: Union[str, os.PathLike]) -> Optional[str]:
        """
        Transform a single file.

        Args:
            code: Full text of the file
            file_id: Path-like identifier of the file

        Returns:
            The import region followed by the wrapped body, or None when the
            file is not eligible and must pass through unchanged

        Raises:
            ImportInBodyError: If an import statement appears after the body started
        """
        if not self.filter(file_id):
            return None

        split = split_source(code)
        return "\n".join([split.imports_text, wrap_in_iife(split.body_text)])


def create_plugin(
    options: Optional[TransformOptions] = None,
    **overrides,
) -> TriggerTransformer:
    """
    Build a transformer from options.

    Keyword overrides (include=..., exclude=...) are merged into the options,
    so `create_plugin(include="src/triggers/**")` works without building a
    TransformOptions first.
    """
    if overrides:
        base = options.model_dump() if options else {}
        base.update(overrides)
        options = TransformOptions(**base)
    return TriggerTransformer(options)
