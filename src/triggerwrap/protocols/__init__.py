"""
Port interfaces (protocols) for pluggable collaborators.

These define the contracts that filters and reporters must implement.
"""

import os
from typing import Any, Protocol, Union


class FileFilter(Protocol):
    def __call__(self, file_id: Union[str, os.PathLike]) -> bool:
        """
        Decide whether a file should be transformed.

        Args:
            file_id: Path-like identifier of the file

        Returns:
            True if the file is eligible
        """
        ...


class ProgressReporter(Protocol):
    def banner(self, name: str, version: str) -> None:
        ...

    def info(self, message: str) -> None:
        ...

    def warning(self, message: str) -> None:
        ...

    def success(self, message: str) -> None:
        ...

    def error(self, message: str) -> None:
        """Report a per-file failure without stopping the run."""
        ...

    def start_progress(self, description: str, total: int) -> Any:
        ...

    def advance_progress(self, task: Any) -> None:
        ...

    def stop_progress(self) -> None:
        ...
