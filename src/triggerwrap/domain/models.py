"""
Domain models for triggerwrap.

Contains all core data structures used across the application.
"""

from typing import List, Optional, Union
from pathlib import Path
from pydantic import BaseModel, ConfigDict, Field, field_validator


# --- Source Domain Models ---

class SourceSplit(BaseModel):
    """
    A source file cut at its region boundary.

    The import region is copied verbatim to the output; the body region is
    checked for stray imports and then wrapped.
    """
    model_config = ConfigDict(frozen=True)

    boundary: int = Field(..., ge=0, description="Index of the first line outside the import region")
    import_lines: List[str] = Field(default_factory=list, description="Lines before the boundary")
    body_lines: List[str] = Field(default_factory=list, description="Lines from the boundary on")

    @property
    def imports_text(self) -> str:
        return "\n".join(self.import_lines)

    @property
    def body_text(self) -> str:
        return "\n".join(self.body_lines)

    @property
    def line_count(self) -> int:
        return len(self.import_lines) + len(self.body_lines)


class ImportViolation(BaseModel):
    """
    An import statement found after the body started.
    """
    model_config = ConfigDict(frozen=True)

    line_index: int = Field(..., ge=0, description="0-based index of the line in the full source")
    line: str = Field(..., description="The offending line, verbatim")

    @property
    def line_number(self) -> int:
        """1-based line number, as editors and compilers display it."""
        return self.line_index + 1

    @property
    def message(self) -> str:
        return f"Found import after body started ({self.line_number}:1)"


# --- Configuration Domain Models ---

PatternInput = Union[str, List[str], None]


class TransformOptions(BaseModel):
    """
    Include/exclude patterns that decide which files get transformed.

    Each field accepts a single pattern, a list of patterns, or nothing.
    A missing include means "every file"; a missing exclude means "no file".
    """
    model_config = ConfigDict(extra="forbid")

    include: Optional[List[str]] = Field(None, description="Glob patterns of files to transform")
    exclude: Optional[List[str]] = Field(None, description="Glob patterns of files to leave alone")

    @field_validator("include", "exclude", mode="before")
    @classmethod
    def normalize_patterns(cls, v: PatternInput) -> Optional[List[str]]:
        """Accept a bare string as a one-pattern list."""
        if v is None:
            return None
        if isinstance(v, str):
            v = [v]
        if not isinstance(v, (list, tuple)):
            raise ValueError("patterns must be a string or a list of strings")
        for pattern in v:
            if not isinstance(pattern, str) or not pattern:
                raise ValueError(f"Invalid pattern {pattern!r}: must be a non-empty string")
        return list(v)


# --- Build Domain Models ---

class FileOutcome(BaseModel):
    """
    What happened to one file during a build or check run.
    """
    path: Path
    status: str = Field(..., description="'transformed', 'skipped', 'failed' or 'clean'")
    output_path: Optional[Path] = None
    output: Optional[str] = Field(None, description="Transformed text when not written to disk")
    violation: Optional[ImportViolation] = None
    error: Optional[str] = None

    def to_location(self) -> str:
        """Formats the failure as path:line:column for terminal output."""
        if self.violation is None:
            return str(self.path)
        return f"{self.path}:{self.violation.line_number}:1"


class BuildSummary(BaseModel):
    """
    The outcomes of all files in a run.
    """
    outcomes: List[FileOutcome] = Field(default_factory=list)

    def _with_status(self, status: str) -> List[FileOutcome]:
        return [outcome for outcome in self.outcomes if outcome.status == status]

    @property
    def transformed(self) -> List[FileOutcome]:
        return self._with_status("transformed")

    @property
    def skipped(self) -> List[FileOutcome]:
        return self._with_status("skipped")

    @property
    def failed(self) -> List[FileOutcome]:
        return self._with_status("failed")

    @property
    def has_failures(self) -> bool:
        """Returns True if any file aborted."""
        return len(self.failed) > 0
