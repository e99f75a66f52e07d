"""
Batch driver that runs the transformer over files on disk.
"""

from pathlib import Path
from typing import Iterable, List, Optional

from ..core.splitter import find_body_import, find_region_boundary
from ..domain.constants import IGNORED_DIRECTORIES, SOURCE_FILE_EXTENSIONS
from ..domain.exceptions import ImportInBodyError
from ..domain.models import BuildSummary, FileOutcome
from ..protocols import ProgressReporter
from ..ui.progress import NullProgressReporter
from .transformer import TriggerTransformer


def read_source(path: Path) -> str:
    """Read a UTF-8 source file without translating its line endings."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def write_source(path: Path, text: str) -> None:
    """Write text exactly as given, CRLF included."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(text)


def collect_source_files(paths: Iterable[Path]) -> List[Path]:
    """
    Expand the given paths into a sorted, de-duplicated list of files.

    Files are taken as given; directories are walked for known source
    extensions, skipping vendored and build directories.
    """
    files = set()
    for path in paths:
        path = Path(path)
        if path.is_dir():
            for candidate in path.rglob("*"):
                if any(part in IGNORED_DIRECTORIES for part in candidate.relative_to(path).parts):
                    continue
                if candidate.is_file() and candidate.suffix in SOURCE_FILE_EXTENSIONS:
                    files.add(candidate.resolve())
        else:
            files.add(path.resolve())
    return sorted(files)


class BuildRunner:
    """
    Transforms a set of files, writing the results or keeping them in memory.

    An import found in a body aborts that file only: it is recorded as failed
    and reported, and the run carries on with the next file.
    """

    def __init__(self, transformer: TriggerTransformer, reporter: Optional[ProgressReporter] = None):
        """
        Initialize the runner.

        Args:
            transformer: The per-file transform entry point
            reporter: Where progress and failures are reported. Silent if None.
        """
        if reporter is None:
            reporter = NullProgressReporter()
        self.transformer = transformer
        self.reporter = reporter

    def _output_path(self, path: Path, out_dir: Path, root: Path) -> Path:
        try:
            relative = path.relative_to(root)
        except ValueError:
            relative = Path(path.name)
        return out_dir / relative

    def transform_file(
        self,
        path: Path,
        out_dir: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> FileOutcome:
        """
        Transform one file.

        Args:
            path: File to read (UTF-8)
            out_dir: Directory to write the result to. Kept in memory if None.
            root: Directory the output layout is relative to. Defaults to cwd.

        Returns:
            FileOutcome describing what happened
        """
        try:
            code = read_source(path)
        except (UnicodeDecodeError, OSError) as e:
            return FileOutcome(path=path, status="failed", error=f"Cannot read file: {e}")

        try:
            output = self.transformer.transform(code, path)
        except ImportInBodyError as e:
            return FileOutcome(path=path, status="failed", violation=e.violation, error=str(e))

        if output is None:
            return FileOutcome(path=path, status="skipped")

        if out_dir is None:
            return FileOutcome(path=path, status="transformed", output=output)

        output_path = self._output_path(path, Path(out_dir).resolve(), (root or Path.cwd()).resolve())
        try:
            output_path.parent.mkdir(parents=True, exist_ok=True)
            write_source(output_path, output)
        except OSError as e:
            return FileOutcome(path=path, status="failed", error=f"Cannot write {output_path}: {e}")
        return FileOutcome(path=path, status="transformed", output_path=output_path)

    def run(
        self,
        paths: Iterable[Path],
        out_dir: Optional[Path] = None,
        root: Optional[Path] = None,
    ) -> BuildSummary:
        """
        Transform every file under the given paths.

        Returns:
            BuildSummary with one outcome per file
        """
        files = collect_source_files(paths)
        summary = BuildSummary()

        task = self.reporter.start_progress("Transforming triggers", total=len(files))
        try:
            for path in files:
                outcome = self.transform_file(path, out_dir=out_dir, root=root)
                summary.outcomes.append(outcome)
                if outcome.status == "failed":
                    self.reporter.error(f"{outcome.to_location()}: {outcome.error}")
                self.reporter.advance_progress(task)
        finally:
            self.reporter.stop_progress()

        self._report_summary(summary)
        return summary

    def check(self, paths: Iterable[Path]) -> BuildSummary:
        """
        Look for imports after the body started without transforming anything.

        Files the filter rejects are reported as skipped.
        """
        summary = BuildSummary()

        for path in collect_source_files(paths):
            if not self.transformer.is_eligible(path):
                summary.outcomes.append(FileOutcome(path=path, status="skipped"))
                continue

            try:
                lines = read_source(path).split("\n")
            except (UnicodeDecodeError, OSError) as e:
                outcome = FileOutcome(path=path, status="failed", error=f"Cannot read file: {e}")
                summary.outcomes.append(outcome)
                self.reporter.error(f"{outcome.to_location()}: {outcome.error}")
                continue

            violation = find_body_import(lines, find_region_boundary(lines))
            if violation is None:
                summary.outcomes.append(FileOutcome(path=path, status="clean"))
            else:
                outcome = FileOutcome(
                    path=path,
                    status="failed",
                    violation=violation,
                    error=violation.message,
                )
                summary.outcomes.append(outcome)
                self.reporter.error(f"{outcome.to_location()}: {violation.line.strip()}")

        return summary

    def _report_summary(self, summary: BuildSummary) -> None:
        transformed = len(summary.transformed)
        skipped = len(summary.skipped)
        failed = len(summary.failed)
        message = f"{transformed} transformed, {skipped} skipped, {failed} failed"
        if summary.has_failures:
            self.reporter.warning(message)
        else:
            self.reporter.success(message)
