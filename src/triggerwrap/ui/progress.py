"""
Progress reporter implementations for different output contexts.

Provides three implementations:
- RichProgressReporter: Interactive terminal with colors and a progress bar
- CIProgressReporter: CI-friendly with simple lines, no spinners/ANSI
- NullProgressReporter: Silent for tests and library use
"""

import sys
from typing import Any

from rich.markup import escape
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn, BarColumn, TaskProgressColumn
from rich.text import Text

from .console import console, BRAND_BORDER


class RichProgressReporter:
    """
    Interactive terminal reporter using Rich library.
    """

    def __init__(self):
        self._progress: Progress | None = None

    def banner(self, name: str, version: str) -> None:
        """Display a styled application banner."""
        title = Text()
        title.append(name, style="brand")
        title.append(f" v{version}", style="dim")
        console.print(Panel(title, border_style=BRAND_BORDER, padding=(0, 2)))

    def info(self, message: str) -> None:
        console.print(f"[info]{escape(message)}[/info]")

    def warning(self, message: str) -> None:
        console.print(f"[warning]{escape(message)}[/warning]")

    def success(self, message: str) -> None:
        console.print(f"[success]{escape(message)}[/success]")

    def error(self, message: str) -> None:
        console.print(f"[error]{escape(message)}[/error]")

    def start_progress(self, description: str, total: int) -> Any:
        """Start a progress bar and return a task handle."""
        self._progress = Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(complete_style=BRAND_BORDER),
            TaskProgressColumn(),
            console=console,
            transient=True,
        )
        self._progress.start()
        return self._progress.add_task(f"[info]{description}[/info]", total=total)

    def advance_progress(self, task: Any) -> None:
        if self._progress:
            self._progress.advance(task)

    def stop_progress(self) -> None:
        if self._progress:
            self._progress.stop()
            self._progress = None


class CIProgressReporter:
    """
    CI-friendly reporter with simple line output.

    Writes plain lines to stderr without ANSI codes or spinners, so build
    logs stay readable and stdout stays free for transformed output.
    """

    def _emit(self, line: str) -> None:
        print(line, file=sys.stderr)

    def banner(self, name: str, version: str) -> None:
        self._emit(f"=== {name} v{version} ===")

    def info(self, message: str) -> None:
        self._emit(f"[INFO] {message}")

    def warning(self, message: str) -> None:
        self._emit(f"[WARNING] {message}")

    def success(self, message: str) -> None:
        self._emit(f"[SUCCESS] {message}")

    def error(self, message: str) -> None:
        self._emit(f"[ERROR] {message}")

    def start_progress(self, description: str, total: int) -> Any:
        """Start a progress bar (just prints the description in CI mode)."""
        self._emit(f"[INFO] {description} (0/{total})")
        return {"description": description, "total": total, "current": 0}

    def advance_progress(self, task: Any) -> None:
        if isinstance(task, dict):
            task["current"] += 1
            self._emit(f"[INFO] {task['description']} ({task['current']}/{task['total']})")

    def stop_progress(self) -> None:
        pass


class NullProgressReporter:
    """
    Silent reporter.

    All methods are no-ops, useful for unit testing and for embedding the
    runner in another build tool.
    """

    def banner(self, name: str, version: str) -> None:
        pass

    def info(self, message: str) -> None:
        pass

    def warning(self, message: str) -> None:
        pass

    def success(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass

    def start_progress(self, description: str, total: int) -> Any:
        return None

    def advance_progress(self, task: Any) -> None:
        pass

    def stop_progress(self) -> None:
        pass
