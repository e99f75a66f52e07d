"""Tests for the terminal reporters."""

from unittest.mock import patch

from rich.console import Console

from triggerwrap.ui.console import TRIGGERWRAP_THEME
from triggerwrap.ui.progress import CIProgressReporter, RichProgressReporter


class TestRichProgressReporter:
    """Tests for the themed Rich reporter."""

    def test_banner_uses_brand_style(self):
        recording = Console(theme=TRIGGERWRAP_THEME, record=True, width=60)

        with patch("triggerwrap.ui.progress.console", recording):
            RichProgressReporter().banner("triggerwrap", "0.1.0")

        assert "triggerwrap v0.1.0" in recording.export_text()
        assert recording.get_style("brand").bold is True

    def test_theme_has_no_unused_styles(self):
        for name in ("filepath", "line_number"):
            assert name not in TRIGGERWRAP_THEME.styles
        for name in ("brand", "success", "warning", "error", "info"):
            assert name in TRIGGERWRAP_THEME.styles

    def test_messages_are_not_parsed_as_markup(self):
        recording = Console(theme=TRIGGERWRAP_THEME, record=True, width=80)

        with patch("triggerwrap.ui.progress.console", recording):
            RichProgressReporter().error("/proj/[v2]/a.ts:2:1: import")

        assert "/proj/[v2]/a.ts:2:1: import" in recording.export_text()


class TestCIProgressReporter:
    """Tests for plain CI output."""

    def test_lines_go_to_stderr(self, capsys):
        reporter = CIProgressReporter()

        reporter.error("b.ts:2:1: boom")
        task = reporter.start_progress("Transforming triggers", total=2)
        reporter.advance_progress(task)

        captured = capsys.readouterr()
        assert captured.out == ""
        assert "[ERROR] b.ts:2:1: boom" in captured.err
        assert "[INFO] Transforming triggers (1/2)" in captured.err
