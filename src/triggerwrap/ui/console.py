"""
Shared Rich console instances with the triggerwrap theme.
"""

from rich.console import Console
from rich.theme import Theme

TRIGGERWRAP_THEME = Theme({
    "brand": "bold #5F87AF",      # Steel blue - headers, branding
    "success": "green",           # Transformed files
    "warning": "yellow",          # Skipped files, partial failures
    "error": "red bold",          # Imports after the body started
    "info": "white",
    # Rich progress bar style overrides
    "progress.spinner": "#5F87AF",
    "progress.percentage": "#87AFD7",
    "bar.complete": "#5F87AF",
    "bar.finished": "#87AFD7",
    "progress.elapsed": "dim",
})

# Brand border style for panels and rules
BRAND_BORDER = "#5F87AF"

# Transformed code goes to stdout, diagnostics to stderr
console = Console(theme=TRIGGERWRAP_THEME, stderr=True)
