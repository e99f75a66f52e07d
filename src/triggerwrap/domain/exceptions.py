"""
Domain-specific exceptions for triggerwrap.
"""

from .models import ImportViolation


class ImportInBodyError(Exception):
    """
    Raised when a static import statement is found in the body of a trigger.

    This likely indicates an improper trigger (imports are only allowed at
    the top of the file), but may also indicate a bug in the region splitter.
    It must abort the file being processed; it is never auto-corrected.
    """

    def __init__(self, violation: ImportViolation):
        self.violation = violation
        super().__init__(violation.message)

    @property
    def line_index(self) -> int:
        """0-based index of the offending line in the full source."""
        return self.violation.line_index

    @property
    def line_number(self) -> int:
        """1-based line number of the offending line."""
        return self.violation.line_number


class ConfigLoadError(Exception):
    """
    Raised when a configuration file exists but cannot be loaded.

    This indicates issues such as:
    - Invalid YAML or TOML syntax
    - A top-level value that is not a mapping
    - Invalid include/exclude pattern values
    """
    pass
