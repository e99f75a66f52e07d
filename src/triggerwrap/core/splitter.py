"""
Import/body region splitting for trigger scripts.

A trigger is written as the body of an implicit function: it may `return`
early at top level. Such a file won't parse in its raw form, since either the
parser complains about a `return` outside a function body or - if everything
is wrapped in an IIFE - it complains about non-top-level imports. So the
static imports are kept at the top and only the rest is wrapped.
"""

import re
from typing import List, Optional

from ..domain.models import ImportViolation, SourceSplit
from ..domain.exceptions import ImportInBodyError

IIFE_OPEN = "(function() {\n"
IIFE_CLOSE = "\n})();\n"

_LEADING_WHITESPACE = re.compile(r"\s")


def is_import_statement_start(line: str) -> bool:
    return line.startswith("import ")


def could_be_import_line(line: str) -> bool:
    """
    Check if a line could be part of a trigger's import region.

    The import region is everything from the start of the file down to, but
    not including, the first non-import statement. This is a line-level
    heuristic, not a parser: ambiguous lines stay in the import region.

    Args:
        line: A single line of source code, without its newline

    Returns:
        True if the line doesn't end the import region
    """
    return (
        # blank line
        line == ""
        # comments don't end the import region
        or line.startswith("//")
        or line.startswith("/*")
        or is_import_statement_start(line)
        # end of a multiline import statement. We never enter a block that
        # isn't an import block before the boundary.
        or line.startswith("}")
        # multiline imports indent their members
        or _LEADING_WHITESPACE.match(line) is not None
    )


def find_region_boundary(lines: List[str]) -> int:
    """
    Return the index of the first line that can't belong to the import region.

    Returns len(lines) when every line could be an import line.
    """
    for index, line in enumerate(lines):
        if not could_be_import_line(line):
            return index
    return len(lines)


def find_body_import(lines: List[str], boundary: int) -> Optional[ImportViolation]:
    """
    Find the first import statement at or after the boundary.

    Args:
        lines: All lines of the source
        boundary: Index of the first body line

    Returns:
        The violation for the first offending line, or None if the body is clean
    """
    for offset, line in enumerate(lines[boundary:]):
        if is_import_statement_start(line):
            return ImportViolation(line_index=boundary + offset, line=line)
    return None


def check_body_imports(lines: List[str], boundary: int) -> List[str]:
    """
    Ensure no import statement appears in the body region.

    Returns:
        The body lines, unchanged

    Raises:
        ImportInBodyError: If an import statement is found after the boundary
    """
    violation = find_body_import(lines, boundary)
    if violation is not None:
        raise ImportInBodyError(violation)
    return lines[boundary:]


def split_source(code: str) -> SourceSplit:
    """
    Split a file into its static imports and everything else.

    Args:
        code: The input source code

    Returns:
        SourceSplit holding the boundary and both regions

    Raises:
        ImportInBodyError: If an import statement appears after the body started
    """
    lines = code.split("\n")
    boundary = find_region_boundary(lines)
    body_lines = check_body_imports(lines, boundary)

    return SourceSplit(
        boundary=boundary,
        import_lines=lines[:boundary],
        body_lines=body_lines,
    )


def wrap_in_iife(code: str) -> str:
    """
    Wrap a block of code in an IIFE.

    This turns a block with early returns into valid top-level code that the
    bundler will parse. The body is kept byte for byte.
    """
    return f"{IIFE_OPEN}{code}{IIFE_CLOSE}"
