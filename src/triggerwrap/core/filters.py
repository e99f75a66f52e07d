"""
Include/exclude path filtering.

Decides which files are eligible for transformation, following the way
bundler plugins build their filters: exclude beats include, no include
means every file, and virtual module ids (containing a NUL byte) never match.
"""

import fnmatch
import glob
import os
import re
from pathlib import Path, PurePosixPath
from typing import Iterable, List, Optional, Sequence, Union

Matcher = Union[str, re.Pattern]
FilterPattern = Union[Matcher, Sequence[Matcher], None]


def normalize_path(path: Union[str, os.PathLike]) -> str:
    """Normalize an id to forward slashes so patterns match on every OS."""
    return str(path).replace("\\", "/")


def _ensure_list(patterns: FilterPattern) -> List[Matcher]:
    if patterns is None:
        return []
    if isinstance(patterns, (str, re.Pattern)):
        return [patterns]
    return list(patterns)


def _resolve_pattern(pattern: str, base: Optional[str]) -> str:
    """Anchor a relative glob to the base directory."""
    if base is None or pattern.startswith("**") or PurePosixPath(pattern).is_absolute():
        return pattern
    if re.match(r"^[A-Za-z]:/", pattern):
        return pattern
    # Brackets and wildcards in the directory name are literal
    return f"{glob.escape(base.rstrip('/'))}/{pattern}"


def _matches_glob(path: str, pattern: str) -> bool:
    if fnmatch.fnmatchcase(path, pattern):
        return True
    # "**/x" also matches "x" at the root.
    if pattern.startswith("**/") and fnmatch.fnmatchcase(path, pattern[3:]):
        return True
    return False


class PathFilter:
    """
    Predicate over file ids built from include and exclude patterns.

    Patterns are glob strings or compiled regular expressions. Relative globs
    are resolved against `resolve` (the current directory by default); pass
    `resolve=False` to match them as written.
    """

    def __init__(
        self,
        include: FilterPattern = None,
        exclude: FilterPattern = None,
        resolve: Union[str, os.PathLike, bool, None] = None,
    ):
        if resolve is False:
            base = None
        elif resolve is None or resolve is True:
            base = normalize_path(Path.cwd())
        else:
            base = normalize_path(resolve)

        self.include = self._compile(include, base)
        self.exclude = self._compile(exclude, base)

    @staticmethod
    def _compile(patterns: FilterPattern, base: Optional[str]) -> List[Matcher]:
        compiled: List[Matcher] = []
        for pattern in _ensure_list(patterns):
            if isinstance(pattern, re.Pattern):
                compiled.append(pattern)
            else:
                compiled.append(_resolve_pattern(normalize_path(pattern), base))
        return compiled

    @staticmethod
    def _matches(path: str, matchers: Iterable[Matcher]) -> bool:
        for matcher in matchers:
            if isinstance(matcher, re.Pattern):
                if matcher.search(path):
                    return True
            elif _matches_glob(path, matcher):
                return True
        return False

    def __call__(self, file_id: Union[str, os.PathLike]) -> bool:
        path = normalize_path(file_id)
        if "\0" in path:
            return False

        if self._matches(path, self.exclude):
            return False
        if not self.include:
            return True
        return self._matches(path, self.include)

    def __repr__(self) -> str:
        return f"PathFilter(include={self.include!r}, exclude={self.exclude!r})"


def create_filter(
    include: FilterPattern = None,
    exclude: FilterPattern = None,
    resolve: Union[str, os.PathLike, bool, None] = None,
) -> PathFilter:
    """Build a PathFilter; shorthand mirroring bundler plugin utilities."""
    return PathFilter(include=include, exclude=exclude, resolve=resolve)
