"""Tests for the import/body region splitter."""

import pytest

from triggerwrap.core.splitter import (
    IIFE_CLOSE,
    IIFE_OPEN,
    check_body_imports,
    could_be_import_line,
    find_body_import,
    find_region_boundary,
    split_source,
    wrap_in_iife,
)
from triggerwrap.domain.exceptions import ImportInBodyError


class TestCouldBeImportLine:
    """Tests for the single-line classification predicate."""

    @pytest.mark.parametrize("line", [
        "",
        "// a comment",
        "/* block comment",
        "/** doc comment */",
        'import { f } from "x";',
        "import x from 'y';",
        '} from "x";',
        "  a,",
        "\tb,",
        " ",
    ])
    def test_import_region_lines(self, line):
        """Blank, comment, import, closing-brace and indented lines keep the region open."""
        assert could_be_import_line(line) is True

    @pytest.mark.parametrize("line", [
        "g();",
        "if (!f()) return;",
        "const x = 1;",
        "export default x;",
        "importantThing();",
        "import",
        "# not a comment here",
        "{",
    ])
    def test_body_lines(self, line):
        """Any other statement ends the import region."""
        assert could_be_import_line(line) is False

    def test_unicode_whitespace_counts_as_indentation(self):
        """Leading whitespace is any Unicode whitespace, not just spaces."""
        assert could_be_import_line("\u00a0member,") is True


class TestFindRegionBoundary:
    """Tests for locating the first body line."""

    def test_boundary_after_imports_and_blank_line(self):
        lines = ['import { f } from "x";', "", "if (!f()) return;", "g();"]
        assert find_region_boundary(lines) == 2

    def test_no_import_region(self):
        assert find_region_boundary(["g();", "h();"]) == 0

    def test_whole_file_is_import_region(self):
        lines = ['import a from "a";', "// done", ""]
        assert find_region_boundary(lines) == len(lines)

    def test_empty_sequence(self):
        assert find_region_boundary([]) == 0

    def test_comments_before_imports(self):
        lines = ["// header", "/* license */", 'import a from "a";', "run();"]
        assert find_region_boundary(lines) == 3

    def test_first_line_at_boundary_fails_predicate(self):
        """Every line before the boundary passes the predicate, the boundary line fails it."""
        lines = ["// c", 'import {', "  a,", '} from "a";', "", "run();", "import b from 'b';"]
        boundary = find_region_boundary(lines)

        assert all(could_be_import_line(line) for line in lines[:boundary])
        assert could_be_import_line(lines[boundary]) is False


class TestBodyImportGuard:
    """Tests for the post-boundary import check."""

    def test_clean_body_returns_body_lines(self):
        lines = ['import a from "a";', "run();", "return;"]
        assert check_body_imports(lines, 1) == ["run();", "return;"]

    def test_import_in_body_raises(self):
        lines = ["g();", 'import { f } from "x";']

        with pytest.raises(ImportInBodyError) as exc_info:
            check_body_imports(lines, 0)

        assert exc_info.value.line_index == 1
        assert exc_info.value.line_number == 2

    def test_reports_first_offending_line(self):
        lines = ['import a from "a";', "run();", "", 'import b from "b";', 'import c from "c";']

        violation = find_body_import(lines, 1)

        assert violation is not None
        assert violation.line_index == 3
        assert violation.line == 'import b from "b";'

    def test_indented_import_is_not_a_violation(self):
        """Only imports starting at column 0 are static imports."""
        lines = ["run();", "  import x from 'x';"]
        assert find_body_import(lines, 0) is None

    def test_guard_is_repeatable(self):
        """Running the guard twice gives the same outcome."""
        lines = ["g();", 'import { f } from "x";']
        first = find_body_import(lines, 0)
        second = find_body_import(lines, 0)
        assert first == second

    def test_empty_body(self):
        assert check_body_imports(['import a from "a";'], 1) == []


class TestSplitSource:
    """Tests for splitting whole sources."""

    def test_imports_then_body(self, trigger_source):
        split = split_source(trigger_source)

        assert split.boundary == 2
        assert split.imports_text == 'import { f } from "x";\n'
        assert split.body_text == "if (!f()) return;\ng();"

    def test_import_after_statement_raises(self):
        with pytest.raises(ImportInBodyError, match=r"Found import after body started \(2:1\)"):
            split_source('g();\nimport { f } from "x";')

    def test_multiline_import(self):
        split = split_source('import {\n  a,\n  b\n} from "x";\nbody();')

        assert split.boundary == 4
        assert split.import_lines == ["import {", "  a,", "  b", '} from "x";']
        assert split.body_lines == ["body();"]

    def test_empty_input(self):
        split = split_source("")

        assert split.imports_text == ""
        assert split.body_text == ""
        assert split.body_lines == []

    def test_file_with_only_imports(self):
        split = split_source('import a from "a";\n')

        assert split.boundary == 2
        assert split.body_lines == []

    @pytest.mark.parametrize("code", [
        'import { f } from "x";\n\nif (!f()) return;\ng();',
        'import {\n  a,\n} from "x";\nbody();\n',
        "run();\n\nreturn;\n",
        "// only a comment",
        "",
        "\n\n",
    ])
    def test_split_is_lossless(self, code):
        """Joining both regions gives back the original text."""
        split = split_source(code)

        assert "\n".join(split.import_lines + split.body_lines) == code
        assert split.line_count == len(code.split("\n"))


class TestWrapInIife:
    """Tests for the body wrapper."""

    def test_wraps_body(self):
        assert wrap_in_iife("return;") == "(function() {\nreturn;\n})();\n"

    def test_empty_body(self):
        assert wrap_in_iife("") == "(function() {\n\n})();\n"

    def test_body_kept_verbatim(self):
        body = "  // keep me\n\tif (x) return;\r\n\n"
        wrapped = wrap_in_iife(body)

        assert wrapped.startswith(IIFE_OPEN)
        assert wrapped.endswith(IIFE_CLOSE)
        assert wrapped[len(IIFE_OPEN):-len(IIFE_CLOSE)] == body

    def test_rewrapping_nests(self):
        """Wrapping twice is allowed and simply nests the functions."""
        twice = wrap_in_iife(wrap_in_iife("return;"))
        assert twice == "(function() {\n(function() {\nreturn;\n})();\n\n})();\n"
