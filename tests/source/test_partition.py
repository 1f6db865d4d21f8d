"""Tests for source/partition.py module.

Covers:
- scan_regions() ordering, disjointness and reconstruction
- partition() extraction of dependencies, namespaces and typedefs
- Empty-region filtering and deduplication
- Fatal paths for malformed documents
- scan_file() reading and error context
- Custom language descriptors
"""

from __future__ import annotations

from pathlib import Path

import pytest

from cxxclean.core.errors import ErrorCode, ScanError
from cxxclean.core.languages import LanguageDescriptor
from cxxclean.source import SourceItem, SourcePiece, partition, scan_file, scan_regions
from cxxclean.source.extract import strip_includes, strip_namespaces, strip_typedefs

SAMPLE = (
    "#include <iostream>\n"
    '#include "util/strings.h"\n'
    "  #define MAX(a, b) \\\n"
    "      ((a) > (b) ? (a) : (b))\n"
    "\n"
    "using namespace std;\n"
    "typedef unsigned long long ull;\n"
    "/* block\n"
    "   comment */\n"
    "int main() {\n"
    "    // greet\n"
    '    cout << "hi \\"there\\"" << \'\\n\';\n'
    "    return 0;\n"
    "}\n"
)


class TestScanRegions:
    """Tests for scan_regions function."""

    @pytest.mark.parametrize(
        "text",
        [
            SAMPLE,
            "",
            "int x;",
            "/* a */  #define X\n",
            "a // c\n  /* d */\n'x'\"y\"#z",
            "#define A \\\n  1\n#define B 2",
        ],
    )
    def test_reconstructs_original_text(self, text: str) -> None:
        assert scan_regions(text).reconstruct() == text

    def test_pieces_are_contiguous_and_ordered(self) -> None:
        regions = scan_regions(SAMPLE)
        position = 0
        for piece in regions.pieces():
            assert piece.start == position
            position = piece.end
        assert position == len(SAMPLE)

    def test_trailing_run_kept_even_when_empty(self) -> None:
        regions = scan_regions("")
        assert regions.sources == (SourcePiece(start=0, content=""),)

    def test_trailing_run_after_last_region(self) -> None:
        regions = scan_regions("x /* c */")
        assert regions.sources[-1] == SourcePiece(start=9, content="")

    def test_region_kinds(self) -> None:
        regions = scan_regions(SAMPLE)
        assert len(regions.macros) == 3
        assert [c.content for c in regions.comments] == ["/* block\n   comment */\n", "// greet"]
        assert [lit.content for lit in regions.literals] == ['"hi \\"there\\""', "'\\n'"]

    def test_indentation_never_reaches_into_previous_region(self) -> None:
        regions = scan_regions("/* a */  #define X\n")
        assert regions.comments == (SourcePiece(start=0, content="/* a */  "),)
        assert regions.macros == (SourcePiece(start=9, content="#define X\n"),)

    def test_literal_wins_over_comment_marker(self) -> None:
        regions = scan_regions('s = "// not a comment";')
        assert regions.comments == ()
        assert regions.literals[0].content == '"// not a comment"'

    def test_quote_inside_comment_is_ignored(self) -> None:
        regions = scan_regions("// don't\n/* it's */\nx")
        assert regions.literals == ()
        assert len(regions.comments) == 2


class TestPartition:
    """Tests for partition function."""

    def test_sample_document(self) -> None:
        item = partition(SAMPLE)

        assert item.dependencies == ("iostream", "util/strings.h")
        assert item.namespaces == ("std",)
        assert dict(item.typedefs) == {"ull": "unsigned long long"}
        assert [m.content for m in item.macros] == [
            "  #define MAX(a, b) \\\n      ((a) > (b) ? (a) : (b))\n"
        ]
        assert all("using" not in s.content for s in item.sources)
        assert all("typedef" not in s.content for s in item.sources)

    def test_escape_handling(self) -> None:
        item = partition('s = "a\\"b";')
        assert item.literals == (SourcePiece(start=4, content='"a\\"b"'),)

    def test_macro_continuation(self) -> None:
        item = partition("#define X 1\\\n  + 2\n")
        assert item.macros == (SourcePiece(start=0, content="#define X 1\\\n  + 2\n"),)
        assert item.sources == ()

    def test_block_comment_whitespace_absorption(self) -> None:
        item = partition("  /* hi */  \ncode")
        assert item.comments == (SourcePiece(start=0, content="  /* hi */  \n"),)
        assert item.sources == (SourcePiece(start=13, content="code"),)

    def test_dependency_extraction_strips_directive(self) -> None:
        item = partition("  #include <foo/bar.h>\n")
        assert item.dependencies == ("foo/bar.h",)
        assert item.macros == (SourcePiece(start=0, content="  "),)

    def test_fully_stripped_macro_is_dropped(self) -> None:
        item = partition("#include <foo/bar.h>\n")
        assert item.dependencies == ("foo/bar.h",)
        assert item.macros == ()

    def test_duplicate_includes_yield_one_dependency(self) -> None:
        item = partition("#include <a.h>\nint x;\n#include <a.h>\n#include \"b.h\"\n")
        assert item.dependencies == ("a.h", "b.h")

    def test_duplicate_namespaces_yield_one_entry(self) -> None:
        item = partition("using namespace std;\nint x;\nusing namespace std;\n")
        assert item.namespaces == ("std",)

    def test_typedef_last_write_wins(self) -> None:
        item = partition("typedef int A;\ntypedef long A;\n")
        assert dict(item.typedefs) == {"A": "long"}

    def test_typedef_with_template_and_pointer(self) -> None:
        item = partition("typedef vector<int> IntVec;\ntypedef int * IntPtr;\n")
        assert dict(item.typedefs) == {"IntVec": "vector<int>", "IntPtr": "int *"}

    def test_include_inside_comment_is_not_a_dependency(self) -> None:
        item = partition("// #include <a.h>\n/* #include <b.h>\n */\n")
        assert item.dependencies == ()

    def test_declarations_inside_literals_are_ignored(self) -> None:
        item = partition('const char* s = "using namespace std;";\n')
        assert item.namespaces == ()

    def test_empty_document(self) -> None:
        assert partition("") == SourceItem()

    def test_plain_code_only(self) -> None:
        item = partition("int x;")
        assert item.sources == (SourcePiece(start=0, content="int x;"),)
        assert item.macros == item.comments == item.literals == ()

    def test_macro_without_trailing_newline(self) -> None:
        item = partition("#pragma once")
        assert item.macros == (SourcePiece(start=0, content="#pragma once"),)

    def test_no_empty_pieces(self) -> None:
        item = partition(SAMPLE)
        for pieces in (item.macros, item.sources, item.comments, item.literals):
            assert all(p.content for p in pieces)

    def test_extraction_is_idempotent(self) -> None:
        item = partition(SAMPLE)
        for macro in item.macros:
            assert strip_includes(macro.content)[1] == []
        for source in item.sources:
            assert strip_namespaces(source.content)[1] == []
            assert strip_typedefs(source.content)[1] == []

    def test_result_is_immutable(self) -> None:
        item = partition("typedef int A;\n")
        with pytest.raises(TypeError):
            item.typedefs["B"] = "long"  # type: ignore[index]

    def test_to_dict(self) -> None:
        item = partition("#include <a.h>\nusing namespace n;\ntypedef int A;\n// c\n")
        data = item.to_dict()
        assert data["dependencies"] == ["a.h"]
        assert data["namespaces"] == ["n"]
        assert data["typedefs"] == {"A": "int"}
        assert data["comments"] == [{"start": 49, "content": "// c"}]


class TestPartitionFailures:
    """Tests for malformed documents."""

    def test_unterminated_literal(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            partition('"unterminated')
        assert exc_info.value.code == ErrorCode.SCAN_UNTERMINATED_LITERAL
        assert exc_info.value.offset == 0

    def test_unterminated_block_comment(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            partition("int x; /* oops")
        assert exc_info.value.code == ErrorCode.SCAN_UNTERMINATED_BLOCK_COMMENT
        assert exc_info.value.offset == 7

    def test_failure_after_valid_regions(self) -> None:
        with pytest.raises(ScanError) as exc_info:
            partition("#include <a.h>\nchar c = 'x;\n")
        assert exc_info.value.offset == 24


class TestScanFile:
    """Tests for scan_file function."""

    def test_reads_and_partitions(self, tmp_path: Path) -> None:
        path = tmp_path / "main.cpp"
        path.write_text("#include <vector>\nint main() {}\n")

        item = scan_file(path)

        assert item.dependencies == ("vector",)

    def test_keeps_crlf_line_endings(self, tmp_path: Path) -> None:
        path = tmp_path / "win.c"
        path.write_bytes(b"// c\r\nint x;\r\n")

        item = scan_file(path)

        assert item.comments == (SourcePiece(start=0, content="// c\r"),)

    def test_error_names_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.c"
        path.write_text("/* never closed")

        with pytest.raises(ScanError) as exc_info:
            scan_file(path)

        assert exc_info.value.details["path"] == str(path)
        assert exc_info.value.offset == 0
        assert str(path) in exc_info.value.message

    def test_decode_error(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.c"
        path.write_bytes(b"char c = '\xe9';\n")

        with pytest.raises(ScanError) as exc_info:
            scan_file(path)

        assert exc_info.value.code == ErrorCode.SCAN_DECODE_ERROR

    def test_custom_encoding(self, tmp_path: Path) -> None:
        path = tmp_path / "latin.c"
        path.write_bytes(b"char c = '\xe9';\n")

        item = scan_file(path, encoding="latin-1")

        assert item.literals[0].content == "'\u00e9'"


class TestCustomLanguage:
    """Tests for scanning with a non-C descriptor."""

    def test_descriptor_drives_every_matcher(self) -> None:
        language = LanguageDescriptor(
            name="toy",
            macro_mark="%",
            quote_marks=frozenset({"`"}),
            inline_comment_mark="--",
            block_comment_marks=("{-", "-}"),
        )
        text = "%include <x.h>\n-- note\n{- blk -}\n`s` y"

        item = partition(text, language)

        assert item.dependencies == ("x.h",)
        assert [c.content for c in item.comments] == ["-- note", "{- blk -}\n"]
        assert [lit.content for lit in item.literals] == ["`s`"]
        assert [s.content for s in item.sources] == ["\n", " y"]


class TestNonAsciiSource:
    """Non-ASCII text is scanned but not extracted."""

    def test_non_ascii_include_stays_a_macro(self) -> None:
        item = partition("#include <déjà.h>\n")
        assert item.dependencies == ()
        assert item.macros == (SourcePiece(start=0, content="#include <déjà.h>\n"),)
