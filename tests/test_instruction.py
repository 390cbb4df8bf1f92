"""
Tests for instruction and directive parsing.
"""

import pytest

from _document import Document, Line_Kind
from _instruction import Instruction


class TestInstruction:

    def test_keyword_and_arguments(self):
        i = Instruction.parse("  run  echo hi  ")
        assert i.keyword == "RUN"
        assert i.keyword_raw == "run"
        assert (i.keyword_start, i.keyword_end) == (2, 5)
        assert i.arguments == "echo hi"
        assert (i.arguments_start, i.arguments_end) == (7, 14)
        assert i.nested is None

    def test_no_arguments(self):
        i = Instruction.parse("ONBUILD")
        assert i.arguments == ""
        assert i.arguments_start == 7
        assert i.nested is None

    @pytest.mark.parametrize("text", ["", "   ", "\t"])
    def test_blank(self, text):
        assert Instruction.parse(text) is None

    def test_unknown_keyword(self):
        i = Instruction.parse("BUILD it")
        assert i.keyword == "BUILD"
        assert not i.documented

    def test_onbuild_nested(self):
        i = Instruction.parse("onbuild run make")
        assert i.documented
        assert i.nested.keyword == "RUN"
        assert (i.nested.keyword_start, i.nested.keyword_end) == (8, 11)
        assert i.nested.arguments == "make"
        assert i.nested.arguments_start == 12

    def test_nesting_is_one_level(self):
        i = Instruction.parse("ONBUILD ONBUILD RUN x")
        assert i.nested.keyword == "ONBUILD"
        assert i.nested.nested is None

    def test_only_onbuild_nests(self):
        assert Instruction.parse("RUN EXPOSE 8080").nested is None

    def test_keyword_at(self):
        i = Instruction.parse("ONBUILD EXPOSE 8080")
        assert i.keyword_at(0) is i
        assert i.keyword_at(7) is i
        assert i.keyword_at(9) is i.nested
        assert i.keyword_at(16) is None

    def test_offset(self):
        i = Instruction.parse("EXPOSE 80", offset=10)
        assert (i.keyword_start, i.arguments_start) == (10, 17)


class TestDirectives:

    def test_escape(self):
        doc = Document("#escape=`\nFROM x")
        (d,) = doc.directives
        assert (d.key, d.value) == ("escape", "`")
        assert (d.key_start, d.key_end) == (1, 7)
        assert d.escape == "`"
        assert doc.escape == "`"

    def test_default(self):
        assert Document("FROM x").escape == "\\"
        assert Document("").directives == ()

    @pytest.mark.parametrize("value", ["", "ab", "x", "``"])
    def test_invalid_value(self, value):
        doc = Document("#escape=%s\nFROM x" % value)
        (d,) = doc.directives
        assert d.recognized
        assert d.escape is None
        assert doc.escape == "\\"

    def test_value_whitespace(self):
        assert Document("#escape= ` \nFROM x").escape == "`"

    def test_first_valid_wins(self):
        assert Document("#escape=`\n#escape=\\").escape == "`"
        assert Document("#escape=ab\n#escape=`").escape == "`"

    def test_blank_lines_keep_scanning(self):
        assert Document("\n  \n#escape=`").escape == "`"

    @pytest.mark.parametrize("first", ["FROM x", "# comment", "#syntax=x",
                                       "#escape"])
    def test_other_line_ends_scanning(self, first):
        doc = Document(first + "\n#escape=`")
        assert doc.escape == "\\"
        assert doc.directives == ()
        assert doc.entries[1].kind is Line_Kind.COMMENT

    def test_backslash_directive_not_continued(self):
        doc = Document("#escape=\\\nRUN a \\\nb")
        assert doc.escape == "\\"
        assert [e.line.text for e in doc.entries] == ["#escape=\\", "RUN a b"]


class TestClassification:

    def test_kinds(self):
        doc = Document("#escape=`\n\n# hi\nFROM x\n  \nRUN a")
        assert [e.kind for e in doc.entries] == [
            Line_Kind.DIRECTIVE, Line_Kind.BLANK, Line_Kind.COMMENT,
            Line_Kind.INSTRUCTION, Line_Kind.BLANK, Line_Kind.INSTRUCTION]

    def test_line_map(self):
        doc = Document("RUN a \\\nb\nUSER c")
        assert doc.line_map == (0, 0, 1)

    def test_line_map_skipped_comment(self):
        doc = Document("RUN a \\\n# c\nb\nUSER d")
        assert doc.line_map == (0, 0, 0, 1)
        assert doc.locate(1, 2) is None

    def test_line_map_comment_at_end(self):
        doc = Document("RUN a \\\n# c")
        assert doc.line_map == (0, 0)
        assert doc.locate(1, 1) is None

    def test_locate(self):
        doc = Document("RUN a \\\nb\nUSER c")
        (entry, offset) = doc.locate(1, 0)
        assert entry.node.keyword == "RUN"
        assert offset == 6
        assert doc.locate(3, 0) is None
