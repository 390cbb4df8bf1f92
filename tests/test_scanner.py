"""
Tests for physical line scanning and continuation normalization.
"""

import pytest

import _scanner
from _scanner import Fragment, Line_Ending, Normalizer


def logical(text, escape="\\"):
    return list(Normalizer(text, _scanner.scan(text), escape))


class TestScan:

    def test_empty(self):
        lines = _scanner.scan("")
        assert len(lines) == 1
        assert lines[0].ending is Line_Ending.NONE
        assert (lines[0].start, lines[0].end) == (0, 0)

    def test_line_endings(self):
        lines = _scanner.scan("a\nb\rc\r\nd")
        assert [l.ending for l in lines] == [Line_Ending.LF, Line_Ending.CR,
                                             Line_Ending.CRLF, Line_Ending.NONE]
        assert [(l.start, l.end) for l in lines] == [(0, 1), (2, 3), (4, 5),
                                                     (7, 8)]

    def test_trailing_newline(self):
        lines = _scanner.scan("FROM x\n")
        assert len(lines) == 2
        assert lines[1].start == lines[1].end == 7

    def test_lf_cr_is_two_endings(self):
        lines = _scanner.scan("a\n\rb")
        assert [l.ending for l in lines] == [Line_Ending.LF, Line_Ending.CR,
                                             Line_Ending.NONE]


class TestNormalizer:

    def test_no_continuation(self):
        lines = logical("FROM x\nRUN y")
        assert [ll.text for ll in lines] == ["FROM x", "RUN y"]
        assert [ll.index for ll in lines] == [0, 1]

    @pytest.mark.parametrize("ending", ["\n", "\r", "\r\n"])
    def test_continuation(self, ending):
        lines = logical("a \\" + ending + "b")
        assert len(lines) == 1
        assert lines[0].text == "a b"
        assert lines[0].fragments == (Fragment(0, 0, 2, 0, 0),
                                      Fragment(1, 0, 1, 3 + len(ending), 2))

    def test_whitespace_after_escape(self):
        lines = logical("RUN a \\ \t\nb")
        assert [ll.text for ll in lines] == ["RUN a b"]

    def test_several_lines(self):
        lines = logical("RUN a \\\n b \\\n c\nUSER d")
        assert [ll.text for ll in lines] == ["RUN a  b  c", "USER d"]
        assert (lines[0].line_first, lines[0].line_last) == (0, 2)

    def test_escape_at_end_of_file(self):
        lines = logical("RUN a \\")
        assert [ll.text for ll in lines] == ["RUN a \\"]

    def test_continuation_into_empty_last_line(self):
        lines = logical("RUN a \\\n")
        assert [ll.text for ll in lines] == ["RUN a "]

    def test_escape_not_before_ending(self):
        lines = logical("FR\\OM node")
        assert [ll.text for ll in lines] == ["FR\\OM node"]

    def test_backtick(self):
        assert [ll.text for ll in logical("RUN a `\nb", "`")] == ["RUN a b"]
        assert ([ll.text for ll in logical("RUN a \\\nb", "`")]
                == ["RUN a \\", "b"])

    def test_comment_not_continued(self):
        lines = logical("# c \\\nRUN x")
        assert [ll.text for ll in lines] == ["# c \\", "RUN x"]
        assert lines[0].is_comment

    def test_comment_inside_continuation_dropped(self):
        lines = logical("RUN a \\\n# c $x\n  # d\n b\nUSER u")
        assert [ll.text for ll in lines] == ["RUN a  b", "USER u"]
        assert [f.line for f in lines[0].fragments] == [0, 3]

    def test_comment_ends_document_inside_continuation(self):
        lines = logical("RUN a \\\n# c")
        assert [ll.text for ll in lines] == ["RUN a "]

    def test_escape_change_applies_to_next_line(self):
        text = "#escape=`\nRUN a `\nb"
        norm = Normalizer(text, _scanner.scan(text))
        out = []
        for ll in norm:
            out.append(ll.text)
            norm.escape = "`"
        assert out == ["#escape=`", "RUN a b"]


class TestLogicalLine:

    def test_offset_at(self):
        (ll,) = logical("fr\\\noM node")
        assert ll.offset_at(0, 0) == 0
        assert ll.offset_at(0, 2) == 2
        assert ll.offset_at(1, 1) == 3
        assert ll.offset_at(0, 3) is None
        assert ll.offset_at(2, 0) is None

    def test_position_of(self):
        (ll,) = logical("fr\\\noM node")
        assert ll.position_of(1) == (0, 1)
        assert ll.position_of(2) == (1, 0)
        assert ll.position_of(9) == (1, 7)
        assert ll.position_of(10) is None

    def test_blank(self):
        lines = logical(" \t\n\nx")
        assert [ll.is_blank for ll in lines] == [True, True, False]
