# Physical line scanning and continuation normalization.
#
# Dockerfile text is first cut into physical lines at any of the three line
# endings. Physical lines are then joined into logical lines wherever a line
# ends with the escape character, possibly followed by horizontal whitespace.
# The escape character, the whitespace after it and the line ending are
# dropped from the logical text, as are comment lines between continued
# lines; everything else is kept verbatim.

import collections
import enum
import logging
import re

import _dockhover as _dockhover


## Constants ##

logger = logging.getLogger(__name__)

# CRLF must come first so it isn't read as a CR line followed by an LF line.
TERMINATOR_RE = re.compile(r"\r\n|\r|\n")

# Comments are never continued, even if they end in the escape character.
COMMENT_RE = re.compile(r"[ \t]*#")


## Classes ##

class Line_Ending(enum.Enum):
   LF = "\n"
   CR = "\r"
   CRLF = "\r\n"
   NONE = ""

# Physical line. start and end are absolute offsets of its content; end
# excludes the line ending.
Physical_Line = collections.namedtuple("Physical_Line",
                                       ["index", "start", "end", "ending"])

# Piece of a logical line that came from one physical line. start_col and
# end_col are columns in physical line "line"; offset is the absolute offset
# of start_col; logical_start is where the piece begins in the logical text.
Fragment = collections.namedtuple("Fragment",
                                  ["line", "start_col", "end_col", "offset",
                                   "logical_start"])


class Logical_Line:
   """One or more physical lines joined by continuations.

        index ....... ordinal among the document's logical lines

        text ........ logical text, continuation markers removed

        fragments ... tuple of Fragment, in document order; concatenating
                      their text gives text. Comment lines skipped inside a
                      continuation have no fragment."""

   __slots__ = ("fragments",
                "index",
                "text")

   def __init__(self, index, text, fragments):
      self.index = index
      self.text = text
      self.fragments = tuple(fragments)

   def __repr__(self):
      return "Logical_Line(%d, %r, lines %d-%d)" % (self.index, self.text,
                                                    self.line_first,
                                                    self.line_last)

   @property
   def is_blank(self):
      return (self.text.strip(" \t") == "")

   @property
   def is_comment(self):
      return (COMMENT_RE.match(self.text) is not None)

   @property
   def line_first(self):
      return self.fragments[0].line

   @property
   def line_last(self):
      return self.fragments[-1].line

   def offset_at(self, line, character):
      """Return the offset in my logical text of physical position (line,
         character), or None if that position isn't part of my text (e.g.,
         it's inside an elided continuation marker). The end of a fragment
         counts as inside it, so a position just after a token still maps
         to the token's end."""
      for f in self.fragments:
         if (f.line == line):
            if (f.start_col <= character <= f.end_col):
               return f.logical_start + character - f.start_col
            return None
      return None

   def position_of(self, offset):
      """Return the physical (line, character) of logical offset, or None if
         offset is out of range. Offsets on a fragment boundary map to the
         start of the later fragment."""
      if (offset < 0 or offset > len(self.text)):
         return None
      for f in reversed(self.fragments):
         if (offset >= f.logical_start):
            return (f.line, f.start_col + offset - f.logical_start)
      return None


class Normalizer:
   """Iterator of Logical_Line objects built from physical lines.

      The escape character is read at the start of each logical line, so a
      caller may change attribute "escape" between iterations (i.e., after
      seeing an escape directive) and the new character takes effect from
      the next logical line onward."""

   __slots__ = ("escape",
                "lines",
                "text")

   def __init__(self, text, lines, escape=_dockhover.ESCAPE_DEFAULT):
      self.escape = escape
      self.lines = lines
      self.text = text

   def __iter__(self):
      i = 0
      index = 0
      while (i < len(self.lines)):
         (ll, i) = self.join(index, i, self.escape)
         yield ll
         index += 1

   def content(self, pl):
      return self.text[pl.start:pl.end]

   def join(self, index, i, escape):
      """Build logical line number index starting at physical line i. Return
         it and the index of the next unused physical line."""
      content = self.content(self.lines[i])
      if (COMMENT_RE.match(content) is not None):
         f = Fragment(i, 0, len(content), self.lines[i].start, 0)
         return (Logical_Line(index, content, [f]), i + 1)
      marker_re = re.compile(re.escape(escape) + r"[ \t]*$")
      fragments = list()
      text = ""
      while True:
         pl = self.lines[i]
         content = self.content(pl)
         # A marker needs a line ending after it; at end of file the escape
         # character is ordinary content.
         m = None
         if (pl.ending is not Line_Ending.NONE):
            m = marker_re.search(content)
         end_col = len(content) if m is None else m.start()
         fragments.append(Fragment(pl.index, 0, end_col, pl.start, len(text)))
         text += content[:end_col]
         i += 1
         if (m is None):
            break
         # Comment lines inside a continuation are dropped, not joined.
         while (i < len(self.lines)
                and COMMENT_RE.match(self.content(self.lines[i])) is not None):
            logger.debug("skipping comment in continuation: line %d" % i)
            i += 1
         if (i >= len(self.lines)):
            break
      if (len(fragments) > 1):
         logger.debug("joined physical lines %d-%d: %r"
                      % (fragments[0].line, fragments[-1].line, text))
      return (Logical_Line(index, text, fragments), i)


## Functions ##

def scan(text):
   """Return a tuple of Physical_Line for text. There is always at least one
      line, and the last line never has an ending."""
   lines = list()
   start = 0
   for m in TERMINATOR_RE.finditer(text):
      lines.append(Physical_Line(len(lines), start, m.start(),
                                 Line_Ending(m.group(0))))
      start = m.end()
   lines.append(Physical_Line(len(lines), start, len(text), Line_Ending.NONE))
   return tuple(lines)
