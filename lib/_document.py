# Parsed model of one Dockerfile snapshot.

import collections
import enum
import logging

import _directive as _directive
import _instruction as _instruction
import _scanner as _scanner
import _variables as _variables


## Constants ##

logger = logging.getLogger(__name__)


## Classes ##

class Line_Kind(enum.Enum):
   BLANK = "blank"
   COMMENT = "comment"
   DIRECTIVE = "directive"
   INSTRUCTION = "instruction"

# Classified logical line. node is a Directive for DIRECTIVE, an Instruction
# for INSTRUCTION, and None otherwise.
Entry = collections.namedtuple("Entry", ["kind", "line", "node"])


class Document:
   """Everything we know about a Dockerfile's text, computed up front.

        text ........... the text itself

        lines .......... tuple of Physical_Line

        entries ........ tuple of Entry, one per logical line

        line_map ....... physical line index -> logical line index

        directives ..... tuple of recognized Directive

        escape ......... escape character in force after directives

        variables ...... Variable_Table

        references ..... logical line index -> tuple of Reference

      Nothing here changes after construction; a new revision of the text
      gets a new Document."""

   __slots__ = ("directives",
                "entries",
                "escape",
                "line_map",
                "lines",
                "references",
                "text",
                "variables")

   def __init__(self, text):
      self.text = text
      self.lines = _scanner.scan(text)
      dirs = _directive.Directive_Scanner()
      norm = _scanner.Normalizer(text, self.lines)
      entries = list()
      for ll in norm:
         entries.append(self.classify(ll, dirs))
         norm.escape = dirs.escape
      self.entries = tuple(entries)
      # Physical lines up to the next logical line belong to this one,
      # including comments dropped from a continuation.
      firsts = [e.line.line_first for e in entries] + [len(self.lines)]
      line_map = list()
      for (e, first, next_) in zip(entries, firsts, firsts[1:]):
         line_map.extend(e.line.index for _ in range(first, next_))
      self.line_map = tuple(line_map)
      self.directives = tuple(dirs.directives)
      self.escape = dirs.escape
      self.variables = _variables.Variable_Table(self.instructions)
      references = dict()
      for i in self.instructions:
         refs = _variables.references_find(i.arguments, i.arguments_start,
                                           i.line.index, self.escape)
         for r in refs:
            r.declaration = self.variables.resolve(r.name, r.line, r.start)
         references[i.line.index] = tuple(refs)
      self.references = references
      logger.debug("parsed %d physical lines into %d logical lines"
                   % (len(self.lines), len(self.entries)))

   def __repr__(self):
      return "Document(%d lines, escape %r)" % (len(self.lines), self.escape)

   @staticmethod
   def classify(ll, dirs):
      d = dirs.feed(ll)
      if (d is not None):
         return Entry(Line_Kind.DIRECTIVE, ll, d)
      if (ll.is_blank):
         return Entry(Line_Kind.BLANK, ll, None)
      if (ll.is_comment):
         return Entry(Line_Kind.COMMENT, ll, None)
      i = _instruction.Instruction.parse(ll.text, ll)
      if (i is None):
         # unreachable for non-blank text
         return Entry(Line_Kind.BLANK, ll, None)
      return Entry(Line_Kind.INSTRUCTION, ll, i)

   @property
   def instructions(self):
      "Iterator of top-level Instructions in document order."
      return (e.node for e in self.entries if e.kind is Line_Kind.INSTRUCTION)

   def locate(self, line, character):
      """Return (Entry, logical offset) for physical position (line,
         character), or None if the position is outside the document or not
         part of any logical text."""
      if (line < 0 or character < 0 or line >= len(self.lines)):
         return None
      pl = self.lines[line]
      if (character > pl.end - pl.start):
         return None
      entry = self.entries[self.line_map[line]]
      offset = entry.line.offset_at(line, character)
      if (offset is None):
         return None
      return (entry, offset)
