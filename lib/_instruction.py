# Instructions: a keyword and its arguments, one per logical line.

import logging

import _dockhover as _dockhover
import _grammar as _grammar


## Constants ##

logger = logging.getLogger(__name__)


## Classes ##

class Instruction:
   """Instruction parsed from the text of a logical line.

        keyword ........ canonical (upper-case) keyword

        keyword_raw .... keyword as written

        keyword_start, keyword_end
                         offsets of the keyword in the logical text

        arguments ...... argument text without surrounding whitespace;
                         empty string if none

        arguments_start  offset of the arguments in the logical text

        line ........... the Logical_Line it came from

        nested ......... for ONBUILD, the trigger instruction if it has a
                         keyword; otherwise None

      Any leading word makes an Instruction, even one that isn't a Dockerfile
      keyword; such instructions just have no documentation."""

   __slots__ = ("arguments",
                "arguments_start",
                "keyword",
                "keyword_end",
                "keyword_raw",
                "keyword_start",
                "line",
                "nested")

   # Instruction parser object, populated at the time of first use.
   parser = None

   def __init__(self, keyword_raw, keyword_start, arguments, arguments_start,
                line, nested=None):
      self.keyword_raw = keyword_raw
      self.keyword = keyword_raw.upper()
      self.keyword_start = keyword_start
      self.keyword_end = keyword_start + len(keyword_raw)
      self.arguments = arguments
      self.arguments_start = arguments_start
      self.line = line
      self.nested = nested

   def __repr__(self):
      out = "Instruction(%r, %r" % (self.keyword, self.arguments)
      if (self.nested is not None):
         out += ", nested=%r" % self.nested
      return out + ")"

   @classmethod
   def parse(class_, text, line=None, offset=0, nest=True):
      """Parse text, which starts at offset in the logical text of line, and
         return an Instruction, or None if text has no keyword. If nest, parse
         the arguments of ONBUILD as a nested instruction; nesting is one
         level only."""
      if (class_.parser is None):
         class_.parser = _grammar.parser_new(_grammar.GRAMMAR_INSTRUCTION)
      tree = _grammar.parse(class_.parser, text)
      if (tree is None):
         return None
      kw = tree.terminal("KEYWORD")
      args = tree.terminal("ARGUMENTS")
      if (args is None):
         arguments = ""
         arguments_start = offset + kw.start_pos + len(kw)
      else:
         arguments = str(args)
         arguments_start = offset + args.start_pos
      i = class_(str(kw), offset + kw.start_pos, arguments, arguments_start,
                 line)
      if (nest and i.keyword == "ONBUILD" and arguments != ""):
         i.nested = class_.parse(arguments, line, arguments_start, nest=False)
      elif (i.keyword == "ONBUILD" and nest):
         logger.debug("ONBUILD with no trigger")
      return i

   @property
   def arguments_end(self):
      return self.arguments_start + len(self.arguments)

   @property
   def documented(self):
      return (self.keyword in _dockhover.KEYWORDS)

   def on_keyword(self, offset):
      return (self.keyword_start <= offset <= self.keyword_end)

   def keyword_at(self, offset):
      """Return the instruction, mine or my nested one, whose keyword contains
         offset, or None."""
      if (self.on_keyword(offset)):
         return self
      if (self.nested is not None and self.nested.on_keyword(offset)):
         return self.nested
      return None
