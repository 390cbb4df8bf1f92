# Parser directives, i.e. "#key=value" comments at the top of a Dockerfile.

import logging

import _dockhover as _dockhover
import _grammar as _grammar


## Constants ##

logger = logging.getLogger(__name__)


## Classes ##

class Directive:
   """Parser directive found among the leading lines of a document.

        key ......... key as written, e.g. "ESCAPE"

        value ....... everything after the "=", possibly empty

        key_start, key_end
                      offsets of the key in the logical text

        line ........ the Logical_Line it came from

      Only the escape directive is recognized; any other key parses but is
      not a directive as far as we're concerned."""

   __slots__ = ("key",
                "key_end",
                "key_start",
                "line",
                "value")

   # Directive parser object, populated at the time of first use.
   parser = None

   def __init__(self, key, value, key_start, key_end, line):
      self.key = key
      self.value = value
      self.key_start = key_start
      self.key_end = key_end
      self.line = line

   def __repr__(self):
      return "Directive(%r, %r)" % (self.key, self.value)

   @classmethod
   def parse(class_, line):
      """Return a Directive if Logical_Line line has directive syntax, else
         None. The key need not be one we recognize."""
      if (class_.parser is None):
         class_.parser = _grammar.parser_new(_grammar.GRAMMAR_DIRECTIVE)
      tree = _grammar.parse(class_.parser, line.text)
      if (tree is None):
         return None
      key = tree.terminal("DIRECTIVE_KEY")
      value = tree.terminal("DIRECTIVE_VALUE")
      return class_(str(key), "" if value is None else str(value),
                    key.start_pos, key.start_pos + len(key), line)

   @property
   def canonical(self):
      return self.key.lower()

   @property
   def escape(self):
      """The escape character I select, or None if I'm not an escape
         directive with a valid value."""
      if (not self.recognized):
         return None
      value = self.value.strip(" \t")
      if (value in _dockhover.ESCAPE_CHARS):
         return value
      return None

   @property
   def recognized(self):
      return (self.canonical == _dockhover.DIRECTIVE_ESCAPE)

   def on_key(self, offset):
      return (self.key_start <= offset <= self.key_end)


class Directive_Scanner:
   """Watches the leading logical lines of a document for directives.

      Scanning stays open across blank lines and recognized directives and
      closes for good at the first other line. The first escape directive
      with a valid value sets the escape character; later ones, and any
      that appear after scanning closes, have no effect."""

   __slots__ = ("directives",
                "escape",
                "escape_set",
                "open_")

   def __init__(self):
      self.directives = list()
      self.escape = _dockhover.ESCAPE_DEFAULT
      self.escape_set = False
      self.open_ = True

   def feed(self, line):
      """Examine the next Logical_Line. Return the Directive it holds, or None
         if it's not a recognized directive."""
      if (not self.open_ or line.is_blank):
         return None
      d = Directive.parse(line)
      if (d is None or not d.recognized):
         logger.debug("directives end at logical line %d" % line.index)
         self.open_ = False
         return None
      self.directives.append(d)
      if (not self.escape_set and d.escape is not None):
         logger.debug("escape character: %r" % d.escape)
         self.escape = d.escape
         self.escape_set = True
      return d
