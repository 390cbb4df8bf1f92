# Answer "what is under this position" for a parsed Document.

import collections
import logging

import _dockhover as _dockhover
import _document as _document


## Constants ##

logger = logging.getLogger(__name__)


## Classes ##

Hover = collections.namedtuple("Hover", ["contents"])

Position = collections.namedtuple("Position", ["line", "character"])


## Functions ##

def hover(document, position, documentation):
   """Return a Hover for position in Document document, or None if there is
      nothing to say. documentation is anything with a get_markdown(name)
      method returning a string or None.

      Checks, in order: the key of an escape directive; the keyword of an
      instruction or of the instruction nested under ONBUILD; the name in an
      ARG declaration (giving its own value); a variable reference (giving
      the value it resolves to)."""
   (line, character) = position
   located = document.locate(line, character)
   if (located is None):
      return None
   (entry, offset) = located
   if (entry.kind is _document.Line_Kind.DIRECTIVE):
      return directive_hover(entry.node, offset, documentation)
   elif (entry.kind is _document.Line_Kind.INSTRUCTION):
      return instruction_hover(document, entry.node, offset, documentation)
   else:
      assert (entry.kind in (_document.Line_Kind.BLANK,
                             _document.Line_Kind.COMMENT))
      return None

def directive_hover(directive, offset, documentation):
   if (directive.recognized and directive.on_key(offset)):
      return markdown_hover(documentation, _dockhover.DIRECTIVE_ESCAPE)
   return None

def instruction_hover(document, instruction, offset, documentation):
   i = instruction.keyword_at(offset)
   if (i is not None):
      if (not i.documented):
         return None
      return markdown_hover(documentation, i.keyword)
   line = instruction.line.index
   if (instruction.keyword == "ARG"):
      for d in document.variables.declared_by(line):
         if (d.on_name(offset)):
            return value_hover(d.value)
   for r in document.references.get(line, ()):
      if (r.contains(offset)):
         logger.debug("hovering %r" % r)
         return value_hover(r.value)
   return None

def markdown_hover(documentation, name):
   text = documentation.get_markdown(name)
   if (text is None):
      logger.debug("no documentation: %s" % name)
      return None
   return Hover(text)

def value_hover(value):
   if (value is None):
      return None
   return Hover(value)
