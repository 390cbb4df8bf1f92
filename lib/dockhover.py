# Hover for Dockerfiles: public interface.
#
#   >>> import dockhover
#   >>> dockhover.hover("ARG v=1\nUSER $v", (1, 6))
#   Hover(contents='1')

import functools

import _dockhover as _dockhover
import _document as _document
import _hover as _hover
import _markdown as _markdown


## Constants ##

Document = _document.Document
Hover = _hover.Hover
Markdown_Documentation = _markdown.Markdown_Documentation
Position = _hover.Position

# Documentation used when the caller doesn't supply any.
DOCUMENTATION_DEFAULT = _markdown.Markdown_Documentation()


## Functions ##

@functools.lru_cache(maxsize=_dockhover.CACHE_SIZE)
def parse(text):
   """Return the Document for text. Documents never change once built, so
      identical text shares one."""
   return _document.Document(text)

def hover(text, position, documentation=None):
   """Return a Hover for position in Dockerfile text, or None.

      position is a Position or a (line, character) tuple, both zero-based.
      documentation has a get_markdown(name) method; if None, use the
      built-in Markdown_Documentation."""
   if (documentation is None):
      documentation = DOCUMENTATION_DEFAULT
   return _hover.hover(parse(text), position, documentation)
