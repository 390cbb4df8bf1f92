# Build variables: ARG and ENV declarations, $name references, and the
# stage-scoped lookup that connects them.
#
# Scopes are numbered by build stage. Scope 0 holds declarations before the
# first FROM; each FROM opens the next stage, starting at 1. A reference sees
# declarations in scope 0 and in its own stage, and a declaration in its own
# stage wins over a global one.

import logging
import re

import _dockhover as _dockhover
import _grammar as _grammar


## Constants ##

logger = logging.getLogger(__name__)

# $name, ${name}, and ${name:-word} and friends. Braces must balance.
REFERENCE_RE = re.compile(r"""\$(?: \{ (?P<braced>[A-Za-z_][A-Za-z0-9_]*)
                                       (?: :[-+?] [^}]* )? \}
                                  | (?P<bare>[A-Za-z_][A-Za-z0-9_]*) )""",
                          re.VERBOSE)


## Classes ##

class Declaration:
   """Variable declared by ARG or ENV.

        name ......... variable name

        value ........ value with quotes stripped, or None if declared with
                       no value (e.g., "ARG foo")

        start, end ... offsets of the name in the logical text

        extent ....... offset where the declaration's text ends: the start of
                       the next declaration on the line, or the end of the
                       arguments

        line ......... index of the declaring logical line

        scope ........ 0 for global, else the stage ordinal

        keyword ...... declaring instruction, ARG or ENV"""

   __slots__ = ("end",
                "extent",
                "keyword",
                "line",
                "name",
                "scope",
                "start",
                "value")

   def __init__(self, name, value, start, line, scope, keyword):
      self.name = name
      self.value = value
      self.start = start
      self.end = start + len(name)
      self.extent = self.end
      self.line = line
      self.scope = scope
      self.keyword = keyword

   def __repr__(self):
      return "Declaration(%s %s=%r, scope %d)" % (self.keyword, self.name,
                                                  self.value, self.scope)

   def on_name(self, offset):
      return (self.start <= offset <= self.end)


class Reference:
   """Use of a variable in instruction arguments.

        name ......... variable name

        start, end ... offsets in the logical text; "$" through the end of
                       the name, or through the closing brace

        line ......... index of the logical line

        declaration .. the Declaration it resolves to, or None"""

   __slots__ = ("declaration",
                "end",
                "line",
                "name",
                "start")

   def __init__(self, name, start, end, line, declaration=None):
      self.name = name
      self.start = start
      self.end = end
      self.line = line
      self.declaration = declaration

   def __repr__(self):
      return "Reference(%s, %d-%d, %r)" % (self.name, self.start, self.end,
                                           self.declaration)

   def contains(self, offset):
      return (self.start <= offset <= self.end)

   @property
   def value(self):
      if (self.declaration is None):
         return None
      return self.declaration.value


class Variable_Table:
   """Declarations of one document, in document order, plus the stage that
      each instruction line belongs to."""

   __slots__ = ("declarations",
                "stages")

   # Argument parser objects, populated at the time of first use.
   parsers = dict()

   def __init__(self, instructions):
      """instructions is an iterable of Instruction, in document order."""
      declarations = list()
      stages = dict()
      stage = 0
      for i in instructions:
         if (i.keyword == "FROM"):
            stage += 1
         stages[i.line.index] = stage
         if (i.keyword in _dockhover.KEYWORDS_DECLARING):
            declarations.extend(self.declarations_parse(i, stage))
      self.declarations = tuple(declarations)
      self.stages = stages
      logger.debug("%d declarations in %d stages" % (len(declarations), stage))

   @classmethod
   def parser(class_, keyword):
      if (keyword not in class_.parsers):
         grammar = { "ARG": _grammar.GRAMMAR_ARG,
                     "ENV": _grammar.GRAMMAR_ENV }[keyword]
         class_.parsers[keyword] = _grammar.parser_new(grammar)
      return class_.parsers[keyword]

   @classmethod
   def declarations_parse(class_, instruction, scope):
      """Return a list of the Declarations made by ARG or ENV instruction.
         Arguments that don't parse declare nothing."""
      if (instruction.arguments == ""):
         return []
      tree = _grammar.parse(class_.parser(instruction.keyword),
                            instruction.arguments)
      if (tree is None):
         return []
      base = instruction.arguments_start
      line = instruction.line.index
      out = list()
      for st in tree.children:
         name = st.terminal("VAR_NAME")
         if (st.data == "arg_bare"):
            value = None
         elif (st.data == "env_space"):
            value = str(st.terminal("ENV_REST"))
         else:
            assert (st.data in ("arg_equals", "env_equals"))
            # "foo=" declares an empty value, not a missing one.
            value = _grammar.value_text(st.child("value")) or ""
         out.append(Declaration(str(name), value, base + name.start_pos, line,
                                scope, instruction.keyword))
      for (d, next_) in zip(out, out[1:]):
         d.extent = next_.start
      if (len(out) > 0):
         out[-1].extent = instruction.arguments_end
      return out

   def declared_by(self, line):
      "Return the declarations made on logical line line."
      return [d for d in self.declarations if d.line == line]

   def resolve(self, name, line, offset=None):
      """Return the Declaration that a reference to name at logical offset
         offset of logical line line sees, or None. Declarations on earlier
         lines count, as do those on the same line whose text ends at or
         before offset; if offset is None, only earlier lines count."""
      stage = self.stages.get(line, 0)
      global_ = None
      staged = None
      for d in self.declarations:
         if (d.line > line):
            break
         if (d.name != name):
            continue
         if (d.line == line and (offset is None or d.extent > offset)):
            continue
         if (d.scope == 0):
            global_ = d
         elif (d.scope == stage):
            staged = d
      return staged if staged is not None else global_


## Functions ##

def references_find(text, offset, line, escape):
   """Return a list of the References in text, which starts at offset in the
      logical text of logical line line. A "$" right after the escape
      character is literal."""
   out = list()
   for m in REFERENCE_RE.finditer(text):
      if (m.start() > 0 and text[m.start() - 1] == escape):
         continue
      name = m.group("braced") or m.group("bare")
      out.append(Reference(name, offset + m.start(), offset + m.end(), line))
   return out
