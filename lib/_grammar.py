# Line-level grammars for Dockerfile hover.
#
# Unlike a whole-file grammar, these parse one logical line at a time, after
# continuations are gone, so none of them deal with newlines or the escape
# character. A line that doesn't parse is simply not that kind of line.

import logging
import re

import lark

from _tree import Tree


## Hairy Imports ##

# Verify the lark we got is one we know how to drive. We only complain, since
# hover is best-effort anyway.
LARK_MIN = (1, 0, 0)
LARK_MAX = (99, 0, 0)
lark_version = tuple(int(i) for i in re.findall(r"[0-9]+", lark.__version__)[:3])
logger = logging.getLogger(__name__)
if (not LARK_MIN <= lark_version <= LARK_MAX):
   logger.warning("found Python module \"lark\" version %s but need between %d.%d.%d and %d.%d.%d inclusive"
                  % ((lark.__version__,) + LARK_MIN + LARK_MAX))


## Constants ##

# Common rules for all grammars.
GRAMMAR_COMMON = r"""
_WSH: /[ \t]+/                   // sequence of horizontal whitespace
"""

# Variable names and values, shared by ARG and ENV. A value is any run of
# unquoted chunks and quoted strings with no whitespace between them; e.g.
# a"b c"'d' is one value. Unquoted chunks can't start with a quote, which
# keeps 'f g=h' from also parsing as two declarations.
GRAMMAR_VALUE = r"""
value: ( VALUE_CHUNK | STRING_DQ | STRING_SQ )+

VAR_NAME: /[^ \t=]+/
VALUE_CHUNK: /[^ \t'"]+/
STRING_DQ: /"[^"]*"/
STRING_SQ: /'[^']*'/
"""

# Parser directive, e.g. "#escape=`". No whitespace is allowed between the
# key and the equals sign; the value may be empty.
GRAMMAR_DIRECTIVE = r"""
start: _WSH? "#" _WSH? DIRECTIVE_KEY "=" DIRECTIVE_VALUE?

DIRECTIVE_KEY: /[A-Za-z][A-Za-z0-9_-]*/
DIRECTIVE_VALUE: /.+/
""" + GRAMMAR_COMMON

# Any instruction: a keyword, then optionally arguments. ARGUMENTS starts and
# ends with non-whitespace, so surrounding whitespace never belongs to it.
GRAMMAR_INSTRUCTION = r"""
start: _WSH? KEYWORD ( _WSH ARGUMENTS )? _WSH?

KEYWORD: /[^ \t]+/
ARGUMENTS: /[^ \t](?:.*[^ \t])?/
""" + GRAMMAR_COMMON

# Arguments of ARG: one or more declarations, each with or without a value.
GRAMMAR_ARG = r"""
start: _WSH? _arg_decl ( _WSH _arg_decl )* _WSH?

_arg_decl: arg_bare | arg_equals
arg_bare: VAR_NAME
arg_equals: VAR_NAME "=" value?
""" + GRAMMAR_VALUE + GRAMMAR_COMMON

# Arguments of ENV: either "key=value" pairs or the legacy "key value" form,
# where the value is the rest of the line.
GRAMMAR_ENV = r"""
start: _WSH? ( env_space | _env_equalses ) _WSH?

env_space: VAR_NAME _WSH ENV_REST
_env_equalses: env_equals ( _WSH env_equals )*
env_equals: VAR_NAME "=" value?

ENV_REST: /[^ \t](?:.*[^ \t])?/
""" + GRAMMAR_VALUE + GRAMMAR_COMMON


## Functions ##

def parser_new(grammar):
   """Return a new parser for grammar. Instantiating one is slow relative to
      parsing a line, so callers keep theirs in a class variable."""
   return lark.Lark(grammar, parser="earley", propagate_positions=True,
                    tree_class=Tree)

def parse(parser, text):
   """Parse text, returning the tree or None if it doesn't match."""
   try:
      tree = parser.parse(text)
   except (lark.exceptions.UnexpectedInput, lark.exceptions.UnexpectedEOF) as x:
      logger.debug("no parse: %r: %s" % (text, type(x).__name__))
      return None
   if (logger.isEnabledFor(logging.DEBUG)):
      logger.debug("parsed: %r\n%s" % (text, tree.pretty()[:-1]))  # rm trailing newline
   return tree

def value_text(tree):
   """Return the text of a value subtree with quotes stripped, or None if
      there is no value subtree."""
   if (tree is None):
      return None
   out = ""
   for t in tree.children:
      if (t.type in ("STRING_DQ", "STRING_SQ")):
         out += t[1:-1]
      else:
         out += t
   return out
