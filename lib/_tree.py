import shutil

import lark


## Constants ##

# Width of token name when truncating text to fit on screen.
WIDTH_TOKEN_MAX = 10


## Classes ##

class Tree(lark.tree.Tree):

   def _pretty(self, level, istr):
      # Re-implement with less space optimization and more debugging info.
      # See: https://github.com/lark-parser/lark/blob/262ab71/lark/tree.py#L78
      # Lines are always 1 here, so print offsets instead.
      pfx = "%4d %3d%s" % (getattr(self.meta, "start_pos", 0),
                           getattr(self.meta, "end_pos", 0), istr*(level+1))
      yield (pfx + self._pretty_label() + "\n")
      term_width = shutil.get_terminal_size().columns
      for c in self.children:
         if (isinstance(c, Tree)):
            yield from c._pretty(level + 1, istr)
         else:
            text = c
            type_ = c.type
            width = len(pfx) + len(istr) + len(text) + len(type_) + 2
            over = width - term_width
            if (len(type_) > WIDTH_TOKEN_MAX):
               # trim token (unconditionally for consistent alignment)
               token_rm = len(type_) - WIDTH_TOKEN_MAX
               type_ = type_[:-token_rm]
               over -= token_rm
            if (over > 0):
               # trim text (if needed)
               text = text[:-(over + 3)] + "..."
            yield "%s%s %s %s\n" % (pfx, istr, type_, text)

   def children_(self, cname):
      "Yield subtrees named cname that are direct children, in order."
      for st in self.children:
         if (isinstance(st, Tree) and st.data == cname):
            yield st

   def child(self, cname):
      """Return the first direct child subtree named cname, or None if there
         is no such subtree."""
      return next(self.children_(cname), None)

   def terminal(self, tname, i=0):
      """Return the ith child terminal named tname (zero-based) as a token,
         or None if not found. Tokens are strings that also know where they
         start."""
      for (j, t) in enumerate(self.terminals(tname)):
         if (j == i):
            return t
      return None

   def terminals(self, tname):
      """Yield all child terminals named tname, or empty sequence if none
         found."""
      for j in self.children:
         if (isinstance(j, lark.lexer.Token) and j.type == tname):
            yield j
