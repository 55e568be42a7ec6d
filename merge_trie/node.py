"""
Trie nodes, chain construction and the destructive merge.

A `Node` holds one optional symbol and an ordered list of owned children.
Strings enter the structure as single-branching chains (one node per
character, terminated by a sentinel whose `symbol` is None) and are combined
with `merge`, which unifies children that share a symbol.

Key design choices
------------------
- **Memory efficiency:** `Node` uses `__slots__`.
- **In-place merge:** the first operand survives as the result; the second is
  emptied. Callers must treat both operands as consumed.
- **Iterative algorithms:** chain construction and merge never recurse, so
  very long input strings cannot hit the interpreter recursion limit.

Conventions & Notes
-------------------
- **Sentinels:** a sentinel never has children. `merge` drops sentinel
  children; a node that only ever belonged to one chain keeps its sentinel.
- **Child order:** first-appearance order (left operand first), never sorted.
"""

from itertools import chain


class SymbolMismatchError(AssertionError):
  """Raised when `merge` is called on nodes carrying different symbols.

  This is an internal logic error, never a user-input error; nothing in the
  package catches it.
  """


class Node:
  __slots__ = ("symbol", "children")

  def __init__(self, symbol=None, children=None):
    self.symbol = symbol
    self.children = [] if children is None else children

  @classmethod
  def sentinel(cls):
    return cls(None)

  @property
  def is_sentinel(self):
    return self.symbol is None

  def __repr__(self):
    return f"Node({self.symbol!r}, children={[c.symbol for c in self.children]!r})"


def from_string(s):
  """Decompose `s` into a chain of single-child nodes ending in a sentinel.

  Parameters
  ----------
  s : str
      Already-normalized input. The empty string yields a bare sentinel.

  Returns
  -------
  Node
      Head of the chain (`s[0]`), or the sentinel when `s == ""`.

  Complexity
  ----------
  O(L) time and space, built tail-first without recursion.
  """
  node = Node.sentinel()
  for ch in reversed(s):
    node = Node(ch, [node])
  return node


def merge(a, b):
  """Merge two nodes carrying the same symbol and return the result.

  Parameters
  ----------
  a, b : Node
      Operands with equal `symbol`. Both are consumed: `a` is rebuilt in place
      and returned, `b` is left with no children.

  Returns
  -------
  Node
      `a`, whose children are the concatenation of both operands' children
      with sentinels dropped and same-symbol siblings folded into one node.

  Raises
  ------
  SymbolMismatchError
      If `a.symbol != b.symbol`.

  Notes
  -----
  Groups with a single member are kept as-is (sentinel included); only groups
  with two or more members are folded, left to right. Pending folds live on an
  explicit stack, so the depth of the shared path is not bounded by the
  recursion limit.
  """
  if a.symbol != b.symbol:
    raise SymbolMismatchError(
        f"cannot merge nodes with different symbols: {a.symbol!r} != {b.symbol!r}")
  if a is b:
    return a

  pending = [(a, b)]
  while pending:
    keep, absorbed = pending.pop()
    groups = {}
    folds = []
    for child in chain(keep.children, absorbed.children):
      if child.symbol is None:
        continue
      first = groups.get(child.symbol)
      if first is None:
        groups[child.symbol] = child
      else:
        folds.append((first, child))
    keep.children = list(groups.values())
    absorbed.children = []
    # reversed so the stack pops each group's folds left to right
    pending.extend(reversed(folds))
  return a
