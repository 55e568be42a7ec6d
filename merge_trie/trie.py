"""
Forest of merged chains with a single mutating entry point.

`Trie` keeps one root per distinct leading symbol. `insert` either adopts a
node as a new root or merges it into the root carrying the same symbol; all
path sharing below the roots falls out of `merge`.

The structure is write-only until serialization: there is no lookup and no
deletion. The read-only helpers at the bottom (`count_nodes`,
`depth_profile`, `symbol_paths`) exist for statistics and checks.

Complexity (typical)
--------------------
- insert: O(R) root scan plus the cost of `merge` on the shared path
- count_nodes / depth_profile / symbol_paths: O(#nodes), iterative
"""

from collections import Counter

from merge_trie.node import from_string, merge


def normalize_line(line, uppercase=True):
  """Strip surrounding whitespace and, unless disabled, fold to upper case."""
  line = line.strip()
  return line.upper() if uppercase else line


class Trie:
  __slots__ = ("roots", )

  def __init__(self):
    self.roots = []

  def __len__(self):
    return len(self.roots)

  def insert(self, node):
    """Insert `node` into the forest.

    Parameters
    ----------
    node : Node
        Typically the output of `from_string`. Consumed: it either becomes a
        root or is merged into the existing root with the same symbol.

    Notes
    -----
    The merged root is re-appended at the end of `roots`, so root order tracks
    the most recent insertion into each root.
    """
    for i, root in enumerate(self.roots):
      if root.symbol == node.symbol:
        found = self.roots.pop(i)
        self.roots.append(merge(found, node))
        return
    self.roots.append(node)

  def batch_insert(self, words, normalize=normalize_line):
    """Normalize each word, build its chain and insert it, in input order.

    Parameters
    ----------
    words : Iterable[str]
    normalize : Callable[[str], str] | None, default=normalize_line
        Applied to every word before chain construction. Pass None to insert
        words verbatim.

    Returns
    -------
    int
        Number of words inserted.
    """
    count = 0
    for w in words:
      if normalize is not None:
        w = normalize(w)
      self.insert(from_string(w))
      count += 1
    return count

  def _iter_real(self):
    """Yield `(node, depth)` for every non-sentinel node, depth-first."""
    stack = [(root, 0) for root in reversed(self.roots) if root.symbol is not None]
    while stack:
      node, depth = stack.pop()
      yield node, depth
      for child in reversed(node.children):
        if child.symbol is not None:
          stack.append((child, depth + 1))

  def count_nodes(self, get_avg_branch_factor=False):
    """Return the real-node count, or the average branching factor.

    Parameters
    ----------
    get_avg_branch_factor : bool, default=False
        If False, return the number of non-sentinel nodes.
        If True, return the average number of non-sentinel children over the
        nodes that have at least one.

    Returns
    -------
    int | float
    """
    total_nodes = 0
    internal = 0
    total_deg = 0
    for node, _ in self._iter_real():
      total_nodes += 1
      deg = sum(1 for c in node.children if c.symbol is not None)
      if deg:
        internal += 1
        total_deg += deg
    if get_avg_branch_factor:
      return (total_deg / internal) if internal else 0.0
    return total_nodes

  def depth_profile(self):
    """Return a list whose i-th entry is the number of real nodes at depth i."""
    profile = []
    for _, depth in self._iter_real():
      if depth == len(profile):
        profile.append(0)
      profile[depth] += 1
    return profile

  def symbol_paths(self):
    """Return the multiset of root-to-leaf symbol strings.

    A leaf is a real node without real children. A sentinel root contributes
    the empty string. Two forests are structurally equivalent when their
    `symbol_paths` are equal.
    """
    paths = Counter()
    for root in self.roots:
      paths.update(node_paths(root))
    return paths


def node_paths(node):
  """Return the `Counter` of root-to-leaf symbol strings under `node`."""
  paths = Counter()
  if node.symbol is None:
    paths[""] += 1
    return paths
  stack = [(node, node.symbol)]
  while stack:
    cur, prefix = stack.pop()
    real = [c for c in cur.children if c.symbol is not None]
    if not real:
      paths[prefix] += 1
      continue
    for child in real:
      stack.append((child, prefix + child.symbol))
  return paths
