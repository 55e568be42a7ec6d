"""
Graphviz DOT serialization of a `Trie`.

Output shape::

    digraph {
    rankdir=LR;
    node_<hex> [label="W",shape=plain];
    node_<hex> -> node_<hex>;
    ...
    }

Nodes are declared depth-first alongside their edges: a node's declaration
comes first, then for each child its edge followed by the child's own
subtree. Sentinels are never declared or connected.

Sentinel handling is a named `SentinelPolicy`:

- `STOP` stops iterating a node's remaining children at the first sentinel
  child. This is the reference rendering and the default.
- `SKIP` skips only the sentinel child and keeps going.

The two differ only for nodes that hold a sentinel before real siblings;
`merge` never produces such nodes, but hand-built ones can.
"""

import enum

from merge_trie.identity import node_id, subtree_digests

RANKDIRS = ("LR", "RL", "TB", "BT")


def check_rankdir(rankdir):
  """Return `rankdir` if Graphviz accepts it, else raise ValueError."""
  if rankdir not in RANKDIRS:
    hint = "; use TB for top-to-bottom" if rankdir in ("UB", "TD", "UD") else ""
    raise ValueError(f"rankdir must be one of {RANKDIRS}, got {rankdir!r}{hint}")
  return rankdir


class SentinelPolicy(enum.Enum):
  STOP = "stop"
  SKIP = "skip"


def _escape(symbol):
  return symbol.replace("\\", "\\\\").replace('"', '\\"')


def _declare(nid, symbol):
  return f'{nid} [label="{_escape(symbol)}",shape=plain];'


def iter_node_dot(root, policy=SentinelPolicy.STOP):
  """Yield the declaration and edge lines for one root and its subtree.

  Parameters
  ----------
  root : Node
      A sentinel root yields nothing.
  policy : SentinelPolicy, default=SentinelPolicy.STOP

  Notes
  -----
  Traversal uses an explicit stack of child iterators, so deep chains do not
  recurse. Ids are computed from one digest pass over the root's subtree.
  """
  if root.symbol is None:
    return
  digests = subtree_digests(root)
  root_id = node_id(root, "", digests)
  yield _declare(root_id, root.symbol)

  stack = [(root_id, root.symbol, iter(root.children))]
  while stack:
    nid, lineage, it = stack[-1]
    child = next(it, None)
    if child is None:
      stack.pop()
      continue
    if child.symbol is None:
      if policy is SentinelPolicy.STOP:
        stack.pop()
      continue
    cid = node_id(child, lineage, digests)
    yield f"{nid} -> {cid};"
    yield _declare(cid, child.symbol)
    stack.append((cid, lineage + child.symbol, iter(child.children)))


def iter_dot(trie, rankdir="LR", policy=SentinelPolicy.STOP):
  """Yield every line of the DOT description of `trie`, header to footer."""
  check_rankdir(rankdir)
  policy = SentinelPolicy(policy)
  yield "digraph {"
  yield f"rankdir={rankdir};"
  for root in trie.roots:
    yield from iter_node_dot(root, policy)
  yield "}"


def write_dot(trie, stream, rankdir="LR", policy=SentinelPolicy.STOP):
  """Write the DOT description of `trie` to a text stream, one line each."""
  for line in iter_dot(trie, rankdir, policy):
    stream.write(line)
    stream.write("\n")


def to_dot(trie, rankdir="LR", policy=SentinelPolicy.STOP):
  """Return the DOT description of `trie` as a single string."""
  return "".join(line + "\n" for line in iter_dot(trie, rankdir, policy))
