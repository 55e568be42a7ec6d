"""
Display identifiers for trie nodes.

Identifiers are derived, never stored: `subtree_digest` is a Merkle-style
BLAKE2b hash over a node's symbol and its children's digests, and `node_id`
mixes that digest with the node's lineage (the symbols on the path from its
root down to its parent). Equal shapes at different positions therefore get
different labels, while the same node always gets the same label.

The ids are for rendering only. Two different nodes share an id only on a
hash collision, which is accepted for visualization and must not be relied on
for deduplication.
"""

import hashlib

_DIGEST_SIZE = 16
_ID_SIZE = 8
_SENTINEL_TAG = b"\x00"
_NODE_TAG = b"\x01"


def _hash_node(node, child_digests):
  if node.symbol is None:
    return hashlib.blake2b(_SENTINEL_TAG, digest_size=_DIGEST_SIZE).digest()
  h = hashlib.blake2b(digest_size=_DIGEST_SIZE)
  sym = node.symbol.encode("utf-8")
  h.update(_NODE_TAG + len(sym).to_bytes(4, "big") + sym)
  for d in child_digests:
    h.update(d)
  return h.digest()


def subtree_digests(root):
  """Return `{id(node): digest}` for every node under `root` (inclusive).

  Computed in a single iterative post-order pass. The mapping is keyed by
  object identity and is only meaningful while the tree is not mutated.
  """
  digests = {}
  stack = [(root, False)]
  while stack:
    node, expanded = stack.pop()
    if expanded:
      digests[id(node)] = _hash_node(node, [digests[id(c)] for c in node.children])
      continue
    stack.append((node, True))
    for child in node.children:
      stack.append((child, False))
  return digests


def subtree_digest(node):
  """Structural digest of `node`'s subtree (bytes)."""
  return subtree_digests(node)[id(node)]


def node_id(node, lineage="", digests=None):
  """Return a printable DOT identifier for `node`.

  Parameters
  ----------
  node : Node
  lineage : str, default=""
      Symbols from the root down to `node`'s parent. Empty for roots, and for
      callers that want a pure shape-based id.
  digests : dict | None
      Precomputed `subtree_digests` output. Serializers pass this to avoid
      rehashing the subtree for every node.

  Returns
  -------
  str
      `"node_"` followed by 16 hex characters.
  """
  digest = digests[id(node)] if digests is not None else subtree_digest(node)
  h = hashlib.blake2b(digest_size=_ID_SIZE)
  h.update(lineage.encode("utf-8"))
  h.update(b"\x00")
  h.update(digest)
  return f"node_{h.hexdigest()}"
