import random
import string
import sys
import unittest

from merge_trie.node import Node, SymbolMismatchError, from_string, merge
from merge_trie.trie import node_paths


def chain_symbols(node):
    """Walk a single-branching chain and return its symbols, sentinel included."""
    out = []
    while True:
        out.append(node.symbol)
        if not node.children:
            return out
        assert len(node.children) == 1
        node = node.children[0]


class TestFromString(unittest.TestCase):
    def test_chain_shape(self):
        n = from_string("abc")
        self.assertEqual(n.symbol, "a")
        self.assertEqual(len(n.children), 1)
        self.assertEqual(n.children[0].symbol, "b")
        self.assertEqual(n.children[0].children[0].symbol, "c")
        tail = n.children[0].children[0].children
        self.assertEqual(len(tail), 1)
        self.assertTrue(tail[0].is_sentinel)
        self.assertEqual(tail[0].children, [])

    def test_empty_string_is_sentinel(self):
        n = from_string("")
        self.assertIsNone(n.symbol)
        self.assertEqual(n.children, [])

    def test_long_string_does_not_recurse(self):
        s = "x" * (sys.getrecursionlimit() * 3)
        symbols = chain_symbols(from_string(s))
        self.assertEqual(len(symbols), len(s) + 1)
        self.assertIsNone(symbols[-1])


class TestMerge(unittest.TestCase):
    def test_mismatched_symbols_raise(self):
        with self.assertRaises(SymbolMismatchError):
            merge(from_string("win"), from_string("ton"))
        self.assertTrue(issubclass(SymbolMismatchError, AssertionError))

    def test_prefix_sharing(self):
        nm = merge(from_string("WIN"), from_string("WON"))
        self.assertEqual(nm.symbol, "W")
        self.assertEqual([c.symbol for c in nm.children], ["I", "O"])
        for child in nm.children:
            self.assertEqual([c.symbol for c in child.children], ["N"])

    def test_children_keep_first_appearance_order(self):
        nm = merge(from_string("ab"), from_string("ac"))
        nm = merge(nm, from_string("aa"))
        self.assertEqual([c.symbol for c in nm.children], ["b", "c", "a"])

    def test_sentinels_dropped_from_merged_groups(self):
        nm = merge(from_string("ab"), from_string("abc"))
        b = nm.children[0]
        self.assertEqual([c.symbol for c in b.children], ["c"])
        self.assertEqual(node_paths(nm), {"abc": 1})

    def test_singleton_groups_keep_their_sentinel(self):
        nm = merge(from_string("ab"), from_string("ac"))
        for child in nm.children:
            self.assertEqual(len(child.children), 1)
            self.assertTrue(child.children[0].is_sentinel)

    def test_operands_are_consumed(self):
        a, b = from_string("win"), from_string("won")
        nm = merge(a, b)
        self.assertIs(nm, a)
        self.assertEqual(b.children, [])

    def test_self_merge_is_noop(self):
        a = from_string("abc")
        self.assertIs(merge(a, a), a)
        self.assertEqual(node_paths(a), {"abc": 1})

    def test_no_duplicate_sibling_symbols(self):
        random.seed(7)
        root = from_string("q")
        for _ in range(300):
            w = "q" + "".join(random.choice("abc") for _ in range(random.randint(0, 6)))
            root = merge(root, from_string(w))
        stack = [root]
        while stack:
            node = stack.pop()
            syms = [c.symbol for c in node.children]
            self.assertEqual(len(syms), len(set(syms)))
            stack.extend(node.children)

    def test_associative_and_commutative(self):
        random.seed(11)
        for _ in range(50):
            words = ["m" + "".join(random.choice(string.ascii_lowercase[:4]) for _ in range(random.randint(1, 5)))
                     for _ in range(3)]
            a1, b1, c1 = (from_string(w) for w in words)
            a2, b2, c2 = (from_string(w) for w in words)
            a3, b3, c3 = (from_string(w) for w in words)
            left = merge(merge(a1, b1), c1)
            right = merge(a2, merge(b2, c2))
            swapped = merge(c3, merge(b3, a3))
            self.assertEqual(node_paths(left), node_paths(right), words)
            self.assertEqual(node_paths(left), node_paths(swapped), words)

    def test_deep_shared_path_does_not_recurse(self):
        prefix = "p" * (sys.getrecursionlimit() * 2)
        nm = merge(from_string(prefix + "a"), from_string(prefix + "b"))
        node = nm
        depth = 0
        while len(node.children) == 1:
            node = node.children[0]
            depth += 1
        self.assertEqual(depth, len(prefix) - 1)
        self.assertEqual([c.symbol for c in node.children], ["a", "b"])

    def test_groups_fold_left_to_right(self):
        # three same-symbol children across both operands
        a = Node("r", [from_string("ab"), from_string("ac")])
        b = Node("r", [from_string("ad")])
        nm = merge(a, b)
        self.assertEqual([c.symbol for c in nm.children], ["a"])
        self.assertEqual([c.symbol for c in nm.children[0].children], ["b", "c", "d"])

    def test_nested_groups_fold_left_to_right(self):
        a = Node("r", [from_string("xab"), from_string("xac")])
        b = Node("r", [from_string("xad"), from_string("xae")])
        nm = merge(a, b)
        x = nm.children[0]
        self.assertEqual([c.symbol for c in x.children], ["a"])
        self.assertEqual([c.symbol for c in x.children[0].children], ["b", "c", "d", "e"])

    def test_hand_built_node_repr(self):
        n = Node("a", [Node("b"), Node.sentinel()])
        self.assertEqual(repr(n), "Node('a', children=['b', None])")


if __name__ == "__main__":
    unittest.main()
