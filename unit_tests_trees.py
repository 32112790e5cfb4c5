import unittest

from rlist import RNil, EmptyCollectionError
from btree import BTree, BEnd, BNode
from cons_list import from_iterable


def example_tree():
    #        1
    #    2       6
    #  3   4   7   8
    #        5
    return BNode(
        1,
        BNode(2, BNode(3, BEnd, BEnd), BNode(4, BEnd, BNode(5, BEnd, BEnd))),
        BNode(6, BNode(7, BEnd, BEnd), BNode(8, BEnd, BEnd)),
    )


class TestSum(unittest.TestCase):
    def test_leaves(self):
        """
        Checks the leaves are collected from left to right
        """
        tree = example_tree()
        leaves = tree.collect_leaves()
        self.assertEqual(leaves.map(lambda node: node.value), from_iterable([3, 5, 7, 8]))
        self.assertEqual(tree.leaf_count(), 4)
        self.assertEqual(BEnd.collect_leaves(), RNil)
        self.assertEqual(BEnd.leaf_count(), 0)
        self.assertEqual(BNode(1).leaf_count(), 1)

    def test_is_leaf(self):
        self.assertTrue(BNode(1, BEnd, BEnd).is_leaf())
        self.assertFalse(BNode(1, BNode(2), BEnd).is_leaf())
        self.assertFalse(BEnd.is_leaf())
        self.assertTrue(BEnd.is_empty())
        self.assertFalse(BNode(1).is_empty())
        self.assertIsInstance(BEnd, BTree)

    def test_empty_tree(self):
        for accessor in [lambda t: t.value, lambda t: t.left, lambda t: t.right]:
            with self.assertRaises(EmptyCollectionError):
                accessor(BEnd)
        with self.assertRaises(AttributeError):
            example_tree()._value = 0

    def test_repr(self):
        self.assertEqual(repr(BEnd), "BEnd")
        self.assertEqual(repr(BNode(1, BNode(2), BEnd)), "BNode(1, BNode(2, BEnd, BEnd), BEnd)")

    def test_deep_tree(self):
        """
        Checks a degenerate tree deeper than the recursion limit
        """
        N = 10_000
        tree = BEnd
        for i in range(N):
            tree = BNode(i, tree, BEnd)
        self.assertEqual(tree.leaf_count(), 1)
        self.assertEqual(tree.collect_leaves().head.value, 0)


if __name__ == "__main__":
    unittest.main(verbosity=2)
