import unittest

from rlist import RNil, Cons, IndexOutOfBounds
from cons_list import from_iterable, to_list, from_cons_tuple, to_cons_tuple, index, split


class TestSum(unittest.TestCase):
    def test_python_lists(self):
        for python_list in [[], [1], [1, 2, 3], list(range(5_000))]:
            self.assertEqual(to_list(from_iterable(python_list)), python_list)
        self.assertEqual(from_iterable(iter([1, 2])), Cons(1, Cons(2, RNil)))
        self.assertEqual(from_iterable([]), RNil)

    def test_cons_tuples(self):
        """
        Checks the conversions from and to lists of the form None | (value, list)
        """
        t = (1, (2, (3, None)))
        l = from_cons_tuple(t)
        self.assertEqual(l, from_iterable([1, 2, 3]))
        self.assertEqual(to_cons_tuple(l), t)
        self.assertEqual(from_cons_tuple(None), RNil)
        self.assertIsNone(to_cons_tuple(RNil))

        self.assertEqual(index(t, 0), 1)
        self.assertEqual(index(t, 2), 3)
        with self.assertRaises(IndexOutOfBounds):
            index(t, 3)
        with self.assertRaises(IndexOutOfBounds):
            index(t, -1)
        with self.assertRaises(IndexOutOfBounds):
            index(None, 0)

    def test_split(self):
        l = from_iterable([1, 2, 3, 4, 5])
        first, rest = split(l, 2)
        self.assertEqual(first, from_iterable([1, 2]))
        self.assertEqual(rest, from_iterable([3, 4, 5]))
        self.assertIs(rest, l.tail.tail)
        self.assertEqual(split(l, 0), (RNil, l))
        self.assertEqual(split(l, 5), (l, RNil))
        with self.assertRaises(IndexOutOfBounds):
            split(l, 6)


if __name__ == "__main__":
    unittest.main(verbosity=2)
