import logging
import unittest
import random
import numpy as np
from scipy.stats import chisquare

from rlist import RList, RNil, Cons, EmptyCollectionError, IndexOutOfBounds
from cons_list import from_iterable, to_list

logging_levels = {0: logging.INFO, 1: logging.DEBUG}
verbosity = 0
logging.basicConfig(format='%(message)s', level=logging_levels[verbosity])

seed = 100
random.seed(seed)

# longer than the recursion limit
N = 100_000


class FixedDraws:
    """
    Random source replaying a fixed sequence of indices
    """
    def __init__(self, draws):
        self.draws = draws
        self.i = 0

    def integers(self, high):
        draw = self.draws[self.i]
        assert(0 <= draw < high)
        self.i += 1
        return draw


class TestSum(unittest.TestCase):
    def test_primitives(self):
        """
        Checks construction, head, tail and emptiness
        """
        self.assertTrue(RNil.is_empty())
        self.assertFalse(RNil)
        l = RNil.prepend(3).prepend(2).prepend(1)
        self.assertFalse(l.is_empty())
        self.assertEqual(l.head, 1)
        self.assertEqual(l.tail.head, 2)
        self.assertEqual(l, from_iterable([1, 2, 3]))

        # prepend shares the old list as its tail
        l2 = l.prepend(0)
        self.assertIs(l2.tail, l)
        self.assertEqual(str(l), "[1, 2, 3]")

        with self.assertRaises(EmptyCollectionError):
            RNil.head
        with self.assertRaises(EmptyCollectionError):
            RNil.tail
        with self.assertRaises(AttributeError):
            l._head = 5

    def test_rendering(self):
        self.assertEqual(str(RNil), "[]")
        self.assertEqual(repr(from_iterable([1, 2, 3])), "[1, 2, 3]")
        self.assertEqual(str(Cons(42, RNil)), "[42]")
        self.assertEqual(str(from_iterable(["a", "b"])), "[a, b]")
        nested = from_iterable([from_iterable([1, 2]), RNil])
        self.assertEqual(str(nested), "[[1, 2], []]")

    def test_apply(self):
        """
        Checks indexed access and its failures
        """
        l = from_iterable([5, 6, 7, 8])
        for i, x in enumerate([5, 6, 7, 8]):
            self.assertEqual(l.apply(i), x)
            self.assertEqual(l[i], x)
        with self.assertRaises(IndexOutOfBounds):
            l.apply(-1)
        with self.assertRaises(IndexOutOfBounds):
            l.apply(4)
        with self.assertRaises(IndexOutOfBounds):
            RNil.apply(0)
        long_list = from_iterable(range(N))
        self.assertEqual(long_list.apply(N - 1), N - 1)

    def test_length_reverse(self):
        for python_list in [[], [1], [1, 2, 3], list(range(N))]:
            l = from_iterable(python_list)
            self.assertEqual(l.length(), len(python_list))
            self.assertEqual(len(l.reverse()), len(l))
            self.assertEqual(l.reverse().reverse(), l)
            self.assertEqual(to_list(l.reverse()), python_list[::-1])

    def test_concat(self):
        """
        Checks concatenation, its neutral element and associativity
        """
        a = from_iterable([1, 2, 3])
        b = from_iterable([4, 5])
        c = from_iterable([6])
        self.assertEqual(a.concat(b), from_iterable([1, 2, 3, 4, 5]))
        self.assertEqual(a + b, a.concat(b))
        self.assertEqual(RNil.concat(a), a)
        self.assertEqual(a.concat(RNil), a)
        self.assertEqual(a.concat(b).concat(c), a.concat(b.concat(c)))
        self.assertEqual(len(a.concat(b)), len(a) + len(b))
        # the inputs are untouched and the second one is shared
        self.assertEqual(a, from_iterable([1, 2, 3]))
        self.assertIs(a.concat(b).tail.tail.tail, b)

        long_list = from_iterable(range(N))
        self.assertEqual(len(long_list.concat(long_list)), 2 * N)

    def test_remove_at(self):
        """
        Checks removal, including the indexes outside of the list
        """
        l = from_iterable([1, 2, 3, 4])
        self.assertEqual(l.remove_at(0), from_iterable([2, 3, 4]))
        self.assertEqual(l.remove_at(2), from_iterable([1, 2, 4]))
        self.assertEqual(l.remove_at(3), from_iterable([1, 2, 3]))
        self.assertEqual(len(l.remove_at(1)), len(l) - 1)
        # removing nothing is not an error
        self.assertEqual(l.remove_at(-1), l)
        self.assertEqual(l.remove_at(4), l)
        self.assertEqual(l.remove_at(100), l)
        self.assertEqual(RNil.remove_at(0), RNil)
        # the suffix after the removed element is shared
        self.assertIs(l.remove_at(1).tail, l.tail.tail)

    def test_map_filter(self):
        l = from_iterable([1, 2, 3, 4, 5])
        self.assertEqual(l.map(lambda x: x), l)
        self.assertEqual(l.map(lambda x: 10 * x), from_iterable([10, 20, 30, 40, 50]))
        self.assertEqual(l.filter(lambda x: True), l)
        self.assertEqual(l.filter(lambda x: False), RNil)
        self.assertEqual(l.filter(lambda x: x % 2 == 1), from_iterable([1, 3, 5]))
        self.assertEqual(RNil.map(lambda x: x + 1), RNil)

        long_list = from_iterable(range(N))
        self.assertEqual(len(long_list.map(lambda x: x + 1)), N)
        self.assertEqual(len(long_list.filter(lambda x: x % 2 == 0)), N // 2)

    def test_flat_map(self):
        """
        Checks that flat_map keeps the order of the outer and inner elements
        """
        l = from_iterable([1, 2, 3])
        self.assertEqual(l.flat_map(lambda x: Cons(x, RNil)), l)
        self.assertEqual(
            l.flat_map(lambda x: from_iterable([x, 10 * x])),
            from_iterable([1, 10, 2, 20, 3, 30]),
        )
        self.assertEqual(l.flat_map(lambda x: RNil), RNil)
        self.assertEqual(
            l.flat_map(lambda x: from_iterable(range(x))),
            from_iterable([0, 0, 1, 0, 1, 2]),
        )
        self.assertEqual(RNil.flat_map(lambda x: Cons(x, RNil)), RNil)

        long_list = from_iterable(range(N))
        self.assertEqual(len(long_list.flat_map(lambda x: from_iterable([x, x]))), 2 * N)

    def test_rle(self):
        l = from_iterable([1, 1, 1, 2, 3, 3])
        self.assertEqual(l.rle(), from_iterable([(1, 3), (2, 1), (3, 2)]))
        self.assertEqual(str(l.rle()), "[(1, 3), (2, 1), (3, 2)]")
        self.assertEqual(Cons(7, RNil).rle(), from_iterable([(7, 1)]))
        self.assertEqual(from_iterable([1, 2, 1]).rle(), from_iterable([(1, 1), (2, 1), (1, 1)]))
        with self.assertRaises(EmptyCollectionError):
            RNil.rle()
        self.assertEqual(from_iterable([0] * N).rle(), from_iterable([(0, N)]))

    def test_duplicate_each(self):
        """
        Checks duplication, where k <= 0 drops every element
        """
        l = from_iterable([1, 2, 3])
        self.assertEqual(l.duplicate_each(2), from_iterable([1, 1, 2, 2, 3, 3]))
        self.assertEqual(l.duplicate_each(1), l)
        self.assertEqual(l.duplicate_each(0), RNil)
        self.assertEqual(l.duplicate_each(-3), RNil)
        self.assertEqual(RNil.duplicate_each(4), RNil)

    def test_rotate(self):
        l = from_iterable([1, 2, 3, 4, 5])
        self.assertEqual(l.rotate(0), l)
        self.assertEqual(l.rotate(1), from_iterable([2, 3, 4, 5, 1]))
        self.assertEqual(l.rotate(3), from_iterable([4, 5, 1, 2, 3]))
        self.assertEqual(l.rotate(7), from_iterable([3, 4, 5, 1, 2]))
        for k in [5, 10, 25]:
            self.assertEqual(l.rotate(k), l)
        self.assertEqual(RNil.rotate(3), RNil)
        with self.assertRaises(ValueError):
            l.rotate(-1)

    def test_sample(self):
        """
        Checks the size and the content of samples
        """
        l = from_iterable([1, 2, 3, 4, 5])
        elements = set(to_list(l))
        sample = l.sample(20, rng=np.random.default_rng(seed))
        self.assertEqual(len(sample), 20)
        for x in sample:
            self.assertIn(x, elements)

        # same seed, same sample
        self.assertEqual(sample, l.sample(20, rng=np.random.default_rng(seed)))
        self.assertEqual(len(l.sample(3)), 3)

        self.assertEqual(l.sample(3, rng=FixedDraws([4, 0, 2])), from_iterable([5, 1, 3]))
        self.assertEqual(l.sample(0), RNil)
        self.assertEqual(RNil.sample(0), RNil)
        with self.assertRaises(EmptyCollectionError):
            RNil.sample(1)

    def test_sample_uniform(self):
        """
        Check if sample draws every element with the same probability
        """
        K = 20_000  # number of samples
        L = 10  # size of the list
        alpha = 0.001  # threshold to reject the "H0 hypothesis"

        l = from_iterable(range(L))
        count = {x: 0 for x in range(L)}
        for x in l.sample(K, rng=np.random.default_rng(seed)):
            count[x] += 1

        f_obs = [count[x] for x in range(L)]
        f_exp = [K / L] * L
        chisq, p_value = chisquare(f_obs, f_exp=f_exp)
        self.assertLessEqual(alpha, p_value)

    def test_persistence(self):
        """
        Checks that no operation modifies its receiver
        """
        python_list = [random.randint(0, 9) for _ in range(50)]
        l = from_iterable(python_list)
        l.reverse()
        l.concat(l)
        l.remove_at(10)
        l.map(lambda x: x + 1)
        l.filter(lambda x: x > 4)
        l.flat_map(lambda x: from_iterable([x, x]))
        l.rle()
        l.duplicate_each(3)
        l.rotate(17)
        l.quick_sort()
        l.merge_sort()
        l.insertion_sort()
        self.assertEqual(to_list(l), python_list)

    def test_equality(self):
        a = from_iterable([1, 2, 3])
        self.assertEqual(a, from_iterable([1, 2, 3]))
        self.assertNotEqual(a, from_iterable([1, 2]))
        self.assertNotEqual(a, from_iterable([1, 2, 4]))
        self.assertNotEqual(a, [1, 2, 3])
        self.assertEqual(hash(a), hash(from_iterable([1, 2, 3])))
        self.assertIsInstance(a, RList)


if __name__ == "__main__":
    unittest.main(verbosity=2)
