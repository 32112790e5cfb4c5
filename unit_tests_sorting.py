import logging
import unittest
import random

from rlist import RNil
from cons_list import from_iterable, to_list

from Sorting.insertion_sort import insertion_sort, insert_sorted
from Sorting.merge_sort import merge_sort, merge
from Sorting.quick_sort import quick_sort, partition

seed = 100
random.seed(seed)

list_algorithms = [
    (insertion_sort, 'insertion sort'),
    (merge_sort, 'merge sort'),
    (quick_sort, 'quick sort'),
]


class TestSum(unittest.TestCase):
    def test_sort(self):
        """
        Checks the three algorithms on small inputs
        """
        l = from_iterable([3, 1, 4, 1, 5, 9, 2, 6])
        expected = from_iterable([1, 1, 2, 3, 4, 5, 6, 9])
        for algorithm, name in list_algorithms:
            logging.debug('sorting with {}'.format(name))
            self.assertEqual(algorithm(l), expected, name)
            self.assertEqual(algorithm(RNil), RNil, name)
            self.assertEqual(algorithm(from_iterable([7])), from_iterable([7]), name)
            self.assertEqual(algorithm(expected), expected, name)
            self.assertEqual(algorithm(expected.reverse()), expected, name)
            self.assertEqual(algorithm(from_iterable([2] * 10)), from_iterable([2] * 10), name)

    def test_methods(self):
        l = from_iterable([3, 1, 4, 1, 5, 9, 2, 6])
        self.assertEqual(l.insertion_sort(), insertion_sort(l))
        self.assertEqual(l.merge_sort(), merge_sort(l))
        self.assertEqual(l.quick_sort(), quick_sort(l))

    def test_order(self):
        """
        Checks sorting with a caller supplied order
        """
        l = from_iterable([3, 1, 4, 1, 5, 9, 2, 6])
        descending = lambda a, b: a >= b
        expected = from_iterable([9, 6, 5, 4, 3, 2, 1, 1])
        by_length = lambda a, b: len(a) <= len(b)
        words = from_iterable(["ccc", "a", "dddd", "bb"])
        for algorithm, name in list_algorithms:
            self.assertEqual(algorithm(l, descending), expected, name)
            self.assertEqual(
                algorithm(words, by_length), from_iterable(["a", "bb", "ccc", "dddd"]), name
            )

    def test_agreement(self):
        """
        Checks that the three algorithms agree on random inputs
        """
        for size in [0, 1, 2, 3, 17, 100, 257]:
            python_list = [random.randint(0, 20) for _ in range(size)]
            l = from_iterable(python_list)
            results = [algorithm(l) for algorithm, _ in list_algorithms]
            self.assertEqual(to_list(results[0]), sorted(python_list))
            for result in results[1:]:
                self.assertEqual(result, results[0])

    def test_long_lists(self):
        """
        Checks merge sort and quick sort beyond the recursion limit
        """
        N = 20_000
        python_list = [random.randint(0, N) for _ in range(N)]
        l = from_iterable(python_list)
        self.assertEqual(to_list(merge_sort(l)), sorted(python_list))
        self.assertEqual(to_list(quick_sort(l)), sorted(python_list))
        # first element pivot: quadratic but correct on sorted inputs
        sorted_list = from_iterable(range(1_500))
        self.assertEqual(quick_sort(sorted_list), sorted_list)
        self.assertEqual(insertion_sort(sorted_list.reverse()), sorted_list)

    def test_helpers(self):
        self.assertEqual(
            insert_sorted(3, from_iterable([1, 2, 4, 5])), from_iterable([1, 2, 3, 4, 5])
        )
        self.assertEqual(insert_sorted(0, RNil), from_iterable([0]))
        self.assertEqual(
            merge(from_iterable([1, 4, 6]), from_iterable([2, 3, 7, 8])),
            from_iterable([1, 2, 3, 4, 6, 7, 8]),
        )
        self.assertEqual(merge(RNil, from_iterable([1])), from_iterable([1]))
        smaller, larger = partition(from_iterable([5, 1, 8, 3, 9]), 4)
        self.assertEqual(sorted(to_list(smaller)), [1, 3])
        self.assertEqual(sorted(to_list(larger)), [5, 8, 9])


if __name__ == "__main__":
    unittest.main(verbosity=2)
