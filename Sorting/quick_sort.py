import logging
import operator

from rlist import RList, RNil, Cons


def quick_sort(l: RList, leq=operator.le):
    """
    Quick sort driven by a work-list of lists instead of recursion.

    The head of each list is its pivot, with no randomisation:
    sorted and reverse-sorted inputs are quadratic.
    Lists of size at most one are final and go to the accumulator.
    """
    todo = Cons(l, RNil)
    acc = RNil
    partitions = 0
    while not todo.is_empty():
        current = todo.head
        todo = todo.tail
        if current.is_empty():
            continue
        if current.tail.is_empty():
            acc = Cons(current, acc)
            continue
        pivot = current.head
        smaller, larger = partition(current.tail, pivot, leq)
        todo = Cons(smaller, Cons(Cons(pivot, RNil), Cons(larger, todo)))
        partitions += 1
    logging.debug('quick sort: {} partitions'.format(partitions))
    return acc.flat_map(lambda x: x).reverse()


def partition(l: RList, pivot, leq=operator.le):
    """
    Splits l into the elements y with leq(y, pivot) and the others
    """
    smaller = RNil
    larger = RNil
    remaining = l
    while not remaining.is_empty():
        if leq(remaining.head, pivot):
            smaller = Cons(remaining.head, smaller)
        else:
            larger = Cons(remaining.head, larger)
        remaining = remaining.tail
    return smaller, larger
