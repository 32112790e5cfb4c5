import logging
import operator

from rlist import RList, RNil, Cons


def merge_sort(l: RList, leq=operator.le):
    """
    Bottom-up merge sort.

    runs: the sorted lists waiting to be merged in the current round,
    initially one singleton per element
    merged: the lists produced by the current round

    Each round merges the runs two by two; with an odd number of runs
    the last one is carried over to the next round as it is.
    """
    runs = l.map(lambda x: Cons(x, RNil))
    merged = RNil
    rounds = 0
    while True:
        if runs.is_empty():
            if merged.is_empty():
                result = RNil
                break
            if merged.tail.is_empty():
                result = merged.head
                break
            runs, merged = merged, RNil
            rounds += 1
        elif runs.tail.is_empty():
            if merged.is_empty():
                result = runs.head
                break
            runs, merged = Cons(runs.head, merged), RNil
            rounds += 1
        else:
            first, second = runs.head, runs.tail.head
            merged = Cons(merge(first, second, leq), merged)
            runs = runs.tail.tail
    logging.debug('merge sort: {} rounds'.format(rounds))
    return result


def merge(a: RList, b: RList, leq=operator.le):
    """
    Merges two sorted lists, taking from a on ties
    """
    acc = RNil
    while not a.is_empty() and not b.is_empty():
        if leq(a.head, b.head):
            acc = Cons(a.head, acc)
            a = a.tail
        else:
            acc = Cons(b.head, acc)
            b = b.tail
    if a.is_empty():
        return acc.reverse_onto(b)
    return acc.reverse_onto(a)
