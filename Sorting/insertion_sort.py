import operator

from rlist import RList, RNil, Cons


def insertion_sort(l: RList, leq=operator.le):
    """
    Inserts the elements of l one at a time into a sorted accumulator.
    leq(a, b) is the order: a comes before b.
    """
    acc = RNil
    remaining = l
    while not remaining.is_empty():
        acc = insert_sorted(remaining.head, acc, leq)
        remaining = remaining.tail
    return acc


def insert_sorted(element, sorted_list: RList, leq=operator.le):
    """
    Inserts element in front of the first element y of sorted_list with leq(element, y)
    """
    before = RNil
    after = sorted_list
    while not after.is_empty() and not leq(element, after.head):
        before = Cons(after.head, before)
        after = after.tail
    return before.reverse_onto(Cons(element, after))
