# Conversions between RList and Python data
# tuple cons list = None | (value, tuple cons list)

from rlist import RList, RNil, Cons, IndexOutOfBounds


def from_iterable(iterable):
    acc = RNil
    for x in iterable:
        acc = Cons(x, acc)
    return acc.reverse()


def to_list(rlist: RList):
    return [x for x in rlist]


def from_cons_tuple(t):
    acc = RNil
    while t is not None:
        (value, t) = t
        acc = Cons(value, acc)
    return acc.reverse()


def to_cons_tuple(rlist: RList):
    t = None
    for x in rlist.reverse():
        t = (x, t)
    return t


def index(cons_tuple, i):
    if i < 0:
        raise IndexOutOfBounds(i)
    current = cons_tuple
    for _ in range(i):
        if current is None:
            raise IndexOutOfBounds(i)
        current = current[1]
    if current is None:
        raise IndexOutOfBounds(i)
    return current[0]


def split(rlist: RList, n):
    '''
    Returns the list of the first n elements and the remaining list,
    which shares its nodes with rlist
    '''
    first = RNil
    rest = rlist
    for _ in range(n):
        if rest.is_empty():
            raise IndexOutOfBounds(n)
        first = Cons(rest.head, first)
        rest = rest.tail
    return first.reverse(), rest
