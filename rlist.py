'''
Objective: define a persistent singly-linked list.
A list is either RNil (the empty list) or Cons(head, tail)

Every operation returns a new list and never touches the nodes of the
receiver, so lists can freely share tails.
All traversals are loops: no operation grows the call stack with the list.
'''
import logging
import operator

import numpy as np


class EmptyCollectionError(LookupError):
    '''
    Raised when reading the content of an empty collection
    '''
    pass


class IndexOutOfBounds(IndexError):
    def __init__(self, index):
        super().__init__("index {} is out of bounds".format(index))
        self.index = index


class RList:
    '''
    Object that represents an immutable list
    '''
    __slots__ = ()

    def is_empty(self):
        raise NotImplementedError

    @property
    def head(self):
        raise NotImplementedError

    @property
    def tail(self):
        raise NotImplementedError

    def prepend(self, value):
        return Cons(value, self)

    def __iter__(self):
        remaining = self
        while not remaining.is_empty():
            yield remaining.head
            remaining = remaining.tail

    def __bool__(self):
        return not self.is_empty()

    def __len__(self):
        return self.length()

    def __getitem__(self, index):
        return self.apply(index)

    def __add__(self, other):
        return self.concat(other)

    def __eq__(self, other):
        if not isinstance(other, RList):
            return NotImplemented
        a, b = self, other
        while not a.is_empty() and not b.is_empty():
            if a is b:
                return True
            if a.head != b.head:
                return False
            a, b = a.tail, b.tail
        return a.is_empty() and b.is_empty()

    def __hash__(self):
        h = 17
        for x in self:
            h = hash((h, x))
        return h

    def __repr__(self):
        return "[" + ", ".join(str(x) for x in self) + "]"

    ###########################################################################
    # Easy problems

    def apply(self, index: int):
        '''
        Element at position index, counting from 0
        '''
        if index < 0:
            raise IndexOutOfBounds(index)
        remaining = self
        current = index
        while not remaining.is_empty():
            if current == 0:
                return remaining.head
            remaining = remaining.tail
            current -= 1
        raise IndexOutOfBounds(index)

    def length(self) -> int:
        acc = 0
        remaining = self
        while not remaining.is_empty():
            acc += 1
            remaining = remaining.tail
        return acc

    def reverse(self):
        return self.reverse_onto(RNil)

    def reverse_onto(self, other):
        '''
        Prepends the elements of self, one by one, to other:
        [1, 2, 3].reverse_onto([4, 5]) = [3, 2, 1, 4, 5]
        '''
        result = other
        remaining = self
        while not remaining.is_empty():
            result = Cons(remaining.head, result)
            remaining = remaining.tail
        return result

    def concat(self, other):
        '''
        Linear in the length of self only: other is shared, not copied
        '''
        return self.reverse().reverse_onto(other)

    def remove_at(self, index: int):
        '''
        Removes the element at position index.
        An index outside of the list leaves it unchanged.
        '''
        if index < 0:
            return self
        predecessors = RNil
        remaining = self
        current = 0
        while not remaining.is_empty():
            if current == index:
                return predecessors.reverse_onto(remaining.tail)
            predecessors = Cons(remaining.head, predecessors)
            remaining = remaining.tail
            current += 1
        return self

    ###########################################################################
    # Transforms

    def map(self, f):
        acc = RNil
        remaining = self
        while not remaining.is_empty():
            acc = Cons(f(remaining.head), acc)
            remaining = remaining.tail
        return acc.reverse()

    def filter(self, predicate):
        acc = RNil
        remaining = self
        while not remaining.is_empty():
            if predicate(remaining.head):
                acc = Cons(remaining.head, acc)
            remaining = remaining.tail
        return acc.reverse()

    def flat_map(self, f):
        '''
        Concatenation of the lists f(x) for x in self.

        Concatenating the results one after the other costs O(z^2) for an
        output of size z, so it is done in two passes instead:
        * stack the reversed sub-lists, the last one on top
        * pop the stack and prepend every element to the result

        The result is built back to front in O(n + z).
        '''
        stack = RNil
        remaining = self
        while not remaining.is_empty():
            stack = Cons(f(remaining.head).reverse(), stack)
            remaining = remaining.tail

        result = RNil
        current = RNil
        while not (current.is_empty() and stack.is_empty()):
            if current.is_empty():
                current = stack.head
                stack = stack.tail
            else:
                result = Cons(current.head, result)
                current = current.tail
        return result

    ###########################################################################
    # Medium problems

    def rle(self):
        '''
        Run-length encoding: [1, 1, 2, 3, 3] -> [(1, 2), (2, 1), (3, 2)]
        '''
        value, count = self.head, 1
        acc = RNil
        remaining = self.tail
        while not remaining.is_empty():
            if remaining.head == value:
                count += 1
            else:
                acc = Cons((value, count), acc)
                value, count = remaining.head, 1
            remaining = remaining.tail
        return Cons((value, count), acc).reverse()

    def duplicate_each(self, k: int):
        '''
        Each element repeated k times in a row.
        For k <= 0 every element is dropped: the result is empty.
        '''
        acc = RNil
        remaining = self
        while not remaining.is_empty():
            n = 0
            while n < k:
                acc = Cons(remaining.head, acc)
                n += 1
            remaining = remaining.tail
        return acc.reverse()

    def rotate(self, k: int):
        '''
        Rotation by k positions to the left:
        [1, 2, 3, 4].rotate(1) = [2, 3, 4, 1]

        Walks k steps, starting over from the first element whenever the
        list runs out, so k larger than the length wraps around.
        '''
        if k < 0:
            raise ValueError("cannot rotate by a negative number of positions: {}".format(k))
        if self.is_empty():
            return self
        remaining = self
        rotations_left = k
        buffer = RNil
        while True:
            if remaining.is_empty():
                if rotations_left == 0:
                    return self
                remaining = self
                buffer = RNil
            elif rotations_left == 0:
                return remaining.concat(buffer.reverse())
            else:
                buffer = Cons(remaining.head, buffer)
                remaining = remaining.tail
                rotations_left -= 1

    def sample(self, k: int, rng=None):
        '''
        k elements drawn uniformly at random, with replacement.

        rng is a numpy Generator, or any object with an integers(high) method;
        by default a fresh numpy Generator is used.
        '''
        if k <= 0:
            return RNil
        if self.is_empty():
            raise EmptyCollectionError("cannot sample from an empty list")
        if rng is None:
            rng = np.random.default_rng()
        max_index = self.length()
        acc = RNil
        for _ in range(k):
            acc = Cons(self.apply(int(rng.integers(max_index))), acc)
        logging.debug('drew {} elements out of {}'.format(k, max_index))
        return acc.reverse()

    ###########################################################################
    # Hard problems

    def insertion_sort(self, leq=operator.le):
        from Sorting.insertion_sort import insertion_sort
        return insertion_sort(self, leq)

    def merge_sort(self, leq=operator.le):
        from Sorting.merge_sort import merge_sort
        return merge_sort(self, leq)

    def quick_sort(self, leq=operator.le):
        from Sorting.quick_sort import quick_sort
        return quick_sort(self, leq)


class _RNil(RList):
    '''
    The empty list, only instantiated once as RNil
    '''
    __slots__ = ()

    def is_empty(self):
        return True

    @property
    def head(self):
        raise EmptyCollectionError("head of an empty list")

    @property
    def tail(self):
        raise EmptyCollectionError("tail of an empty list")

    def rle(self):
        raise EmptyCollectionError("run-length encoding of an empty list")


class Cons(RList):
    __slots__ = ('_head', '_tail')

    def __init__(self, head, tail: RList = None):
        if tail is None:
            tail = RNil
        assert(isinstance(tail, RList))
        object.__setattr__(self, '_head', head)
        object.__setattr__(self, '_tail', tail)

    def __setattr__(self, name, value):
        raise AttributeError("RList nodes are immutable")

    def is_empty(self):
        return False

    @property
    def head(self):
        return self._head

    @property
    def tail(self):
        return self._tail


RNil = _RNil()
