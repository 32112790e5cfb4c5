'''
Objective: define an immutable binary tree.
A tree is either BEnd (the empty tree) or BNode(value, left, right)
'''
from rlist import RNil, Cons, EmptyCollectionError


class BTree:
    '''
    Object that represents an immutable binary tree
    '''
    __slots__ = ()

    def is_empty(self):
        raise NotImplementedError

    def is_leaf(self):
        raise NotImplementedError

    def collect_leaves(self):
        '''
        The leaves of the tree, from left to right, as an RList of nodes.
        Uses an explicit list of subtrees still to visit, leftmost first.
        '''
        todo = Cons(self, RNil)
        leaves = RNil
        while not todo.is_empty():
            node = todo.head
            todo = todo.tail
            if node.is_empty():
                continue
            if node.is_leaf():
                leaves = Cons(node, leaves)
            else:
                todo = Cons(node.left, Cons(node.right, todo))
        return leaves.reverse()

    def leaf_count(self) -> int:
        return self.collect_leaves().length()


class _BEnd(BTree):
    __slots__ = ()

    @property
    def value(self):
        raise EmptyCollectionError("value of an empty tree")

    @property
    def left(self):
        raise EmptyCollectionError("left subtree of an empty tree")

    @property
    def right(self):
        raise EmptyCollectionError("right subtree of an empty tree")

    def is_empty(self):
        return True

    def is_leaf(self):
        return False

    def __repr__(self):
        return "BEnd"


class BNode(BTree):
    __slots__ = ('_value', '_left', '_right')

    def __init__(self, value, left: BTree = None, right: BTree = None):
        left = BEnd if left is None else left
        right = BEnd if right is None else right
        assert(isinstance(left, BTree))
        assert(isinstance(right, BTree))
        object.__setattr__(self, '_value', value)
        object.__setattr__(self, '_left', left)
        object.__setattr__(self, '_right', right)

    def __setattr__(self, name, value):
        raise AttributeError("BTree nodes are immutable")

    @property
    def value(self):
        return self._value

    @property
    def left(self):
        return self._left

    @property
    def right(self):
        return self._right

    def is_empty(self):
        return False

    def is_leaf(self):
        return self.left.is_empty() and self.right.is_empty()

    def __repr__(self):
        # pieces are either a subtree still to render or an already rendered string
        todo = Cons(self, RNil)
        out = []
        while not todo.is_empty():
            piece = todo.head
            todo = todo.tail
            if isinstance(piece, str):
                out.append(piece)
            elif piece.is_empty():
                out.append(repr(piece))
            else:
                todo = Cons("BNode({}, ".format(piece.value),
                            Cons(piece.left, Cons(", ", Cons(piece.right, Cons(")", todo)))))
        return "".join(out)


BEnd = _BEnd()
