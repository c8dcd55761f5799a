from treap_node import (
    Node,
    find_node,
    height,
    new_rng,
    release,
    rotate_left,
    rotate_right,
)


class TreapSet:
    """
    An ordered set of unique keys backed by a treap.

    Keys only need to support < and > against each other. Every node gets a
    random priority when it is created, and rotations keep those priorities
    in max-heap order, so the expected height stays O(log n) whatever order
    the keys arrive in.
    """

    def __init__(self, seed=None, rng=None):
        self._rng = rng if rng is not None else new_rng(seed)
        self._root = None
        self._count = 0

    def insert(self, key) -> bool:
        """Adds key to the set. Returns False if it was already there."""
        self._root, created = self._insert(self._root, key)
        if created:
            self._count += 1
        return created

    def remove(self, key) -> bool:
        """Removes key from the set. Returns False if it was not there."""
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._count -= 1
        return removed

    def member(self, key) -> bool:
        return find_node(self._root, key) is not None

    def size(self) -> int:
        return self._count

    def clear(self):
        """Releases every node and resets the set to empty."""
        release(self._root)
        self._root = None
        self._count = 0

    def height(self) -> int:
        return height(self._root)

    def _insert(self, node, key):
        # Base case: empty slot, the only place a priority is drawn
        if node is None:
            return Node(key, self._rng.random()), True

        if key < node.key:
            node.left, created = self._insert(node.left, key)
            if node.left.priority > node.priority:
                node = rotate_right(node)
        elif key > node.key:
            node.right, created = self._insert(node.right, key)
            if node.right.priority > node.priority:
                node = rotate_left(node)
        else:
            created = False

        return node, created

    def _remove(self, node, key):
        if node is None:
            return None, False

        if key < node.key:
            node.left, removed = self._remove(node.left, key)
        elif key > node.key:
            node.right, removed = self._remove(node.right, key)
        elif node.left is None:
            replacement, node.right = node.right, None
            return replacement, True
        elif node.right is None:
            replacement, node.left = node.left, None
            return replacement, True
        # Two children: push the node down below the higher-priority child
        elif node.left.priority > node.right.priority:
            node = rotate_right(node)
            node.right, removed = self._remove(node.right, key)
        else:
            node = rotate_left(node)
            node.left, removed = self._remove(node.left, key)

        return node, removed

    def __len__(self):
        return self._count

    def __contains__(self, key):
        return self.member(key)

    def __repr__(self):
        return f"TreapSet(size={self._count})"
