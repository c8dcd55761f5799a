from treap_node import (
    Node,
    find_node,
    height,
    new_rng,
    release,
    rotate_left,
    rotate_right,
)


class TreapMap:
    """
    An ordered key -> value mapping backed by a treap.

    Inserting an existing key overwrites its value in place; the node keeps
    its priority and position. Looking up a missing key is not an error,
    find() hands back the caller's default instead.
    """

    def __init__(self, seed=None, rng=None):
        self._rng = rng if rng is not None else new_rng(seed)
        self._root = None
        self._count = 0

    def insert(self, key, value) -> bool:
        """Binds key to value. Returns True for a new key, False on overwrite."""
        self._root, created = self._insert(self._root, key, value)
        if created:
            self._count += 1
        return created

    def remove(self, key) -> bool:
        """Drops the binding for key. Returns False if there was none."""
        self._root, removed = self._remove(self._root, key)
        if removed:
            self._count -= 1
        return removed

    def find(self, key, default=None):
        """Returns the value bound to key, or default if key is absent."""
        node = find_node(self._root, key)
        if node is None:
            return default
        return node.value

    def contains(self, key) -> bool:
        return find_node(self._root, key) is not None

    def size(self) -> int:
        return self._count

    def clear(self):
        release(self._root)
        self._root = None
        self._count = 0

    def height(self) -> int:
        return height(self._root)

    def _insert(self, node, key, value):
        if node is None:
            return Node(key, self._rng.random(), value), True

        if key < node.key:
            node.left, created = self._insert(node.left, key, value)
            if node.left.priority > node.priority:
                node = rotate_right(node)
        elif key > node.key:
            node.right, created = self._insert(node.right, key, value)
            if node.right.priority > node.priority:
                node = rotate_left(node)
        else:
            node.value = value
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
        return self.contains(key)

    def __repr__(self):
        return f"TreapMap(size={self._count})"
