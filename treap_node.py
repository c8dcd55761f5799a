import random


class Node:
    """
    A single treap node.

    Ordered as a binary search tree by `key` and as a max-heap by
    `priority`. `value` is only used by the map.
    """

    __slots__ = ("key", "value", "priority", "left", "right")

    def __init__(self, key, priority, value=None):
        self.key = key
        self.value = value
        self.priority = priority
        self.left = None
        self.right = None

    def __repr__(self):
        return f"Node(key={self.key!r}, priority={self.priority:.6f})"


def new_rng(seed=None):
    """Returns a private random source. seed=None draws from OS entropy."""
    return random.Random(seed)


def rotate_right(y):
    """
    Promotes the left child of y. Returns the new subtree root.

          y             x
         / \\           / \\
        x   T3   ->   T1   y
       / \\                / \\
      T1  T2            T2  T3
    """
    assert y.left is not None, "rotate_right needs a left child"
    x = y.left
    y.left = x.right
    x.right = y
    return x


def rotate_left(x):
    """
    Promotes the right child of x. Returns the new subtree root.

        x                 y
       / \\               / \\
      T1  y      ->     x   T3
         / \\           / \\
        T2  T3        T1  T2
    """
    assert x.right is not None, "rotate_left needs a right child"
    y = x.right
    x.right = y.left
    y.left = x
    return y


def find_node(node, key):
    """Plain BST descent. Returns the node holding key, or None."""
    while node is not None:
        if key < node.key:
            node = node.left
        elif key > node.key:
            node = node.right
        else:
            return node
    return None


def release(node):
    """Unlinks a whole subtree, children first. Returns the number of nodes released."""
    if node is None:
        return 0
    released = release(node.left) + release(node.right) + 1
    node.left = None
    node.right = None
    return released


def height(node):
    if node is None:
        return 0
    return 1 + max(height(node.left), height(node.right))
