"""
Tests for the node primitives: rotations, lookup, teardown, height.
"""
import sys
from pathlib import Path

import pytest

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from treap_node import Node, find_node, height, release, rotate_left, rotate_right
from treap_checks import in_order_keys


def build_right_leaning():
    """
          y(20)
         /    \\
       x(10)   T3(30)
       /  \\
    T1(5) T2(15)
    """
    y = Node(20, 0.9)
    x = Node(10, 0.8)
    y.left = x
    y.right = Node(30, 0.1)
    x.left = Node(5, 0.2)
    x.right = Node(15, 0.3)
    return y, x


def test_rotate_right_promotes_left_child():
    y, x = build_right_leaning()
    t2 = x.right

    new_root = rotate_right(y)

    assert new_root is x
    assert x.right is y
    assert y.left is t2, "x's right subtree should move under y"
    assert in_order_keys(new_root) == [5, 10, 15, 20, 30]


def test_rotate_left_undoes_rotate_right():
    y, x = build_right_leaning()
    before = in_order_keys(y)

    new_root = rotate_left(rotate_right(y))

    assert new_root is y
    assert y.left is x
    assert in_order_keys(new_root) == before


def test_rotations_need_the_promoted_child():
    leaf = Node(1, 0.5)
    with pytest.raises(AssertionError):
        rotate_right(leaf)
    with pytest.raises(AssertionError):
        rotate_left(leaf)


def test_find_node():
    y, x = build_right_leaning()
    assert find_node(y, 15) is x.right
    assert find_node(y, 20) is y
    assert find_node(y, 16) is None
    assert find_node(None, 1) is None


def test_release_visits_every_node_once():
    y, x = build_right_leaning()

    assert release(y) == 5
    assert y.left is None and y.right is None
    assert x.left is None and x.right is None
    assert release(None) == 0


def test_height():
    y, _ = build_right_leaning()
    assert height(None) == 0
    assert height(Node(1, 0.5)) == 1
    assert height(y) == 3
