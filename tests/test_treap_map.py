"""
Tests for TreapMap: lookup with defaults, overwrite, removal, size.
"""
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from treap_map import TreapMap
from treap_checks import SequenceRandom, assert_treap


def test_walkthrough():
    tm = TreapMap(seed=42)
    tm.insert(50, "Alejandro")
    tm.insert(30, "Beatriz")
    tm.insert(70, "Carlos")

    assert tm.find(30, "N/A") == "Beatriz"
    assert tm.find(99, "N/A") == "N/A"

    tm.insert(50, "Ana")
    assert tm.find(50, "N/A") == "Ana", "Insert on an existing key should overwrite"

    tm.remove(70)
    assert not tm.contains(70)
    assert tm.find(70, "N/A") == "N/A"
    assert assert_treap(tm) == [30, 50]


def test_find_default_is_none():
    tm = TreapMap()
    assert tm.find(1) is None
    tm.insert(1, "one")
    assert tm.find(1) == "one"


def test_falsy_values_are_still_found():
    tm = TreapMap(seed=5)
    tm.insert(1, 0)
    tm.insert(2, None)
    assert tm.find(1, "missing") == 0
    assert tm.find(2, "missing") is None
    assert tm.contains(2)


def test_overwrite_keeps_node_and_priority():
    tm = TreapMap(rng=SequenceRandom([0.5, 0.9]))
    assert tm.insert("k", "v1") is True
    node = tm._root

    assert tm.insert("k", "v2") is False
    assert tm._root is node
    assert node.priority == 0.5, "Overwrite must not draw a new priority"
    assert tm.find("k") == "v2"
    assert tm.size() == 1


def test_insert_twice_same_as_once():
    once = TreapMap(seed=9)
    twice = TreapMap(seed=9)
    for key in (4, 2, 6, 1, 3):
        once.insert(key, str(key))
        twice.insert(key, str(key))
        twice.insert(key, str(key))

    assert once.size() == twice.size() == 5
    assert assert_treap(once) == assert_treap(twice)
    for key in (4, 2, 6, 1, 3):
        assert once.find(key) == twice.find(key)


def test_remove_every_shape():
    # 50 at the root, 30 (with child 20) on the left, 70 leaf on the right
    tm = TreapMap(rng=SequenceRandom([0.9, 0.5, 0.4, 0.3, 0.6]))
    for key in (50, 30, 70, 20):
        tm.insert(key, f"v{key}")

    assert tm.remove(70) is True   # leaf
    assert tm.remove(30) is True   # one child
    tm.insert(80, "v80")
    assert tm.remove(50) is True   # two children
    assert tm.remove(50) is False
    assert tm.size() == 2
    assert assert_treap(tm) == [20, 80]
    assert tm.find(20) == "v20"
    assert tm.find(80) == "v80"
