"""
Throughput comparison: TreapSet / TreapMap against sortedcontainers.

Both sides get the same shuffled workload:
- insert n keys
- look up every key plus n keys that were never inserted
- remove every key

Run: python benchmark.py [n]
"""

import sys
import time

from sortedcontainers import SortedDict, SortedList

from treap_node import new_rng
from treap_map import TreapMap
from treap_set import TreapSet


def format_throughput(count, elapsed):
    """Format throughput as ops/second"""
    if elapsed == 0:
        return "N/A"
    return f"{count / elapsed:,.0f} ops/sec"


def _timed(func, keys):
    start = time.perf_counter()
    for key in keys:
        func(key)
    return time.perf_counter() - start


def make_workload(n, seed=None):
    """Returns (present, absent): n shuffled even keys and n odd keys never inserted."""
    rng = new_rng(seed)
    present = list(range(0, 2 * n, 2))
    absent = list(range(1, 2 * n, 2))
    rng.shuffle(present)
    rng.shuffle(absent)
    return present, absent


def bench_set(n, seed=None):
    present, absent = make_workload(n, seed)
    lookups = present + absent

    treap = TreapSet(seed=seed)
    reference = SortedList()

    results = {}
    results["set_insert"] = (
        _timed(treap.insert, present),
        _timed(reference.add, present),
    )
    results["set_height"] = treap.height()
    results["set_member"] = (
        _timed(treap.member, lookups),
        _timed(reference.__contains__, lookups),
    )
    results["set_remove"] = (
        _timed(treap.remove, present),
        _timed(reference.discard, present),
    )
    assert len(treap) == len(reference) == 0
    return results


def bench_map(n, seed=None):
    present, absent = make_workload(n, seed)
    lookups = present + absent

    treap = TreapMap(seed=seed)
    reference = SortedDict()

    results = {}
    results["map_insert"] = (
        _timed(lambda k: treap.insert(k, str(k)), present),
        _timed(lambda k: reference.__setitem__(k, str(k)), present),
    )
    results["map_height"] = treap.height()
    results["map_find"] = (
        _timed(lambda k: treap.find(k, None), lookups),
        _timed(reference.get, lookups),
    )
    results["map_remove"] = (
        _timed(treap.remove, present),
        _timed(lambda k: reference.pop(k, None), present),
    )
    assert len(treap) == len(reference) == 0
    return results


def run(n=10_000, seed=None):
    results = {"n": n}
    results.update(bench_set(n, seed))
    results.update(bench_map(n, seed))
    return results


def print_summary_table(results):
    """Print a formatted summary table of benchmark results"""
    n = results["n"]
    width = 76
    inner_width = width - 4

    print("\n    ┌" + "─" * inner_width + "┐")
    title = f"TREAP vs SORTEDCONTAINERS (n={n:,})"
    padding = (inner_width - len(title)) // 2
    print("    │" + " " * padding + title + " " * (inner_width - padding - len(title)) + "│")
    print("    ├" + "─" * inner_width + "┤")

    def print_row(name, treap, reference):
        row = "{:<20} {:>25} {:>25}".format(name, treap, reference)
        print("    │ " + row + " │")

    print_row("Operation", "treap", "sortedcontainers")
    print("    ├" + "─" * inner_width + "┤")

    for name in ("set_insert", "set_member", "set_remove", "map_insert", "map_find", "map_remove"):
        if name not in results:
            continue
        treap_elapsed, reference_elapsed = results[name]
        ops = 2 * n if name in ("set_member", "map_find") else n
        print_row(
            name,
            format_throughput(ops, treap_elapsed),
            format_throughput(ops, reference_elapsed),
        )

    print("    ├" + "─" * inner_width + "┤")
    for name in ("set_height", "map_height"):
        if name in results:
            print_row(name, results[name], "-")
    print("    └" + "─" * inner_width + "┘")


def main():
    n = int(sys.argv[1]) if len(sys.argv) > 1 else 10_000
    print_summary_table(run(n))


if __name__ == "__main__":
    main()
